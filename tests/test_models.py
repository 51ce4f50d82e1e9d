"""Tests for the query, provider and citation data models."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from citemind.errors import UnknownProviderError
from citemind.models.citation import CitationResult, ProviderOutcome
from citemind.models.provider import Provider
from citemind.models.query import Query


class TestProvider:
    @pytest.mark.parametrize("value", ["openai", "OpenAI", " openai "])
    def test_parse(self, value):
        assert Provider.parse(value) is Provider.OPENAI

    def test_parse_passes_members_through(self):
        assert Provider.parse(Provider.GEMINI) is Provider.GEMINI

    def test_parse_unknown(self):
        with pytest.raises(UnknownProviderError, match="bard"):
            Provider.parse("bard")

    def test_labels(self):
        assert Provider.HUGGINGFACE.label == "HuggingFace"


class TestQuery:
    def test_keywords_stored_as_tuple(self):
        q = Query.of("Is Acme good?", ["Acme", "acme"])
        assert q.keywords == ("Acme", "acme")

    def test_immutable(self):
        q = Query("text", ("a",))
        with pytest.raises(FrozenInstanceError):
            q.text = "other"  # type: ignore[misc]

    def test_defaults_to_no_keywords(self):
        assert Query("text").keywords == ()

    def test_rejects_single_string_keywords(self):
        with pytest.raises(TypeError):
            Query.of("Is Acme good?", "Acme")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Query("Is Acme good?", "Acme")  # type: ignore[arg-type]


class TestCitationResult:
    def test_from_response(self):
        query = Query.of("Is Acme Corp a market leader?", ["Acme Corp"])
        result = CitationResult.from_response(
            Provider.OPENAI,
            "gpt-4o",
            query,
            "Acme Corp is an excellent market leader. The competition struggles.",
        )
        assert result.platform is Provider.OPENAI
        assert result.query == "Is Acme Corp a market leader?"
        assert result.mentions == ("Acme Corp is an excellent market leader",)
        assert result.sentiment_label == "positive"
        assert result.confidence > 0.5
        assert result.timestamp.tzinfo is timezone.utc

    def test_immutable(self):
        result = CitationResult(Provider.GEMINI, "gemini-1.5-pro", "q", "r")
        with pytest.raises(FrozenInstanceError):
            result.mentions = ("x",)  # type: ignore[misc]

    def test_to_dict(self):
        ts = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        result = CitationResult(
            Provider.ANTHROPIC, "claude", "q", "r", ("m",), -0.5, 0.7, ts
        )
        assert result.to_dict() == {
            "platform": "anthropic",
            "model": "claude",
            "query": "q",
            "response": "r",
            "mentions": ["m"],
            "sentiment": -0.5,
            "sentiment_label": "negative",
            "confidence": 0.7,
            "timestamp": "2024-05-01T12:00:00+00:00",
        }


def test_provider_outcome_ok():
    result = CitationResult(Provider.OPENAI, "m", "q", "r")
    assert ProviderOutcome(Provider.OPENAI, result=result).ok
    assert not ProviderOutcome(Provider.OPENAI, error=RuntimeError("x")).ok
