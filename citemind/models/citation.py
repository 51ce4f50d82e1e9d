"""Citation result data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from citemind.analysis.text_analyzer import (
    extract_mentions,
    score_confidence,
    score_sentiment,
    sentiment_label,
)
from citemind.models.provider import Provider
from citemind.models.query import Query


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CitationResult:
    """The canonical output of one provider invocation."""

    platform: Provider
    model: str
    query: str
    response: str
    mentions: tuple[str, ...] = ()
    sentiment: float = 0.0
    confidence: float = 0.5
    timestamp: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_response(
        cls, platform: Provider, model: str, query: Query, response: str
    ) -> CitationResult:
        """Analyze a provider's raw text and stamp the result."""
        return cls(
            platform=platform,
            model=model,
            query=query.text,
            response=response,
            mentions=tuple(extract_mentions(response, query.keywords)),
            sentiment=score_sentiment(response),
            confidence=score_confidence(response, query.keywords),
            timestamp=_utcnow(),
        )

    @property
    def sentiment_label(self) -> str:
        return sentiment_label(self.sentiment)

    def to_dict(self) -> dict:
        return {
            "platform": self.platform.value,
            "model": self.model,
            "query": self.query,
            "response": self.response,
            "mentions": list(self.mentions),
            "sentiment": self.sentiment,
            "sentiment_label": self.sentiment_label,
            "confidence": self.confidence,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class ProviderOutcome:
    """Terminal state of one provider invocation: a result or an error."""

    provider: Provider
    result: CitationResult | None = None
    error: Exception | None = None
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None
