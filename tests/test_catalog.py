"""Tests for the provider/model catalog."""

import pytest

from citemind.catalog import DEFAULT_MODELS, QueryCatalog
from citemind.errors import ConfigurationError, UnknownProviderError
from citemind.models.provider import Provider


class TestDefaultCatalog:
    def test_lists_every_provider(self, catalog):
        assert catalog.list_providers() == frozenset(Provider)

    def test_iterates_in_registration_order(self, catalog):
        assert list(catalog) == [
            Provider.OPENAI,
            Provider.ANTHROPIC,
            Provider.PERPLEXITY,
            Provider.GEMINI,
            Provider.HUGGINGFACE,
        ]

    def test_list_models(self, catalog):
        assert catalog.list_models(Provider.ANTHROPIC) == (
            "claude-3-5-sonnet-20241022",
            "claude-3-5-haiku-20241022",
        )

    @pytest.mark.parametrize("provider", list(Provider))
    def test_default_model_is_first(self, catalog, provider):
        assert catalog.default_model(provider) == DEFAULT_MODELS[provider][0]

    def test_models_table_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_MODELS[Provider.OPENAI] = ("other",)  # type: ignore[index]


class TestCustomCatalog:
    def test_unregistered_provider_raises(self):
        catalog = QueryCatalog({Provider.OPENAI: ["gpt-test"]})
        with pytest.raises(UnknownProviderError):
            catalog.list_models(Provider.GEMINI)
        with pytest.raises(UnknownProviderError):
            catalog.default_model(Provider.GEMINI)

    def test_unknown_provider_error_is_a_key_error(self):
        catalog = QueryCatalog({Provider.OPENAI: ["gpt-test"]})
        with pytest.raises(KeyError):
            catalog.list_models(Provider.GEMINI)

    def test_provider_without_models_is_rejected(self):
        with pytest.raises(ConfigurationError, match="no models"):
            QueryCatalog({Provider.OPENAI: []})

    def test_input_mapping_changes_do_not_leak(self):
        models = {Provider.OPENAI: ["gpt-a", "gpt-b"]}
        catalog = QueryCatalog(models)
        models[Provider.OPENAI].append("gpt-c")
        models[Provider.GEMINI] = ["gemini-x"]
        assert catalog.list_models(Provider.OPENAI) == ("gpt-a", "gpt-b")
        assert Provider.GEMINI not in catalog


class TestSubset:
    def test_keeps_catalog_order(self, catalog):
        sub = catalog.subset(["gemini", Provider.OPENAI])
        assert list(sub) == [Provider.OPENAI, Provider.GEMINI]

    def test_unknown_identifier(self, catalog):
        with pytest.raises(UnknownProviderError):
            catalog.subset(["bard"])

    def test_unregistered_provider(self, four_provider_catalog):
        with pytest.raises(UnknownProviderError):
            four_provider_catalog.subset([Provider.HUGGINGFACE])
