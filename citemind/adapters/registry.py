"""Static registry binding each provider to its adapter class."""

from __future__ import annotations

import httpx

from citemind.adapters.anthropic import AnthropicAdapter
from citemind.adapters.base import HTTPAdapter, ProviderAdapter
from citemind.adapters.gemini import GeminiAdapter
from citemind.adapters.huggingface import HuggingFaceAdapter
from citemind.adapters.openai import OpenAIAdapter
from citemind.adapters.perplexity import PerplexityAdapter
from citemind.catalog import QueryCatalog
from citemind.models.provider import Provider

ADAPTER_TYPES: dict[Provider, type[HTTPAdapter]] = {
    Provider.OPENAI: OpenAIAdapter,
    Provider.ANTHROPIC: AnthropicAdapter,
    Provider.PERPLEXITY: PerplexityAdapter,
    Provider.GEMINI: GeminiAdapter,
    Provider.HUGGINGFACE: HuggingFaceAdapter,
}

_missing = set(Provider) - set(ADAPTER_TYPES)
if _missing:
    raise RuntimeError(f"No adapter registered for: {sorted(p.value for p in _missing)}")


def build_adapters(
    catalog: QueryCatalog,
    client: httpx.AsyncClient | None = None,
) -> dict[Provider, ProviderAdapter]:
    """Instantiate one adapter per catalog provider, optionally sharing a client."""
    return {
        provider: ADAPTER_TYPES[provider](catalog, client=client)
        for provider in catalog
    }
