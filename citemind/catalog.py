"""Query catalog: the read-only registry of providers and their models."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Sequence

from citemind.errors import ConfigurationError, UnknownProviderError
from citemind.models.provider import Provider

DEFAULT_MODELS: Mapping[Provider, tuple[str, ...]] = MappingProxyType({
    Provider.OPENAI: ("gpt-4o", "gpt-4o-mini"),
    Provider.ANTHROPIC: ("claude-3-5-sonnet-20241022", "claude-3-5-haiku-20241022"),
    Provider.PERPLEXITY: (
        "llama-3.1-sonar-large-128k-online",
        "llama-3.1-sonar-small-128k-online",
    ),
    Provider.GEMINI: ("gemini-1.5-pro", "gemini-1.5-flash"),
    Provider.HUGGINGFACE: (
        "meta-llama/Llama-2-70b-chat-hf",
        "mistralai/Mixtral-8x7B-Instruct-v0.1",
    ),
})


class QueryCatalog:
    """Maps each registered provider to its ordered list of supported models.

    The first model of each provider is its default. Iteration yields providers
    in registration order, which is also the order of aggregated results.
    """

    def __init__(self, models: Mapping[Provider, Sequence[str]]) -> None:
        entries: dict[Provider, tuple[str, ...]] = {}
        for provider, names in models.items():
            names = tuple(names)
            if not names:
                raise ConfigurationError(
                    f"Provider {provider.value} has no models registered", provider
                )
            entries[provider] = names
        self._models = MappingProxyType(entries)

    def __iter__(self) -> Iterator[Provider]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)

    def __contains__(self, provider: object) -> bool:
        return provider in self._models

    def list_providers(self) -> frozenset[Provider]:
        return frozenset(self._models)

    def list_models(self, provider: Provider) -> tuple[str, ...]:
        try:
            return self._models[provider]
        except KeyError:
            raise UnknownProviderError(provider) from None

    def default_model(self, provider: Provider) -> str:
        return self.list_models(provider)[0]

    def subset(self, providers: Iterable[Provider | str]) -> QueryCatalog:
        """Return a catalog restricted to ``providers``, in catalog order."""
        wanted = {Provider.parse(p) for p in providers}
        for provider in wanted:
            if provider not in self._models:
                raise UnknownProviderError(provider)
        return QueryCatalog({p: m for p, m in self._models.items() if p in wanted})


def build_default_catalog() -> QueryCatalog:
    return QueryCatalog(DEFAULT_MODELS)
