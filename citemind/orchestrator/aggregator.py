"""Citation aggregator: fans one query out to every provider."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable, Iterable, Mapping, Sequence

import httpx

from citemind.adapters.base import ProviderAdapter
from citemind.adapters.registry import build_adapters
from citemind.catalog import QueryCatalog, build_default_catalog
from citemind.config import settings
from citemind.errors import (
    ConfigurationError,
    ProviderError,
    ProviderUnavailableError,
)
from citemind.models.citation import CitationResult, ProviderOutcome
from citemind.models.provider import Provider
from citemind.models.query import Query

logger = logging.getLogger(__name__)

OutcomeHook = Callable[[ProviderOutcome], None]


class Aggregator:
    """Dispatches a query to all catalog providers in parallel.

    Each provider runs under its own timeout, and a failing provider never
    cancels or blocks the others. Results come back in catalog order once
    every invocation has finished.
    """

    def __init__(
        self,
        catalog: QueryCatalog,
        adapters: Mapping[Provider, ProviderAdapter],
        timeout: float | None = None,
        on_outcome: OutcomeHook | None = None,
    ) -> None:
        if not len(catalog):
            raise ConfigurationError("At least one provider must be registered")
        self.catalog = catalog
        self.adapters = dict(adapters)
        self.timeout = timeout if timeout is not None else settings.provider_timeout
        self.on_outcome = on_outcome

    async def query_all(
        self, query: Query, providers: Iterable[Provider | str] | None = None
    ) -> list[CitationResult]:
        """Return the results that mention at least one keyword.

        Failed providers are logged and omitted. An empty list is a valid
        outcome: either nothing was mentioned or every provider failed, and
        the logs tell the two apart.
        """
        outcomes = await self.collect(query, providers)
        results = [o.result for o in outcomes if o.result is not None and o.result.mentions]

        failed = [o for o in outcomes if not o.ok]
        if failed and len(failed) == len(outcomes):
            logger.error(
                "All %d providers failed for query %r", len(outcomes), query.text
            )
        else:
            logger.info(
                "Completed %d providers (%d failed), %d results with mentions",
                len(outcomes), len(failed), len(results),
            )
        return results

    async def collect(
        self, query: Query, providers: Iterable[Provider | str] | None = None
    ) -> list[ProviderOutcome]:
        """Run every selected provider and return one outcome per provider."""
        catalog = self.catalog if providers is None else self.catalog.subset(providers)
        selected = list(catalog)
        logger.info(
            "Dispatching to %d providers: %s",
            len(selected), [p.value for p in selected],
        )
        outcomes = await asyncio.gather(*[self._run_provider(p, query) for p in selected])
        for outcome in outcomes:
            self._notify(outcome)
        return list(outcomes)

    async def query_platform(
        self, provider: Provider | str, query: Query, model: str | None = None
    ) -> CitationResult:
        """Query a single provider, letting its errors propagate."""
        provider = Provider.parse(provider)
        # Raises UnknownProviderError for providers outside this catalog
        self.catalog.list_models(provider)
        return await self._invoke(provider, query, model)

    async def _run_provider(self, provider: Provider, query: Query) -> ProviderOutcome:
        started = time.monotonic()
        try:
            result = await self._invoke(provider, query)
        except (ProviderError, ConfigurationError) as exc:
            elapsed = time.monotonic() - started
            logger.warning("Provider %s failed after %.2fs: %s", provider.value, elapsed, exc)
            return ProviderOutcome(provider, error=exc, elapsed=elapsed)
        except Exception as exc:
            elapsed = time.monotonic() - started
            logger.exception("Provider %s raised unexpectedly", provider.value)
            return ProviderOutcome(provider, error=exc, elapsed=elapsed)

        elapsed = time.monotonic() - started
        logger.info(
            "Provider %s returned %d mentions in %.2fs",
            provider.value, len(result.mentions), elapsed,
        )
        return ProviderOutcome(provider, result=result, elapsed=elapsed)

    async def _invoke(
        self, provider: Provider, query: Query, model: str | None = None
    ) -> CitationResult:
        adapter = self.adapters.get(provider)
        if adapter is None:
            raise ConfigurationError(f"No adapter configured for {provider.value}", provider)
        try:
            return await asyncio.wait_for(adapter.query(query, model), self.timeout)
        except asyncio.TimeoutError as exc:
            raise ProviderUnavailableError(
                provider, f"no response within {self.timeout}s"
            ) from exc

    def _notify(self, outcome: ProviderOutcome) -> None:
        if self.on_outcome is None:
            return
        try:
            self.on_outcome(outcome)
        except Exception:
            logger.exception("Outcome hook failed for %s", outcome.provider.value)


async def query_all_platforms(
    query: str, keywords: Sequence[str]
) -> list[CitationResult]:
    """Query every configured provider and return results that cite a keyword."""
    catalog = build_default_catalog()
    async with httpx.AsyncClient(timeout=settings.provider_timeout) as client:
        aggregator = Aggregator(catalog, build_adapters(catalog, client=client))
        return await aggregator.query_all(Query.of(query, keywords))
