"""Citation monitor: runs tracked queries for a tenant and stores the hits."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from citemind.analysis.text_analyzer import score_relevance
from citemind.config import settings
from citemind.db.database import Database
from citemind.models.citation import CitationResult
from citemind.models.provider import Provider
from citemind.models.query import Query
from citemind.orchestrator.aggregator import Aggregator
from citemind.orchestrator.discovery import generate_discovery_queries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonitoredCitation:
    """A surviving result together with its relevance to the tracked query."""

    result: CitationResult
    relevance: float
    record_id: str | None = None

    def to_dict(self) -> dict:
        return {**self.result.to_dict(), "relevance": self.relevance, "id": self.record_id}


@dataclass
class MonitorReport:
    tenant_id: str
    queries: list[str] = field(default_factory=list)
    citations: list[MonitoredCitation] = field(default_factory=list)

    @property
    def total_citations(self) -> int:
        return sum(len(c.result.mentions) for c in self.citations)

    def to_dict(self) -> dict:
        return {
            "tenant_id": self.tenant_id,
            "queries": self.queries,
            "total_citations": self.total_citations,
            "results": [c.to_dict() for c in self.citations],
        }


class CitationMonitor:
    """Runs a tenant's tracked query, and its discovery variants, across providers."""

    def __init__(
        self,
        aggregator: Aggregator,
        db: Database | None = None,
        query_delay: float | None = None,
    ) -> None:
        self.aggregator = aggregator
        self.db = db
        self.query_delay = query_delay if query_delay is not None else settings.query_delay

    async def monitor(
        self,
        tenant_id: str,
        query_text: str,
        keywords: Sequence[str],
        providers: Iterable[Provider | str] | None = None,
        discovery: bool = True,
    ) -> MonitorReport:
        # Materialize so the same subset applies to every discovery query
        selected = list(providers) if providers is not None else None
        queries = (
            generate_discovery_queries(query_text, keywords) if discovery else [query_text]
        )
        report = MonitorReport(tenant_id=tenant_id, queries=queries)
        logger.info("Monitoring %d queries for tenant %s", len(queries), tenant_id)

        for i, text in enumerate(queries):
            if i and self.query_delay > 0:
                # Rate-limit pause between consecutive queries
                await asyncio.sleep(self.query_delay)

            results = await self.aggregator.query_all(Query.of(text, keywords), selected)
            for result in results:
                relevance = score_relevance(result.response, keywords, text)
                record_id = None
                if self.db is not None:
                    try:
                        record_id = await self.db.add_result(tenant_id, result, relevance)
                    except Exception:
                        logger.exception(
                            "Failed to store result for tenant %s on %s",
                            tenant_id, result.platform.value,
                        )
                report.citations.append(MonitoredCitation(result, relevance, record_id))

        logger.info(
            "Tenant %s: %d results, %d citations",
            tenant_id, len(report.citations), report.total_citations,
        )
        return report
