"""SQLite database layer via aiosqlite."""

from __future__ import annotations

import json
import uuid

import aiosqlite

from citemind.analysis.text_analyzer import NEGATIVE_THRESHOLD, POSITIVE_THRESHOLD
from citemind.models.citation import CitationResult

SCHEMA = """
CREATE TABLE IF NOT EXISTS citation_results (
    id TEXT PRIMARY KEY,
    tenant_id TEXT NOT NULL,
    platform TEXT NOT NULL,
    model TEXT NOT NULL,
    query_text TEXT NOT NULL,
    response_text TEXT NOT NULL,
    mentions_json TEXT NOT NULL DEFAULT '[]',
    mention_count INTEGER NOT NULL DEFAULT 0,
    sentiment_score REAL NOT NULL DEFAULT 0.0,
    confidence_score REAL NOT NULL DEFAULT 0.5,
    relevance_score REAL NOT NULL DEFAULT 0.0,
    created_at TIMESTAMP NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_citation_results_tenant
    ON citation_results (tenant_id, created_at);
"""

ANALYTICS_QUERY = f"""
SELECT
    platform,
    date(created_at) AS date_recorded,
    COUNT(*) AS total_results,
    SUM(mention_count) AS citations_found,
    SUM(CASE WHEN sentiment_score > {POSITIVE_THRESHOLD} THEN 1 ELSE 0 END) AS positive_mentions,
    SUM(CASE WHEN sentiment_score BETWEEN {NEGATIVE_THRESHOLD} AND {POSITIVE_THRESHOLD}
        THEN 1 ELSE 0 END) AS neutral_mentions,
    SUM(CASE WHEN sentiment_score < {NEGATIVE_THRESHOLD} THEN 1 ELSE 0 END) AS negative_mentions,
    AVG(sentiment_score) AS avg_sentiment_score,
    AVG(confidence_score) AS avg_confidence_score
FROM citation_results
WHERE tenant_id = ?
GROUP BY platform, date(created_at)
ORDER BY date_recorded DESC, platform
"""


class Database:
    """Async SQLite database for persisting monitored citation results."""

    def __init__(self, path: str = "citemind.db") -> None:
        self.path = path
        self._db: aiosqlite.Connection | None = None

    async def connect(self) -> None:
        self._db = await aiosqlite.connect(self.path)
        self._db.row_factory = aiosqlite.Row
        await self._db.executescript(SCHEMA)

    async def close(self) -> None:
        if self._db:
            await self._db.close()
            self._db = None

    @property
    def db(self) -> aiosqlite.Connection:
        if self._db is None:
            raise RuntimeError("Database not connected; call connect() first")
        return self._db

    # -- Citation results --

    async def add_result(
        self, tenant_id: str, result: CitationResult, relevance: float = 0.0
    ) -> str:
        result_id = str(uuid.uuid4())
        await self.db.execute(
            "INSERT INTO citation_results (id, tenant_id, platform, model, query_text, "
            "response_text, mentions_json, mention_count, sentiment_score, confidence_score, "
            "relevance_score, created_at) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
            (
                result_id,
                tenant_id,
                result.platform.value,
                result.model,
                result.query,
                result.response,
                json.dumps(list(result.mentions)),
                len(result.mentions),
                result.sentiment,
                result.confidence,
                relevance,
                result.timestamp.isoformat(),
            ),
        )
        await self.db.commit()
        return result_id

    async def get_results(
        self, tenant_id: str, platform: str | None = None, limit: int = 50
    ) -> list[dict]:
        sql = "SELECT * FROM citation_results WHERE tenant_id = ?"
        params: list = [tenant_id]
        if platform:
            sql += " AND platform = ?"
            params.append(platform)
        sql += " ORDER BY created_at DESC LIMIT ?"
        params.append(limit)

        cursor = await self.db.execute(sql, params)
        rows = await cursor.fetchall()
        results = []
        for row in rows:
            record = dict(row)
            record["mentions"] = json.loads(record.pop("mentions_json"))
            results.append(record)
        return results

    # -- Analytics --

    async def get_analytics(self, tenant_id: str) -> list[dict]:
        """Daily per-platform rollup of a tenant's stored results."""
        cursor = await self.db.execute(ANALYTICS_QUERY, (tenant_id,))
        rows = await cursor.fetchall()
        return [dict(r) for r in rows]
