"""CiteMind: FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from citemind.adapters.registry import build_adapters
from citemind.catalog import build_default_catalog
from citemind.config import settings
from citemind.db.database import Database
from citemind.errors import UnknownProviderError
from citemind.models.provider import Provider
from citemind.orchestrator.aggregator import Aggregator, query_all_platforms
from citemind.orchestrator.monitor import CitationMonitor

logger = logging.getLogger(__name__)

catalog = build_default_catalog()
db = Database(settings.database_path)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.log_level.upper())
    await db.connect()
    yield
    await db.close()


app = FastAPI(
    title="CiteMind",
    description="AI citation monitoring across LLM providers",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Request / Response models ---


class CitationQueryRequest(BaseModel):
    query: str = Field(min_length=1)
    keywords: list[str] = Field(default_factory=list)


class MonitorRequest(CitationQueryRequest):
    tenant_id: str = Field(min_length=1)
    platforms: list[str] | None = None
    discovery: bool = True


class ProviderInfo(BaseModel):
    name: str
    models: list[str]
    default_model: str


# --- Routes ---


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/api/providers", response_model=list[ProviderInfo])
async def list_providers():
    return [
        ProviderInfo(
            name=provider.value,
            models=list(catalog.list_models(provider)),
            default_model=catalog.default_model(provider),
        )
        for provider in catalog
    ]


@app.post("/api/citations/query")
async def query_citations(req: CitationQueryRequest):
    """Query every provider once and return the results that cite a keyword."""
    results = await query_all_platforms(req.query, req.keywords)
    return {"results": [r.to_dict() for r in results]}


@app.post("/api/citations/monitor")
async def monitor_citations(req: MonitorRequest):
    """Run a tracked query (plus discovery variants) and store the hits."""
    async with httpx.AsyncClient(timeout=settings.provider_timeout) as client:
        monitor = CitationMonitor(
            Aggregator(catalog, build_adapters(catalog, client=client)), db=db
        )
        try:
            report = await monitor.monitor(
                req.tenant_id,
                req.query,
                req.keywords,
                providers=req.platforms,
                discovery=req.discovery,
            )
        except UnknownProviderError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
    return report.to_dict()


@app.get("/api/citations/{tenant_id}")
async def get_citations(tenant_id: str, platform: str | None = None, limit: int = 50):
    if platform is not None:
        try:
            platform = Provider.parse(platform).value
        except UnknownProviderError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"results": await db.get_results(tenant_id, platform=platform, limit=limit)}


@app.get("/api/citations/{tenant_id}/analytics")
async def get_analytics(tenant_id: str):
    return {"analytics": await db.get_analytics(tenant_id)}


def run() -> None:
    import uvicorn

    uvicorn.run("citemind.main:app", host=settings.host, port=settings.port)
