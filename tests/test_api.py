"""Tests for the FastAPI routes."""

import pytest
from fastapi.testclient import TestClient

from citemind import main
from citemind.config import settings
from citemind.db.database import Database
from citemind.models.citation import CitationResult
from citemind.models.provider import Provider
from citemind.models.query import Query
from tests.helpers.fake_adapter import FakeAdapter

MENTION = "Acme Corp is an excellent market leader. The competition struggles."


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(main, "db", Database(str(tmp_path / "api.db")))
    monkeypatch.setattr(settings, "query_delay", 0.0)
    monkeypatch.setattr(
        main,
        "build_adapters",
        lambda catalog, client=None: {p: FakeAdapter(p, MENTION) for p in catalog},
    )
    with TestClient(main.app) as c:
        yield c


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_list_providers(client):
    providers = client.get("/api/providers").json()
    assert [p["name"] for p in providers] == [p.value for p in Provider]
    openai = providers[0]
    assert openai["default_model"] == openai["models"][0] == "gpt-4o"


def test_query_citations(client, monkeypatch):
    calls = []

    async def fake_query_all_platforms(query, keywords):
        calls.append((query, keywords))
        return [
            CitationResult.from_response(
                Provider.GEMINI, "gemini-1.5-pro", Query.of(query, keywords), MENTION
            )
        ]

    monkeypatch.setattr(main, "query_all_platforms", fake_query_all_platforms)

    response = client.post(
        "/api/citations/query",
        json={"query": "Is Acme Corp a market leader?", "keywords": ["Acme Corp"]},
    )

    assert response.status_code == 200
    results = response.json()["results"]
    assert calls == [("Is Acme Corp a market leader?", ["Acme Corp"])]
    assert results[0]["platform"] == "gemini"
    assert results[0]["mentions"] == ["Acme Corp is an excellent market leader"]
    assert results[0]["sentiment_label"] == "positive"


def test_query_requires_text(client):
    assert client.post("/api/citations/query", json={"query": ""}).status_code == 422


def test_monitor_stores_results(client):
    response = client.post(
        "/api/citations/monitor",
        json={
            "tenant_id": "tenant-1",
            "query": "Is Acme Corp a market leader?",
            "keywords": ["Acme Corp"],
            "platforms": ["openai", "anthropic"],
            "discovery": False,
        },
    )

    assert response.status_code == 200
    report = response.json()
    assert report["total_citations"] == 2
    assert [r["platform"] for r in report["results"]] == ["openai", "anthropic"]

    stored = client.get("/api/citations/tenant-1").json()["results"]
    assert len(stored) == 2
    only_openai = client.get("/api/citations/tenant-1", params={"platform": "openai"}).json()
    assert [r["platform"] for r in only_openai["results"]] == ["openai"]
    mixed_case = client.get("/api/citations/tenant-1", params={"platform": " OpenAI "}).json()
    assert [r["platform"] for r in mixed_case["results"]] == ["openai"]

    analytics = client.get("/api/citations/tenant-1/analytics").json()["analytics"]
    assert {row["platform"] for row in analytics} == {"openai", "anthropic"}
    assert all(row["positive_mentions"] == 1 for row in analytics)


def test_monitor_unknown_platform(client):
    response = client.post(
        "/api/citations/monitor",
        json={"tenant_id": "t", "query": "q", "keywords": ["Acme"], "platforms": ["bard"]},
    )
    assert response.status_code == 400
    assert "bard" in response.json()["detail"]


def test_unknown_tenant_has_no_results(client):
    assert client.get("/api/citations/nobody").json() == {"results": []}


def test_results_unknown_platform_filter(client):
    response = client.get("/api/citations/tenant-1", params={"platform": "bard"})
    assert response.status_code == 400
    assert "bard" in response.json()["detail"]
