"""Shared fixtures for the CiteMind test suite."""

from __future__ import annotations

import httpx
import pytest

from citemind.catalog import QueryCatalog, build_default_catalog
from citemind.config import settings
from citemind.models.provider import Provider

API_KEY_SETTINGS = (
    "openai_api_key",
    "anthropic_api_key",
    "perplexity_api_key",
    "google_api_key",
    "huggingface_api_key",
)


@pytest.fixture(autouse=True)
def _clear_api_keys(monkeypatch):
    """Keep credentials from the developer's environment out of tests."""
    for name in API_KEY_SETTINGS:
        monkeypatch.setattr(settings, name, "")


@pytest.fixture
def catalog() -> QueryCatalog:
    return build_default_catalog()


@pytest.fixture
def four_provider_catalog() -> QueryCatalog:
    return QueryCatalog({
        Provider.OPENAI: ("gpt-test",),
        Provider.ANTHROPIC: ("claude-test",),
        Provider.PERPLEXITY: ("sonar-test",),
        Provider.GEMINI: ("gemini-test",),
    })


@pytest.fixture
async def mock_client_factory():
    """Build an httpx.AsyncClient whose requests are answered by ``handler``."""
    clients: list[httpx.AsyncClient] = []

    def factory(handler) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        await client.aclose()
