"""Base protocol and shared HTTP plumbing for provider adapters."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Protocol, runtime_checkable

import httpx

from citemind.catalog import QueryCatalog
from citemind.config import settings
from citemind.errors import (
    ConfigurationError,
    ProviderResponseFormatError,
    ProviderUnavailableError,
)
from citemind.models.citation import CitationResult
from citemind.models.provider import Provider
from citemind.models.query import Query

logger = logging.getLogger(__name__)


@runtime_checkable
class ProviderAdapter(Protocol):
    """Interface that every provider adapter implements."""

    platform: Provider
    name: str

    async def query(self, query: Query, model: str | None = None) -> CitationResult:
        """Execute a query against the provider and return a canonical result."""
        ...


class HTTPAdapter:
    """Adapter for providers reached with a single JSON POST.

    Subclasses supply the endpoint, the request body and the path of the
    generated text in the response.
    """

    platform: ClassVar[Provider]
    name: ClassVar[str]
    credential_setting: ClassVar[str]

    def __init__(
        self,
        catalog: QueryCatalog,
        api_key: str | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        max_tokens: int | None = None,
    ) -> None:
        self.catalog = catalog
        self.api_key = api_key
        self.client = client
        self.timeout = timeout if timeout is not None else settings.provider_timeout
        self.max_tokens = max_tokens if max_tokens is not None else settings.max_tokens

    async def query(self, query: Query, model: str | None = None) -> CitationResult:
        model = model or self.catalog.default_model(self.platform)
        api_key = self._require_api_key()

        logger.info("Querying %s with model %s", self.name, model)
        url, headers, payload = self.build_request(query.text, model, api_key)
        data = await self._post(url, headers, payload)
        text = self._parse_text(data)

        result = CitationResult.from_response(self.platform, model, query, text)
        logger.info(
            "%s returned %d chars, %d mentions",
            self.name, len(text), len(result.mentions),
        )
        return result

    def build_request(
        self, prompt: str, model: str, api_key: str
    ) -> tuple[str, dict[str, str], dict[str, Any]]:
        """Return ``(url, headers, json_body)`` for one completion request."""
        raise NotImplementedError

    def extract_text(self, data: Any) -> Any:
        """Pull the generated text out of a decoded success body."""
        raise NotImplementedError

    def _require_api_key(self) -> str:
        # Settings are consulted per call so rotated keys take effect
        api_key = self.api_key or getattr(settings, self.credential_setting, "")
        if not api_key:
            env_var = f"CITEMIND_{self.credential_setting.upper()}"
            raise ConfigurationError(
                f"{self.name} API key not configured (set {env_var})", self.platform
            )
        return api_key

    async def _post(
        self, url: str, headers: dict[str, str], payload: dict[str, Any]
    ) -> Any:
        try:
            if self.client is not None:
                response = await self.client.post(
                    url, headers=headers, json=payload, timeout=self.timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(url, headers=headers, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            detail = exc.response.text[:200]
            raise ProviderUnavailableError(
                self.platform,
                f"API error {status} {exc.response.reason_phrase} - {detail}",
                status_code=status,
            ) from exc
        except httpx.TimeoutException as exc:
            raise ProviderUnavailableError(
                self.platform, f"request timed out after {self.timeout}s"
            ) from exc
        except httpx.RequestError as exc:
            raise ProviderUnavailableError(
                self.platform, f"request failed: {exc!r}"
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise ProviderResponseFormatError(
                self.platform, "response body is not valid JSON"
            ) from exc

    def _parse_text(self, data: Any) -> str:
        try:
            text = self.extract_text(data)
        except (KeyError, IndexError, TypeError) as exc:
            raise ProviderResponseFormatError(
                self.platform, f"generated text missing from response ({exc!r})"
            ) from exc
        if not isinstance(text, str):
            raise ProviderResponseFormatError(
                self.platform, f"expected generated text, got {type(text).__name__}"
            )
        return text
