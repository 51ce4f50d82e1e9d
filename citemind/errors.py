"""Exception hierarchy for the citation engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from citemind.models.provider import Provider


class CitationEngineError(Exception):
    """Base class for all citation engine errors."""


class ConfigurationError(CitationEngineError):
    """A required credential or provider registration is missing."""

    def __init__(self, message: str, provider: Provider | None = None) -> None:
        super().__init__(message)
        self.provider = provider


class UnknownProviderError(CitationEngineError, KeyError):
    """A provider identifier is not part of the enumeration or the catalog."""

    def __init__(self, provider: object) -> None:
        super().__init__(f"Unknown provider: {provider!r}")
        self.provider = provider

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class ProviderError(CitationEngineError):
    """A single provider invocation failed."""

    def __init__(self, provider: Provider, message: str) -> None:
        super().__init__(f"{provider.label}: {message}")
        self.provider = provider


class ProviderUnavailableError(ProviderError):
    """Network failure, timeout, or non-success HTTP status from a provider."""

    def __init__(
        self, provider: Provider, message: str, status_code: int | None = None
    ) -> None:
        super().__init__(provider, message)
        self.status_code = status_code


class ProviderResponseFormatError(ProviderError):
    """The provider answered successfully but the body holds no usable text."""
