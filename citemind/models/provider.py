"""Provider enumeration."""

from __future__ import annotations

from enum import Enum

from citemind.errors import UnknownProviderError


class Provider(Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    PERPLEXITY = "perplexity"
    GEMINI = "gemini"
    HUGGINGFACE = "huggingface"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: str | Provider) -> Provider:
        """Resolve a provider from its identifier, case-insensitively."""
        if isinstance(value, Provider):
            return value
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError):
            raise UnknownProviderError(value) from None


_LABELS = {
    Provider.OPENAI: "OpenAI",
    Provider.ANTHROPIC: "Anthropic",
    Provider.PERPLEXITY: "Perplexity",
    Provider.GEMINI: "Gemini",
    Provider.HUGGINGFACE: "HuggingFace",
}
