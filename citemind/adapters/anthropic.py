"""Anthropic adapter: Messages API via httpx."""

from __future__ import annotations

from typing import Any

from citemind.adapters.base import HTTPAdapter
from citemind.models.provider import Provider

ANTHROPIC_API_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"


class AnthropicAdapter(HTTPAdapter):
    """Adapter for Anthropic's Claude models."""

    platform = Provider.ANTHROPIC
    name = "Anthropic"
    credential_setting = "anthropic_api_key"

    def build_request(
        self, prompt: str, model: str, api_key: str
    ) -> tuple[str, dict[str, str], dict[str, Any]]:
        headers = {
            "x-api-key": api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }
        payload = {
            "model": model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        return ANTHROPIC_API_URL, headers, payload

    def extract_text(self, data: Any) -> Any:
        for block in data["content"]:
            if block["type"] == "text":
                return block["text"]
        raise KeyError("text")
