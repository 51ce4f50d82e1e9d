"""OpenAI adapter: Chat Completions API via httpx."""

from __future__ import annotations

from typing import Any

from citemind.adapters.base import HTTPAdapter
from citemind.models.provider import Provider

OPENAI_API_URL = "https://api.openai.com/v1/chat/completions"


class OpenAIAdapter(HTTPAdapter):
    """Adapter for OpenAI's chat completions endpoint."""

    platform = Provider.OPENAI
    name = "OpenAI"
    credential_setting = "openai_api_key"

    api_url: str = OPENAI_API_URL
    temperature: float = 0.7

    def build_request(
        self, prompt: str, model: str, api_key: str
    ) -> tuple[str, dict[str, str], dict[str, Any]]:
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }
        return self.api_url, headers, payload

    def extract_text(self, data: Any) -> Any:
        return data["choices"][0]["message"]["content"]
