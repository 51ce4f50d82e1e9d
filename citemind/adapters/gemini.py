"""Gemini adapter: Google Generative Language API."""

from __future__ import annotations

from typing import Any

from citemind.adapters.base import HTTPAdapter
from citemind.models.provider import Provider

GENERATE_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


class GeminiAdapter(HTTPAdapter):
    """Adapter for Google's Gemini models."""

    platform = Provider.GEMINI
    name = "Gemini"
    credential_setting = "google_api_key"

    def build_request(
        self, prompt: str, model: str, api_key: str
    ) -> tuple[str, dict[str, str], dict[str, Any]]:
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": api_key,
        }
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": 0.7,
                "topK": 40,
                "topP": 0.95,
                "maxOutputTokens": self.max_tokens,
            },
        }
        return GENERATE_URL.format(model=model), headers, payload

    def extract_text(self, data: Any) -> Any:
        return data["candidates"][0]["content"]["parts"][0]["text"]
