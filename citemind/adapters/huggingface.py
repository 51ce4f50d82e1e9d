"""HuggingFace adapter: hosted Inference API text generation."""

from __future__ import annotations

from typing import Any

from citemind.adapters.base import HTTPAdapter
from citemind.models.provider import Provider

INFERENCE_URL = "https://api-inference.huggingface.co/models/{model}"


class HuggingFaceAdapter(HTTPAdapter):
    """Adapter for text-generation models on the HuggingFace Inference API."""

    platform = Provider.HUGGINGFACE
    name = "HuggingFace"
    credential_setting = "huggingface_api_key"

    def build_request(
        self, prompt: str, model: str, api_key: str
    ) -> tuple[str, dict[str, str], dict[str, Any]]:
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "inputs": prompt,
            "parameters": {
                "max_new_tokens": self.max_tokens,
                "temperature": 0.7,
                "return_full_text": False,
            },
        }
        return INFERENCE_URL.format(model=model), headers, payload

    def extract_text(self, data: Any) -> Any:
        # Text generation answers with a list of candidates
        if not isinstance(data, list):
            raise TypeError(f"expected a list of generations, got {type(data).__name__}")
        return data[0]["generated_text"]
