"""Perplexity adapter: OpenAI-compatible chat completions."""

from __future__ import annotations

from citemind.adapters.openai import OpenAIAdapter
from citemind.models.provider import Provider

PERPLEXITY_API_URL = "https://api.perplexity.ai/chat/completions"


class PerplexityAdapter(OpenAIAdapter):
    """Adapter for Perplexity's online Sonar models."""

    platform = Provider.PERPLEXITY
    name = "Perplexity"
    credential_setting = "perplexity_api_key"

    api_url = PERPLEXITY_API_URL
    # Lower temperature keeps answers anchored to retrieved sources
    temperature = 0.2
