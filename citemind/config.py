"""CiteMind configuration: loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "CITEMIND_", "env_file": ".env", "extra": "ignore"}

    # Provider API keys, read at invocation time by each adapter
    openai_api_key: str = ""
    anthropic_api_key: str = ""
    perplexity_api_key: str = ""
    google_api_key: str = ""
    huggingface_api_key: str = ""

    # Provider calls
    provider_timeout: float = 30.0  # seconds, per provider invocation
    max_tokens: int = 1000
    query_delay: float = 1.0  # seconds between monitored discovery queries

    # Database
    database_path: str = "citemind.db"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:5173"]
    log_level: str = "INFO"


settings = Settings()
