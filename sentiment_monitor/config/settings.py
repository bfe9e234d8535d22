"""Application settings using Pydantic Settings for environment-based configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central configuration for the sentiment-monitor service.

    All settings can be overridden via environment variables.
    Prefix is not used to allow standard env var names (e.g., DEMO_MODE).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # API server
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    api_keys: str | None = None  # Comma-separated; unset means dev mode
    cors_origins: str = "http://localhost:5173,http://localhost:3000"
    cors_allow_credentials: bool = True
    request_timeout_seconds: float = Field(default=30.0, ge=0.0, le=300.0)

    # Sentiment classification
    huggingface_api_token: str | None = None
    demo_mode: bool = False

    # Storage
    storage_backend: Literal["memory"] = "memory"
    data_dir: str = "data"
    seed_path: str = "data/seed.json"
    persist_enabled: bool = True

    # Observability
    metrics_enabled: bool = True
    tracing_enabled: bool = False
    otel_exporter_otlp_endpoint: str | None = None
    otel_service_name: str = "sentiment-monitor"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once.
    Clear cache with get_settings.cache_clear() if needed.
    """
    return Settings()
