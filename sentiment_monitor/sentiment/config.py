"""
Sentiment classifier configuration.

Settings can be overridden via environment variables prefixed with SENTIMENT_.

Example:
    SENTIMENT_INFERENCE_URL=https://api-inference.huggingface.co/models/...
    SENTIMENT_REQUEST_TIMEOUT_SECONDS=5
    SENTIMENT_SEED=42
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SentimentConfig(BaseSettings):
    """Configuration for the sentiment classifier."""

    model_config = SettingsConfigDict(
        env_prefix="SENTIMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    inference_url: str = Field(
        default="https://api-inference.huggingface.co/models/siebert/sentiment-roberta-large-english",
        description="Hugging Face inference endpoint used in remote mode",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        ge=0.5,
        le=60.0,
        description="Upper bound for a single remote classification call",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the heuristic score generator (unseeded when None)",
    )
