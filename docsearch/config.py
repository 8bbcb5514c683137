"""Configuration settings for the docsearch service."""

import logging

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from .engine.scoring.constants import TYPE_WEIGHTS


class Settings(BaseSettings):
    """Service settings, read from ``DOCSEARCH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOCSEARCH_",
        env_file=".env",
        extra="ignore",
    )

    # Index source: http(s) URL or a local path to the JSON payload
    index_source: str = "index.json"
    index_fetch_timeout: float = 10.0

    # Typeahead display
    suggestion_limit: int = Field(default=10, ge=1)
    min_query_length: int = Field(default=1, ge=0)

    # Ranking: entity type -> score divisor
    type_weights: dict[str, PositiveInt] = Field(default_factory=lambda: dict(TYPE_WEIGHTS))

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"
    cors_allowed_origins: str = "*"

    @property
    def cors_origins_list(self) -> list[str]:
        """Split the comma-separated CORS origins."""
        if self.cors_allowed_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
