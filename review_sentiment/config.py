"""Application configuration via Pydantic Settings.

NOTE: We explicitly map the .env variable names (MODEL_NAME, LOG_ENDPOINT_URL,
DATABASE_URL, etc.) to avoid silent misconfiguration.
"""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Inference
    model_name: str = Field(
        default="distilbert-base-uncased-finetuned-sst-2-english",
        validation_alias="MODEL_NAME",
    )

    # Dataset (local path or http(s) URL of a TSV file with a "text" column)
    reviews_source: str = Field(
        default="data/reviews_test.tsv",
        validation_alias="REVIEWS_SOURCE",
    )

    # Remote logging endpoint (empty = logging not configured)
    log_endpoint_url: str = Field(default="", validation_alias="LOG_ENDPOINT_URL")
    log_request_timeout: float = Field(default=10.0, validation_alias="LOG_REQUEST_TIMEOUT")

    # Logging endpoint storage
    database_url: str = Field(
        default="sqlite+aiosqlite:///./sentiment_logs.db",
        validation_alias="DATABASE_URL",
    )
    sheet_name: str = Field(default="Logs", validation_alias="SHEET_NAME")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    preload_on_startup: bool = Field(default=True, validation_alias="PRELOAD_ON_STARTUP")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "protected_namespaces": ()}


settings = Settings()


def setup_logging() -> None:
    """Configure the root logger from LOG_LEVEL."""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
