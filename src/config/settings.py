"""
Tower of Hanoi - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import logging
import os
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

_SECRET_KEYS = (
    "DEFAULT_DISK_COUNT",
    "MIN_DISK_COUNT",
    "MAX_DISK_COUNT",
    "PEG_CAPACITY",
    "DEBUG",
    "LOG_LEVEL",
)


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        # No secrets.toml outside Streamlit Cloud
        logger.debug("Streamlit secrets unavailable; using environment only")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Game
    default_disk_count: int = Field(default=3, ge=1)
    min_disk_count: int = Field(default=1, ge=1)
    max_disk_count: int = Field(default=10, ge=1)
    peg_capacity: int = Field(default=100, ge=1)

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def _check_disk_bounds(self) -> "Settings":
        if not (
            self.min_disk_count
            <= self.default_disk_count
            <= self.max_disk_count
            <= self.peg_capacity
        ):
            raise ValueError(
                "Expected min_disk_count <= default_disk_count <= max_disk_count "
                f"<= peg_capacity, got {self.min_disk_count}, {self.default_disk_count}, "
                f"{self.max_disk_count}, {self.peg_capacity}."
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the root logger."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)
