"""Runtime settings read from the environment."""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

LOG_LEVEL_ENV = "JSON_SCHEMA_CHECK_LOG_LEVEL"


class Settings(BaseModel):
    """Settings for the json-schema-check CLI."""

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log_level is a standard logging level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level


def load_settings() -> Settings:
    """
    Load settings from the environment, reading a local .env file first.

    Returns:
        Settings: The resolved settings.
    """
    load_dotenv()
    return Settings(log_level=os.getenv(LOG_LEVEL_ENV, "INFO"))
