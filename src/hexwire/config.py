"""
Configuration management using Pydantic Settings
"""
import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOGGER_NAME = "hexwire"
DEFAULT_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class HexwireSettings(BaseSettings):
    """hexwire settings, read from HEXWIRE_* environment variables or .env"""

    log_level: str = Field(default="WARNING", description="Logging level for the hexwire logger")
    log_format: str = Field(default=DEFAULT_LOG_FORMAT, description="Log record format")
    accept_text_in_binary_mode: bool = Field(
        default=False,
        description="Let binary-mode deserialization also accept encoded text",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Uppercase the level name and reject unknown levels"""
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="HEXWIRE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )


@lru_cache()
def get_settings() -> HexwireSettings:
    """Get cached settings instance"""
    return HexwireSettings()


def configure_logging(settings: Optional[HexwireSettings] = None) -> logging.Logger:
    """
    Configure the package logger from settings.

    Attaches a single stream handler; calling it again only updates the
    level and format.
    """
    settings = settings or get_settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level)

    formatter = logging.Formatter(settings.log_format)
    handler = next(
        (h for h in logger.handlers if getattr(h, "_hexwire_handler", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._hexwire_handler = True
        logger.addHandler(handler)
    handler.setFormatter(formatter)
    return logger
