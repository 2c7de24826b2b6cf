# ABOUTME: Base configuration classes for the property resolution library
# ABOUTME: Provides foundational settings shared by all configuration classes

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "PROPERTYUTIL_"


class BasePropertyUtilSettings(BaseSettings):
    """Defines the foundational configuration of the library.

    Settings are loaded by `pydantic-settings` from environment variables
    prefixed with ``PROPERTYUTIL_`` or from a ``.env`` file. Names are matched
    case-insensitively.

    Attributes:
        LOG_LEVEL: The minimum level for log messages emitted by ``setup_logging``.
        model_config: Pydantic's configuration dictionary, specifying how settings are loaded.
    """

    LOG_LEVEL: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="The minimum level for log messages to be processed.",
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level_case_insensitive(cls, v: str) -> str:
        """Validate LOG_LEVEL field with case-insensitive normalization."""
        if isinstance(v, str):
            v = v.upper().strip()
            return "WARNING" if v == "WARN" else v
        return v
