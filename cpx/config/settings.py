"""Process-wide settings read from the environment."""

import logging
import re
from functools import lru_cache
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cpx.core.errors import ConfigError


logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CpxSettings(BaseSettings):
    """Settings with automatic environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables (``CPX_*``)
    2. Constructor arguments
    3. .env file
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="CPX_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables take precedence over constructor arguments."""
        return (
            env_settings,
            init_settings,
            dotenv_settings,
            file_secret_settings,
        )

    exclude: re.Pattern[str] | None = Field(
        default=None,
        description="Source paths matching this regex are never copied",
    )
    log_level: str = Field(default="WARNING", description="Log level name")
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("exclude", mode="before")
    @classmethod
    def compile_exclude(cls, v: Any) -> re.Pattern[str] | None:
        if v is None or isinstance(v, re.Pattern):
            return v
        if isinstance(v, str):
            if not v:
                return None
            try:
                return re.compile(v)
            except re.error as e:
                raise ValueError(f"invalid exclude pattern {v!r}: {e}") from e
        raise ValueError("exclude must be a regular expression string")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper_v = v.strip().upper()
        if upper_v not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return upper_v


def load_settings(**overrides: Any) -> CpxSettings:
    """Build settings, converting validation failures to ``ConfigError``.

    Args:
        **overrides: Values used where no environment variable is set

    Returns:
        Validated settings

    Raises:
        ConfigError: If a value is invalid (e.g. a malformed exclude regex)
    """
    try:
        return CpxSettings(**overrides)
    except ValidationError as e:
        raise ConfigError(f"Invalid cpx settings: {e}", {"overrides": overrides}) from e


@lru_cache(maxsize=1)
def get_settings() -> CpxSettings:
    """Settings for this process, read from the environment once."""
    settings = load_settings()
    logger.debug(
        "Loaded settings: exclude=%s log_level=%s",
        settings.exclude.pattern if settings.exclude else None,
        settings.log_level,
    )
    return settings
