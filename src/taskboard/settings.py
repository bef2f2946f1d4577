"""
Taskboard Settings.

Configuration is read from ``TASKBOARD_*`` environment variables into a
validated pydantic model. Use ``get_settings()`` to share one instance
across the process.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from taskboard.constants import DEFAULT_USER_ID
from taskboard.exceptions import TaskboardConfigurationError

ENV_PREFIX = "TASKBOARD_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class Settings(BaseModel):
    """Process-wide configuration."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(default=DEFAULT_USER_ID, min_length=1)
    seed_demo_data: bool = True
    host: str = "127.0.0.1"
    port: int = Field(default=5000, ge=1, le=65535)
    api_prefix: str = "/api"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("api_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        for name in cls.model_fields:
            raw = env.get(ENV_PREFIX + name.upper())
            if raw is None:
                continue
            if name == "seed_demo_data":
                values[name] = _parse_bool(name, raw)
            else:
                values[name] = raw

        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise TaskboardConfigurationError(f"Invalid configuration: {e}") from e


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise TaskboardConfigurationError(
        f"Invalid boolean for {ENV_PREFIX}{name.upper()}: {raw!r}"
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached process settings."""
    return Settings.from_env()


def configure_logging(settings: Settings) -> None:
    """Configure root logging for an entry point."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
