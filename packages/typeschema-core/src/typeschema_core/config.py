"""Settings for typeschema-core.

Settings are read once from the environment (``TYPESCHEMA_`` prefix) and
shared process-wide. Nothing mutates them after creation, so concurrent
readers need no synchronization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TypeSchemaSettings(BaseSettings):
    """Process-wide configuration for schema output and logging.

    Example:
        >>> # TYPESCHEMA_INDENT=4 TYPESCHEMA_LOG_LEVEL=DEBUG
        >>> settings = get_settings()
        >>> settings.indent
        4
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPESCHEMA_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    indent: int | None = Field(
        default=2,
        ge=0,
        description="Indentation used when writing schemas as text",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Minimum log level",
    )
    json_logs: bool = Field(
        default=False,
        description="Render log entries as JSON instead of console format",
    )


@lru_cache(maxsize=1)
def get_settings() -> TypeSchemaSettings:
    """Return the shared settings instance, loading it on first use."""
    return TypeSchemaSettings()
