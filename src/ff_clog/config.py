"""
Configuration for ff-clog backends.

``LoggerConfig`` is the value object handed to ``Backend.init``.
``ClogSettings`` reads the same fields from ``CLOG_*`` environment
variables (or a ``.env`` file) for services that configure logging
from their environment.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import InvalidConfigError
from .levels import CONSOLE, LEVEL_INFO


class LoggerConfig(BaseModel):
    """Settings applied to a backend when it is initialized."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    level: str = LEVEL_INFO
    source: str = ""
    service: str = ""
    skip: int = Field(default=0, ge=0)  # 0 keeps the backend default


class ClogSettings(BaseSettings):
    """Logger configuration loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="CLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    backend: str = CONSOLE
    level: str = LEVEL_INFO
    service: str = ""
    source: str = ""
    skip: int = Field(default=0, ge=0)

    def to_logger_config(self) -> LoggerConfig:
        """Build the LoggerConfig for the configured backend."""
        return LoggerConfig(
            level=self.level,
            service=self.service,
            source=self.source,
            skip=self.skip,
        )


def coerce_config(config: "LoggerConfig | Mapping[str, Any] | None") -> LoggerConfig:
    """
    Normalize what callers pass to ``init``.

    Raises:
        InvalidConfigError: If config is None or not a LoggerConfig/mapping
    """
    if config is None:
        raise InvalidConfigError("init logger failed, config is required")
    if isinstance(config, LoggerConfig):
        return config
    if isinstance(config, Mapping):
        try:
            return LoggerConfig.model_validate(dict(config))
        except ValidationError as e:
            raise InvalidConfigError(f"init logger failed, invalid config: {e}") from e
    raise InvalidConfigError(f"init logger failed, unsupported config type: {type(config).__name__}")
