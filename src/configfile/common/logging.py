"""Logging utilities for configfile using Loguru.

Logging is disabled by default when configfile is imported as a library.
Callers opt in with ``configfile.enable_logging()``.
"""

import sys
from typing import Literal, TypeAlias

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from configfile.constants import APP_NAME

Logger: TypeAlias = "loguru.Logger"


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=False)
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO") -> int:
    logger.enable(APP_NAME)
    logger.remove()

    handler_id = logger.add(
        sys.stderr,
        level=level,
        format=_get_text_format(),
        colorize=False,
    )

    return handler_id


def setup_logging(config: LoggingConfig) -> int | None:
    """Apply a logging config, returning the sink id when logging was enabled."""
    if not config.enabled:
        disable_library_logging()
        return None
    return enable_library_logging(config.log_level)


def create_logger(scope: str) -> Logger:
    return logger.bind(scope=scope)


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"
