"""Common helpers used across configfile modules."""

from .logging import (
    Logger,
    LoggingConfig,
    create_logger,
    disable_library_logging,
    enable_library_logging,
    setup_logging,
)

__all__ = [
    "Logger",
    "LoggingConfig",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "setup_logging",
]
