"""Configuration reader protocol."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, TypeVar

from result import Result

from .models import ConfigFileError, ConfigFormat

T = TypeVar("T")


class ConfigReader(Protocol):
    """Protocol for locating and reading named configuration files."""

    def resolve(self, name: str) -> Result[Path, ConfigFileError]:
        """Return the full path of the first matching configuration file."""
        ...

    def read_file(self, name: str) -> Result[bytes, ConfigFileError]:
        """Return the raw contents of the named configuration file."""
        ...

    def read_structured(
        self,
        name: str,
        target: type[T],
        format: ConfigFormat = ConfigFormat.JSON,
    ) -> Result[T, ConfigFileError]:
        """Decode the named configuration file into ``target``.

        Returns:
            Ok(T) when the file was found and fits the target shape.
            Err(ConfigNotFoundError) when no searched folder has the file.
            Err(ConfigIOError) on open or read failures.
            Err(ConfigDecodeError) when parsing or shape validation fails.
        """
        ...
