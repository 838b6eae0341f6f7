"""configfile - locate a named configuration file and read or decode it.

Files are searched in the current folder, the user home directory and,
optionally, ``/etc``. The first match wins.

By default, internal logging is disabled when used as a library.
Library users can enable logging by calling configfile.enable_logging().
"""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from result import Result

from configfile.common import disable_library_logging, enable_library_logging, setup_logging

from .folders import get_homedir, list_folders
from .models import (
    ConfigDecodeError,
    ConfigFileError,
    ConfigFormat,
    ConfigIOError,
    ConfigNotFoundError,
    SearchPolicy,
)
from .protocol import ConfigReader
from .reader import FileConfigReader, ResolvedFile
from .resolver import resolve
from .settings import get_settings
from .utils import Platform

T = TypeVar("T")

disable_library_logging()

enable_logging = enable_library_logging


def configure_logging() -> int | None:
    """Enable or disable logging according to the CONFIGFILE_LOGGING__* settings."""
    return setup_logging(get_settings().logging)


def resolve_file(name: str, policy: SearchPolicy | None = None) -> Result[Path, ConfigFileError]:
    """Resolve ``name`` using ``policy`` or the environment-configured default policy."""
    return _default_reader(policy).resolve(name)


def read_file(name: str, policy: SearchPolicy | None = None) -> Result[bytes, ConfigFileError]:
    return _default_reader(policy).read_file(name)


def read_json(name: str, target: type[T], policy: SearchPolicy | None = None) -> Result[T, ConfigFileError]:
    return _default_reader(policy).read_json(name, target)


def _default_reader(policy: SearchPolicy | None) -> FileConfigReader:
    return FileConfigReader(policy=policy or get_settings().to_search_policy())


__all__ = [
    "ConfigDecodeError",
    "ConfigFileError",
    "ConfigFormat",
    "ConfigIOError",
    "ConfigNotFoundError",
    "ConfigReader",
    "FileConfigReader",
    "Platform",
    "ResolvedFile",
    "SearchPolicy",
    "configure_logging",
    "enable_logging",
    "get_homedir",
    "list_folders",
    "read_file",
    "read_json",
    "resolve",
    "resolve_file",
]
