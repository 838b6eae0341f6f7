"""Search policy, formats and error models for configuration file lookup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True)
class SearchPolicy:
    """Controls which folders are searched for a configuration file.

    Folders are searched in a fixed order: current working directory, home
    directory, then ``/etc``. Earlier folders win.

    Attributes:
        exclude_current_folder: Skip the process working directory
        exclude_homedir: Skip the user home directory
        include_etc: Search ``/etc`` on POSIX-style platforms
        subfolder: Folder name appended to every searched folder
        fail_on_probe_error: Report probe errors other than "missing" instead of skipping the folder
    """

    exclude_current_folder: bool = False
    exclude_homedir: bool = False
    include_etc: bool = False
    subfolder: str = ""
    fail_on_probe_error: bool = False


class ConfigFormat(str, Enum):
    """Structured formats a configuration file can be decoded from."""

    JSON = "json"
    YAML = "yaml"


class ConfigFileError(BaseModel):
    """Base configuration file error."""

    model_config = ConfigDict(extra="forbid")

    filename: str | None = None
    message: str


class ConfigNotFoundError(ConfigFileError):
    """No searched folder contains the requested file."""


class ConfigIOError(ConfigFileError):
    """Filesystem or environment failure while locating or reading a file."""

    path: Path | None = None


class ConfigDecodeError(ConfigFileError):
    """File content could not be decoded into the requested shape."""

    path: Path
    format: ConfigFormat
    line: int | None = None
    column: int | None = None
    field: str | None = None
