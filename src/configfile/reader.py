"""File-based configuration reader."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, TypeVar

from result import Err, Ok, Result, is_err

from configfile.common import create_logger
from configfile.utils import Platform

from .decoders import decode_into
from .folders import list_folders
from .models import ConfigFileError, ConfigFormat, ConfigIOError, SearchPolicy
from .protocol import ConfigReader
from .resolver import resolve

T = TypeVar("T")

logger = create_logger("reader")


@dataclass
class ResolvedFile:
    """An opened configuration file owned by the caller that requested it."""

    filename: str
    path: Path
    handle: BinaryIO

    def close(self) -> None:
        self.handle.close()

    def __enter__(self) -> ResolvedFile:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


class FileConfigReader(ConfigReader):
    def __init__(self, policy: SearchPolicy | None = None, platform: Platform | None = None) -> None:
        self.policy = policy or SearchPolicy()
        self.platform = platform or Platform.current()

    def list_folders(self) -> Result[list[Path], ConfigIOError]:
        return list_folders(self.policy, self.platform)

    def resolve(self, name: str) -> Result[Path, ConfigFileError]:
        folders_result = self.list_folders().map_err(lambda error: error.model_copy(update={"filename": name}))
        if is_err(folders_result):
            return folders_result

        return resolve(name, folders_result.ok_value, fail_on_probe_error=self.policy.fail_on_probe_error)

    def get_file(self, name: str) -> Result[ResolvedFile, ConfigFileError]:
        """Resolve and open the named file; the caller must close it."""
        path_result = self.resolve(name)
        if is_err(path_result):
            return path_result

        path = path_result.ok_value
        try:
            handle = path.open("rb")
        except OSError:
            return Err(
                ConfigIOError(
                    filename=name,
                    path=path,
                    message=f"Unable to read configuration file {name}. Not exists or not readable",
                )
            )

        logger.debug("Config file opened", filename=name, path=str(path))
        return Ok(ResolvedFile(filename=name, path=path, handle=handle))

    def read_file(self, name: str) -> Result[bytes, ConfigFileError]:
        file_result = self.get_file(name)
        if is_err(file_result):
            return file_result

        with file_result.ok_value as resolved:
            try:
                content = resolved.handle.read()
            except OSError as exc:
                return Err(ConfigIOError(filename=name, path=resolved.path, message=str(exc)))

        logger.debug("Config file read", filename=name, size=len(content))
        return Ok(content)

    def read_structured(
        self,
        name: str,
        target: type[T],
        format: ConfigFormat = ConfigFormat.JSON,
    ) -> Result[T, ConfigFileError]:
        file_result = self.get_file(name)
        if is_err(file_result):
            return file_result

        with file_result.ok_value as resolved:
            return decode_into(
                resolved.handle,
                target,
                filename=name,
                path=resolved.path,
                format=format,
            )

    def read_json(self, name: str, target: type[T]) -> Result[T, ConfigFileError]:
        return self.read_structured(name, target, ConfigFormat.JSON)

    def read_yaml(self, name: str, target: type[T]) -> Result[T, ConfigFileError]:
        return self.read_structured(name, target, ConfigFormat.YAML)
