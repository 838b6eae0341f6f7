"""Structured decoding of configuration file streams."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO, TypeAlias, TypeVar

import yaml
from pydantic import TypeAdapter, ValidationError
from result import Err, Ok, Result

from .models import ConfigDecodeError, ConfigFormat, ConfigIOError

T = TypeVar("T")

Decoder: TypeAlias = Callable[[BinaryIO, str, Path], Result[object, ConfigDecodeError]]


def decode_into(
    handle: BinaryIO,
    target: type[T],
    *,
    filename: str,
    path: Path,
    format: ConfigFormat = ConfigFormat.JSON,
) -> Result[T, ConfigDecodeError | ConfigIOError]:
    """Decode an open stream and validate the data into ``target``."""
    decoder = get_decoder(format)

    try:
        decoded = decoder(handle, filename, path)
    except OSError as exc:
        return Err(ConfigIOError(filename=filename, path=path, message=str(exc)))

    return decoded.and_then(lambda data: _validate(data, target, filename=filename, path=path, format=format))


def get_decoder(format: ConfigFormat) -> Decoder:
    match format:
        case ConfigFormat.JSON:
            return _decode_json
        case ConfigFormat.YAML:
            return _decode_yaml
        case _:
            raise ValueError(f"Unexpected format: {format}")


def _decode_json(handle: BinaryIO, filename: str, path: Path) -> Result[object, ConfigDecodeError]:
    try:
        return Ok(json.load(handle))
    except json.JSONDecodeError as exc:
        return Err(
            ConfigDecodeError(
                filename=filename,
                path=path,
                format=ConfigFormat.JSON,
                line=exc.lineno,
                column=exc.colno,
                message=str(exc),
            )
        )
    except (UnicodeDecodeError, RecursionError) as exc:
        return Err(ConfigDecodeError(filename=filename, path=path, format=ConfigFormat.JSON, message=str(exc)))


def _decode_yaml(handle: BinaryIO, filename: str, path: Path) -> Result[object, ConfigDecodeError]:
    try:
        data = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        return Err(
            ConfigDecodeError(
                filename=filename,
                path=path,
                format=ConfigFormat.YAML,
                line=(line + 1) if line is not None else None,
                column=(column + 1) if column is not None else None,
                message=str(exc),
            )
        )
    except RecursionError as exc:
        return Err(ConfigDecodeError(filename=filename, path=path, format=ConfigFormat.YAML, message=str(exc)))

    # An empty document is an empty mapping
    return Ok({} if data is None else data)


def _validate(
    data: object,
    target: type[T],
    *,
    filename: str,
    path: Path,
    format: ConfigFormat,
) -> Result[T, ConfigDecodeError]:
    try:
        return Ok(TypeAdapter(target).validate_python(data))
    except ValidationError as exc:
        error_details = exc.errors()
        field = None
        message = str(exc)
        if error_details:
            first = error_details[0]
            loc = first.get("loc") or ()
            field = ".".join(str(part) for part in loc) or None
        return Err(
            ConfigDecodeError(
                filename=filename,
                path=path,
                format=format,
                field=field,
                message=message,
            )
        )
