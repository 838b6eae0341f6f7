"""Resolve a configuration filename against an ordered folder list."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from result import Err, Ok, Result

from configfile.common import create_logger
from configfile.utils import Platform

from .models import ConfigIOError, ConfigNotFoundError

logger = create_logger("resolver")


def resolve(
    filename: str,
    folders: Sequence[Path],
    *,
    fail_on_probe_error: bool = False,
) -> Result[Path, ConfigNotFoundError | ConfigIOError]:
    """Return the path of ``filename`` in the first folder that contains it.

    Folders are probed in order and the search stops at the first hit. A probe
    that fails for a reason other than the file missing skips the folder,
    unless ``fail_on_probe_error`` is set.
    """
    relative_name = filename.lstrip("/" + Platform.current().sep)
    for folder in folders:
        candidate = folder / relative_name
        try:
            candidate.stat()
        except (FileNotFoundError, NotADirectoryError):
            continue
        except OSError as exc:
            if fail_on_probe_error:
                return Err(
                    ConfigIOError(
                        filename=filename,
                        path=candidate,
                        message=f"Unable to probe configuration file {filename}: {exc}",
                    )
                )
            logger.debug("Probe failed, skipping folder", path=str(candidate), error=str(exc))
            continue

        logger.debug("Config file resolved", filename=filename, path=str(candidate))
        return Ok(candidate)

    return Err(ConfigNotFoundError(filename=filename, message=f"File {filename} not found"))
