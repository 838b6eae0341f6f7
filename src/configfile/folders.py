"""Candidate folder discovery for configuration files."""

from __future__ import annotations

import os
from pathlib import Path

from result import Err, Ok, Result, is_err

from configfile.common import create_logger
from configfile.constants import ETC_FOLDER
from configfile.utils import Platform

from .models import ConfigIOError, SearchPolicy

logger = create_logger("folders")


def get_homedir(platform: Platform | None = None) -> Result[Path, ConfigIOError]:
    """Return the home directory of the invoking user.

    On non-Windows platforms a non-empty ``HOME`` takes precedence over the
    user database.
    """
    platform = platform or Platform.current()

    if not platform.is_windows:
        home = os.getenv("HOME")
        if home:
            return Ok(Path(home))

    try:
        home = _lookup_profile_home(platform)
    except (KeyError, OSError, RuntimeError) as exc:
        return Err(ConfigIOError(message=f"Unable to determine home directory: {exc}"))

    if not home:
        return Err(ConfigIOError(message="Unable to determine home directory"))

    return Ok(Path(home))


def list_folders(policy: SearchPolicy, platform: Platform | None = None) -> Result[list[Path], ConfigIOError]:
    """Return folders to search, in priority order: current, home, etc."""
    platform = platform or Platform.current()
    folders: list[Path] = []

    if not policy.exclude_current_folder:
        try:
            folders.append(Path(os.getcwd()))
        except OSError as exc:
            return Err(ConfigIOError(message=f"Unable to determine current folder: {exc}"))

    if not policy.exclude_homedir:
        home_result = get_homedir(platform)
        if is_err(home_result):
            return home_result
        folders.append(home_result.ok_value)

    if policy.include_etc and platform.supports_etc:
        folders.append(Path(ETC_FOLDER))

    subfolder = _relative_to_folder(policy.subfolder, platform.sep)
    if subfolder:
        folders = [folder / subfolder for folder in folders]

    logger.debug("Folders listed", folders=[str(folder) for folder in folders])
    return Ok(folders)


def _lookup_profile_home(platform: Platform) -> str:
    if platform.is_windows:
        return str(Path.home())

    import pwd

    return pwd.getpwuid(os.getuid()).pw_dir


def _relative_to_folder(name: str, sep: str) -> str:
    # Leading separators would make pathlib discard the folder it is joined to
    return name.lstrip("/" + sep)
