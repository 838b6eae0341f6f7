"""Target platform description used during folder discovery."""

from __future__ import annotations

import os
from dataclasses import dataclass

WINDOWS_OS_NAME = "nt"


@dataclass(frozen=True)
class Platform:
    """Operating system traits that affect where configuration lives.

    Attributes:
        os_name: Value in the style of ``os.name`` (``posix``, ``nt``)
        sep: Path separator of the platform
    """

    os_name: str
    sep: str

    @classmethod
    def current(cls) -> Platform:
        return cls(os_name=os.name, sep=os.sep)

    @property
    def is_windows(self) -> bool:
        return self.os_name == WINDOWS_OS_NAME

    @property
    def supports_etc(self) -> bool:
        return not self.is_windows and self.sep == "/"
