"""Version information of the fragment argument linter"""

import re
from typing import NamedTuple

__all__ = ["version", "version_info"]


version = "0.3.0"
"""Version of the fragment argument linter"""


_re_version = re.compile(r"(\d+)\.(\d+)\.(\d+)(\D*)(\d*)")

_release_levels = {"a": "alpha", "b": "beta", "c": "candidate", "r": "candidate"}


class VersionInfo(NamedTuple):
    """Version of the linter, split into its parts"""

    major: int
    minor: int
    micro: int
    releaselevel: str
    serial: int

    @classmethod
    def from_str(cls, v: str) -> "VersionInfo":
        groups = _re_version.match(v).groups()  # type: ignore
        major, minor, micro = map(int, groups[:3])
        level = _release_levels.get((groups[3] or "")[:1], "final")
        serial = groups[4]
        serial = int(serial) if serial else 0
        return cls(major, minor, micro, level, serial)

    def __str__(self) -> str:
        v = f"{self.major}.{self.minor}.{self.micro}"
        level = self.releaselevel
        if level and level != "final":
            v = f"{v}{level[:1]}{self.serial}"
        return v


version_info = VersionInfo.from_str(version)
