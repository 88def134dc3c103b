"""Short version tag for the host toolchain.

The generated build descriptor records the Python version the project was
generated with.  Only ``major.minor`` (plus a prerelease tag, if any) is kept.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass

from wanted.errors import VersionParseError

_SEMVER = re.compile(
    r"^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<pre>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)

_RELEASE_LEVELS: dict[str, str] = {
    "alpha": "alpha",
    "beta": "beta",
    "candidate": "rc",
}


@dataclass(frozen=True)
class SemVer:
    """A parsed ``major.minor.patch[-pre][+build]`` version."""

    major: int
    minor: int
    patch: int
    pre: str = ""
    build: str = ""


def parse_version(text: str) -> SemVer:
    """Parse *text* as a semantic version.

    Raises:
        VersionParseError: If *text* is not well-formed.
    """
    match = _SEMVER.match(text.strip())
    if match is None:
        raise VersionParseError(text)
    return SemVer(
        major=int(match["major"]),
        minor=int(match["minor"]),
        patch=int(match["patch"]),
        pre=match["pre"] or "",
        build=match["build"] or "",
    )


def short_version(text: str) -> str:
    """Return ``"{major}.{minor}"`` with ``"-{pre}"`` appended when present.

    Examples::

        short_version("1.4.0")      -> "1.4"
        short_version("1.4.0-rc.1") -> "1.4-rc.1"
    """
    version = parse_version(text)
    short = f"{version.major}.{version.minor}"
    if version.pre:
        short += f"-{version.pre}"
    return short


def toolchain_version() -> str:
    """Return the running interpreter's version as a semantic version string."""
    info = sys.version_info
    version = f"{info.major}.{info.minor}.{info.micro}"
    if info.releaselevel != "final":
        level = _RELEASE_LEVELS.get(info.releaselevel, info.releaselevel)
        version += f"-{level}.{info.serial}"
    return version
