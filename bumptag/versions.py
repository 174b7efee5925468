"""Version parsing and bumping utilities.

Handles conversion between tag names and semver objects. Tag names carry a
configurable prefix ("v" by default) in front of a strict Semantic
Versioning 2.0.0 string.
"""

from __future__ import annotations

from typing import Literal

import semver

from .errors import ParseError

BumpKind = Literal["major", "minor", "patch"]

ZERO_VERSION = semver.Version(0, 0, 0)


def parse_version(text: str, prefix: str = "v") -> semver.Version:
    """Parse a tag name into a semver.Version.

    The prefix is stripped when present, then the remainder must be a full
    MAJOR.MINOR.PATCH version (pre-release and build suffixes allowed):
    - "v1.2.3" → 1.2.3
    - "1.2.3-rc.1" → 1.2.3-rc.1
    - "v3.0" → ParseError

    Raises:
        ParseError: If the text is not a semantic version.
    """
    stripped = text.strip()
    if prefix:
        stripped = stripped.removeprefix(prefix)
    try:
        return semver.Version.parse(stripped)
    except (ValueError, TypeError) as e:
        raise ParseError(text, prefix) from e


def version_key(version: semver.Version) -> tuple[int, int, int]:
    """Ordering key: pre-release and build metadata are ignored."""
    return (version.major, version.minor, version.patch)


def bump_version(version: semver.Version, kind: BumpKind) -> semver.Version:
    """Return the next version along one granularity.

    Examples:
        1.1.1 major → 2.0.0
        1.1.1 minor → 1.2.0
        1.1.1 patch → 1.1.2
    """
    if kind == "major":
        return version.bump_major()
    if kind == "minor":
        return version.bump_minor()
    if kind == "patch":
        return version.bump_patch()
    raise ValueError(f"unexpected bump kind: {kind}")


def to_tag_name(version: semver.Version, prefix: str = "v") -> str:
    """Render a version as a tag name, e.g. 1.2.0 → "v1.2.0"."""
    return f"{prefix}{version}"
