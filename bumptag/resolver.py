"""Find the latest release tag in the history reachable from HEAD.

Every tag decorating a reachable commit is a candidate, and the numerically
highest version wins. The nearest tag by commit distance is irrelevant.
"""

from __future__ import annotations

from collections.abc import Iterable

from .errors import ParseError
from .models import TagReference
from .vcs import VersionControl
from .versions import ZERO_VERSION, parse_version, version_key

TAG_MARKER = "tag:"


def parse_decorations(lines: Iterable[str], prefix: str = "v") -> list[TagReference]:
    """Extract version tags from ``git log --pretty=%D`` output.

    Each line lists the refs of one commit, comma separated:
        "HEAD -> master, tag: v3.1.0, tag: v3.0.1, origin/master"

    Only refs carrying the "tag:" marker are considered. Tags that do not
    parse as versions are skipped.

    Returns:
        Tag references in the order they appear.
    """
    refs: list[TagReference] = []
    for line in lines:
        for ref in line.split(","):
            ref = ref.strip()
            if not ref.startswith(TAG_MARKER):
                continue
            name = ref.removeprefix(TAG_MARKER).strip()
            try:
                version = parse_version(name, prefix)
            except ParseError:
                continue
            refs.append(TagReference(name=name, version=str(version)))
    return refs


def latest_tag(refs: Iterable[TagReference]) -> TagReference:
    """Pick the highest version; the first one seen wins on ties.

    Returns the empty reference (no name, 0.0.0) when nothing beats 0.0.0.
    """
    best = TagReference()
    best_key = version_key(ZERO_VERSION)
    for ref in refs:
        key = version_key(ref.semver)
        if key > best_key:
            best, best_key = ref, key
    return best


def find_tag(vcs: VersionControl, prefix: str = "v") -> TagReference:
    """Find the highest version tag reachable from HEAD.

    Raises:
        CommandError: If the history cannot be read.
    """
    return latest_tag(parse_decorations(vcs.decorations(), prefix))
