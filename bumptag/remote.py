"""Infer the remote a new tag should be pushed to."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .errors import NotFoundError
from .vcs import VersionControl

# "* master  cc51028 [origin/master: ahead 1] subject"
_CURRENT_BRANCH_RE = re.compile(r"^\* \S+\s+[0-9a-f]+ \[([^/\]\s]+)/[^\]]+\]")


def parse_remote(lines: Iterable[str]) -> str | None:
    """Return the upstream remote of the checked-out branch, if any."""
    for line in lines:
        match = _CURRENT_BRANCH_RE.match(line)
        if match:
            return match.group(1)
    return None


def find_remote(vcs: VersionControl) -> str:
    """Return the remote tracked by the current branch.

    Raises:
        NotFoundError: If the current branch has no upstream.
    """
    remote = parse_remote(vcs.branches())
    if remote is None:
        raise NotFoundError("remote for current branch not found")
    return remote
