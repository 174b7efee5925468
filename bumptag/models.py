"""Data models for bumptag.

These Pydantic models represent the values passed between the steps of a
bumptag run.
"""

from __future__ import annotations

import semver
from pydantic import BaseModel

from .versions import BumpKind, parse_version


class TagReference(BaseModel):
    """A tag name paired with the version it encodes.

    The default instance stands for "no tag yet": an empty name and 0.0.0.

    Attributes:
        name: Raw tag name as stored in the repository (e.g. "v3.1.0").
        version: Canonical version string without prefix (e.g. "3.1.0").
    """

    name: str = ""
    version: str = "0.0.0"

    @property
    def exists(self) -> bool:
        return bool(self.name)

    @property
    def semver(self) -> semver.Version:
        return parse_version(self.version, prefix="")


class VersionBump(BaseModel):
    """Records the move from the latest tag to the one being created.

    Attributes:
        old: The latest existing tag (empty when the repository has none).
        new: The tag to create.
        kind: Bump granularity, or None when the version was given explicitly.
    """

    old: TagReference
    new: TagReference
    kind: BumpKind | None = None


class ReleaseOptions(BaseModel):
    """Options for a single run, as collected from the command line.

    Attributes:
        explicit: Tag name to create instead of bumping.
        bump: Granularity used when no explicit tag is given.
        edit: Open an editor on the annotation before tagging.
        dry_run: Print the annotation and create nothing.
        silent: Do not print the created tag.
        auto_push: Push the tag to the remote of the current branch.
        find_tag: Only print the latest tag name.
        changelog: Text used verbatim as the annotation body.
    """

    explicit: str | None = None
    bump: BumpKind = "minor"
    edit: bool = False
    dry_run: bool = False
    silent: bool = False
    auto_push: bool = False
    find_tag: bool = False
    changelog: str | None = None
