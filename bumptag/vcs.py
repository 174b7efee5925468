"""Abstract interface over the version control operations bumptag needs.

The release workflow receives a VersionControl instance instead of calling
git directly, so tests can pass a fake and nothing is patched globally.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class VersionControl(ABC):
    """Query and mutation operations used by the release workflow.

    Implementations raise CommandError when the underlying tool fails.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def decorations(self) -> list[str]:
        """Return the ref decorations of every commit reachable from HEAD.

        One entry per commit, newest first, in ``git log --pretty=%D``
        format, e.g. ``"HEAD -> master, tag: v1.0.0, origin/master"``.
        Commits without refs give an empty string.
        """
        ...

    @abstractmethod
    def changelog(self, since: str = "") -> list[str]:
        """Return ``<short-hash> <subject>`` for non-merge commits.

        Args:
            since: Exclusive lower bound (a tag name). Empty means the whole
                history reachable from HEAD.
        """
        ...

    @abstractmethod
    def branches(self) -> list[str]:
        """Return the lines of ``git branch --list -vv``."""
        ...

    @abstractmethod
    def config_get(self, name: str, local: bool = False) -> str | None:
        """Return a configuration value, or None when it is not set."""
        ...

    @abstractmethod
    def show(self, name: str) -> str:
        """Return the ``git show`` output for a ref."""
        ...

    @abstractmethod
    def toplevel(self) -> Path:
        """Return the root of the working tree."""
        ...

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def config_set(self, name: str, value: str) -> None:
        """Set a value in the repository-local configuration."""
        ...

    @abstractmethod
    def config_unset(self, name: str) -> None:
        """Remove a value from the repository-local configuration."""
        ...

    @abstractmethod
    def create_tag(self, name: str, annotation: str, sign: bool = False) -> None:
        """Create an annotated tag on HEAD, GPG-signed when ``sign`` is set."""
        ...

    @abstractmethod
    def push(self, remote: str, name: str) -> None:
        """Push a single ref to ``remote``."""
        ...
