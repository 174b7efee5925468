"""Build the annotation attached to a new tag."""

from __future__ import annotations

from .vcs import VersionControl


def get_changelog(vcs: VersionControl, since: str = "") -> list[str]:
    """List ``<short-hash> <subject>`` for non-merge commits after ``since``.

    Newest first. With an empty ``since`` the whole history is listed.
    """
    return [line for line in vcs.changelog(since) if line.strip()]


def make_annotation(
    tag_name: str,
    changelog: list[str] | None = None,
    *,
    text: str | None = None,
) -> str:
    """Compose the tag message.

    The first line is "Bump version <tag>", followed by a blank line and
    either the supplied ``text`` verbatim or one "* " bullet per changelog
    line, in the given order.
    """
    lines = [f"Bump version {tag_name}", ""]
    if text is not None:
        lines.append(text)
    else:
        lines.extend(f"* {line}" for line in changelog or [])
    return "\n".join(lines)
