"""Create, push and show release tags."""

from __future__ import annotations

from .config import Settings
from .vcs import VersionControl

_TRUE = {"true", "yes", "on", "1"}


def should_sign(vcs: VersionControl, settings: Settings) -> bool:
    """Decide whether the tag gets a GPG signature.

    [tool.bumptag].sign wins when set; otherwise follows commit.gpgsign.
    Unset or unrecognized values mean no signature.
    """
    if settings.sign is not None:
        return settings.sign
    value = vcs.config_get("commit.gpgsign")
    return value is not None and value.strip().lower() in _TRUE


def create_tag(vcs: VersionControl, name: str, annotation: str, sign: bool) -> None:
    """Create an annotated tag on HEAD.

    Either git creates the whole tag object or it fails and nothing exists,
    so there is nothing to clean up on error.
    """
    vcs.create_tag(name, annotation, sign=sign)


def push_tag(vcs: VersionControl, remote: str, name: str) -> None:
    vcs.push(remote, name)


def show_tag(vcs: VersionControl, name: str) -> str:
    return vcs.show(name)
