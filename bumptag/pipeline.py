"""Release workflow: find tag → changelog → bump → annotate → tag → push.

This module orchestrates a bumptag run:
1. Disable log.showSignature for the whole run
2. Find the highest version tag reachable from HEAD
3. Collect the changelog since that tag (or take supplied text)
4. Compute the next version (explicit or bumped)
5. Compose and optionally edit the annotation
6. Create the annotated tag, push it, show it

Steps run strictly in order; each one needs the result of the previous one.
"""

from __future__ import annotations

import os
from collections.abc import Callable

import click

from .changelog import get_changelog, make_annotation
from .config import Settings
from .gpg import SignatureGuard
from .models import ReleaseOptions, TagReference, VersionBump
from .publisher import create_tag, push_tag, should_sign, show_tag
from .remote import find_remote
from .resolver import find_tag
from .vcs import VersionControl
from .versions import bump_version, parse_version, to_tag_name

DEFAULT_EDITOR = "vim"

Echo = Callable[..., None]


def next_tag(
    current: TagReference, options: ReleaseOptions, prefix: str = "v"
) -> VersionBump:
    """Compute the tag to create after ``current``.

    An explicit tag name replaces the version wholesale; otherwise the
    version is bumped along ``options.bump``.

    Raises:
        ParseError: If the explicit tag name is not a semantic version.
    """
    if options.explicit is not None:
        version = parse_version(options.explicit, prefix)
        kind = None
    else:
        kind = options.bump
        version = bump_version(current.semver, kind)
    new = TagReference(name=to_tag_name(version, prefix), version=str(version))
    return VersionBump(old=current, new=new, kind=kind)


def edit_annotation(annotation: str, settings: Settings) -> str:
    """Let the user edit the annotation in $EDITOR (or the configured editor).

    The temporary file is removed whatever the editor's exit status.

    Raises:
        click.ClickException: If the editor cannot be run.
    """
    editor = os.environ.get("EDITOR") or settings.editor or DEFAULT_EDITOR
    edited = click.edit(annotation, editor=editor, require_save=False)
    return annotation if edited is None else edited


def run_bumptag(
    vcs: VersionControl,
    options: ReleaseOptions,
    settings: Settings | None = None,
    echo: Echo = click.echo,
) -> VersionBump | None:
    """Execute a full bumptag run.

    Args:
        vcs: Repository to tag.
        options: Flags of this run.
        settings: Repository settings; defaults when None.
        echo: Output function for user-facing text.

    Returns:
        The computed bump, or None when only the latest tag was printed.
    """
    settings = settings or Settings()
    prefix = settings.prefix

    with SignatureGuard(vcs):
        current = find_tag(vcs, prefix)

        if options.find_tag:
            echo(current.name, nl=False)
            return None

        bump = next_tag(current, options, prefix)
        tag_name = bump.new.name

        if options.changelog is not None:
            annotation = make_annotation(tag_name, text=options.changelog)
        else:
            since = current.name if current.exists else ""
            annotation = make_annotation(tag_name, get_changelog(vcs, since))

        if options.edit:
            annotation = edit_annotation(annotation, settings)

        if options.dry_run:
            echo(annotation)
            return bump

        create_tag(vcs, tag_name, annotation, should_sign(vcs, settings))

        if options.auto_push:
            remote = find_remote(vcs)
            push_tag(vcs, remote, tag_name)
            if not options.silent:
                echo(f"The tag '{tag_name}' has been pushed to the remote '{remote}'")

        if not options.silent:
            echo(show_tag(vcs, tag_name))

    return bump
