"""CLI entry point for bumptag."""

from __future__ import annotations

from typing import IO

import click

from .config import load_settings
from .models import ReleaseOptions
from .pipeline import run_bumptag
from .shell import Git


@click.command()
@click.version_option(package_name="bumptag")
@click.argument("tagname", required=False)
@click.option("-e", "--edit", is_flag=True, help="Edit an annotation.")
@click.option(
    "-r", "--dry-run", is_flag=True, help="Prints an annotation for the new tag."
)
@click.option("-s", "--silent", is_flag=True, help="Do not show the created tag.")
@click.option(
    "-a", "--auto-push", is_flag=True, help="Push the created tag automatically."
)
@click.option(
    "-m", "--major", "bump", flag_value="major", help="Increment the MAJOR version."
)
@click.option(
    "-n",
    "--minor",
    "bump",
    flag_value="minor",
    help="Increment the MINOR version (default).",
)
@click.option(
    "-p", "--patch", "bump", flag_value="patch", help="Increment the PATCH version."
)
@click.option(
    "--find-tag",
    is_flag=True,
    help="Show the last tag, can be useful for CI tools.",
)
@click.option(
    "-c",
    "--changelog",
    type=click.File("r"),
    help="Use the contents of FILE ('-' for stdin) as the annotation body.",
)
@click.option(
    "--prefix",
    envvar="BUMPTAG_PREFIX",
    help="Tag name prefix. Overrides [tool.bumptag].prefix (default: v).",
)
@click.option("-v", "--verbose", is_flag=True, help="Print git commands to stderr.")
def cli(
    tagname: str | None,
    edit: bool,
    dry_run: bool,
    silent: bool,
    auto_push: bool,
    bump: str | None,
    find_tag: bool,
    changelog: IO[str] | None,
    prefix: str | None,
    verbose: bool,
) -> None:
    """Create a new tag to release a new version of your code.

    Finds the last semantic version tag, increments it and creates an
    annotated tag with a changelog. TAGNAME, when given, is used instead
    and must be a Semantic Versions 2.0.0 string (http://semver.org).
    """
    git = Git(verbose=verbose)
    settings = load_settings(git.toplevel())
    if prefix is not None:
        settings = settings.model_copy(update={"prefix": prefix})

    options = ReleaseOptions(
        explicit=tagname,
        bump=bump or "minor",
        edit=edit,
        dry_run=dry_run,
        silent=silent,
        auto_push=auto_push,
        find_tag=find_tag,
        changelog=changelog.read() if changelog is not None else None,
    )
    run_bumptag(git, options, settings)
