"""Git implementation of VersionControl.

Provides a thin wrapper around subprocess calls to the git binary. Every
call blocks until git exits; there is no timeout.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

import click

from .errors import CommandError
from .vcs import VersionControl


class Git(VersionControl):
    """Run git commands in a working tree.

    Args:
        cwd: Directory to run git in. Defaults to the current directory.
        verbose: Echo every invocation to stderr.
    """

    def __init__(self, cwd: Path | None = None, *, verbose: bool = False) -> None:
        self.cwd = cwd
        self.verbose = verbose

    def run(self, *args: str, input: str | None = None) -> str:
        """Run a git command and return its stripped stdout.

        Args:
            *args: Arguments to pass to git (e.g., "log", "--pretty=%D").
            input: Text fed to git on stdin.

        Raises:
            CommandError: If git exits non-zero or cannot be started.
        """
        cmd = ["git", *args]
        if self.verbose:
            click.echo(f"$ {' '.join(cmd)}", err=True)
        try:
            result = subprocess.run(
                cmd,
                cwd=self.cwd,
                input=input,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise CommandError(cmd, None, str(e)) from e
        if result.returncode != 0:
            raise CommandError(cmd, result.returncode, result.stderr)
        return result.stdout.strip()

    def decorations(self) -> list[str]:
        return self.run("log", "--pretty=%D").splitlines()

    def changelog(self, since: str = "") -> list[str]:
        args = ["log", "--pretty=%h %s", "--no-merges"]
        if since:
            args.append(f"{since}..HEAD")
        return [line for line in self.run(*args).splitlines() if line.strip()]

    def branches(self) -> list[str]:
        return self.run("branch", "--list", "-vv").splitlines()

    def config_get(self, name: str, local: bool = False) -> str | None:
        args = ["config", "--local", "--get", name] if local else ["config", "--get", name]
        try:
            return self.run(*args)
        except CommandError as e:
            # `git config --get` exits 1 when the key is missing
            if e.returncode == 1:
                return None
            raise

    def show(self, name: str) -> str:
        return self.run("show", name)

    def toplevel(self) -> Path:
        return Path(self.run("rev-parse", "--show-toplevel"))

    def config_set(self, name: str, value: str) -> None:
        self.run("config", "--local", name, value)

    def config_unset(self, name: str) -> None:
        self.run("config", "--local", "--unset", name)

    def create_tag(self, name: str, annotation: str, sign: bool = False) -> None:
        args = ["tag", "-F-"]
        if sign:
            args.append("--sign")
        args.append(name)
        self.run(*args, input=annotation)

    def push(self, remote: str, name: str) -> None:
        self.run("push", remote, name)
