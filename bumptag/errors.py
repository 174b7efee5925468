"""Exceptions raised by bumptag.

All errors derive from BumptagError, a click.ClickException, so the CLI
reports them as ``Error: <message>`` and exits with status 1.
"""

from __future__ import annotations

from collections.abc import Sequence

import click

# Exit status used when SIGINT arrives while log.showSignature is overridden.
INTERRUPTED_EXIT_CODE = 42


class BumptagError(click.ClickException):
    """Base class for every fatal bumptag error."""


class ParseError(BumptagError):
    """A string is not a semantic version."""

    def __init__(self, text: str, prefix: str = "") -> None:
        self.text = text
        self.prefix = prefix
        hint = f" (optionally prefixed with '{prefix}')" if prefix else ""
        super().__init__(
            f"'{text}' is not a valid semantic version MAJOR.MINOR.PATCH{hint}"
        )


class CommandError(BumptagError):
    """A git invocation failed or could not be started.

    Attributes:
        command: Full argument list, including the executable.
        returncode: Process exit status, or None if it never started.
        stderr: Captured diagnostic output.
    """

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None,
        stderr: str = "",
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr.strip()
        reason = (
            f"exit status {returncode}" if returncode is not None else "not started"
        )
        message = f"command '{' '.join(self.command)}' failed: {reason}"
        if self.stderr:
            message += "\n" + self.stderr
        super().__init__(message)


class NotFoundError(BumptagError):
    """The remote tracked by the current branch cannot be determined."""


class ConfigError(BumptagError):
    """Repository or bumptag configuration cannot be read or written."""
