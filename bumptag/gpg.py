"""Keep GPG signatures out of ``git log`` output for the duration of a run.

With log.showSignature enabled, ``git log`` interleaves gpg output with the
formatted lines bumptag parses. SignatureGuard forces the option off in the
local configuration and puts the previous value back on exit or SIGINT.

Usage:
    with SignatureGuard(vcs):
        tag = find_tag(vcs)
"""

from __future__ import annotations

import signal
import threading
from types import FrameType
from typing import Any

import click

from .errors import INTERRUPTED_EXIT_CODE, CommandError, ConfigError
from .vcs import VersionControl

LOG_SHOW_SIGNATURE = "log.showSignature"


class SignatureGuard:
    """Context manager that disables log.showSignature until exit.

    The restore runs at most once, whichever of normal exit and SIGINT comes
    first. A SIGINT while armed restores the setting and exits the process
    with INTERRUPTED_EXIT_CODE.
    """

    def __init__(self, vcs: VersionControl) -> None:
        self.vcs = vcs
        self.old_value: str | None = None
        self._restore_once = threading.Lock()
        self._previous_handler: Any = None
        self._interrupted = False

    def __enter__(self) -> SignatureGuard:
        self.old_value = self._read_current()
        # The handler goes in before the write so no window leaves it disabled.
        self._previous_handler = signal.signal(signal.SIGINT, self._on_interrupt)
        try:
            self.vcs.config_set(LOG_SHOW_SIGNATURE, "false")
        except CommandError as e:
            self._reinstall_handler()
            raise ConfigError(f"Cannot disable {LOG_SHOW_SIGNATURE}:\n{e.message}") from e
        except BaseException:
            self._reinstall_handler()
            raise
        return self

    def __exit__(self, *exc_info: object) -> None:
        try:
            self.restore()
        finally:
            self._reinstall_handler()
        if self._interrupted:
            raise SystemExit(INTERRUPTED_EXIT_CODE)

    def restore(self) -> bool:
        """Put the previous value back. Returns False if already restored."""
        if not self._restore_once.acquire(blocking=False):
            return False
        try:
            if self.old_value:
                self.vcs.config_set(LOG_SHOW_SIGNATURE, self.old_value)
            else:
                self.vcs.config_unset(LOG_SHOW_SIGNATURE)
        except CommandError as e:
            click.echo(
                f"Warning: cannot restore {LOG_SHOW_SIGNATURE}:\n{e.message}", err=True
            )
        return True

    def _read_current(self) -> str | None:
        try:
            return self.vcs.config_get(LOG_SHOW_SIGNATURE, local=True)
        except CommandError:
            return None

    def _reinstall_handler(self) -> None:
        previous = self._previous_handler
        signal.signal(signal.SIGINT, signal.SIG_DFL if previous is None else previous)

    def _on_interrupt(self, signum: int, frame: FrameType | None) -> None:
        if self.restore():
            raise SystemExit(INTERRUPTED_EXIT_CODE)
        # __exit__ owns the restore and exits once it has finished.
        self._interrupted = True
