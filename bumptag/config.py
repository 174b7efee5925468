"""Settings loaded from the [tool.bumptag] table of pyproject.toml.

Example:
    [tool.bumptag]
    prefix = "v"
    editor = "nano"
    sign = true
"""

from __future__ import annotations

from pathlib import Path

import tomlkit
from pydantic import BaseModel, ConfigDict, ValidationError
from tomlkit.exceptions import TOMLKitError

from .errors import ConfigError


class Settings(BaseModel):
    """Per-repository bumptag settings.

    Attributes:
        prefix: Prepended to the version to form tag names.
        editor: Editor used by --edit when $EDITOR is unset.
        sign: Force GPG signing on or off. None defers to commit.gpgsign.
    """

    model_config = ConfigDict(extra="forbid")

    prefix: str = "v"
    editor: str = "vim"
    sign: bool | None = None


def load_pyproject(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a pyproject.toml file."""
    return tomlkit.parse(path.read_text())


def load_settings(root: Path) -> Settings:
    """Read settings from ``root/pyproject.toml``.

    A missing file or a file without [tool.bumptag] gives the defaults.

    Raises:
        ConfigError: If the file is not valid TOML or the table is invalid.
    """
    pyproject = root / "pyproject.toml"
    if not pyproject.is_file():
        return Settings()

    try:
        doc = load_pyproject(pyproject)
    except (OSError, TOMLKitError) as e:
        raise ConfigError(f"Cannot read {pyproject}: {e}") from e

    tool = doc.unwrap().get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigError(f"[tool] in {pyproject} must be a table")
    table = tool.get("bumptag", {})
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.bumptag] in {pyproject} must be a table")
    try:
        return Settings.model_validate(table)
    except ValidationError as e:
        raise ConfigError(f"Invalid [tool.bumptag] in {pyproject}:\n{e}") from e
