"""Locate and read the ``issuelink.toml`` that applies to a repository.

Lookup order: ``--config``, then ``ISSUELINK_CONFIG``, then the first
``issuelink.toml`` between the repository directory and the filesystem
root. A file named explicitly must exist; the walk-up search may find
nothing, in which case code defaults apply.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "issuelink.toml"
CONFIG_ENV_VAR = "ISSUELINK_CONFIG"


def config_candidates(start: Path) -> Iterator[Path]:
    """Yield ``issuelink.toml`` paths from *start* up to the root, nearest first."""
    start = start.resolve()
    for directory in (start, *start.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None, *, explicit: str | None = None) -> Path | None:
    """Return the config file for a repository at *start* (default: cwd).

    Raises:
        click.ClickException: *explicit* or ``ISSUELINK_CONFIG`` names a
            file that does not exist.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        if not path.is_file():
            msg = f"Config file not found: {named}"
            raise click.ClickException(msg)
        return path

    for candidate in config_candidates(start or Path.cwd()):
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML. Unreadable or malformed files raise ClickException."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read {path}: {exc}"
        raise click.ClickException(msg) from exc
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
