"""Locating and reading ``storefront.toml``.

Precedence: an explicit ``--config`` path, then the ``STOREFRONT_CONFIG``
env var, then the first ``storefront.toml`` found walking up from the
working directory. A store with no file at all runs on code defaults.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "storefront.toml"
CONFIG_ENV_VAR = "STOREFRONT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) to the nearest storefront.toml.

    ``STOREFRONT_CONFIG`` short-circuits the walk; if it names a missing
    file there is no config.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(config_path: str | None = None, start: Path | None = None) -> Path | None:
    """The config file to use: *config_path* if given (and present), else discovery."""
    if config_path:
        path = Path(config_path)
        return path if path.is_file() else None
    return find_config(start)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*; malformed TOML is reported as a CLI error, not a traceback."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
