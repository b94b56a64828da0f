"""Shared pytest fixtures for storefront tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from click.testing import CliRunner

from storefront.config.settings import StoreSettings
from storefront.infrastructure.adapters import FixedClock
from storefront.infrastructure.collaborators import Collaborators
from storefront.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _restore_process_state() -> Iterator[None]:
    """Undo what the CLI group does to global logging and telemetry state."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("storefront").setLevel(logging.NOTSET)
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> StoreSettings:
    """Default settings, isolated from any storefront.toml on the host."""
    monkeypatch.delenv("STOREFRONT_CONFIG", raising=False)
    return StoreSettings.from_cli(start=tmp_path)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 4, 1, 12, 0))


@pytest.fixture
def collaborators(clock: FixedClock) -> Collaborators:
    """Collaborators replaced wholesale by mocks, as a caller's test would."""
    return Collaborators(
        currency=MagicMock(),
        shipping=MagicMock(),
        analytics=MagicMock(),
        payment=MagicMock(charge=AsyncMock(return_value={"status": "success"})),
        email=MagicMock(send_email=AsyncMock(return_value=None)),
        security=MagicMock(),
        clock=clock,
    )


@pytest.fixture
def _isolated_store(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run CLI tests from an empty temp directory with no config overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_store")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("STOREFRONT_CONFIG", raising=False)
    yield
