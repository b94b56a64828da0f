"""Tests for the status and render commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from storefront.cli import cli


@pytest.mark.usefixtures("_isolated_store")
class TestStatusCommand:
    @pytest.mark.parametrize(
        ("at", "online"),
        [
            ("2024-04-01 07:59", False),
            ("2024-04-01 08:00", True),
            ("2024-04-01 19:59", True),
            ("2024-04-01 20:01", False),
        ],
    )
    def test_hours(self, cli_runner: CliRunner, at: str, online: bool) -> None:
        result = cli_runner.invoke(cli, ["--json", "--at", at, "status"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["data"]["online"] is online

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--at", "2024-04-01T07:59", "status"])
        assert "store is offline" in result.stdout

    def test_configured_hours(self, cli_runner: CliRunner) -> None:
        with open("storefront.toml", "w", encoding="utf-8") as fh:
            fh.write("[store]\nopen_hour = 6\n")
        result = cli_runner.invoke(cli, ["--json", "--at", "2024-04-01 07:59", "status"])
        assert json.loads(result.stdout)["data"]["online"] is True


@pytest.mark.usefixtures("_isolated_store")
class TestRenderCommand:
    def test_renders_page(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--sync", "render"])
        assert result.exit_code == 0, result.output
        assert "<div>content</div>" in result.stdout

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "--sync", "render"])
        payload = json.loads(result.stdout)
        assert payload["data"] == {"route": "/home", "content": "<div>content</div>"}
        assert payload["warnings"] == []

    def test_verbose_includes_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "-v", "--sync", "render"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert "PageService.render_page" in payload["meta"]["telemetry"]["name"]
