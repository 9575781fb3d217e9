"""Tests for the init command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from fetchfile.cli import cli
from fetchfile.examples import JsonConfig


class TestInitCommand:
    def test_writes_binary_default(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "config.bin"
        result = cli_runner.invoke(cli, ["--json", "init", "fetchfile.examples:Config", str(path)])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)["data"]
        assert data["overwritten"] is False
        assert data["size"] == 16
        assert path.stat().st_size == 16

    def test_writes_json_default(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        result = cli_runner.invoke(cli, ["init", "fetchfile.examples:JsonConfig", str(path)])
        assert result.exit_code == 0
        assert json.loads(path.read_text()) == {"setting1": 0, "setting2": 5}
        assert JsonConfig.load(path) == JsonConfig()

    def test_refuses_existing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("keep me")
        result = cli_runner.invoke(
            cli, ["--json", "init", "fetchfile.examples:JsonConfig", str(path)]
        )
        assert result.exit_code == 1
        assert result.stdout == ""
        assert json.loads(result.stderr)["error"]["code"] == "ALREADY_EXISTS"
        assert path.read_text() == "keep me"

    def test_force_overwrites(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("keep me")
        result = cli_runner.invoke(
            cli, ["--json", "init", "fetchfile.examples:JsonConfig", str(path), "--force"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["overwritten"] is True
        assert JsonConfig.load(path) == JsonConfig()

    def test_quiet_prints_path(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        result = cli_runner.invoke(cli, ["-q", "init", "fetchfile.examples:YamlConfig", str(path)])
        assert result.exit_code == 0
        assert result.stdout.strip() == str(path)
