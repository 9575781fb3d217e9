"""Tests for the fetch command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from fetchfile.cli import cli
from fetchfile.examples import Config

TARGET = "fetchfile.examples:Config"


class TestFetchCommand:
    def test_missing_file_uses_default(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "config.bin"
        result = cli_runner.invoke(cli, ["--json", "fetch", TARGET, str(path)])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)["data"]
        assert data["is_default"] is True
        assert data["saved"] is False
        assert data["codec"] == "binary"
        assert data["value"] == {"setting1": 0, "setting2": 5}
        assert not path.exists()

    def test_save_default_writes_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "config.bin"
        result = cli_runner.invoke(cli, ["--json", "fetch", TARGET, str(path), "--save-default"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["data"]["saved"] is True
        assert Config.load(path) == Config()

    def test_second_fetch_loads_saved_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "config.bin"
        cli_runner.invoke(cli, ["fetch", TARGET, str(path), "--save-default"])
        result = cli_runner.invoke(cli, ["-q", "fetch", TARGET, str(path)])
        assert result.exit_code == 0
        assert result.stdout.strip() == "loaded"

    def test_corrupt_file_replaced_with_save_default(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        path = tmp_path / "config.bin"
        path.write_bytes(b"\x01")
        result = cli_runner.invoke(cli, ["--json", "fetch", TARGET, str(path), "--save-default"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["is_default"] is True
        assert Config.load(path) == Config()

    def test_loads_yaml_values(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("setting1: 3\nsetting2: 9\n")
        result = cli_runner.invoke(
            cli, ["--json", "fetch", "fetchfile.examples:YamlConfig", str(path)]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["is_default"] is False
        assert data["value"] == {"setting1": 3, "setting2": 9}

    def test_atomic_flag_leaves_no_temp_files(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        path = tmp_path / "config.bin"
        result = cli_runner.invoke(cli, ["--atomic", "fetch", TARGET, str(path), "--save-default"])
        assert result.exit_code == 0
        assert [p.name for p in tmp_path.iterdir()] == ["config.bin"]

    def test_unwritable_path_fails(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "missing-dir" / "config.bin"
        result = cli_runner.invoke(cli, ["--json", "fetch", TARGET, str(path), "--save-default"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "WRITE_ERROR"

    def test_rich_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["fetch", TARGET, str(tmp_path / "c.bin")])
        assert result.exit_code == 0
        assert "source: default" in result.stdout

    def test_bad_target(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["fetch", "not-a-target", str(tmp_path / "c.bin")])
        assert result.exit_code == 2
        assert "package.module:ClassName" in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["fetch", "--examples"])
        assert result.exit_code == 0
        assert "--save-default" in result.output
