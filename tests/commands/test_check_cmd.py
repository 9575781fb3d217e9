"""Tests for the check command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from fetchfile.cli import cli
from fetchfile.examples import Config

TARGET = "fetchfile.examples:Config"


class TestCheckCommand:
    def test_absent(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", TARGET, str(tmp_path / "c.bin")])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["state"] == "absent"
        assert data["reason"]

    def test_valid_default(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "c.bin"
        Config().save(path)
        result = cli_runner.invoke(cli, ["--json", "check", TARGET, str(path)])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["state"] == "valid"
        assert data["matches_default"] is True

    def test_valid_custom(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "c.bin"
        Config(setting1=7, setting2=1).save(path)
        result = cli_runner.invoke(cli, ["--json", "check", TARGET, str(path)])
        data = json.loads(result.stdout)["data"]
        assert data["matches_default"] is False
        assert data["value"] == {"setting1": 7, "setting2": 1}

    def test_corrupt_exits_nonzero(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "c.bin"
        path.write_bytes(b"\x01")
        result = cli_runner.invoke(cli, ["--json", "check", TARGET, str(path)])
        assert result.exit_code == 1
        error = json.loads(result.stderr)["error"]
        assert error["code"] == "DECODE_ERROR"
        assert error["detail"]["state"] == "corrupt"
        assert error["detail"]["codec"] == "binary"

    def test_corrupt_leaves_file_untouched(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "c.bin"
        path.write_bytes(b"\x01")
        cli_runner.invoke(cli, ["check", TARGET, str(path)])
        assert path.read_bytes() == b"\x01"

    def test_quiet(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "check", TARGET, str(tmp_path / "c.bin")])
        assert result.stdout.strip() == "absent"
