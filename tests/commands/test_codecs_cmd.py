"""Tests for the codecs command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from fetchfile.cli import cli


class TestCodecsCommand:
    def test_json_lists_all(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "codecs"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["count"] == 3
        assert [item["name"] for item in data["items"]] == ["yaml", "json", "binary"]

    def test_quiet_lists_names(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "codecs"])
        assert result.stdout.split() == ["yaml", "json", "binary"]

    def test_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["codecs"])
        assert result.exit_code == 0
        assert ".bin" in result.stdout
