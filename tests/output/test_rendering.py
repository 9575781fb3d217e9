"""Tests for Rich renderers and the output formatter."""

from __future__ import annotations

import json

from fetchfile.output.formatters import OutputSettings, format_result
from fetchfile.output.renderers import render_quiet, render_result
from fetchfile.services.result import ServiceError, ServiceResult


def _fetch_result(*, is_default: bool, saved: bool = False) -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="fetch",
        data={
            "target": "fetchfile.examples:Config",
            "path": "/tmp/config.bin",
            "codec": "binary",
            "is_default": is_default,
            "saved": saved,
            "value": {"setting1": 0, "setting2": 5},
        },
    )


class TestRenderResult:
    def test_fetch_default(self) -> None:
        output = render_result(_fetch_result(is_default=True))
        assert output.splitlines()[0].split() == ["OK", "fetch"]
        assert "source: default" in output
        assert "setting2" in output
        assert "5" in output

    def test_fetch_saved_default(self) -> None:
        output = render_result(_fetch_result(is_default=True, saved=True))
        assert "default (saved)" in output

    def test_fetch_loaded(self) -> None:
        output = render_result(_fetch_result(is_default=False))
        assert "source: file" in output

    def test_fetch_verbose_shows_target(self) -> None:
        output = render_result(_fetch_result(is_default=False), verbose=True)
        assert "fetchfile.examples:Config" in output

    def test_check_valid(self) -> None:
        result = ServiceResult(
            ok=True,
            op="check",
            data={
                "path": "c.bin",
                "codec": "binary",
                "state": "valid",
                "matches_default": True,
                "value": {"setting1": 0},
            },
        )
        output = render_result(result)
        assert "state: valid" in output
        assert "matches_default: yes" in output

    def test_codecs_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="codecs",
            data={
                "count": 1,
                "items": [{"name": "yaml", "suffix": ".yaml", "description": "YAML text"}],
            },
        )
        output = render_result(result)
        assert "Codec" in output
        assert "yaml" in output
        assert "YAML text" in output

    def test_error_with_state(self) -> None:
        result = ServiceResult(
            ok=False,
            op="check",
            error=ServiceError(
                code="DECODE_ERROR",
                message="Malformed binary Config: [truncated]",
                detail={"state": "corrupt", "path": "c.bin"},
            ),
        )
        output = render_result(result)
        assert output.splitlines()[0].split()[:2] == ["ERROR", "check"]
        assert "[truncated]" in output
        assert "state: corrupt" in output
        assert "detail:" not in output
        assert "detail:" in render_result(result, verbose=True)

    def test_unknown_op_uses_generic(self) -> None:
        result = ServiceResult(ok=True, op="other", data={"items": [1, 2]})
        output = render_result(result)
        assert "items: [1,2]" in output


class TestRenderQuiet:
    def test_fetch(self) -> None:
        assert render_quiet(_fetch_result(is_default=True)) == "default"
        assert render_quiet(_fetch_result(is_default=False)) == "loaded"

    def test_check(self) -> None:
        result = ServiceResult(ok=True, op="check", data={"state": "absent"})
        assert render_quiet(result) == "absent"

    def test_error(self) -> None:
        result = ServiceResult(
            ok=False, op="init", error=ServiceError(code="ALREADY_EXISTS", message="exists")
        )
        assert render_quiet(result) == "ERROR: init — exists"


class TestFormatResult:
    def test_json_wins(self) -> None:
        output = format_result(
            _fetch_result(is_default=True),
            settings=OutputSettings(json_output=True, quiet=True),
        )
        assert json.loads(output)["data"]["is_default"] is True

    def test_quiet(self) -> None:
        output = format_result(_fetch_result(is_default=False), settings=OutputSettings(quiet=True))
        assert output == "loaded"

    def test_default_is_rich(self) -> None:
        assert format_result(_fetch_result(is_default=False)).startswith("OK")
