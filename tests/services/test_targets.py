"""Tests for module:ClassName target resolution."""

from __future__ import annotations

import pytest

from fetchfile.examples import Config, JsonConfig
from fetchfile.services.targets import resolve_target


class TestResolveTarget:
    def test_resolves_example(self) -> None:
        assert resolve_target("fetchfile.examples:Config") is Config
        assert resolve_target("fetchfile.examples:JsonConfig") is JsonConfig

    @pytest.mark.parametrize(
        "target",
        ["fetchfile.examples", "fetchfile.examples:", ":Config", ""],
    )
    def test_malformed(self, target: str) -> None:
        with pytest.raises(ValueError, match="package.module:ClassName"):
            resolve_target(target)

    def test_unknown_module(self) -> None:
        with pytest.raises(ValueError, match="Cannot import module"):
            resolve_target("fetchfile.does_not_exist:Config")

    def test_unknown_attribute(self) -> None:
        with pytest.raises(ValueError, match="has no attribute"):
            resolve_target("fetchfile.examples:Missing")

    def test_not_fetchable(self) -> None:
        with pytest.raises(ValueError, match="not a Fetchable subclass"):
            resolve_target("fetchfile.codecs:YamlCodec")

    def test_base_class_without_codec(self) -> None:
        with pytest.raises(ValueError, match="does not select a codec"):
            resolve_target("fetchfile.fetchable:Fetchable")
