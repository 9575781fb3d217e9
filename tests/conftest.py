"""Shared pytest fixtures and test helpers for fetchfile tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from fetchfile.examples import Config, JsonConfig, YamlConfig
from fetchfile.fetchable import Fetchable

EXAMPLE_TYPES: list[type[Fetchable]] = [Config, YamlConfig, JsonConfig]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(params=EXAMPLE_TYPES, ids=lambda cls: cls.codec.name)
def config_type(request: pytest.FixtureRequest) -> type[Fetchable]:
    """Each example config type, one per codec."""
    return request.param


@pytest.fixture
def config_path(tmp_path: Path, config_type: type[Fetchable]) -> Path:
    """A not-yet-existing config path with the codec's suffix."""
    return tmp_path / f"config{config_type.codec.suffix}"


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler/level changes made by the CLI's logging setup."""
    import logging

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ff = logging.getLogger("fetchfile")
    ff_level = ff.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ff.setLevel(ff_level)
