"""Shared pytest fixtures for CLI-focused tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from tagreader.config import Config
from tagreader.config.paths import ENV_CONFIG_PATH


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a temporary file and reset the cached instance."""

    config_path = tmp_path / "config.toml"
    monkeypatch.setenv(ENV_CONFIG_PATH, str(config_path))

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield config_path
    finally:
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
