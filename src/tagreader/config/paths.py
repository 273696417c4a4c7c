"""Shared path utilities for configuration locations.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/config.toml`` unless
  overridden by ``TAGREADER_CONFIG``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

ENV_CONFIG_PATH: Final[str] = "TAGREADER_CONFIG"


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for ``pyproject.toml`` or ``.git``; falls back to the current
    working directory.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file.

    A non-blank ``TAGREADER_CONFIG`` in ``env`` (the process environment
    when omitted) wins over the repository default.
    """
    mapping = env if env is not None else os.environ
    candidate = (mapping.get(ENV_CONFIG_PATH) or "").strip()
    if candidate:
        return Path(candidate).expanduser().resolve()
    return (_detect_repo_root() / "config" / "config.toml").resolve()


__all__ = [
    "ENV_CONFIG_PATH",
    "default_config_path",
]
