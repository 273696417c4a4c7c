"""Where: src/tagreader/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Keep level-name parsing out of the CLI parser.
"""

from __future__ import annotations

import logging

_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def log_level_from_name(name: str | None, default: int = logging.INFO) -> int:
    """Translate a level name from config into a ``logging`` level."""
    if not name:
        return default
    return _LEVELS.get(name.strip().upper(), default)


__all__ = ["log_level_from_name"]
