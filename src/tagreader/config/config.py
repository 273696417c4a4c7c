"""Configuration management for tagreader."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from tagreader.config.paths import default_config_path
from tagreader.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Rotating log file; console-only logging when unset
    log_file: Path | None = _path_field()

    # Console log level name (DEBUG, INFO, WARNING, ERROR)
    log_level: str = "INFO"

    # Print the ID3v2 header alongside the fields in the CLI
    show_header: bool = False

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Build a config from parsed TOML, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            path: Explicit config file. When omitted, the default location is
                used and the result is cached.

        Returns:
            Config: Loaded configuration, or defaults when the file is absent.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
        """
        if path is None and cls._instance is not None:
            return cls._instance

        config_file = path if path is not None else default_config_path()

        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration from %s: %s", config_file, e)
                raise
            logger.debug("Configuration loaded from %s", config_file)
            instance = cls.from_dict(config_dict)
        else:
            instance = cls()

        if path is None:
            cls._instance = instance
        return instance


__all__ = ["Config"]
