"""Configuration management for tagsync."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from tagsync.config.paths import default_config_path
from tagsync.config.settings import DEFAULT_ENCODER
from tagsync.platform.logging import logger
from tagsync.shared.errors import ConfigError


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

    # Rotating log file (console-only logging when unset)
    log_file: Path | None = _path_field()

    # Executable used by ``convert``
    encoder: str = DEFAULT_ENCODER

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Config":
        """Build a configuration from parsed TOML, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        encoder = raw.get("encoder", DEFAULT_ENCODER)
        if not isinstance(encoder, str) or not encoder.strip():
            raise ConfigError(f"'encoder' must be a non-empty string, got {encoder!r}")

        log_file = raw.get("log_file")
        if log_file is not None and not isinstance(log_file, str):
            raise ConfigError(f"'log_file' must be a string path, got {log_file!r}")

        return cls(log_file=log_file, encoder=encoder.strip())

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object, or defaults when no file exists.

        Raises:
            ConfigError: If the file exists but is not valid TOML.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        target = config_file or default_config_path()

        if not target.exists():
            logger.debug("No configuration file at %s; using defaults", target)
            instance = cls()
        else:
            try:
                with open(target, "rb") as f:
                    raw = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid configuration file {target}: {e}") from e
            instance = cls.from_dict(raw)
            logger.debug("Configuration loaded from %s", target)

        cls._instance = instance
        cls._loaded_from = target
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the memoized configuration."""
        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config"]
