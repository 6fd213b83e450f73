"""Configuration management for spotifyctl."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from spotifyctl.config.paths import default_config_path, default_log_file
from spotifyctl.features.formatting import DEFAULT_MARKER, DEFAULT_TEMPLATE
from spotifyctl.platform.logging import logger
from spotifyctl.platform.mpris import DEFAULT_PLAYER, DEFAULT_TIMEOUT_SECONDS

_POSITIVE_INT_KEYS: tuple[str, ...] = ("max_artist_length", "max_title_length", "max_length")
_STRING_KEYS: tuple[str, ...] = ("format", "trunc", "player")


class ConfigError(ValueError):
    """Raised when the configuration file cannot be read or parsed."""


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
    """Application configuration.

    Every value is a default that a command line option can override.
    """

    # Status output
    format: str = DEFAULT_TEMPLATE
    trunc: str = DEFAULT_MARKER
    max_artist_length: int | None = None
    max_title_length: int | None = None
    max_length: int | None = None

    # Behaviour
    suppress_errors: bool = False

    # Bus target and timeout
    player: str = DEFAULT_PLAYER
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    # Log file path (optional); `true` in the file selects the default location
    log_file: Path | None = _path_field()

    # Singleton instance
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
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the built-in defaults.

        Args:
            config_file: Explicit file to read instead of the default location.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file exists but is not valid TOML.
        """
        if cls._instance is not None and config_file is None:
            return cls._instance

        target = config_file or default_config_path()

        if not target.exists():
            logger.debug("No configuration file at %s, using defaults", target)
            instance = cls()
        else:
            try:
                with open(target, "rb") as f:
                    raw = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigError(f"Failed to load configuration from {target}: {e}") from e

            instance = cls(**cls._validated(raw, target))
            logger.debug("Configuration loaded from %s", target)

        if config_file is None:
            cls._instance = instance
            cls._loaded_from = target
        return instance

    @classmethod
    def _validated(cls, raw: dict[str, Any], source: Path) -> dict[str, Any]:
        """Drop unknown keys and values of the wrong shape, warning about each."""

        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}

        for key, value in raw.items():
            if key not in known:
                logger.warning("Ignoring unknown configuration key '%s' in %s", key, source)
                continue

            if key in _POSITIVE_INT_KEYS:
                if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                    logger.warning("%s must be a positive integer; ignoring %r", key, value)
                    continue
            elif key == "timeout":
                if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                    logger.warning("timeout must be a positive number; ignoring %r", value)
                    continue
                value = float(value)
            elif key == "suppress_errors":
                if not isinstance(value, bool):
                    logger.warning("suppress_errors must be true or false; ignoring %r", value)
                    continue
            elif key == "log_file" and isinstance(value, bool):
                if not value:
                    continue
                value = default_log_file()
            elif key in _STRING_KEYS or key == "log_file":
                if not isinstance(value, str):
                    logger.warning("%s must be a string; ignoring %r", key, value)
                    continue
                if key == "player" and not value.strip():
                    logger.warning("player must not be empty; ignoring")
                    continue

            values[key] = value

        return values


__all__ = ["Config", "ConfigError"]
