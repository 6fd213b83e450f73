"""Shared path utilities for configuration and log locations.

This module centralizes how the application discovers the files it reads.

Policy (XDG by default):
- Config: ``$SPOTIFYCTL_CONFIG`` when set, else
  ``$XDG_CONFIG_HOME/spotifyctl/config.toml`` (``~/.config`` fallback).
- Logs: ``$XDG_STATE_HOME/spotifyctl/spotifyctl.log`` (``~/.local/state``
  fallback), used when the config sets ``log_file = true``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

APP_DIR_NAME: Final[str] = "spotifyctl"

_ENV_CONFIG_FILE: Final[str] = "SPOTIFYCTL_CONFIG"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"
_ENV_XDG_STATE_HOME: Final[str] = "XDG_STATE_HOME"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _xdg_base(env: Mapping[str, str] | None, env_var: str, fallback: str) -> Path:
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=env_var,
        default_factory=lambda: Path.home() / fallback,
    )


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file.

    ``SPOTIFYCTL_CONFIG`` wins over the XDG location.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: (
            _xdg_base(env, _ENV_XDG_CONFIG_HOME, ".config") / APP_DIR_NAME / "config.toml"
        ),
    )


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the default directory for log files."""

    return (_xdg_base(env, _ENV_XDG_STATE_HOME, ".local/state") / APP_DIR_NAME).resolve()


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    """Get the default log file path."""

    return (default_log_dir(env) / "spotifyctl.log").resolve()


__all__ = [
    "APP_DIR_NAME",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
