"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helpers, and the Rich console handler.
Why: Provide a single canonical import path for every module that logs.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import PlayerRichHandler

__all__ = [
    "LOGGER_NAME",
    "PlayerRichHandler",
    "logger",
    "setup_logger",
]
