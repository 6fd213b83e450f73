"""MPRIS adapter exports.

Where: platform/mpris/__init__.py
What: Re-export the bus client, its constants and its error types.
Why: Keep dbus-python behind one import path that the CLI can mock.
"""

from __future__ import annotations

from .client import DEFAULT_PLAYER, DEFAULT_TIMEOUT_SECONDS, MprisClient
from .constants import PlayerMethod, service_name
from .errors import PlayerCallError, PlayerConnectionError, PlayerError
from .reply import reply_from_dbus, typed_value_from_dbus

__all__ = [
    "DEFAULT_PLAYER",
    "DEFAULT_TIMEOUT_SECONDS",
    "MprisClient",
    "PlayerCallError",
    "PlayerConnectionError",
    "PlayerError",
    "PlayerMethod",
    "reply_from_dbus",
    "service_name",
    "typed_value_from_dbus",
]
