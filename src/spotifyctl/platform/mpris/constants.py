"""Well-known MPRIS names used to reach the player."""

from __future__ import annotations

from enum import Enum
from typing import Final

SERVICE_PREFIX: Final[str] = "org.mpris.MediaPlayer2."
OBJECT_PATH: Final[str] = "/org/mpris/MediaPlayer2"

PROPERTIES_INTERFACE: Final[str] = "org.freedesktop.DBus.Properties"
PROPERTIES_GET_METHOD: Final[str] = "Get"
PLAYER_INTERFACE: Final[str] = "org.mpris.MediaPlayer2.Player"
METADATA_PROPERTY: Final[str] = "Metadata"


class PlayerMethod(str, Enum):
    """Fire-and-forget methods of the ``Player`` interface."""

    PLAY = "Play"
    PAUSE = "Pause"
    PLAYPAUSE = "PlayPause"
    NEXT = "Next"
    PREVIOUS = "Previous"


def service_name(player: str) -> str:
    """Bus name of an MPRIS player, e.g. ``spotify`` -> ``org.mpris.MediaPlayer2.spotify``."""

    return f"{SERVICE_PREFIX}{player}"


__all__ = [
    "METADATA_PROPERTY",
    "OBJECT_PATH",
    "PLAYER_INTERFACE",
    "PROPERTIES_GET_METHOD",
    "PROPERTIES_INTERFACE",
    "PlayerMethod",
    "SERVICE_PREFIX",
    "service_name",
]
