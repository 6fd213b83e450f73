"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from spotifyctl.platform.mpris import PlayerMethod

PlayerCommandName = Literal["play", "pause", "playpause", "next", "previous"]

PLAYER_METHODS: dict[str, PlayerMethod] = {
    "play": PlayerMethod.PLAY,
    "pause": PlayerMethod.PAUSE,
    "playpause": PlayerMethod.PLAYPAUSE,
    "next": PlayerMethod.NEXT,
    "previous": PlayerMethod.PREVIOUS,
}


@final
@dataclass(slots=True)
class StatusArgs:
    """Command line arguments for the ``status`` command."""

    command: Literal["status"]
    suppress_errors: bool
    verbose: bool
    player: str
    timeout: float
    max_artist_length: int | None
    max_title_length: int | None
    max_length: int | None
    template: str
    trunc: str


@final
@dataclass(slots=True)
class PlayerArgs:
    """Command line arguments for the playback control commands."""

    command: PlayerCommandName
    suppress_errors: bool
    verbose: bool
    player: str
    timeout: float

    @property
    def method(self) -> PlayerMethod:
        return PLAYER_METHODS[self.command]


CLIArgs = StatusArgs | PlayerArgs

__all__ = ["CLIArgs", "PLAYER_METHODS", "PlayerArgs", "PlayerCommandName", "StatusArgs"]
