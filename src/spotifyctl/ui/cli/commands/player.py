"""Playback control commands (play, pause, playpause, next, previous)."""

from typing import final, override

from spotifyctl.platform.mpris import MprisClient
from spotifyctl.ui.cli.args.options import PlayerArgs
from spotifyctl.ui.cli.commands.executor import CommandExecutor


@final
class PlayerCommand(CommandExecutor):
    """Send one fire-and-forget method call to the player."""

    args: PlayerArgs

    def __init__(self, args: PlayerArgs, client: MprisClient | None = None) -> None:
        super().__init__(args, client)
        self.args = args

    @override
    def execute(self) -> None:
        self.client.call(self.args.method)
