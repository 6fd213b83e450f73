"""Command execution package for CLI."""

from spotifyctl.ui.cli.commands.executor import CommandExecutor
from spotifyctl.ui.cli.commands.player import PlayerCommand
from spotifyctl.ui.cli.commands.status import StatusCommand

__all__ = [
    "CommandExecutor",
    "PlayerCommand",
    "StatusCommand",
]
