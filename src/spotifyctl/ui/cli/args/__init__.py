"""Command line argument handling package."""

from spotifyctl.ui.cli.args.parser import ArgumentParser
from spotifyctl.ui.cli.args.options import CLIArgs, PlayerArgs, StatusArgs

__all__ = ["ArgumentParser", "CLIArgs", "PlayerArgs", "StatusArgs"]
