"""Command line interface package."""

from spotifyctl.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
