"""Display management for CLI interface."""

from spotifyctl.ui.cli.display.status import StatusDisplay

__all__ = ["StatusDisplay"]
