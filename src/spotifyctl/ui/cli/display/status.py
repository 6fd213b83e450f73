"""src/spotifyctl/ui/cli/display/status.py
What: Write the status line to standard output.
Why: The line must reach stdout exactly as formatted, so its length stays what the options promise.
"""

from __future__ import annotations

from typing import final

from rich.console import Console


@final
class StatusDisplay:
    """Handles status line output."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize status display.

        Args:
            console: Console to print to; defaults to standard output.
        """
        self.console = console or Console(
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def show_status(self, text: str) -> None:
        """Print ``text`` as exactly one line.

        Rich rendering would rewrite tabs and control characters, so the
        text goes straight to the console's file.
        """
        out = self.console.file
        _ = out.write(f"{text}\n")
        out.flush()
