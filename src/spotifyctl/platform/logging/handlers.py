"""Rich console handler for spotifyctl diagnostics."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable, Group
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text
from rich.traceback import Traceback


class PlayerRichHandler(RichHandler):
    """Rich handler that renders player bus events with an icon and colour.

    Records carrying ``extra={"player_event": ...}`` get a compact one-line
    rendering; everything else is rendered as a plain message.
    """

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "player.connect": ("🔌", "cyan"),
        "player.call": ("▶", "blue"),
        "player.reply": ("✓", "green"),
        "player.error": ("✗", "red"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _render_player_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured bus events with dedicated styling."""

        event = getattr(record, "player_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("•", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        method = getattr(record, "method", None)
        interface = getattr(record, "interface", None)
        destination = getattr(record, "destination", None)

        if event == "player.connect":
            _ = body.append("Connected to session bus")
        elif event == "player.call":
            _ = body.append("Calling ")
            _ = body.append(f"{interface}.{method}" if interface else str(method))
        elif event == "player.reply":
            _ = body.append("Reply from ")
            _ = body.append(str(method))
        else:
            _ = body.append("Call failed")
            if method:
                _ = body.append(f" ({method})")
            error_name = getattr(record, "error_name", None)
            if error_name:
                _ = body.append(f": {error_name}")

        if destination:
            _ = body.append(" @ ")
            _ = body.append(str(destination), style=Style(color="white"))

        _ = text.append_text(body)
        return text

    @override
    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        """Emit the message alone, without the column table.

        Time, level and path are hidden, and the table would pad every line
        with spaces up to the console width.
        """
        if traceback is None:
            return message_renderable
        return Group(message_renderable, traceback)

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for bus events."""

        event_text = self._render_player_event(record)
        if event_text is not None:
            return event_text

        return super().render_message(record, message)


__all__ = ["PlayerRichHandler"]
