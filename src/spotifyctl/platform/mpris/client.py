"""Where: src/spotifyctl/platform/mpris/client.py
What: Blocking MPRIS client on top of dbus-python.
Why: Decouple bus concerns from reply decoding and output formatting.
"""

from __future__ import annotations

from typing import Any

from spotifyctl.features.metadata import TypedValue
from spotifyctl.platform.logging import logger

from .constants import (
    METADATA_PROPERTY,
    OBJECT_PATH,
    PLAYER_INTERFACE,
    PROPERTIES_GET_METHOD,
    PROPERTIES_INTERFACE,
    PlayerMethod,
    service_name,
)
from .errors import PlayerCallError, PlayerConnectionError
from .reply import reply_from_dbus

DEFAULT_PLAYER: str = "spotify"
DEFAULT_TIMEOUT_SECONDS: float = 10.0


class MprisClient:
    """Send one request at a time to a single MPRIS player.

    Every call blocks until the player answers or ``timeout`` expires.
    """

    player: str
    timeout: float
    _bus: Any

    def __init__(
        self,
        player: str = DEFAULT_PLAYER,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        bus: Any | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            player: MPRIS player name, the suffix of ``org.mpris.MediaPlayer2.``.
            timeout: Seconds to wait for each reply.
            bus: Already connected bus; :meth:`connect` opens the session bus otherwise.
        """
        self.player = player
        self.timeout = timeout
        self._bus = bus

    @property
    def destination(self) -> str:
        return service_name(self.player)

    def connect(self) -> None:
        """Open the session bus connection if none is held yet.

        Raises:
            PlayerConnectionError: If dbus-python is missing or the bus is unreachable.
        """
        if self._bus is not None:
            return

        try:
            import dbus  # pyright: ignore[reportMissingImports] - optional dependency
        except ImportError as exc:
            raise PlayerConnectionError(
                "dbus-python is not installed; install spotifyctl[dbus]"
            ) from exc

        try:
            self._bus = dbus.SessionBus()
        except dbus.exceptions.DBusException as exc:
            raise PlayerConnectionError(_dbus_message(exc)) from exc

        logger.debug(
            "Connected to session bus",
            extra={"player_event": "player.connect", "destination": self.destination},
        )

    def get_metadata(self) -> tuple[TypedValue, ...]:
        """Fetch the ``Metadata`` property as reply arguments."""

        value = self._invoke(
            PROPERTIES_INTERFACE,
            PROPERTIES_GET_METHOD,
            PLAYER_INTERFACE,
            METADATA_PROPERTY,
        )
        return reply_from_dbus(value)

    def call(self, method: PlayerMethod) -> None:
        """Invoke a ``Player`` method; its reply carries no data."""

        _ = self._invoke(PLAYER_INTERFACE, method.value)

    def _invoke(self, interface: str, method: str, *args: Any) -> Any:
        self.connect()
        import dbus  # pyright: ignore[reportMissingImports] - optional dependency

        logger.debug(
            "Calling %s.%s",
            interface,
            method,
            extra={
                "player_event": "player.call",
                "interface": interface,
                "method": method,
                "destination": self.destination,
            },
        )

        try:
            proxy = self._bus.get_object(self.destination, OBJECT_PATH, introspect=False)
            remote = proxy.get_dbus_method(method, dbus_interface=interface)
            result = remote(*args, timeout=self.timeout)
        except dbus.exceptions.DBusException as exc:
            error_name = exc.get_dbus_name()
            logger.debug(
                "Call to %s failed: %s",
                method,
                error_name,
                extra={
                    "player_event": "player.error",
                    "method": method,
                    "error_name": error_name,
                    "destination": self.destination,
                },
            )
            raise PlayerCallError(method, _dbus_message(exc), error_name=error_name) from exc

        logger.debug(
            "Reply from %s",
            method,
            extra={
                "player_event": "player.reply",
                "method": method,
                "destination": self.destination,
            },
        )
        return result


def _dbus_message(exc: Any) -> str:
    message = exc.get_dbus_message()
    return str(message) if message else str(exc)


__all__ = ["DEFAULT_PLAYER", "DEFAULT_TIMEOUT_SECONDS", "MprisClient"]
