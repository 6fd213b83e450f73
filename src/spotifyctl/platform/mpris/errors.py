"""Transport errors raised by the MPRIS client."""

from __future__ import annotations


class PlayerError(Exception):
    """Base class for failures talking to the player over the bus."""


class PlayerConnectionError(PlayerError):
    """The session bus could not be reached."""


class PlayerCallError(PlayerError):
    """A remote call was sent but answered with an error."""

    method: str
    error_name: str | None

    def __init__(self, method: str, message: str, error_name: str | None = None) -> None:
        self.method = method
        self.error_name = error_name
        super().__init__(message)


__all__ = ["PlayerCallError", "PlayerConnectionError", "PlayerError"]
