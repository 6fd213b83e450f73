# Where: spotifyctl.shared.track_metadata
# What: TrackMetadata value object decoded from a player reply.
# Why: Give the extractor and the status command one shared representation.

from dataclasses import dataclass


@dataclass(slots=True)
class TrackMetadata:
    """Metadata for the track a player is currently on."""

    title: str | None = None
    artist: str | None = None


__all__ = ["TrackMetadata"]
