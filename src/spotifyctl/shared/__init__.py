# Where: spotifyctl.shared.__init__
# What: Provide a concise import surface for shared dataclasses.
# Why: Encourage consistent reuse of shared value objects across features.

"""Shared cross-cutting value objects exposed at the package level."""

from .track_metadata import TrackMetadata

__all__ = ["TrackMetadata"]
