"""
Summary: Export reply decoding domain and use case symbols.
Why: Provide a stable import surface for the CLI, the bus adapter and tests.
"""

from spotifyctl.shared import TrackMetadata

from .domain import Cursor, Step, TypedValue, ValueKind, descend, into, to_key
from .usecases import (
    METADATA_ARTIST_KEY,
    METADATA_TITLE_KEY,
    extract_artist,
    extract_title,
    extract_track_metadata,
)

__all__ = [
    "Cursor",
    "Step",
    "TrackMetadata",
    "TypedValue",
    "ValueKind",
    "descend",
    "into",
    "to_key",
    "METADATA_ARTIST_KEY",
    "METADATA_TITLE_KEY",
    "extract_artist",
    "extract_title",
    "extract_track_metadata",
]
