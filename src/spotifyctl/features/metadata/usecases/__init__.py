"""Use cases for decoding player replies."""

from .metadata_extractor import (
    METADATA_ARTIST_KEY,
    METADATA_TITLE_KEY,
    extract_artist,
    extract_title,
    extract_track_metadata,
)

__all__ = [
    "METADATA_ARTIST_KEY",
    "METADATA_TITLE_KEY",
    "extract_artist",
    "extract_title",
    "extract_track_metadata",
]
