"""Decode track title and artist from an MPRIS ``Metadata`` property reply.

Where: src/spotifyctl/features/metadata/usecases/metadata_extractor.py
What: Walk the reply of ``Properties.Get(Player, "Metadata")`` with a cursor.
Why: The reply layout is a third-party convention; a missing or malformed
     field must degrade to ``None`` so the caller can show a placeholder.

The reply looks like this::

    variant
      array [
        dict entry(
          string "xesam:title"
          variant string "{track title}"
        )
        dict entry(
          string "xesam:artist"
          variant array [ string "{track artist}" ]
        )
        ...
      ]

``xesam:artist`` is a list of strings, so the artist path has one more
array level than the title path. Only the first artist is read.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from spotifyctl.platform.logging import logger
from spotifyctl.shared import TrackMetadata

from ..domain.cursor import Cursor, descend, into, to_key
from ..domain.typed_value import TypedValue, ValueKind

METADATA_TITLE_KEY: Final[str] = "xesam:title"
METADATA_ARTIST_KEY: Final[str] = "xesam:artist"


def extract_title(reply: Sequence[TypedValue]) -> str | None:
    """Return the track title, or None if the reply does not carry one."""

    cursor = descend(
        Cursor.at_root(reply),
        into(ValueKind.VARIANT),
        into(ValueKind.ARRAY),
        to_key(METADATA_TITLE_KEY),
        into(ValueKind.VARIANT),
    )
    title = cursor.read_string() if cursor is not None else None
    if title is None:
        logger.debug("No %s in metadata reply", METADATA_TITLE_KEY)
    return title


def extract_artist(reply: Sequence[TypedValue]) -> str | None:
    """Return the first track artist, or None if the reply does not carry one."""

    cursor = descend(
        Cursor.at_root(reply),
        into(ValueKind.VARIANT),
        into(ValueKind.ARRAY),
        to_key(METADATA_ARTIST_KEY),
        into(ValueKind.VARIANT),
        into(ValueKind.ARRAY),
    )
    artist = cursor.read_string() if cursor is not None else None
    if artist is None:
        logger.debug("No %s in metadata reply", METADATA_ARTIST_KEY)
    return artist


def extract_track_metadata(reply: Sequence[TypedValue]) -> TrackMetadata:
    """Decode both fields from the same reply."""

    return TrackMetadata(title=extract_title(reply), artist=extract_artist(reply))


__all__ = [
    "METADATA_ARTIST_KEY",
    "METADATA_TITLE_KEY",
    "extract_artist",
    "extract_title",
    "extract_track_metadata",
]
