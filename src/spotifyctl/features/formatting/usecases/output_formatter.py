"""src/spotifyctl/features/formatting/usecases/output_formatter.py
What: Combine artist and title into a template with bounded-length output.
Why: Status bars need output whose length is predictable from the options.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from spotifyctl.platform.logging import logger

from ..domain.strings import TruncationError, count_matches, replace_all, str_trunc

TOKEN_ARTIST: Final[str] = "%artist%"
TOKEN_TITLE: Final[str] = "%title%"
DEFAULT_TEMPLATE: Final[str] = f"{TOKEN_ARTIST}: {TOKEN_TITLE}"
DEFAULT_MARKER: Final[str] = "..."
DEFAULT_PLACEHOLDER: Final[str] = "Spotify"


@dataclass(slots=True, frozen=True)
class FormatRequest:
    """Inputs for one status line.

    ``None`` for any of the length limits means unlimited.
    """

    artist: str
    title: str
    max_artist_length: int | None = None
    max_title_length: int | None = None
    max_length: int | None = None
    template: str = DEFAULT_TEMPLATE
    trunc: str = DEFAULT_MARKER


def estimate_length(template: str, artist: str, title: str) -> int:
    """Length of ``template`` once every token is replaced by the untruncated values."""

    artist_occurrences = count_matches(template, TOKEN_ARTIST)
    title_occurrences = count_matches(template, TOKEN_TITLE)

    artist_delta = len(artist) - len(TOKEN_ARTIST)
    title_delta = len(title) - len(TOKEN_TITLE)

    return len(template) + artist_occurrences * artist_delta + title_occurrences * title_delta


def substitute(template: str, artist: str, title: str) -> str:
    """Replace every artist token, then every title token."""

    return replace_all(replace_all(template, TOKEN_ARTIST, artist), TOKEN_TITLE, title)


def format_output(
    artist: str,
    title: str,
    max_artist_length: int | None = None,
    max_title_length: int | None = None,
    max_length: int | None = None,
    template: str = DEFAULT_TEMPLATE,
    trunc: str = DEFAULT_MARKER,
) -> str:
    """Build the status line for ``artist`` and ``title``.

    When both fields are empty the placeholder is returned as is. Field
    limits only apply when no total limit is given or when the untruncated
    output would exceed it; the combined output is then cut to the total
    limit as well.

    Raises:
        TruncationError: If a field or the output cannot be truncated
            because ``trunc`` is longer than the corresponding limit.
    """
    if not artist and not title:
        return DEFAULT_PLACEHOLDER

    untruncated_length = estimate_length(template, artist, title)

    if max_length is not None and untruncated_length <= max_length:
        return substitute(template, artist, title)

    logger.debug(
        "Truncating status output (untruncated length %d, max length %s)",
        untruncated_length,
        max_length,
    )
    trunc_title = _truncate_field("title", title, max_title_length, trunc)
    trunc_artist = _truncate_field("artist", artist, max_artist_length, trunc)
    combined = substitute(template, trunc_artist, trunc_title)
    return _truncate_field("output", combined, max_length, trunc)


def format_request(request: FormatRequest) -> str:
    """Run :func:`format_output` for a prepared :class:`FormatRequest`."""

    return format_output(
        request.artist,
        request.title,
        max_artist_length=request.max_artist_length,
        max_title_length=request.max_title_length,
        max_length=request.max_length,
        template=request.template,
        trunc=request.trunc,
    )


def _truncate_field(field: str, value: str, max_len: int | None, trunc: str) -> str:
    try:
        return str_trunc(value, max_len, trunc)
    except TruncationError as exc:
        raise exc.for_field(field) from exc


__all__ = [
    "DEFAULT_MARKER",
    "DEFAULT_PLACEHOLDER",
    "DEFAULT_TEMPLATE",
    "FormatRequest",
    "TOKEN_ARTIST",
    "TOKEN_TITLE",
    "estimate_length",
    "format_output",
    "format_request",
    "substitute",
]
