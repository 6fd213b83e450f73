"""
Summary: Pure string primitives for bounded-length status output.
Why: Keep truncation and token arithmetic exact and independently testable.
"""

from __future__ import annotations


class TruncationError(ValueError):
    """Raised when a string cannot be truncated within its bound.

    This only happens when the truncation marker alone is longer than the
    maximum length, which is a configuration mistake.
    """

    field: str | None
    max_length: int
    marker: str

    def __init__(self, max_length: int, marker: str, field: str | None = None) -> None:
        self.field = field
        self.max_length = max_length
        self.marker = marker
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.field is None:
            return (
                f"Truncation marker {self.marker!r} is longer than the "
                f"maximum length {self.max_length}."
            )
        return (
            f"Failed to truncate {self.field}. Please make sure the trunc "
            f"string is smaller than the max {self.field} length."
        )

    def for_field(self, field: str) -> TruncationError:
        """Return a copy of this error naming the field that failed."""

        return TruncationError(self.max_length, self.marker, field=field)


def str_trunc(s: str, max_len: int | None, marker: str) -> str:
    """Truncate ``s`` to ``max_len`` characters, ending with ``marker``.

    Args:
        s: String to truncate.
        max_len: Maximum length of the result; None means unlimited.
        marker: Appended to a truncated string; counts towards ``max_len``.

    Returns:
        str: ``s`` unchanged when it already fits, otherwise exactly
        ``max_len`` characters.

    Raises:
        TruncationError: If ``s`` does not fit and ``marker`` is longer than ``max_len``.
    """
    if max_len is None or len(s) <= max_len:
        return s
    if len(marker) > max_len:
        raise TruncationError(max_len, marker)
    return s[: max_len - len(marker)] + marker


def count_matches(s: str, token: str) -> int:
    """Count non-overlapping occurrences of ``token``, scanning left to right."""

    if not token:
        return 0
    return s.count(token)


def replace_all(s: str, token: str, replacement: str) -> str:
    """Replace every non-overlapping occurrence of ``token`` with ``replacement``."""

    if not token:
        return s
    return s.replace(token, replacement)


__all__ = ["TruncationError", "count_matches", "replace_all", "str_trunc"]
