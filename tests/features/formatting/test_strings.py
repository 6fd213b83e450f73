"""
Summary: Tests for the string primitives behind bounded-length output.
Why: Truncation must be exact, and it must refuse when the marker cannot fit.
"""

from __future__ import annotations

import pytest

from spotifyctl.features.formatting import (
    TruncationError,
    count_matches,
    replace_all,
    str_trunc,
)


@pytest.mark.parametrize(
    ("value", "max_len", "marker"),
    [
        ("abc", 3, "..."),
        ("abc", 10, "..."),
        ("", 1, "..."),
        ("abc", 3, "a very long marker"),
        ("anything at all", None, "..."),
    ],
)
def test_str_trunc_returns_short_strings_unchanged(value: str, max_len: int | None, marker: str) -> None:
    """A string that already fits is returned as is, whatever the marker."""

    assert str_trunc(value, max_len, marker) == value


def test_str_trunc_cuts_to_exact_length_with_marker() -> None:
    result = str_trunc("Sing For The Moment", 10, "...")

    assert result == "Sing Fo..."
    assert len(result) == 10


def test_str_trunc_marker_may_fill_the_whole_bound() -> None:
    assert str_trunc("abcdef", 3, "...") == "..."


def test_str_trunc_with_empty_marker_cuts_plainly() -> None:
    assert str_trunc("abcdef", 4, "") == "abcd"


def test_str_trunc_fails_when_marker_longer_than_bound() -> None:
    with pytest.raises(TruncationError) as excinfo:
        _ = str_trunc("abcdef", 2, "...")

    assert excinfo.value.max_length == 2
    assert excinfo.value.marker == "..."
    assert excinfo.value.field is None


def test_truncation_error_for_field_names_the_field() -> None:
    error = TruncationError(2, "...").for_field("title")

    assert error.field == "title"
    assert str(error) == (
        "Failed to truncate title. Please make sure the trunc string is "
        "smaller than the max title length."
    )
    assert isinstance(error, ValueError)


def test_str_trunc_counts_characters_not_bytes() -> None:
    result = str_trunc("Jóga", 3, "…")

    assert result == "Jó…"
    assert len(result) == 3


def test_count_matches_is_non_overlapping() -> None:
    assert count_matches("%title% - %title%", "%title%") == 2
    assert count_matches("aaa", "aa") == 1
    assert count_matches("no tokens here", "%artist%") == 0
    assert count_matches("anything", "") == 0


def test_replace_all_replaces_every_occurrence() -> None:
    assert replace_all("%a% and %a%", "%a%", "x") == "x and x"
    assert replace_all("aaaa", "aa", "b") == "bb"
    assert replace_all("unchanged", "", "x") == "unchanged"
