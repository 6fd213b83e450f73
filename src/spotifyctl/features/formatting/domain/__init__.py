"""Domain primitives for status formatting."""

from .strings import TruncationError, count_matches, replace_all, str_trunc

__all__ = ["TruncationError", "count_matches", "replace_all", "str_trunc"]
