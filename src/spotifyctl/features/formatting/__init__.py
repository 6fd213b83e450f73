"""
Summary: Export status formatting primitives and use cases.
Why: Provide a stable import surface for the CLI and tests.
"""

from .domain import TruncationError, count_matches, replace_all, str_trunc
from .usecases import (
    DEFAULT_MARKER,
    DEFAULT_PLACEHOLDER,
    DEFAULT_TEMPLATE,
    TOKEN_ARTIST,
    TOKEN_TITLE,
    FormatRequest,
    estimate_length,
    format_output,
    format_request,
    substitute,
)

__all__ = [
    "TruncationError",
    "count_matches",
    "replace_all",
    "str_trunc",
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
