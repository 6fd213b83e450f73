"""Use cases for status formatting."""

from .output_formatter import (
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
