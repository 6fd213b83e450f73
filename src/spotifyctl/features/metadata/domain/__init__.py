"""Domain types for decoding player replies."""

from .cursor import Cursor, Step, descend, into, to_key
from .typed_value import TypedValue, ValueKind

__all__ = ["Cursor", "Step", "TypedValue", "ValueKind", "descend", "into", "to_key"]
