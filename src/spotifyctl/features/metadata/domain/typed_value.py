"""
Summary: Tagged union for self-describing values carried in bus replies.
Why: Give the decoder an explicit kind to match on instead of duck typing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValueKind(str, Enum):
    """Kind discriminator of a :class:`TypedValue` node."""

    STRING = "string"
    OBJECT_PATH = "object_path"
    INTEGER = "integer"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    VARIANT = "variant"
    ARRAY = "array"
    DICT_ENTRY = "dict_entry"
    # a value the decoder has no representation for; holds its type name
    OPAQUE = "opaque"

    @property
    def is_container(self) -> bool:
        return self in _CONTAINER_KINDS


_CONTAINER_KINDS: frozenset[ValueKind] = frozenset(
    {ValueKind.VARIANT, ValueKind.ARRAY, ValueKind.DICT_ENTRY}
)

Payload = str | int | float | bool | tuple["TypedValue", ...]


@dataclass(slots=True, frozen=True)
class TypedValue:
    """One node of a reply tree.

    Containers keep their children in ``payload`` as a tuple: a variant
    holds exactly one child, a dict entry holds ``(key, value)`` and an
    array holds its elements in order. Build nodes through the named
    constructors, which check the payload shape.
    """

    kind: ValueKind
    payload: Payload

    @classmethod
    def string(cls, value: str) -> TypedValue:
        return cls(ValueKind.STRING, str(value))

    @classmethod
    def object_path(cls, value: str) -> TypedValue:
        return cls(ValueKind.OBJECT_PATH, str(value))

    @classmethod
    def integer(cls, value: int) -> TypedValue:
        return cls(ValueKind.INTEGER, int(value))

    @classmethod
    def double(cls, value: float) -> TypedValue:
        return cls(ValueKind.DOUBLE, float(value))

    @classmethod
    def boolean(cls, value: bool) -> TypedValue:
        return cls(ValueKind.BOOLEAN, bool(value))

    @classmethod
    def opaque(cls, type_name: str) -> TypedValue:
        return cls(ValueKind.OPAQUE, str(type_name))

    @classmethod
    def variant(cls, inner: TypedValue) -> TypedValue:
        return cls(ValueKind.VARIANT, (inner,))

    @classmethod
    def array(cls, *elements: TypedValue) -> TypedValue:
        return cls(ValueKind.ARRAY, tuple(elements))

    @classmethod
    def entry(cls, key: TypedValue, value: TypedValue) -> TypedValue:
        return cls(ValueKind.DICT_ENTRY, (key, value))

    @classmethod
    def dictionary(cls, items: dict[str, TypedValue]) -> TypedValue:
        """Build ``array[dict_entry(string key, value)]`` from a mapping."""

        return cls.array(*(cls.entry(cls.string(key), value) for key, value in items.items()))

    @property
    def children(self) -> tuple[TypedValue, ...]:
        """Child nodes of a container, or an empty tuple for primitives."""

        if self.kind.is_container and isinstance(self.payload, tuple):
            return self.payload
        return ()


__all__ = ["Payload", "TypedValue", "ValueKind"]
