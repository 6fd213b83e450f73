"""
Summary: Fail-soft positional reader over TypedValue trees.
Why: Structural mismatches in player replies are expected, so steps return None instead of raising.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .typed_value import TypedValue, ValueKind

Step = Callable[["Cursor"], "Cursor | None"]


@dataclass(slots=True, frozen=True)
class Cursor:
    """Position on one node among a sequence of sibling nodes.

    A cursor never mutates the tree. Every step returns a new cursor, or
    ``None`` when the tree does not have the expected shape.
    """

    nodes: tuple[TypedValue, ...]
    index: int = 0

    @classmethod
    def at_root(cls, args: Sequence[TypedValue]) -> Cursor:
        """Position a cursor on the first argument of a reply."""

        return cls(tuple(args))

    @property
    def current(self) -> TypedValue | None:
        if 0 <= self.index < len(self.nodes):
            return self.nodes[self.index]
        return None

    def step_into(self, kind: ValueKind) -> Cursor | None:
        """Descend into the current container if it is of ``kind``.

        The new cursor sits on the first child: the wrapped value of a
        variant, the first element of an array, or the key of a dict entry.
        """
        node = self.current
        if node is None or node.kind is not kind or not kind.is_container:
            return None
        return Cursor(node.children)

    def step_to_key(self, key: str) -> Cursor | None:
        """Scan the dict entries at this level for ``key``.

        On a match the new cursor sits on the entry's value.
        """
        for entry in self.nodes[self.index:]:
            if entry.kind is not ValueKind.DICT_ENTRY or len(entry.children) != 2:
                continue
            entry_key, _value = entry.children
            if entry_key.kind is ValueKind.STRING and entry_key.payload == key:
                return Cursor(entry.children, 1)
        return None

    def read_string(self) -> str | None:
        node = self.current
        if node is None or node.kind is not ValueKind.STRING:
            return None
        return str(node.payload)


def into(kind: ValueKind) -> Step:
    """Build a step that descends into a container of ``kind``."""

    def _step(cursor: Cursor) -> Cursor | None:
        return cursor.step_into(kind)

    return _step


def to_key(key: str) -> Step:
    """Build a step that moves onto the value stored under ``key``."""

    def _step(cursor: Cursor) -> Cursor | None:
        return cursor.step_to_key(key)

    return _step


def descend(cursor: Cursor | None, *steps: Step) -> Cursor | None:
    """Apply ``steps`` left to right, stopping at the first miss."""

    for step in steps:
        if cursor is None:
            return None
        cursor = step(cursor)
    return cursor


__all__ = ["Cursor", "Step", "descend", "into", "to_key"]
