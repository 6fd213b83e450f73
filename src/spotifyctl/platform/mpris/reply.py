"""Where: src/spotifyctl/platform/mpris/reply.py
What: Convert values returned by dbus-python into TypedValue trees.
Why: The extractor walks an explicit tagged union; dbus-python hands back
     builtin subclasses with a ``variant_level`` attribute instead.
"""

from __future__ import annotations

from typing import Any

from spotifyctl.features.metadata import TypedValue
from spotifyctl.platform.logging import logger


def typed_value_from_dbus(value: Any) -> TypedValue:
    """Convert one dbus-python value, restoring the variants it was wrapped in."""

    import dbus  # pyright: ignore[reportMissingImports] - optional dependency

    node = _convert_bare(value, dbus)
    for _ in range(int(getattr(value, "variant_level", 0) or 0)):
        node = TypedValue.variant(node)
    return node


def reply_from_dbus(*args: Any) -> tuple[TypedValue, ...]:
    """Convert the out-arguments of a method call into reply arguments."""

    return tuple(typed_value_from_dbus(arg) for arg in args)


def _convert_bare(value: Any, dbus: Any) -> TypedValue:
    # Order matters: dbus.Boolean subclasses int and dbus.ObjectPath subclasses str.
    if isinstance(value, dict):
        return TypedValue.array(
            *(
                TypedValue.entry(typed_value_from_dbus(key), typed_value_from_dbus(item))
                for key, item in value.items()
            )
        )
    if isinstance(value, (list, tuple)):
        return TypedValue.array(*(typed_value_from_dbus(item) for item in value))
    if isinstance(value, (bool, dbus.Boolean)):
        return TypedValue.boolean(bool(value))
    if isinstance(value, dbus.ObjectPath):
        return TypedValue.object_path(str(value))
    if isinstance(value, str):
        return TypedValue.string(str(value))
    if isinstance(value, int):
        return TypedValue.integer(int(value))
    if isinstance(value, float):
        return TypedValue.double(float(value))
    type_name = type(value).__name__
    logger.debug("Unsupported D-Bus value type %s kept as opaque node", type_name)
    return TypedValue.opaque(type_name)


__all__ = ["reply_from_dbus", "typed_value_from_dbus"]
