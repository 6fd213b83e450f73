"""Fixtures standing in for dbus-python so client tests never touch a real bus."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture


class FakeDBusException(Exception):
    """Mimic ``dbus.exceptions.DBusException``."""

    def __init__(self, message: str = "", name: str | None = None) -> None:
        super().__init__(message)
        self._message = message
        self._name = name

    def get_dbus_name(self) -> str | None:
        return self._name

    def get_dbus_message(self) -> str:
        return self._message


class _VariantDict(dict[str, object]):
    """Plain dict carrying a ``variant_level`` like ``dbus.Dictionary``."""

    variant_level: int = 0


class _VariantStr(str):
    """Plain str carrying a ``variant_level`` like ``dbus.String``."""

    variant_level: int = 0


@pytest.fixture
def dbus_exception() -> type[FakeDBusException]:
    """Exception class the stand-in module raises."""

    return FakeDBusException


@pytest.fixture
def in_variant() -> Callable[[Any], Any]:
    """Wrap a str or dict the way dbus-python marks values unpacked from a variant."""

    def _wrap(value: Any) -> Any:
        wrapped = _VariantDict(value) if isinstance(value, dict) else _VariantStr(value)
        wrapped.variant_level = 1
        return wrapped

    return _wrap


@pytest.fixture
def fake_dbus(mocker: MockerFixture) -> MagicMock:
    """Install a stand-in ``dbus`` module for lazy imports."""

    module = MagicMock(name="dbus")
    module.exceptions.DBusException = FakeDBusException
    module.Boolean = type("Boolean", (int,), {})
    module.ObjectPath = type("ObjectPath", (str,), {})
    _ = mocker.patch.dict(sys.modules, {"dbus": module, "dbus.exceptions": module.exceptions})
    return module


@pytest.fixture
def fake_bus() -> MagicMock:
    """Connected bus whose proxies hand out mock remote methods."""

    return MagicMock(name="SessionBus")
