"""Name-based dispatch from script instructions onto runtime values."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from vecscript.diagnostics.errors import ArgumentError, UnknownCapabilityError


@runtime_checkable
class ScriptValue(Protocol):
    """Value exposing a closed set of named methods and properties to scripts."""

    def has_method(self, name: str) -> bool: ...

    def call_method(self, name: str, *args: object) -> object: ...

    def get_property(self, name: str) -> object: ...

    def set_property(self, name: str, value: object) -> None: ...


def require_method(target: object, method: str, *, variable: str | None = None) -> None:
    """Raise before any argument is evaluated when `target` has no method `method`."""
    if not isinstance(target, ScriptValue) or not target.has_method(method):
        raise UnknownCapabilityError("method", method, variable)


def call_method(target: object, method: str, args: Sequence[object], *, variable: str | None = None) -> object:
    if not isinstance(target, ScriptValue) or not target.has_method(method):
        raise UnknownCapabilityError("method", method, variable)
    try:
        return target.call_method(method, *args)
    except AttributeError as exc:
        raise UnknownCapabilityError("method", method, variable) from exc
    except TypeError as exc:
        raise ArgumentError(f"Bad arguments for '{method}': {exc}") from exc


def get_property(target: object, prop: str, *, variable: str | None = None) -> object:
    if not isinstance(target, ScriptValue):
        raise UnknownCapabilityError("property", prop, variable)
    try:
        return target.get_property(prop)
    except AttributeError as exc:
        raise UnknownCapabilityError("property", prop, variable) from exc


def set_property(target: object, prop: str, value: object, *, variable: str | None = None) -> None:
    if not isinstance(target, ScriptValue):
        raise UnknownCapabilityError("property", prop, variable)
    try:
        target.set_property(prop, value)
    except AttributeError as exc:
        raise UnknownCapabilityError("property", prop, variable) from exc
