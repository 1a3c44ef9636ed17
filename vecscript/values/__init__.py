"""Runtime value types reachable from scripts."""

from typing import TypeAlias

from vecscript.values.capability import ScriptValue, call_method, get_property, require_method, set_property
from vecscript.values.vector import (
    SCRIPT_METHODS,
    SCRIPT_PROPERTIES,
    WRITABLE_PROPERTIES,
    Vec2,
    is_scalar,
)

RuntimeValue: TypeAlias = float | str | Vec2

__all__ = [
    "SCRIPT_METHODS",
    "SCRIPT_PROPERTIES",
    "WRITABLE_PROPERTIES",
    "RuntimeValue",
    "ScriptValue",
    "Vec2",
    "call_method",
    "get_property",
    "is_scalar",
    "require_method",
    "set_property",
]
