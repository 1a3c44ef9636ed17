"""Trailing options attached to an assignment (`, interactive, #CC3344, origin: 5 5`)."""

from __future__ import annotations

from typing import TypeAlias

from dataclasses import dataclass

from vecscript.syntax.expression import Expression


@dataclass(frozen=True, slots=True)
class Flag:
    """Bare word or colour literal, e.g. `interactive`, `reference`, `#CC3344`."""

    token: str

    @property
    def is_color(self) -> bool:
        return self.token.startswith("#")


@dataclass(frozen=True, slots=True)
class PropertyFunction:
    """Keyed option from `key: v1 v2` or `key(v1, v2)` syntax."""

    name: str
    args: tuple[Expression, ...]


Modifier: TypeAlias = Flag | PropertyFunction


__all__ = [
    "Flag",
    "Modifier",
    "PropertyFunction",
]
