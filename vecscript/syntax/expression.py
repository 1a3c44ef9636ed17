"""Expression tree for the right-hand side of script lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

Operator: TypeAlias = Literal["+", "-", "*", "/"]

OPERATORS: frozenset[str] = frozenset({"+", "-", "*", "/"})


@dataclass(frozen=True, slots=True)
class NumberLiteral:
    value: float


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """Opaque token that is neither a number nor an identifier, e.g. `#CC3344`."""

    value: str


@dataclass(frozen=True, slots=True)
class VariableReference:
    name: str


@dataclass(frozen=True, slots=True)
class FunctionCall:
    """Constructor call such as `Vec2(1, 2)`."""

    name: str
    args: tuple[Expression, ...]


@dataclass(frozen=True, slots=True)
class Operation:
    operator: Operator
    left: Expression
    right: Expression


@dataclass(frozen=True, slots=True)
class VariableMethodCall:
    """Method call used as a value, e.g. `e.clone()`."""

    variable: str
    method: str
    args: tuple[Expression, ...]


@dataclass(frozen=True, slots=True)
class VariablePropertyAccess:
    """Property read used as a value, e.g. `e.length`."""

    variable: str
    property: str


Expression: TypeAlias = (
    NumberLiteral
    | StringLiteral
    | VariableReference
    | FunctionCall
    | Operation
    | VariableMethodCall
    | VariablePropertyAccess
)


__all__ = [
    "OPERATORS",
    "Expression",
    "FunctionCall",
    "NumberLiteral",
    "Operation",
    "Operator",
    "StringLiteral",
    "VariableMethodCall",
    "VariablePropertyAccess",
    "VariableReference",
]
