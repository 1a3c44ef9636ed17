"""Parsed, immutable representation of one script line."""

from __future__ import annotations

from typing import TypeAlias

from dataclasses import dataclass
from enum import StrEnum

from vecscript.syntax.expression import Expression
from vecscript.syntax.modifier import Modifier


class InstructionKind(StrEnum):
    METHOD = "method"
    PROPERTY = "property"
    ASSIGNMENT = "assignment"


@dataclass(frozen=True, slots=True)
class Assignment:
    """`a = Vec2(1, 2), interactive, #CC3344`"""

    variable: str
    expr: Expression
    modifiers: tuple[Modifier, ...]
    source: str
    line: int

    @property
    def kind(self) -> InstructionKind:
        return InstructionKind.ASSIGNMENT


@dataclass(frozen=True, slots=True)
class PropertyModification:
    """`f.length = 10`"""

    variable: str
    property: str
    expr: Expression
    source: str
    line: int

    @property
    def kind(self) -> InstructionKind:
        return InstructionKind.PROPERTY


@dataclass(frozen=True, slots=True)
class MethodCall:
    """`f.rotate(10)`"""

    variable: str
    method: str
    args: tuple[Expression, ...]
    source: str
    line: int

    @property
    def kind(self) -> InstructionKind:
        return InstructionKind.METHOD


Instruction: TypeAlias = Assignment | PropertyModification | MethodCall


__all__ = [
    "Assignment",
    "Instruction",
    "InstructionKind",
    "MethodCall",
    "PropertyModification",
]
