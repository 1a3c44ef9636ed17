"""Vector/scalar broadcast rules for binary operations."""

from __future__ import annotations

from typing import TypeAlias

from vecscript.diagnostics.errors import ArgumentError, UnknownOperatorError
from vecscript.values import Vec2, is_scalar

Operand: TypeAlias = float | Vec2


def apply_operator(operator: str, left: object, right: object) -> Operand:
    """Apply `operator` to two evaluated operands, returning a fresh value.

    `+` and `*` broadcast a scalar over both components from either side; `-`
    with a scalar on the left yields `scalar - component` per component.
    """
    if operator not in {"+", "-", "*"}:
        raise UnknownOperatorError(operator)
    left_vector = isinstance(left, Vec2)
    right_vector = isinstance(right, Vec2)
    _check_operand(operator, left)
    _check_operand(operator, right)

    match operator:
        case "+":
            if left_vector and right_vector:
                return left.add_new(right)
            if left_vector:
                return left.add_scalar_new(right)
            if right_vector:
                return right.add_scalar_new(left)
            return left + right
        case "-":
            if left_vector and right_vector:
                return left.subtract_new(right)
            if left_vector:
                return left.subtract_scalar_new(right)
            if right_vector:
                return Vec2(left, left).subtract(right)
            return left - right
        case "*":
            if left_vector and right_vector:
                return left.multiply_new(right)
            if left_vector:
                return left.scale_new(right)
            if right_vector:
                return right.scale_new(left)
            return left * right
        case _:
            raise UnknownOperatorError(operator)


def _check_operand(operator: str, value: object) -> None:
    if isinstance(value, Vec2) or is_scalar(value):
        return
    raise ArgumentError(f"Operand {value!r} of `{operator}` is neither a number nor a vector")
