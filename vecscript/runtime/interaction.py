"""Hooks for an interaction layer that drags vectors between script runs."""

from __future__ import annotations

from typing import Final

from vecscript.diagnostics import ArgumentError, UndefinedVariableError
from vecscript.runtime.evaluator import Runtime
from vecscript.values import Vec2

OPERATOR_SYMBOLS: Final[dict[str, str]] = {
    "+": "+",
    "-": "-",
    "*": "×",
    "/": "÷",
}


def interactive_vectors(runtime: Runtime) -> list[str]:
    return [
        name
        for name, entry in runtime.variables.items()
        if entry.is_vector and entry.properties.interactive
    ]


def move_vector(runtime: Runtime, name: str, x: float, y: float, *, snap: bool = False) -> list[str]:
    """Set the components of vector `name` in place and refresh its reference dependents.

    Returns the names of the variables whose values were recomputed.
    """
    entry = runtime.variables.get(name)
    if entry is None:
        raise UndefinedVariableError(name)
    vector = entry.value
    if not isinstance(vector, Vec2):
        raise ArgumentError(f"Variable '{name}' is not a vector")

    vector.reset(x, y)
    if snap:
        vector.round()

    refreshed = runtime.propagate(vector)
    names: list[str] = []
    for dependent in refreshed:
        names.extend(runtime.variables.names_bound_to(dependent))
    return names


def describe_reference(runtime: Runtime, name: str) -> str | None:
    """Label for a reference vector naming its operands, e.g. `a + b` or `a × b`.

    Returns None for non-reference variables and for vectors whose operands are
    not bound to any variable.
    """
    entry = runtime.variables.get(name)
    if entry is None or not entry.properties.reference or not isinstance(entry.value, Vec2):
        return None
    operation = runtime.dependency_graph.source_operation(entry.value)
    if operation is None:
        return None

    operand_names: list[str] = []
    for operand_name, operand_entry in runtime.variables.items():
        if any(operand_entry.value is operand for operand in operation.vector_operands()):
            operand_names.append(operand_name)
    if not operand_names:
        return None

    symbol = OPERATOR_SYMBOLS.get(operation.operator, operation.operator)
    return f" {symbol} ".join(operand_names)
