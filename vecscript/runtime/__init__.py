"""Evaluator, variable environment and reactive dependency graph."""

from vecscript.runtime.arithmetic import Operand, apply_operator
from vecscript.runtime.dependency import DependencyGraph, SourceOperation
from vecscript.runtime.environment import Environment, ResolvedProperties, VariableEntry
from vecscript.runtime.evaluator import ExecutionResult, Runtime
from vecscript.runtime.interaction import (
    OPERATOR_SYMBOLS,
    describe_reference,
    interactive_vectors,
    move_vector,
)

__all__ = [
    "OPERATOR_SYMBOLS",
    "DependencyGraph",
    "Environment",
    "ExecutionResult",
    "Operand",
    "ResolvedProperties",
    "Runtime",
    "SourceOperation",
    "VariableEntry",
    "apply_operator",
    "describe_reference",
    "interactive_vectors",
    "move_vector",
]
