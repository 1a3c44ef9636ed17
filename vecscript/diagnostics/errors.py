"""Exceptions raised while parsing or executing one script line.

Each exception carries the `DiagnosticSpec` it is reported under; the script
parser and the runtime catch them per line and turn them into `Diagnostic`s.
"""

from __future__ import annotations

from vecscript.diagnostics.codes import (
    PARSER_INVALID_ARGUMENTS,
    PARSER_LINE_FAILED,
    RUNTIME_INVALID_ARGUMENTS,
    RUNTIME_UNDEFINED_VARIABLE,
    RUNTIME_UNEXPECTED_FAILURE,
    RUNTIME_UNKNOWN_FUNCTION,
    RUNTIME_UNKNOWN_METHOD,
    RUNTIME_UNKNOWN_OPERATOR,
    RUNTIME_UNKNOWN_PROPERTY,
    RUNTIME_UNKNOWN_PROPERTY_FUNCTION,
    DiagnosticSpec,
)


class VecScriptError(Exception):
    spec: DiagnosticSpec = RUNTIME_UNEXPECTED_FAILURE


class ScriptSyntaxError(VecScriptError):
    spec = PARSER_LINE_FAILED


class MalformedArgumentsError(ScriptSyntaxError):
    spec = PARSER_INVALID_ARGUMENTS


class UndefinedVariableError(VecScriptError):
    spec = RUNTIME_UNDEFINED_VARIABLE

    def __init__(self, name: str) -> None:
        super().__init__(f"Variable '{name}' is not defined.")
        self.name = name


class UnknownCapabilityError(VecScriptError):
    """A method or property name that the target value does not expose."""

    def __init__(self, kind: str, name: str, variable: str | None = None) -> None:
        owner = f" on variable '{variable}'" if variable is not None else ""
        super().__init__(f"{kind.capitalize()} '{name}' not found{owner}")
        self.kind = kind
        self.name = name
        self.variable = variable
        self.spec = RUNTIME_UNKNOWN_METHOD if kind == "method" else RUNTIME_UNKNOWN_PROPERTY


class UnknownFunctionError(VecScriptError):
    spec = RUNTIME_UNKNOWN_FUNCTION

    def __init__(self, name: str) -> None:
        super().__init__(f"Unrecognised function call: {name}")
        self.name = name


class UnknownOperatorError(VecScriptError):
    spec = RUNTIME_UNKNOWN_OPERATOR

    def __init__(self, operator: str) -> None:
        super().__init__(f"Unrecognised operator: {operator}")
        self.operator = operator


class UnknownPropertyFunctionError(VecScriptError):
    spec = RUNTIME_UNKNOWN_PROPERTY_FUNCTION

    def __init__(self, name: str) -> None:
        super().__init__(f"Unrecognised property function: {name}")
        self.name = name


class ArgumentError(VecScriptError):
    spec = RUNTIME_INVALID_ARGUMENTS
