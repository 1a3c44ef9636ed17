"""Diagnostics."""

from vecscript.diagnostics.codes import (
    PARSER_INVALID_ARGUMENTS,
    PARSER_LINE_FAILED,
    PARSER_UNRECOGNISED_LINE,
    RUNTIME_INVALID_ARGUMENTS,
    RUNTIME_UNDEFINED_VARIABLE,
    RUNTIME_UNEXPECTED_FAILURE,
    RUNTIME_UNKNOWN_FUNCTION,
    RUNTIME_UNKNOWN_METHOD,
    RUNTIME_UNKNOWN_OPERATOR,
    RUNTIME_UNKNOWN_PROPERTY,
    RUNTIME_UNKNOWN_PROPERTY_FUNCTION,
    RUNTIME_UNRECOGNISED_FLAG,
    DiagnosticSpec,
)
from vecscript.diagnostics.diagnostic import Diagnostic, Phase, Severity
from vecscript.diagnostics.errors import (
    ArgumentError,
    MalformedArgumentsError,
    ScriptSyntaxError,
    UndefinedVariableError,
    UnknownCapabilityError,
    UnknownFunctionError,
    UnknownOperatorError,
    UnknownPropertyFunctionError,
    VecScriptError,
)
from vecscript.diagnostics.report import (
    collect_diagnostics,
    has_errors,
    render_diagnostic,
    render_errors,
)

__all__ = [
    "PARSER_INVALID_ARGUMENTS",
    "PARSER_LINE_FAILED",
    "PARSER_UNRECOGNISED_LINE",
    "RUNTIME_INVALID_ARGUMENTS",
    "RUNTIME_UNDEFINED_VARIABLE",
    "RUNTIME_UNEXPECTED_FAILURE",
    "RUNTIME_UNKNOWN_FUNCTION",
    "RUNTIME_UNKNOWN_METHOD",
    "RUNTIME_UNKNOWN_OPERATOR",
    "RUNTIME_UNKNOWN_PROPERTY",
    "RUNTIME_UNKNOWN_PROPERTY_FUNCTION",
    "RUNTIME_UNRECOGNISED_FLAG",
    "ArgumentError",
    "Diagnostic",
    "DiagnosticSpec",
    "MalformedArgumentsError",
    "Phase",
    "ScriptSyntaxError",
    "Severity",
    "UndefinedVariableError",
    "UnknownCapabilityError",
    "UnknownFunctionError",
    "UnknownOperatorError",
    "UnknownPropertyFunctionError",
    "VecScriptError",
    "collect_diagnostics",
    "has_errors",
    "render_diagnostic",
    "render_errors",
]
