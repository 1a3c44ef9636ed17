"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSER_LINE_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_LINE_FAILED",
    message="Line could not be parsed.",
    severity="error",
    category="parser",
)

PARSER_UNRECOGNISED_LINE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNRECOGNISED_LINE",
    message="Line is not an assignment, property modification or method call.",
    hint="Use `name = expr`, `name.property = expr` or `name.method(args)`.",
    severity="error",
    category="parser",
)

PARSER_INVALID_ARGUMENTS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_ARGUMENTS",
    message="Malformed argument list.",
    severity="error",
    category="parser",
)

RUNTIME_UNDEFINED_VARIABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RUNTIME_UNDEFINED_VARIABLE",
    message="Variable is not defined.",
    hint="Assign the variable on an earlier line before reading it.",
    severity="error",
    category="runtime",
)

RUNTIME_UNKNOWN_METHOD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RUNTIME_UNKNOWN_METHOD",
    message="Method not found.",
    severity="error",
    category="runtime",
)

RUNTIME_UNKNOWN_PROPERTY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RUNTIME_UNKNOWN_PROPERTY",
    message="Property not found.",
    severity="error",
    category="runtime",
)

RUNTIME_UNKNOWN_FUNCTION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RUNTIME_UNKNOWN_FUNCTION",
    message="Unrecognised function call.",
    hint="Only `Vec2(x, y)` can be called.",
    severity="error",
    category="runtime",
)

RUNTIME_UNKNOWN_OPERATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RUNTIME_UNKNOWN_OPERATOR",
    message="Unrecognised operator.",
    hint="Supported operators are `+`, `-` and `*`.",
    severity="error",
    category="runtime",
)

RUNTIME_UNKNOWN_PROPERTY_FUNCTION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RUNTIME_UNKNOWN_PROPERTY_FUNCTION",
    message="Unrecognised property function.",
    hint="Only `origin` is recognised.",
    severity="error",
    category="runtime",
)

RUNTIME_INVALID_ARGUMENTS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RUNTIME_INVALID_ARGUMENTS",
    message="Invalid arguments.",
    severity="error",
    category="runtime",
)

RUNTIME_UNEXPECTED_FAILURE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RUNTIME_UNEXPECTED_FAILURE",
    message="Instruction failed.",
    severity="error",
    category="runtime",
)

RUNTIME_UNRECOGNISED_FLAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RUNTIME_UNRECOGNISED_FLAG",
    message="Unrecognised property value.",
    hint="Known flags are `interactive`, `reference` and `#RRGGBB` colours.",
    severity="warning",
    category="runtime",
)
