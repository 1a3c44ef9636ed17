"""Right-hand-side expression and value parsing."""

from __future__ import annotations

import math

from vecscript.diagnostics.errors import MalformedArgumentsError
from vecscript.parser.patterns import (
    FUNCTION_RE,
    IDENTIFIER_RE,
    MEMBER_ACCESS_RE,
    MEMBER_CALL_RE,
    NUMBER_RE,
    closes_at_end,
    find_operator,
    split_top_level,
)
from vecscript.syntax import (
    Expression,
    FunctionCall,
    NumberLiteral,
    Operation,
    StringLiteral,
    VariableMethodCall,
    VariablePropertyAccess,
    VariableReference,
)


def parse_expression(text: str) -> Expression:
    """Parse an expression string into an expression tree.

    Shapes are tried in order: function call, binary operation, member call,
    member access, bare value. A binary operation splits once at the first
    top-level operator, so `a - b - c` groups as `a - (b - c)`.
    """
    expression = text.strip()

    number = parse_number(expression)
    if number is not None:
        return NumberLiteral(number)

    match = FUNCTION_RE.fullmatch(expression)
    if match is not None and closes_at_end(expression, match.start(2) - 1):
        name, args_text = match.groups()
        return FunctionCall(name=name, args=parse_arguments(args_text))

    operator_index = find_operator(expression)
    if operator_index is not None:
        left = expression[:operator_index]
        right = expression[operator_index + 1 :]
        if not right.strip():
            raise MalformedArgumentsError(f"Missing right operand for `{expression[operator_index]}`")
        return Operation(
            operator=expression[operator_index],  # type: ignore[arg-type]
            left=parse_expression(left),
            right=parse_expression(right),
        )

    match = MEMBER_CALL_RE.fullmatch(expression)
    if match is not None and closes_at_end(expression, match.start(3) - 1):
        variable, method, args_text = match.groups()
        return VariableMethodCall(variable=variable, method=method, args=parse_arguments(args_text))

    match = MEMBER_ACCESS_RE.fullmatch(expression)
    if match is not None:
        variable, prop = match.groups()
        return VariablePropertyAccess(variable=variable, property=prop)

    return parse_value(expression)


def parse_value(text: str) -> NumberLiteral | StringLiteral | VariableReference:
    """Classify a single token as a variable reference, a number or an opaque string."""
    token = text.strip()
    if IDENTIFIER_RE.fullmatch(token):
        return VariableReference(token)

    number = parse_number(token)
    if number is not None:
        return NumberLiteral(number)

    return StringLiteral(token)


def parse_number(text: str) -> float | None:
    normalized = text.strip()
    if not NUMBER_RE.fullmatch(normalized):
        return None
    value = float(normalized)
    if not math.isfinite(value):
        return None
    return value


def parse_arguments(text: str) -> tuple[Expression, ...]:
    """Parse a comma-separated argument list; commas inside parentheses do not split."""
    if not text.strip():
        return ()

    parts = split_top_level(text)
    if any(not part.strip() for part in parts):
        raise MalformedArgumentsError(f"Empty argument in `({text})`")
    return tuple(parse_expression(part) for part in parts)


def split_expression(definition: str) -> tuple[str, str]:
    """Separate the main expression from its modifier list at the first top-level comma."""
    main, *rest = split_top_level(definition, maxsplit=1)
    modifiers = rest[0].strip() if rest else ""
    return main.strip(), modifiers
