"""Assignment modifier parsing."""

from __future__ import annotations

from vecscript.parser.expression import parse_expression, parse_value
from vecscript.parser.patterns import COLON_MODIFIER_RE, FUNCTION_RE, split_top_level
from vecscript.syntax import Flag, FunctionCall, Modifier, PropertyFunction


def parse_modifiers(text: str) -> tuple[Modifier, ...]:
    if not text.strip():
        return ()

    modifiers: list[Modifier] = []
    for raw in split_top_level(text):
        token = raw.strip()
        if not token:
            continue
        modifiers.append(parse_modifier(token))
    return tuple(modifiers)


def parse_modifier(token: str) -> Modifier:
    # origin: 5 5
    match = COLON_MODIFIER_RE.fullmatch(token)
    if match is not None:
        key, values = match.groups()
        args = tuple(parse_value(value) for value in values.split())
        return PropertyFunction(name=key, args=args)

    # origin(5, 5)
    if FUNCTION_RE.fullmatch(token):
        node = parse_expression(token)
        if isinstance(node, FunctionCall):
            return PropertyFunction(name=node.name, args=node.args)

    return Flag(token)
