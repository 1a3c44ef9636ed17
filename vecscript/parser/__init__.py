"""Script parser: line matcher, expression parser and modifier parser."""

from vecscript.parser.expression import (
    parse_arguments,
    parse_expression,
    parse_number,
    parse_value,
    split_expression,
)
from vecscript.parser.modifiers import parse_modifier, parse_modifiers
from vecscript.parser.options import ParseMode, ParserOptions
from vecscript.parser.script import ParsedScript, parse_line, parse_script

__all__ = [
    "ParseMode",
    "ParsedScript",
    "ParserOptions",
    "parse_arguments",
    "parse_expression",
    "parse_line",
    "parse_modifier",
    "parse_modifiers",
    "parse_number",
    "parse_script",
    "parse_value",
    "split_expression",
]
