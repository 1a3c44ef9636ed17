"""Line-oriented script parser with per-line error isolation."""

from __future__ import annotations

from dataclasses import dataclass

from vecscript.diagnostics import (
    PARSER_LINE_FAILED,
    PARSER_UNRECOGNISED_LINE,
    Diagnostic,
    DiagnosticSpec,
    VecScriptError,
    has_errors,
    render_errors,
)
from vecscript.parser.expression import parse_arguments, parse_expression, split_expression
from vecscript.parser.modifiers import parse_modifiers
from vecscript.parser.options import ParseMode, ParserOptions
from vecscript.parser.patterns import ASSIGNMENT_LINE_RE, METHOD_LINE_RE, PROPERTY_LINE_RE, closes_at_end
from vecscript.syntax import Assignment, Instruction, MethodCall, PropertyModification


@dataclass(frozen=True, slots=True)
class ParsedScript:
    """Instructions in source order plus one diagnostic per rejected line."""

    source_text: str
    instructions: tuple[Instruction, ...]
    diagnostics: tuple[Diagnostic, ...]
    options: ParserOptions

    @property
    def errors(self) -> list[str]:
        return render_errors(self.diagnostics)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse_script(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedScript:
    """Parse a whole script; a failing line is logged and never stops the rest."""
    resolved_options = _resolve_options(options=options, mode=mode)

    instructions: list[Instruction] = []
    diagnostics: list[Diagnostic] = []

    for number, line in enumerate(_significant_lines(text, resolved_options.comment_prefix), start=1):
        try:
            instruction = parse_line(line, number)
        except VecScriptError as exc:
            diagnostics.append(_diagnostic(exc.spec, str(exc), number, line))
            continue
        except Exception as exc:
            diagnostics.append(_diagnostic(PARSER_LINE_FAILED, str(exc), number, line))
            continue

        if instruction is None:
            if resolved_options.report_unmatched_lines:
                diagnostics.append(
                    _diagnostic(PARSER_UNRECOGNISED_LINE, PARSER_UNRECOGNISED_LINE.message, number, line)
                )
            continue
        instructions.append(instruction)

    return ParsedScript(
        source_text=text,
        instructions=tuple(instructions),
        diagnostics=tuple(diagnostics),
        options=resolved_options,
    )


def parse_line(line: str, number: int = 1) -> Instruction | None:
    """Classify one trimmed line; method calls are tried before property modifications."""
    match = METHOD_LINE_RE.fullmatch(line)
    if match is not None and closes_at_end(line, match.start(3) - 1):
        variable, method, args_text = match.groups()
        return MethodCall(
            variable=variable,
            method=method,
            args=parse_arguments(args_text),
            source=line,
            line=number,
        )

    match = PROPERTY_LINE_RE.fullmatch(line)
    if match is not None:
        variable, prop, value_text = match.groups()
        return PropertyModification(
            variable=variable,
            property=prop,
            expr=parse_expression(value_text),
            source=line,
            line=number,
        )

    match = ASSIGNMENT_LINE_RE.fullmatch(line)
    if match is not None:
        variable, definition = match.groups()
        main_expression, modifiers_text = split_expression(definition)
        return Assignment(
            variable=variable,
            expr=parse_expression(main_expression),
            modifiers=parse_modifiers(modifiers_text),
            source=line,
            line=number,
        )

    return None


def _significant_lines(text: str, comment_prefix: str) -> list[str]:
    lines: list[str] = []
    for raw in text.split("\n"):
        line = raw.strip()
        if not line or line.startswith(comment_prefix):
            continue
        lines.append(line)
    return lines


def _diagnostic(spec: DiagnosticSpec, message: str, number: int, line: str) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=message,
        line=number,
        source=line,
        phase="parse",
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )
