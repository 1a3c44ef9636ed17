import pytest

from tests._script_cases import SCRIPT_CASES, ScriptCase, case_id
from vecscript.parser import ParseMode, ParserOptions, parse_line, parse_script
from vecscript.syntax import (
    Assignment,
    Flag,
    FunctionCall,
    InstructionKind,
    MethodCall,
    NumberLiteral,
    PropertyModification,
    VariableReference,
)


@pytest.mark.parametrize("case", SCRIPT_CASES, ids=case_id)
def test_parse_runs_all_central_cases(case: ScriptCase) -> None:
    parsed = parse_script(case.source)

    assert len(parsed.instructions) == case.instruction_count
    assert (parsed.diagnostics == ()) is case.parses_cleanly


def test_assignment_keeps_commas_inside_call() -> None:
    parsed = parse_script("a = Vec2(1,2), interactive")

    assert parsed.errors == []
    (instruction,) = parsed.instructions
    assert isinstance(instruction, Assignment)
    assert instruction.kind == InstructionKind.ASSIGNMENT
    assert instruction.variable == "a"
    assert instruction.expr == FunctionCall(name="Vec2", args=(NumberLiteral(1.0), NumberLiteral(2.0)))
    assert instruction.modifiers == (Flag("interactive"),)
    assert instruction.source == "a = Vec2(1,2), interactive"


def test_method_call_is_checked_before_property_modification() -> None:
    instruction = parse_line("f.rotate(10, 5)")

    assert isinstance(instruction, MethodCall)
    assert instruction.kind == InstructionKind.METHOD
    assert instruction.variable == "f"
    assert instruction.method == "rotate"
    assert instruction.args == (NumberLiteral(10.0), NumberLiteral(5.0))


def test_method_call_keeps_zero_argument() -> None:
    instruction = parse_line("f.scale(0)")

    assert isinstance(instruction, MethodCall)
    assert instruction.args == (NumberLiteral(0.0),)


def test_property_modification() -> None:
    instruction = parse_line("f.length = g")

    assert isinstance(instruction, PropertyModification)
    assert instruction.kind == InstructionKind.PROPERTY
    assert instruction.variable == "f"
    assert instruction.property == "length"
    assert instruction.expr == VariableReference("g")


def test_unmatched_line_is_silently_skipped_by_default() -> None:
    parsed = parse_script("this is not a line\na = 1\n")

    assert len(parsed.instructions) == 1
    assert parsed.diagnostics == ()


def test_strict_mode_reports_unmatched_lines() -> None:
    parsed = parse_script("this is not a line\na = 1\n", mode=ParseMode.STRICT)

    assert len(parsed.instructions) == 1
    assert [d.code for d in parsed.diagnostics] == ["PARSER_UNRECOGNISED_LINE"]
    assert parsed.has_errors is True


def test_failing_line_is_isolated_and_logged() -> None:
    source = "a = Vec2(1, 2)\nb = Vec2(1,,2)\nc = a * 2\n"

    parsed = parse_script(source)

    assert [instruction.source for instruction in parsed.instructions] == ["a = Vec2(1, 2)", "c = a * 2"]
    assert len(parsed.errors) == 1
    assert parsed.errors[0].startswith("Line 2: `b = Vec2(1,,2)` failed. Error: ")
    assert parsed.diagnostics[0].code == "PARSER_INVALID_ARGUMENTS"


def test_line_numbers_count_significant_lines() -> None:
    source = "// header\n\na = Vec2(1, 2)\nb = 1 +\n"

    parsed = parse_script(source)

    assert parsed.instructions[0].line == 1
    assert parsed.diagnostics[0].line == 2


def test_custom_comment_prefix() -> None:
    parsed = parse_script("# note\na = 1\n", options=ParserOptions(comment_prefix="#"))

    assert len(parsed.instructions) == 1
    assert parsed.diagnostics == ()


def test_parse_rejects_options_and_mode_together() -> None:
    with pytest.raises(ValueError, match="Pass either options or mode, not both"):
        parse_script("a = 1", options=ParserOptions(), mode=ParseMode.STRICT)


def test_parse_handles_windows_line_endings() -> None:
    parsed = parse_script("a = Vec2(1, 2)\r\nb = a + 1\r\n")

    assert [instruction.variable for instruction in parsed.instructions] == ["a", "b"]


def test_only_newlines_separate_lines() -> None:
    parsed = parse_script("a = 1\u2028b = 2\nc = 3\x0cd = 4")

    assert [instruction.variable for instruction in parsed.instructions] == ["a", "c"]
