import pytest

from vecscript.diagnostics import MalformedArgumentsError
from vecscript.parser import parse_expression, parse_number, parse_value, split_expression
from vecscript.syntax import (
    FunctionCall,
    NumberLiteral,
    Operation,
    StringLiteral,
    VariableMethodCall,
    VariablePropertyAccess,
    VariableReference,
)


def test_parse_value_classifies_identifier_number_and_string() -> None:
    assert parse_value("abc") == VariableReference("abc")
    assert parse_value("_tmp1") == VariableReference("_tmp1")
    assert parse_value("2.5") == NumberLiteral(2.5)
    assert parse_value("-3") == NumberLiteral(-3.0)
    assert parse_value("#CC3344") == StringLiteral("#CC3344")


def test_parse_value_does_not_treat_non_finite_words_as_numbers() -> None:
    assert parse_value("inf") == VariableReference("inf")
    assert parse_value("nan") == VariableReference("nan")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1", 1.0),
        ("-1.5", -1.5),
        (".5", 0.5),
        ("2.", 2.0),
        ("1e-3", 0.001),
        ("1_000", None),
        ("0x10", None),
        ("", None),
        ("1e999", None),
        ("-1e999", None),
    ],
)
def test_parse_number(text: str, expected: float | None) -> None:
    assert parse_number(text) == expected


def test_function_call_arguments_are_expressions() -> None:
    node = parse_expression("Vec2(1, 2)")

    assert node == FunctionCall(name="Vec2", args=(NumberLiteral(1.0), NumberLiteral(2.0)))


def test_function_call_with_nested_call_and_member_access() -> None:
    node = parse_expression("Vec2(a.x, b.len(2))")

    assert isinstance(node, FunctionCall)
    assert node.args == (
        VariablePropertyAccess(variable="a", property="x"),
        VariableMethodCall(variable="b", method="len", args=(NumberLiteral(2.0),)),
    )


def test_function_call_with_no_arguments() -> None:
    assert parse_expression("Vec2()") == FunctionCall(name="Vec2", args=())


def test_binary_operation_splits_operands() -> None:
    node = parse_expression("a + b")

    assert node == Operation(operator="+", left=VariableReference("a"), right=VariableReference("b"))


def test_operator_inside_call_arguments_does_not_split() -> None:
    node = parse_expression("Vec2(-1, 2) * 3")

    assert isinstance(node, Operation)
    assert node.operator == "*"
    assert node.left == FunctionCall(name="Vec2", args=(NumberLiteral(-1.0), NumberLiteral(2.0)))
    assert node.right == NumberLiteral(3.0)


def test_two_calls_joined_by_operator_is_an_operation() -> None:
    node = parse_expression("Vec2(1, 2) + Vec2(3, 4)")

    assert isinstance(node, Operation)
    assert isinstance(node.left, FunctionCall)
    assert isinstance(node.right, FunctionCall)


def test_negative_right_operand() -> None:
    node = parse_expression("a - -3")

    assert node == Operation(operator="-", left=VariableReference("a"), right=NumberLiteral(-3.0))


def test_exponent_sign_is_not_an_operator() -> None:
    assert parse_expression("1e-3") == NumberLiteral(0.001)


def test_chained_operation_splits_at_first_operator() -> None:
    node = parse_expression("a - b - c")

    assert node == Operation(
        operator="-",
        left=VariableReference("a"),
        right=Operation(operator="-", left=VariableReference("b"), right=VariableReference("c")),
    )


def test_member_call_and_member_access() -> None:
    assert parse_expression("e.clone()") == VariableMethodCall(variable="e", method="clone", args=())
    assert parse_expression("e.length") == VariablePropertyAccess(variable="e", property="length")


def test_missing_right_operand_raises() -> None:
    with pytest.raises(MalformedArgumentsError):
        parse_expression("a +")


def test_empty_argument_raises() -> None:
    with pytest.raises(MalformedArgumentsError):
        parse_expression("Vec2(1,,2)")


def test_split_expression_ignores_commas_inside_parentheses() -> None:
    assert split_expression("Vec2(1,2), interactive") == ("Vec2(1,2)", "interactive")
    assert split_expression("a + b, origin(1, 2), #fff") == ("a + b", "origin(1, 2), #fff")
    assert split_expression("Vec2(1, 2)") == ("Vec2(1, 2)", "")
