"""Syntax model: expressions, modifiers and instructions."""

from vecscript.syntax.expression import (
    OPERATORS,
    Expression,
    FunctionCall,
    NumberLiteral,
    Operation,
    Operator,
    StringLiteral,
    VariableMethodCall,
    VariablePropertyAccess,
    VariableReference,
)
from vecscript.syntax.instruction import (
    Assignment,
    Instruction,
    InstructionKind,
    MethodCall,
    PropertyModification,
)
from vecscript.syntax.modifier import Flag, Modifier, PropertyFunction

__all__ = [
    "OPERATORS",
    "Assignment",
    "Expression",
    "Flag",
    "FunctionCall",
    "Instruction",
    "InstructionKind",
    "MethodCall",
    "Modifier",
    "NumberLiteral",
    "Operation",
    "Operator",
    "PropertyFunction",
    "PropertyModification",
    "StringLiteral",
    "VariableMethodCall",
    "VariablePropertyAccess",
    "VariableReference",
]
