"""Executes parsed instructions against a fresh variable environment."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from vecscript.diagnostics import (
    RUNTIME_UNEXPECTED_FAILURE,
    RUNTIME_UNRECOGNISED_FLAG,
    Diagnostic,
    DiagnosticSpec,
    UndefinedVariableError,
    UnknownFunctionError,
    UnknownPropertyFunctionError,
    VecScriptError,
    has_errors,
    render_errors,
)
from vecscript.runtime.arithmetic import apply_operator
from vecscript.runtime.dependency import DependencyGraph, SourceOperation
from vecscript.runtime.environment import Environment, ResolvedProperties, VariableEntry
from vecscript.syntax import (
    Assignment,
    Expression,
    Flag,
    FunctionCall,
    Instruction,
    MethodCall,
    Modifier,
    NumberLiteral,
    Operation,
    PropertyFunction,
    PropertyModification,
    StringLiteral,
    VariableMethodCall,
    VariablePropertyAccess,
    VariableReference,
)
from vecscript.values import RuntimeValue, Vec2, call_method, get_property, require_method, set_property


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """Snapshot of one run: environment, dependency graph and runtime diagnostics."""

    variables: Environment
    dependency_graph: DependencyGraph
    diagnostics: tuple[Diagnostic, ...]

    @property
    def errors(self) -> list[str]:
        return render_errors(self.diagnostics)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


class Runtime:
    """Evaluator owning the environment and dependency graph of the latest run."""

    def __init__(self) -> None:
        self.variables = Environment()
        self.dependency_graph = DependencyGraph()
        self.diagnostics: list[Diagnostic] = []
        self._current: Instruction | None = None

    def run(self, instructions: Sequence[Instruction]) -> ExecutionResult:
        """Execute `instructions` in order from a clean state; failures are logged per instruction."""
        self.variables = Environment()
        self.dependency_graph = DependencyGraph()
        self.diagnostics = []

        for instruction in instructions:
            self._current = instruction
            try:
                self.execute(instruction)
            except VecScriptError as exc:
                self._report(exc.spec, str(exc))
            except Exception as exc:
                self._report(RUNTIME_UNEXPECTED_FAILURE, str(exc) or type(exc).__name__)
        self._current = None

        return ExecutionResult(
            variables=self.variables,
            dependency_graph=self.dependency_graph,
            diagnostics=tuple(self.diagnostics),
        )

    def execute(self, instruction: Instruction) -> None:
        match instruction:
            case Assignment():
                self.execute_assignment(instruction)
            case PropertyModification():
                self.execute_property_modification(instruction)
            case MethodCall():
                self.execute_method_call(instruction)
            case _:
                raise TypeError(f"Unrecognised instruction type: {type(instruction).__name__}")

    def execute_assignment(self, instruction: Assignment) -> None:
        value = self.evaluate_expression(instruction.expr)
        properties = self.resolve_properties(instruction.modifiers)
        self.variables.bind(
            instruction.variable,
            VariableEntry(value=value, properties=properties, source_instruction=instruction),
        )

    def execute_property_modification(self, instruction: PropertyModification) -> None:
        target = self.lookup(instruction.variable)
        value = self.evaluate_expression(instruction.expr)
        set_property(target, instruction.property, value, variable=instruction.variable)
        if isinstance(target, Vec2):
            self.propagate(target)

    def execute_method_call(self, instruction: MethodCall) -> None:
        target = self.lookup(instruction.variable)
        require_method(target, instruction.method, variable=instruction.variable)
        args = [self.evaluate_expression(arg) for arg in instruction.args]
        call_method(target, instruction.method, args, variable=instruction.variable)
        if isinstance(target, Vec2):
            self.propagate(target)

    def lookup(self, name: str) -> RuntimeValue:
        entry = self.variables.get(name)
        if entry is None:
            raise UndefinedVariableError(name)
        return entry.value

    def evaluate_expression(self, node: Expression) -> RuntimeValue:
        match node:
            case NumberLiteral(value=value) | StringLiteral(value=value):
                return value
            case VariableReference(name=name):
                return self.lookup(name)
            case FunctionCall(name="Vec2", args=args):
                return Vec2.from_args([self.evaluate_expression(arg) for arg in args])
            case FunctionCall(name=name):
                raise UnknownFunctionError(name)
            case Operation():
                return self._evaluate_operation(node)
            case VariableMethodCall(variable=variable, method=method, args=args):
                target = self.lookup(variable)
                require_method(target, method, variable=variable)
                resolved = [self.evaluate_expression(arg) for arg in args]
                result = call_method(target, method, resolved, variable=variable)
                if isinstance(target, Vec2):
                    self.propagate(target)
                return result  # type: ignore[return-value]
            case VariablePropertyAccess(variable=variable, property=prop):
                target = self.lookup(variable)
                return get_property(target, prop, variable=variable)  # type: ignore[return-value]
            case _:
                raise TypeError(f"Cannot evaluate node of type: {type(node).__name__}")

    def _evaluate_operation(self, node: Operation) -> RuntimeValue:
        left = self.evaluate_expression(node.left)
        right = self.evaluate_expression(node.right)
        result = apply_operator(node.operator, left, right)
        if isinstance(result, Vec2):
            self.dependency_graph.register(
                SourceOperation(operator=node.operator, operands=(left, right), target=result)  # type: ignore[arg-type]
            )
        return result

    def resolve_properties(self, modifiers: Sequence[Modifier]) -> ResolvedProperties:
        color: str | None = None
        interactive = False
        reference = False
        origin: Vec2 | None = None

        for modifier in modifiers:
            match modifier:
                case PropertyFunction(name="origin", args=args):
                    origin = self._resolve_origin(args)
                case PropertyFunction(name=name):
                    raise UnknownPropertyFunctionError(name)
                case Flag(token=token) if modifier.is_color:
                    color = token
                case Flag(token="interactive"):
                    interactive = True
                case Flag(token="reference"):
                    reference = True
                case Flag(token=token):
                    self._report(
                        RUNTIME_UNRECOGNISED_FLAG,
                        f"{RUNTIME_UNRECOGNISED_FLAG.message} `{token}` is ignored.",
                    )

        return ResolvedProperties(color=color, interactive=interactive, reference=reference, origin=origin)

    def _resolve_origin(self, args: Sequence[Expression]) -> Vec2:
        resolved = [self.evaluate_expression(arg) for arg in args]
        if len(resolved) == 1 and isinstance(resolved[0], Vec2):
            return resolved[0]
        return Vec2.from_args(resolved)

    def is_live(self, vector: Vec2) -> bool:
        """Whether `vector` is refreshed when one of its operands changes.

        Vectors that were ever bound to a variable are live only when one of
        those bindings was flagged `reference`, even after the variable is
        rebound. Intermediate results never bound are always refreshed so
        nested expressions stay consistent.
        """
        reference = self.variables.bound_as_reference(vector)
        if reference is None:
            return True
        return reference

    def propagate(self, vector: Vec2) -> list[Vec2]:
        """Recompute live vectors derived from `vector` after it was mutated in place."""
        refreshed: list[Vec2] = []
        for dependent in self.dependency_graph.reachable(vector, self.is_live):
            operation = self.dependency_graph.source_operation(dependent)
            if operation is None:
                continue
            operation.recompute()
            refreshed.append(dependent)
        return refreshed

    def _report(self, spec: DiagnosticSpec, message: str) -> None:
        instruction = self._current
        self.diagnostics.append(
            Diagnostic(
                code=spec.code,
                message=message,
                line=instruction.line if instruction is not None else 0,
                source=instruction.source if instruction is not None else "",
                phase="run",
                severity=spec.severity,
                hint=spec.hint,
                category=spec.category,
            )
        )
