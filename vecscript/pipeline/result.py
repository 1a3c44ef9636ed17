"""Run result carrier combining one parse and one execution."""

from __future__ import annotations

from dataclasses import dataclass

from vecscript.diagnostics import Diagnostic, collect_diagnostics, has_errors, render_errors
from vecscript.parser import ParsedScript
from vecscript.runtime import DependencyGraph, Environment, ExecutionResult, Runtime


@dataclass(frozen=True, slots=True)
class ScriptRunResult:
    """Everything the rendering/interaction layer reads after a full run."""

    parse: ParsedScript
    runtime: Runtime
    execution: ExecutionResult

    @property
    def variables(self) -> Environment:
        return self.execution.variables

    @property
    def dependency_graph(self) -> DependencyGraph:
        return self.execution.dependency_graph

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return collect_diagnostics(self.parse.diagnostics, self.execution.diagnostics)

    @property
    def parse_errors(self) -> list[str]:
        return self.parse.errors

    @property
    def run_errors(self) -> list[str]:
        return self.execution.errors

    @property
    def errors(self) -> list[str]:
        return render_errors(self.diagnostics)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)
