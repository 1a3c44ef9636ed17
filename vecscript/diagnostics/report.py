"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from vecscript.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def render_diagnostic(diagnostic: Diagnostic) -> str:
    """Render a diagnostic as the one-line text shown next to the script editor."""
    if diagnostic.phase == "parse":
        return f"Line {diagnostic.line}: `{diagnostic.source}` failed. Error: {diagnostic.message}"
    return f"Error: {diagnostic.source} - {diagnostic.message}"


def render_errors(diagnostics: Iterable[Diagnostic]) -> list[str]:
    return [render_diagnostic(d) for d in diagnostics if d.severity == "error"]
