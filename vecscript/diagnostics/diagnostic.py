"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning"]
Phase = Literal["parse", "run"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the script parser and the runtime."""

    code: str
    message: str
    line: int
    source: str
    phase: Phase = "parse"
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
