"""Variable environment entries and resolved assignment properties."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from vecscript.syntax import Assignment
from vecscript.values import RuntimeValue, Vec2


@dataclass(frozen=True, slots=True)
class ResolvedProperties:
    """Display/interaction properties folded from an assignment's modifiers.

    `origin` may be the very instance bound to another variable, in which case
    the drawn origin follows that variable when it is dragged.
    """

    color: str | None = None
    interactive: bool = False
    reference: bool = False
    origin: Vec2 | None = None


@dataclass(frozen=True, slots=True)
class VariableEntry:
    value: RuntimeValue
    properties: ResolvedProperties
    source_instruction: Assignment

    @property
    def is_vector(self) -> bool:
        return isinstance(self.value, Vec2)


class Environment(Mapping[str, VariableEntry]):
    """Flat name -> entry namespace; a later assignment replaces an earlier one."""

    __slots__ = ("_entries", "_bound")

    def __init__(self) -> None:
        self._entries: dict[str, VariableEntry] = {}
        # id(value) -> (pinned value, any binding flagged reference)
        self._bound: dict[int, tuple[object, bool]] = {}

    def bind(self, name: str, entry: VariableEntry) -> None:
        self._entries[name] = entry
        key = id(entry.value)
        _, reference = self._bound.get(key, (None, False))
        self._bound[key] = (entry.value, reference or entry.properties.reference)

    def bound_as_reference(self, value: object) -> bool | None:
        """Whether any binding of `value` so far was a reference; None if it was never bound."""
        record = self._bound.get(id(value))
        if record is None or record[0] is not value:
            return None
        return record[1]

    def names_bound_to(self, value: object) -> list[str]:
        return [name for name, entry in self._entries.items() if entry.value is value]

    def __getitem__(self, name: str) -> VariableEntry:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Environment({list(self._entries)!r})"
