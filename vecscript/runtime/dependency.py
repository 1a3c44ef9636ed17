"""Provenance of derived vectors and the operand -> derived dependency graph."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from vecscript.runtime.arithmetic import apply_operator
from vecscript.values import Vec2


@dataclass(frozen=True, slots=True)
class SourceOperation:
    """How a derived vector was produced.

    Vector operands are held by identity, so `recompute` sees any in-place
    mutation made to them since evaluation. Scalar operands are fixed.
    """

    operator: str
    operands: tuple[float | Vec2, float | Vec2]
    target: Vec2

    def recompute(self) -> Vec2:
        left, right = self.operands
        result = apply_operator(self.operator, left, right)
        if not isinstance(result, Vec2):
            raise TypeError(f"Recompute of `{self.operator}` no longer yields a vector")
        return self.target.reset_to_vector(result)

    def vector_operands(self) -> tuple[Vec2, ...]:
        return tuple(operand for operand in self.operands if isinstance(operand, Vec2))


@dataclass(slots=True)
class DependencyGraph:
    """Identity-keyed edges from operand vectors to the vectors derived from them.

    Edges are only ever added during a run; a new run starts from a new graph.
    """

    _vectors: dict[int, Vec2] = field(default_factory=dict)
    _dependents: dict[int, dict[int, Vec2]] = field(default_factory=dict)
    _sources: dict[int, SourceOperation] = field(default_factory=dict)
    _sequence: dict[int, int] = field(default_factory=dict)

    def register(self, operation: SourceOperation) -> None:
        """Record `operation` as the provenance of its target and link its vector operands."""
        target = operation.target
        self._pin(target)
        self._sources[id(target)] = operation
        self._sequence[id(target)] = len(self._sequence)
        for operand in operation.vector_operands():
            self.link(operand, target)

    def link(self, operand: Vec2, derived: Vec2) -> None:
        self._pin(operand)
        self._pin(derived)
        self._dependents.setdefault(id(operand), {})[id(derived)] = derived

    def dependents(self, vector: Vec2) -> tuple[Vec2, ...]:
        return tuple(self._dependents.get(id(vector), {}).values())

    def has_dependents(self, vector: Vec2) -> bool:
        return bool(self._dependents.get(id(vector)))

    def source_operation(self, vector: Vec2) -> SourceOperation | None:
        return self._sources.get(id(vector))

    def reachable(self, vector: Vec2, follow: Callable[[Vec2], bool]) -> list[Vec2]:
        """Transitive dependents of `vector` reached through vectors accepted by `follow`.

        Returned in evaluation order, so every vector comes after its operands.
        """
        found: dict[int, Vec2] = {}
        stack = list(self.dependents(vector))
        while stack:
            current = stack.pop()
            if id(current) in found or current is vector or not follow(current):
                continue
            found[id(current)] = current
            stack.extend(self.dependents(current))
        return sorted(found.values(), key=lambda v: self._sequence.get(id(v), -1))

    def __iter__(self) -> Iterator[tuple[Vec2, tuple[Vec2, ...]]]:
        for key, dependents in self._dependents.items():
            yield self._vectors[key], tuple(dependents.values())

    def __len__(self) -> int:
        return len(self._dependents)

    def _pin(self, vector: Vec2) -> None:
        # Keeping the instance alive keeps its id() from being reused within the run.
        self._vectors.setdefault(id(vector), vector)
