"""Mutable 2-D vector used as the script's vector value type."""

from __future__ import annotations

import math
from collections.abc import Iterator
from numbers import Real
from typing import Final

from vecscript.diagnostics.errors import ArgumentError

# Names reachable from `v.method(...)` in scripts.
SCRIPT_METHODS: Final[frozenset[str]] = frozenset(
    {
        "add",
        "add_new",
        "add_scalar",
        "add_scalar_new",
        "clone",
        "cross",
        "distance",
        "divide",
        "divide_new",
        "dot",
        "multiply",
        "multiply_new",
        "negate",
        "negate_new",
        "normalise",
        "normalise_new",
        "reset",
        "reset_to_vector",
        "rotate",
        "rotate_new",
        "round",
        "round_new",
        "scale",
        "scale_new",
        "subtract",
        "subtract_new",
        "subtract_scalar",
        "subtract_scalar_new",
    }
)
SCRIPT_PROPERTIES: Final[frozenset[str]] = frozenset({"x", "y", "length", "length_squared", "angle"})
WRITABLE_PROPERTIES: Final[frozenset[str]] = frozenset({"x", "y", "length", "angle"})


def is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class Vec2:
    """Two-component vector mutated in place by scripts and drag interaction.

    In-place operations return `self`; the `*_new` variants return a fresh
    instance and leave the receiver untouched. Equality compares components,
    so instances are unhashable and identity is used wherever they are tracked.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    @classmethod
    def from_args(cls, args: tuple[object, ...] | list[object]) -> "Vec2":
        """Build a vector from exactly two evaluated script arguments."""
        if len(args) != 2 or not all(is_scalar(arg) for arg in args):
            rendered = ", ".join(repr(arg) for arg in args)
            raise ArgumentError(f"Vec2 expects two numbers, got ({rendered})")
        x, y = args
        return cls(float(x), float(y))  # type: ignore[arg-type]

    def clone(self) -> "Vec2":
        return Vec2(self.x, self.y)

    def reset(self, x: float, y: float) -> "Vec2":
        self.x = float(x)
        self.y = float(y)
        return self

    def reset_to_vector(self, other: "Vec2") -> "Vec2":
        other = _vector_arg(other, "reset_to_vector")
        return self.reset(other.x, other.y)

    # component-wise

    def add(self, other: "Vec2") -> "Vec2":
        other = _vector_arg(other, "add")
        return self.reset(self.x + other.x, self.y + other.y)

    def add_new(self, other: "Vec2") -> "Vec2":
        return self.clone().add(other)

    def subtract(self, other: "Vec2") -> "Vec2":
        other = _vector_arg(other, "subtract")
        return self.reset(self.x - other.x, self.y - other.y)

    def subtract_new(self, other: "Vec2") -> "Vec2":
        return self.clone().subtract(other)

    def multiply(self, other: "Vec2") -> "Vec2":
        other = _vector_arg(other, "multiply")
        return self.reset(self.x * other.x, self.y * other.y)

    def multiply_new(self, other: "Vec2") -> "Vec2":
        return self.clone().multiply(other)

    def divide(self, other: "Vec2") -> "Vec2":
        other = _vector_arg(other, "divide")
        if other.x == 0 or other.y == 0:
            raise ArgumentError("divide by a vector with a zero component")
        return self.reset(self.x / other.x, self.y / other.y)

    def divide_new(self, other: "Vec2") -> "Vec2":
        return self.clone().divide(other)

    # scalar broadcast

    def add_scalar(self, value: float) -> "Vec2":
        value = _scalar_arg(value, "add_scalar")
        return self.reset(self.x + value, self.y + value)

    def add_scalar_new(self, value: float) -> "Vec2":
        return self.clone().add_scalar(value)

    def subtract_scalar(self, value: float) -> "Vec2":
        value = _scalar_arg(value, "subtract_scalar")
        return self.reset(self.x - value, self.y - value)

    def subtract_scalar_new(self, value: float) -> "Vec2":
        return self.clone().subtract_scalar(value)

    def scale(self, value: float) -> "Vec2":
        value = _scalar_arg(value, "scale")
        return self.reset(self.x * value, self.y * value)

    def scale_new(self, value: float) -> "Vec2":
        return self.clone().scale(value)

    # geometry

    def negate(self) -> "Vec2":
        return self.scale(-1)

    def negate_new(self) -> "Vec2":
        return self.clone().negate()

    def normalise(self) -> "Vec2":
        length = self.length
        if length == 0:
            return self
        return self.scale(1 / length)

    def normalise_new(self) -> "Vec2":
        return self.clone().normalise()

    def rotate(self, radians: float) -> "Vec2":
        radians = _scalar_arg(radians, "rotate")
        cos = math.cos(radians)
        sin = math.sin(radians)
        return self.reset(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def rotate_new(self, radians: float) -> "Vec2":
        return self.clone().rotate(radians)

    def round(self) -> "Vec2":
        return self.reset(round(self.x), round(self.y))

    def round_new(self) -> "Vec2":
        return self.clone().round()

    def dot(self, other: "Vec2") -> float:
        other = _vector_arg(other, "dot")
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vec2") -> float:
        other = _vector_arg(other, "cross")
        return self.x * other.y - self.y * other.x

    def distance(self, other: "Vec2") -> float:
        return self.subtract_new(other).length

    @property
    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    @length.setter
    def length(self, value: float) -> None:
        value = _scalar_arg(value, "length")
        current = self.length
        if current == 0:
            return
        self.scale(value / current)

    @property
    def angle(self) -> float:
        return math.atan2(self.y, self.x)

    @angle.setter
    def angle(self, value: float) -> None:
        value = _scalar_arg(value, "angle")
        length = self.length
        self.reset(math.cos(value) * length, math.sin(value) * length)

    # script capabilities

    def has_method(self, name: str) -> bool:
        return name in SCRIPT_METHODS

    def call_method(self, name: str, *args: object) -> object:
        if not self.has_method(name):
            raise AttributeError(name)
        return getattr(self, name)(*args)

    def get_property(self, name: str) -> object:
        if name not in SCRIPT_PROPERTIES:
            raise AttributeError(name)
        return getattr(self, name)

    def set_property(self, name: str, value: object) -> None:
        if name not in WRITABLE_PROPERTIES:
            raise AttributeError(name)
        if name in {"x", "y"}:
            value = float(_scalar_arg(value, name))
        setattr(self, name, value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vec2({self.x:g}, {self.y:g})"


def _vector_arg(value: object, operation: str) -> Vec2:
    if not isinstance(value, Vec2):
        raise ArgumentError(f"{operation} expects a vector, got {value!r}")
    return value


def _scalar_arg(value: object, operation: str) -> float:
    if not is_scalar(value):
        raise ArgumentError(f"{operation} expects a number, got {value!r}")
    return value  # type: ignore[return-value]
