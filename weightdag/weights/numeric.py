"""Numeric weight types, mostly useful for demos and tests."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class IntegerWeight:
    """A weight that behaves like a plain integer."""

    value: int

    def combine(self, other: "IntegerWeight") -> "IntegerWeight":
        return IntegerWeight(self.value + other.value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class FloatWeight:
    """A weight backed by a float, e.g. a task duration in hours."""

    value: float

    def combine(self, other: "FloatWeight") -> "FloatWeight":
        return FloatWeight(self.value + other.value)

    def __str__(self) -> str:
        return f"{self.value:g}"


WEIGHT_TYPES = {
    "integer": IntegerWeight,
    "float": FloatWeight,
}
