"""Two-dimensional grid positions with element-wise arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Union

_I16_MAX = 2**15 - 1

Number = Union[int, float]


def _divide(a: Number, b: Number) -> Number:
    """Divide, truncating toward zero when both operands are integers."""
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return quotient if (a >= 0) == (b >= 0) else -quotient
    return a / b


_OPERATIONS = {
    "add": lambda a, b: a + b,
    "sub": lambda a, b: a - b,
    "mul": lambda a, b: a * b,
    "div": _divide,
}


@dataclass(frozen=True)
class Position:
    """A row/column pair supporting arithmetic with positions and scalars."""

    row: Number
    column: Number

    @classmethod
    def from_usize(cls, row: int, column: int) -> Position:
        """Build a position whose coordinates must fit in a signed 16-bit integer."""
        for value in (row, column):
            if not 0 <= value <= _I16_MAX:
                raise ValueError(f"coordinate {value} does not fit in a 16-bit signed integer")
        return cls(row, column)

    def manhattan_distance(self, other: Position) -> Number:
        """Sum of the absolute row and column differences."""
        return abs(self.row - other.row) + abs(self.column - other.column)

    def _combine(self, other: object, name: str) -> Position:
        operation = _OPERATIONS[name]
        if isinstance(other, Position):
            return Position(operation(self.row, other.row), operation(self.column, other.column))
        if isinstance(other, Real) and not isinstance(other, bool):
            return Position(operation(self.row, other), operation(self.column, other))
        return NotImplemented

    def __add__(self, other: object) -> Position:
        return self._combine(other, "add")

    def __sub__(self, other: object) -> Position:
        return self._combine(other, "sub")

    def __mul__(self, other: object) -> Position:
        return self._combine(other, "mul")

    def __truediv__(self, other: object) -> Position:
        return self._combine(other, "div")