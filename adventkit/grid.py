"""A rectangular grid of values addressed by positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, TypeVar

from adventkit.position import Position

T = TypeVar("T")


@dataclass
class Grid(Generic[T]):
    """Rows of values; lookups outside the grid yield None rather than failing."""

    data: List[List[T]]

    @classmethod
    def from_str(cls, text: str, mapper: Callable[[str], T]) -> Grid[T]:
        """Build a grid from lines of text, mapping each character to a value."""
        return cls([[mapper(char) for char in line] for line in text.splitlines()])

    def _contains(self, position: Position) -> bool:
        if not 0 <= position.row < len(self.data):
            return False
        return 0 <= position.column < len(self.data[position.row])

    def get(self, position: Position) -> Optional[T]:
        """The value at ``position``, or None if it lies outside the grid."""
        if not self._contains(position):
            return None
        return self.data[position.row][position.column]

    def set(self, position: Position, value: T) -> None:
        """Store ``value`` at ``position``; positions outside the grid are ignored."""
        if self._contains(position):
            self.data[position.row][position.column] = value

    def dimensions(self) -> Position:
        """Number of rows and the length of the first row."""
        columns = len(self.data[0]) if self.data else 0
        return Position(len(self.data), columns)

    def print(self, mapper: Callable[[T], str]) -> None:
        """Print each row, rendering every value as one character."""
        for row in self.data:
            print("".join(mapper(value) for value in row))