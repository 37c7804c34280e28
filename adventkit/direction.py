"""The four grid directions and movement along them."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from adventkit.position import Position


class Direction(Enum):
    """A compass direction on a grid, valued by its (row, column) step."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    def travel(self, position: Position) -> Position:
        """Move one step without any bounds checking."""
        d_row, d_column = self.value
        return Position(position.row + d_row, position.column + d_column)

    def travel_with_bounds(self, position: Position, boundary: Position) -> Optional[Position]:
        """Move one step, or return None if the step leaves the grid."""
        if self is Direction.UP and position.row <= 0:
            return None
        if self is Direction.DOWN and position.row + 1 >= boundary.row:
            return None
        if self is Direction.LEFT and position.column <= 0:
            return None
        if self is Direction.RIGHT and position.column + 1 >= boundary.column:
            return None
        return self.travel(position)

    def travel_with_wrap(self, position: Position, boundary: Position) -> Position:
        """Move one step, wrapping around the grid edges."""
        moved = self.travel(position)
        return Position(moved.row % boundary.row, moved.column % boundary.column)

    def travel_n(self, position: Position, n: int) -> Position:
        """Move ``n`` steps without any bounds checking."""
        d_row, d_column = self.value
        return Position(position.row + n * d_row, position.column + n * d_column)

    def travel_n_with_bounds(
        self, position: Position, boundary: Position, n: int
    ) -> Optional[Position]:
        """Move ``n`` steps, or return None if any step leaves the grid."""
        current: Optional[Position] = position
        for _ in range(n):
            current = self.travel_with_bounds(current, boundary)
            if current is None:
                return None
        return current

    def travel_n_with_wrap(self, position: Position, boundary: Position, n: int) -> Position:
        """Move ``n`` steps, wrapping around the grid edges."""
        moved = self.travel_n(position, n)
        return Position(moved.row % boundary.row, moved.column % boundary.column)