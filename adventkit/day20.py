"""Race condition: time saved by cheating through walls on a single-track course."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from adventkit.direction import Direction
from adventkit.graph import Edge, Graph
from adventkit.position import Position

_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class Tile(Enum):
    """A cell of the racetrack."""

    EMPTY = "."
    WALL = "#"


@dataclass
class Maze:
    """The racetrack layout, its size and the start position."""

    tiles: List[List[Tile]]
    boundary: Position
    start: Position

    def get_tile(self, position: Position) -> Optional[Tile]:
        """The tile at ``position``, or None if it lies outside the track."""
        if not 0 <= position.row < len(self.tiles):
            return None
        row = self.tiles[position.row]
        if not 0 <= position.column < len(row):
            return None
        return row[position.column]


@dataclass(frozen=True)
class PathItem:
    """A free cell and its distance from the start."""

    position: Position
    distance: int


def parse_maze(text: str) -> Maze:
    """Read a track drawn with ``#``, ``.``, ``S`` and ``E``."""
    start: Optional[Position] = None
    tiles: List[List[Tile]] = []
    for row, line in enumerate(text.splitlines()):
        cells = []
        for column, char in enumerate(line):
            if char == "#":
                cells.append(Tile.WALL)
            elif char in ".E":
                cells.append(Tile.EMPTY)
            elif char == "S":
                start = Position(row, column)
                cells.append(Tile.EMPTY)
            else:
                raise ValueError(f"invalid tile character {char!r}")
        tiles.append(cells)

    if not tiles:
        raise ValueError("the maze is empty")
    if start is None:
        raise ValueError("the maze has no start tile")
    return Maze(tiles, Position(len(tiles), len(tiles[0])), start)


def build_graph(maze: Maze) -> Graph:
    """Unit-weight graph with an edge from every cell into each free neighbour."""
    graph: Graph = Graph()
    for row in range(maze.boundary.row):
        for column in range(maze.boundary.column):
            source = Position(row, column)
            for direction in _DIRECTIONS:
                target = direction.travel_with_bounds(source, maze.boundary)
                if target is not None and maze.get_tile(target) is Tile.EMPTY:
                    graph.add_edge(Edge(source, target, 1))
    return graph


def _track(maze: Maze, graph: Graph) -> Iterator[PathItem]:
    for row, cells in enumerate(maze.tiles):
        for column, tile in enumerate(cells):
            if tile is not Tile.EMPTY:
                continue
            position = Position(row, column)
            distance = graph.get_node_distance(position)
            if distance is None:
                raise ValueError(f"the free tile at {position} cannot be reached")
            yield PathItem(position, distance)


def find_cheat_savings(maze: Maze, cheat_radius: int = 2) -> List[int]:
    """Time saved by every cheat spanning at most ``cheat_radius`` steps."""
    graph = build_graph(maze)
    try:
        graph.dijkstra(maze.start)
    except KeyError as error:
        raise ValueError("the start tile is not part of the track") from error

    path = list(_track(maze, graph))
    savings = []
    for cheat_start in path:
        for cheat_end in path:
            if cheat_end.position == cheat_start.position:
                continue
            span = cheat_end.position.manhattan_distance(cheat_start.position)
            if span <= cheat_radius and cheat_end.distance > cheat_start.distance + cheat_radius:
                savings.append(cheat_end.distance - cheat_start.distance - span)
    return savings


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Count worthwhile racetrack cheats.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--threshold", type=int, default=100, help="minimum time saved")
    args = parser.parse_args(argv)

    maze = parse_maze(args.input.read_text())
    for radius in (2, 20):
        count = sum(1 for saving in find_cheat_savings(maze, radius) if saving >= args.threshold)
        print(
            f"With a cheat radius of {radius} there are {count} ways "
            f"to cheat by at least {args.threshold} picoseconds"
        )


if __name__ == "__main__":
    main()