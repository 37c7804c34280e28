"""Reindeer maze: cheapest route scoring moves and turns, and tiles on best routes."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

from adventkit.direction import Direction
from adventkit.graph import Edge, Graph
from adventkit.position import Position

_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)
_FORWARD_COST = 1
_TURN_COST = 1001


@dataclass(frozen=True)
class Tile:
    """A maze position together with the direction it was entered from."""

    position: Position
    direction: Direction


@dataclass
class Maze:
    """The movement graph of a maze with its start and finish positions."""

    graph: Graph
    start: Position
    finish: Position


def _find(rows: Sequence[str], marker: str) -> Position:
    for row, line in enumerate(rows):
        column = line.find(marker)
        if column >= 0:
            return Position(row, column)
    raise ValueError(f"the maze has no {marker!r} tile")


def parse_maze(text: str) -> Maze:
    """Build a graph whose nodes are (position, entry direction) pairs."""
    rows = text.splitlines()
    if not rows:
        raise ValueError("the maze is empty")
    boundary = Position(len(rows), len(rows[0]))
    graph: Graph = Graph()

    for row in range(boundary.row):
        for column in range(boundary.column):
            here = Position(row, column)
            for source_direction in _DIRECTIONS:
                source = Tile(here, source_direction)
                for travel_direction in _DIRECTIONS:
                    target = travel_direction.travel_with_bounds(here, boundary)
                    if target is None or rows[target.row][target.column] == "#":
                        continue
                    weight = _FORWARD_COST if travel_direction is source_direction else _TURN_COST
                    graph.add_edge(Edge(source, Tile(target, travel_direction), weight))

    return Maze(graph, _find(rows, "S"), _find(rows, "E"))


def _best_finish(maze: Maze) -> Tuple[Optional[int], Optional[Tile]]:
    maze.graph.dijkstra(Tile(maze.start, Direction.RIGHT))
    best_distance: Optional[int] = None
    best_tile: Optional[Tile] = None
    for direction in _DIRECTIONS:
        candidate = Tile(maze.finish, direction)
        distance = maze.graph.get_node_distance(candidate)
        if distance is not None and (best_distance is None or distance < best_distance):
            best_distance, best_tile = distance, candidate
    return best_distance, best_tile


def find_minimum_distance(maze: Maze) -> Optional[int]:
    """Lowest score to reach the finish, starting east-facing; None if unreachable."""
    distance, _ = _best_finish(maze)
    return distance


def count_best_tiles(maze: Maze) -> int:
    """Number of distinct positions lying on any lowest-score route."""
    _, finish = _best_finish(maze)
    if finish is None:
        raise ValueError("the finish is unreachable")
    nodes = maze.graph.get_path_nodes(finish)
    if nodes is None:
        raise ValueError("the finish is unreachable")
    return len({tile.position for tile in nodes})


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Score the reindeer maze.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()

    distance = find_minimum_distance(parse_maze(text))
    if distance is None:
        raise SystemExit("The finish cannot be reached")
    print(f"The minimum distance is: {distance}")
    print(f"The number of best tiles is: {count_best_tiles(parse_maze(text))}")


if __name__ == "__main__":
    main()