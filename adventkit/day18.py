"""Falling bytes: shortest escape from a memory grid and the first blocking byte."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from adventkit.direction import Direction
from adventkit.graph import Edge, Graph
from adventkit.position import Position

_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


def parse_bytes(text: str) -> List[Position]:
    """Read ``x,y`` lines as positions with row ``y`` and column ``x``."""
    positions = []
    for line in text.splitlines():
        column, row = line.split(",", 1)
        positions.append(Position(int(row), int(column)))
    return positions


def build_graph(corrupted: Iterable[Position], boundary: Position) -> Graph:
    """Unit-weight graph of the free cells, connecting orthogonal neighbours."""
    blocked = set(corrupted)
    graph: Graph = Graph()
    for row in range(boundary.row):
        for column in range(boundary.column):
            source = Position(row, column)
            if source in blocked:
                continue
            for direction in _DIRECTIONS:
                target = direction.travel_with_bounds(source, boundary)
                if target is not None and target not in blocked:
                    graph.add_edge(Edge(source, target, 1))
    return graph


def _exit(boundary: Position) -> Position:
    return boundary - Position(1, 1)


def find_minimum_distance(
    graph: Graph, boundary: Position, depth_first: bool = False
) -> Optional[int]:
    """Distance from the top-left to the bottom-right corner, or None if unreachable."""
    search = graph.dfs if depth_first else graph.dijkstra
    try:
        search(Position(0, 0))
    except KeyError:
        return None
    return graph.get_node_distance(_exit(boundary))


def find_blocking_byte(text: str, boundary: Position) -> str:
    """The input line of the first byte after which the exit cannot be reached."""
    lines = text.splitlines()
    corrupted = parse_bytes(text)
    fallen = 1
    while True:
        graph = build_graph(corrupted[:fallen], boundary)
        if find_minimum_distance(graph, boundary, depth_first=True) is None:
            break
        path = set(graph.get_path_nodes(_exit(boundary)) or ())
        fallen = next(
            (index for index in range(fallen + 1, len(corrupted)) if corrupted[index] in path),
            None,
        )
        if fallen is None:
            raise ValueError("no byte blocks the path")
    return lines[fallen - 1]


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Escape the corrupted memory grid.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--size", type=int, default=71, help="width and height of the grid")
    parser.add_argument("--bytes", type=int, default=1024, help="bytes fallen for the first part")
    args = parser.parse_args(argv)

    text = args.input.read_text()
    boundary = Position(args.size, args.size)
    graph = build_graph(parse_bytes(text)[: args.bytes], boundary)
    distance = find_minimum_distance(graph, boundary)
    if distance is None:
        raise SystemExit("The exit cannot be reached")
    print(f"The minimum distance is: {distance}")
    print(f"The first blocking byte is: {find_blocking_byte(text, boundary)}")


if __name__ == "__main__":
    main()