"""Resonant collinearity: antinodes created by pairs of same-frequency antennas."""

from __future__ import annotations

import argparse
from itertools import combinations
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from adventkit.position import Position

Antennas = Dict[str, List[Position]]


def parse_antennas(text: str) -> Tuple[Antennas, Position]:
    """Group antenna positions by frequency and return them with the map's size."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("the map is empty")
    antennas: Antennas = {}
    for row, line in enumerate(lines):
        for column, char in enumerate(line):
            if char != ".":
                antennas.setdefault(char, []).append(Position.from_usize(row, column))
    boundary = Position.from_usize(len(lines), len(lines[0]))
    return antennas, boundary


def find_antinodes(positions: Sequence[Position]) -> List[Position]:
    """The two antinodes of every pair: each antenna mirrored through the other."""
    antinodes = []
    for first, second in combinations(positions, 2):
        antinodes.append(first + first - second)
        antinodes.append(second + second - first)
    return antinodes


def is_in_bounds(position: Position, boundary: Position) -> bool:
    """Whether the position lies inside a map of the given size."""
    return 0 <= position.row < boundary.row and 0 <= position.column < boundary.column


def find_resonant_antinodes(positions: Sequence[Position], boundary: Position) -> List[Position]:
    """Every in-bounds point on the line through each pair, stepping by their spacing."""
    antinodes = []
    for first, second in combinations(positions, 2):
        step = second - first
        if step == Position(0, 0):
            raise ValueError(f"two antennas share the position {first}")
        current = second
        while is_in_bounds(current, boundary):
            antinodes.append(current)
            current = current + step
        current = first
        while is_in_bounds(current, boundary):
            antinodes.append(current)
            current = current - step
    return antinodes


def count_antinode_positions(
    antennas: Antennas, boundary: Position, resonant: bool = False
) -> int:
    """Number of distinct in-bounds antinode positions over all frequencies."""
    found: Iterable[Position]
    if resonant:
        found = (
            position
            for positions in antennas.values()
            for position in find_resonant_antinodes(positions, boundary)
        )
    else:
        found = (
            position
            for positions in antennas.values()
            for position in find_antinodes(positions)
            if is_in_bounds(position, boundary)
        )
    return len(set(found))


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Count unique antinode positions.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    antennas, boundary = parse_antennas(args.input.read_text())
    print(f"There are {count_antinode_positions(antennas, boundary)} unique antinode positions")
    resonant = count_antinode_positions(antennas, boundary, resonant=True)
    print(f"There are {resonant} unique resonant antinode positions")


if __name__ == "__main__":
    main()