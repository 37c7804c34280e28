"""Plutonian pebbles: counting stones as they split and change with every blink."""

from __future__ import annotations

import argparse
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

_MULTIPLIER = 2024


def parse_stones(text: str) -> List[int]:
    """Read whitespace-separated stone values."""
    return [int(value) for value in text.split()]


def split_stone(value: int) -> Optional[List[int]]:
    """Split a value with an even number of digits into its two halves, else None."""
    digits = str(value)
    if len(digits) % 2 != 0:
        return None
    half = len(digits) // 2
    return [int(digits[:half]), int(digits[half:])]


def calc_children(value: int) -> List[int]:
    """The stones one stone becomes after a single blink."""
    if value == 0:
        return [1]
    halves = split_stone(value)
    if halves is not None:
        return halves
    return [value * _MULTIPLIER]


@lru_cache(maxsize=None)
def count_stones(value: int, blinks: int) -> int:
    """How many stones a single stone becomes after ``blinks`` blinks."""
    if blinks == 0:
        return 1
    return sum(count_stones(child, blinks - 1) for child in calc_children(value))


def total_stones(stones: Iterable[int], blinks: int) -> int:
    """How many stones a row of stones becomes after ``blinks`` blinks."""
    return sum(count_stones(stone, blinks) for stone in stones)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Count stones after blinking.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    stones = parse_stones(args.input.read_text())
    for blinks in (25, 75):
        print(
            f"The total number of stones after {blinks} blinks is: "
            f"{total_stones(stones, blinks)}"
        )


if __name__ == "__main__":
    main()