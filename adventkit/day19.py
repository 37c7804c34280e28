"""Linen layout: which towel patterns can be built from the available towels, and in how many ways."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set, Tuple

Pattern = Tuple["Color", ...]


class Color(Enum):
    """A stripe colour, valued by its single-letter code."""

    WHITE = "w"
    BLUE = "u"
    BLACK = "b"
    RED = "r"
    GREEN = "g"

    @classmethod
    def from_char(cls, char: str) -> Color:
        """Read a colour from its letter."""
        try:
            return cls(char)
        except ValueError as error:
            raise ValueError(f"invalid color {char!r}") from error


def _read_colors(text: str) -> Pattern:
    return tuple(Color.from_char(char) for char in text)


@dataclass(frozen=True)
class Towel:
    """A towel described by its sequence of stripes."""

    stripes: Pattern

    def __len__(self) -> int:
        return len(self.stripes)

    def fits_pattern(self, pattern: Sequence[Color]) -> bool:
        """Whether the pattern starts with exactly this towel's stripes."""
        if len(pattern) < len(self.stripes):
            return False
        return tuple(pattern[: len(self.stripes)]) == self.stripes


def parse_input(text: str) -> Tuple[Set[Towel], List[Pattern]]:
    """Read the towel list on the first line and one pattern per line after a blank line."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("the input is empty")
    towels = set()
    for towel_text in lines[0].split(", "):
        if not towel_text:
            raise ValueError("a towel must have at least one stripe")
        towels.add(Towel(_read_colors(towel_text)))
    patterns = [_read_colors(line) for line in lines[2:]]
    return towels, patterns


def _fitting(pattern: Pattern, start: int, towels: Iterable[Towel]) -> List[Towel]:
    rest = pattern[start:]
    return [towel for towel in towels if towel.fits_pattern(rest)]


def pattern_is_valid(pattern: Sequence[Color], towels: Set[Towel]) -> bool:
    """Whether the pattern can be laid out end to end from the towels."""
    target = tuple(pattern)

    @lru_cache(maxsize=None)
    def valid_from(start: int) -> bool:
        if start == len(target):
            return True
        return any(valid_from(start + len(towel)) for towel in _fitting(target, start, towels))

    return valid_from(0)


def count_pattern_combinations(pattern: Sequence[Color], towels: Set[Towel]) -> int:
    """Number of distinct towel arrangements that produce the pattern."""
    target = tuple(pattern)

    @lru_cache(maxsize=None)
    def count_from(start: int) -> int:
        if start == len(target):
            return 1
        return sum(count_from(start + len(towel)) for towel in _fitting(target, start, towels))

    return count_from(0)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Check which towel patterns can be made.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    towels, patterns = parse_input(args.input.read_text())
    valid = sum(1 for pattern in patterns if pattern_is_valid(pattern, towels))
    print(f"There are {valid} valid patterns")
    combinations = sum(count_pattern_combinations(pattern, towels) for pattern in patterns)
    print(f"There are {combinations} ways to make the patterns")


if __name__ == "__main__":
    main()