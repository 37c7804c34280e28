"""Claw contraption: the cheapest button presses that reach each prize."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

PART_TWO_OFFSET = 10_000_000_000_000
_A_COST = 3
_B_COST = 1

Vector = Tuple[int, int]


@dataclass(frozen=True)
class Machine:
    """Movement of buttons A and B and the prize location, each as (x, y)."""

    a: Vector
    b: Vector
    prize: Vector


@dataclass(frozen=True)
class Solution:
    """How many times each button is pressed."""

    a_presses: int
    b_presses: int

    def cost(self) -> int:
        """Tokens spent: three per A press and one per B press."""
        return _A_COST * self.a_presses + _B_COST * self.b_presses


def _read_values(line: str) -> Vector:
    try:
        _, x_part = line.split("X", 1)
        x_text, rest = x_part.split(",", 1)
        _, y_text = rest.split("Y", 1)
        return int(x_text[1:]), int(y_text[1:])
    except ValueError as error:
        raise ValueError(f"malformed machine line: {line!r}") from error


def parse_machines(text: str, prize_offset: int = 0) -> List[Machine]:
    """Read blocks of three lines separated by blank lines; shift each prize by an offset."""
    lines = text.splitlines()
    machines = []
    for start in range(0, len(lines), 4):
        block = lines[start:start + 3]
        if len(block) < 3:
            raise ValueError("incomplete machine description")
        a, b, prize = (_read_values(line) for line in block)
        machines.append(Machine(a, b, (prize[0] + prize_offset, prize[1] + prize_offset)))
    return machines


def _exact_divide(numerator: int, denominator: int) -> Optional[int]:
    if denominator == 0 or numerator % denominator != 0:
        return None
    return numerator // denominator


def _within(presses: int, max_presses: Optional[int]) -> bool:
    return presses >= 0 and (max_presses is None or presses <= max_presses)


def solve_machine(machine: Machine, max_presses: Optional[int] = 100) -> Optional[Solution]:
    """The whole-number press counts reaching the prize, or None if there are none."""
    (ax, ay), (bx, by), (px, py) = machine.a, machine.b, machine.prize
    a_presses = _exact_divide(px * by - py * bx, ax * by - ay * bx)
    if a_presses is None or not _within(a_presses, max_presses):
        return None
    b_presses = _exact_divide(py - a_presses * ay, by)
    if b_presses is None or not _within(b_presses, max_presses):
        return None
    return Solution(a_presses, b_presses)


def _total_cost(machines: Sequence[Machine], max_presses: Optional[int]) -> int:
    solutions = (solve_machine(machine, max_presses) for machine in machines)
    return sum(solution.cost() for solution in solutions if solution is not None)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Cost of winning every claw machine prize.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"The total cost is: {_total_cost(parse_machines(text), 100)}")
    far = parse_machines(text, PART_TWO_OFFSET)
    print(f"The total cost with distant prizes is: {_total_cost(far, None)}")


if __name__ == "__main__":
    main()