"""Bridge repair: which calibration equations can be made true with the given operators."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from enum import Enum
from functools import reduce
from itertools import product
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence


class Operation(Enum):
    """A binary operator that is evaluated strictly left to right."""

    ADD = "+"
    MULTIPLY = "*"
    CONCATENATE = "||"

    def apply(self, a: int, b: int) -> int:
        """Combine two values with this operator."""
        if self is Operation.ADD:
            return a + b
        if self is Operation.MULTIPLY:
            return a * b
        if b == 0:
            raise ValueError("cannot concatenate a zero right operand")
        return a * 10 ** len(str(b)) + b


BASIC_OPERATIONS = (Operation.ADD, Operation.MULTIPLY)
ALL_OPERATIONS = (Operation.ADD, Operation.MULTIPLY, Operation.CONCATENATE)


@dataclass
class Equation:
    """A target value and the operands that must combine to reach it."""

    test_value: int
    values: List[int] = field(default_factory=list)


def parse_equation(line: str) -> Equation:
    """Read a line of the form ``target: a b c``."""
    target, separator, rest = line.partition(": ")
    if not separator:
        raise ValueError(f"malformed equation: {line!r}")
    values = [int(value) for value in rest.split()]
    if not values:
        raise ValueError(f"equation has no operands: {line!r}")
    return Equation(int(target), values)


def parse_equations(text: str) -> List[Equation]:
    """Read one equation per line."""
    return [parse_equation(line) for line in text.splitlines()]


def operator_combinations(
    operation_count: int, operations: Sequence[Operation] = BASIC_OPERATIONS
) -> Iterator[List[Operation]]:
    """Every sequence of ``operation_count`` operators, first operator varying fastest."""
    for combination in product(operations, repeat=operation_count):
        yield list(reversed(combination))


def _evaluate(values: Sequence[int], operators: Iterable[Operation]) -> int:
    return reduce(
        lambda acc, pair: pair[1].apply(acc, pair[0]),
        zip(values[1:], operators),
        values[0],
    )


def is_valid_equation(
    equation: Equation, operations: Sequence[Operation] = BASIC_OPERATIONS
) -> bool:
    """Whether some choice of operators makes the operands evaluate to the target."""
    if not equation.values:
        raise ValueError("equation has no operands")
    return any(
        _evaluate(equation.values, operators) == equation.test_value
        for operators in operator_combinations(len(equation.values) - 1, operations)
    )


def total_calibration_result(
    equations: Iterable[Equation], operations: Sequence[Operation] = BASIC_OPERATIONS
) -> int:
    """Sum of the targets of every equation that can be made true."""
    return sum(
        equation.test_value
        for equation in equations
        if is_valid_equation(equation, operations)
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Total the solvable calibration equations.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    equations = parse_equations(args.input.read_text())
    basic = total_calibration_result(equations, BASIC_OPERATIONS)
    print(f"The total calibration result is: {basic}")
    extended = total_calibration_result(equations, ALL_OPERATIONS)
    print(f"The total calibration result with concatenation is: {extended}")


if __name__ == "__main__":
    main()