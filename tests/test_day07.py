import pytest

from adventkit.day07 import (
    ALL_OPERATIONS,
    BASIC_OPERATIONS,
    Equation,
    Operation,
    is_valid_equation,
    operator_combinations,
    parse_equation,
    parse_equations,
    total_calibration_result,
)

EXAMPLE = """\
190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_reads_the_example_equations():
    assert parse_equations(EXAMPLE) == [
        Equation(190, [10, 19]),
        Equation(3267, [81, 40, 27]),
        Equation(83, [17, 5]),
        Equation(156, [15, 6]),
        Equation(7290, [6, 8, 6, 15]),
        Equation(161011, [16, 10, 13]),
        Equation(192, [17, 8, 14]),
        Equation(21037, [9, 7, 18, 13]),
        Equation(292, [11, 6, 16, 20]),
    ]


def test_solves_the_example_with_add_and_multiply():
    assert total_calibration_result(parse_equations(EXAMPLE), BASIC_OPERATIONS) == 3749


def test_solves_the_example_with_concatenation():
    assert total_calibration_result(parse_equations(EXAMPLE), ALL_OPERATIONS) == 11387


def test_concatenates():
    assert Operation.CONCATENATE.apply(1, 2) == 12
    assert Operation.CONCATENATE.apply(123, 45) == 12345


def test_concatenating_zero_is_an_error():
    with pytest.raises(ValueError):
        Operation.CONCATENATE.apply(5, 0)


def test_add_and_multiply():
    assert Operation.ADD.apply(3, 4) == 7
    assert Operation.MULTIPLY.apply(3, 4) == 12


@pytest.mark.parametrize("count, operations, expected", [(0, BASIC_OPERATIONS, 1),
                                                         (3, BASIC_OPERATIONS, 8),
                                                         (2, ALL_OPERATIONS, 9)])
def test_operator_combinations_are_all_distinct(count, operations, expected):
    combinations = [tuple(c) for c in operator_combinations(count, operations)]
    assert len(combinations) == expected
    assert len(set(combinations)) == expected
    assert all(len(c) == count for c in combinations)


def test_first_operator_varies_fastest():
    combinations = list(operator_combinations(2))
    assert combinations[0] == [Operation.ADD, Operation.ADD]
    assert combinations[1] == [Operation.MULTIPLY, Operation.ADD]


def test_single_value_equation():
    assert is_valid_equation(Equation(5, [5]))
    assert not is_valid_equation(Equation(6, [5]))


def test_needs_concatenation():
    equation = parse_equation("156: 15 6")
    assert not is_valid_equation(equation, BASIC_OPERATIONS)
    assert is_valid_equation(equation, ALL_OPERATIONS)


def test_malformed_line_is_rejected():
    with pytest.raises(ValueError):
        parse_equation("190 10 19")