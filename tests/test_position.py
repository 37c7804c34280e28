import pytest

from adventkit.position import Position


def test_it_creates_from_usize():
    pos = Position.from_usize(1, 2)
    assert pos.row == 1
    assert pos.column == 2


def test_from_usize_rejects_values_too_large():
    with pytest.raises(ValueError):
        Position.from_usize(40000, 1)


def test_it_adds_positions():
    result = Position(1, 2) + Position(3, 4)
    assert result == Position(4, 6)


def test_it_subtracts_positions():
    result = Position(3, 4) - Position(1, 2)
    assert result == Position(2, 2)


def test_it_multiplies_positions():
    result = Position(1, 2) * Position(3, 4)
    assert result == Position(3, 8)


def test_it_divides_positions():
    result = Position(3.0, 9.0) / Position(2.0, 3.0)
    assert result.row == 1.5
    assert result.column == 3.0


def test_it_adds_scalars():
    assert Position(1, 2) + 1 == Position(2, 3)


def test_it_subtracts_scalars():
    assert Position(1, 2) - 1 == Position(0, 1)


def test_it_multiplies_scalars():
    assert Position(1, 2) * 3 == Position(3, 6)


def test_it_divides_scalars():
    result = Position(1.0, 2.0) / 2.0
    assert result == Position(0.5, 1.0)


def test_integer_division_truncates_toward_zero():
    assert Position(-7, 7) / 2 == Position(-3, 3)


def test_manhattan_distance_is_symmetric():
    a = Position(1, 5)
    b = Position(4, 2)
    assert a.manhattan_distance(b) == 6
    assert b.manhattan_distance(a) == 6


def test_positions_are_hashable():
    assert len({Position(1, 1), Position(1, 1), Position(0, 1)}) == 2