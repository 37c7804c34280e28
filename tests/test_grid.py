from adventkit.grid import Grid
from adventkit.position import Position


def test_grid_new_and_dimensions():
    data = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    grid = Grid([row[:] for row in data])
    assert grid.dimensions() == Position(3, 3)
    assert grid.data == data


def test_get_and_set():
    grid = Grid([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert grid.get(Position(0, 0)) == 1
    assert grid.get(Position(2, 2)) == 9
    assert grid.get(Position(3, 3)) is None

    grid.set(Position(1, 1), 42)
    assert grid.get(Position(1, 1)) == 42


def test_get_negative_position_is_outside():
    grid = Grid([[1, 2], [3, 4]])
    assert grid.get(Position(-1, 0)) is None
    assert grid.get(Position(0, -1)) is None


def test_from_str():
    grid = Grid.from_str("123\n456\n789", int)
    assert grid.dimensions() == Position(3, 3)
    assert grid.data == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


def test_set_out_of_bounds():
    grid = Grid([[1, 2], [3, 4]])
    grid.set(Position(10, 10), 42)
    assert grid.data == [[1, 2], [3, 4]]


def test_empty_grid_dimensions():
    assert Grid([]).dimensions() == Position(0, 0)


def test_print(capsys):
    grid = Grid([[True, False], [False, True]])
    grid.print(lambda value: "#" if value else ".")
    assert capsys.readouterr().out == "#.\n.#\n"