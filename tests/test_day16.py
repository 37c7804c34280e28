import pytest

from adventkit.day16 import Tile, count_best_tiles, find_minimum_distance, main, parse_maze
from adventkit.direction import Direction
from adventkit.position import Position

EXAMPLE = """\
###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############
"""

CORNER = """\
####
#.E#
#S.#
####
"""


def test_it_solves_the_minimum_distance_example():
    assert find_minimum_distance(parse_maze(EXAMPLE)) == 7036


def test_it_counts_the_best_tiles_example():
    assert count_best_tiles(parse_maze(EXAMPLE)) == 45


def test_parse_finds_start_and_finish():
    maze = parse_maze(EXAMPLE)
    assert maze.start == Position(13, 1)
    assert maze.finish == Position(1, 13)


def test_straight_corridor():
    maze_text = "#####\n#S.E#\n#####\n"
    assert find_minimum_distance(parse_maze(maze_text)) == 2
    assert count_best_tiles(parse_maze(maze_text)) == 3


def test_single_turn_costs_a_thousand():
    assert find_minimum_distance(parse_maze(CORNER)) == 1002
    assert count_best_tiles(parse_maze(CORNER)) == 3


def test_turn_edges_are_weighted():
    maze = parse_maze(CORNER)
    node = maze.graph.get_node(Tile(Position(2, 1), Direction.RIGHT))
    weights = {d.node: d.weight for d in node.destinations}
    assert weights[Tile(Position(2, 2), Direction.RIGHT)] == 1
    assert weights[Tile(Position(1, 1), Direction.UP)] == 1001


def test_unreachable_finish():
    maze_text = "#####\n#S#E#\n#####\n"
    assert find_minimum_distance(parse_maze(maze_text)) is None
    with pytest.raises(ValueError):
        count_best_tiles(parse_maze(maze_text))


def test_missing_start_raises():
    with pytest.raises(ValueError):
        parse_maze("####\n#.E#\n####\n")


def test_main_prints_results(tmp_path, capsys):
    path = tmp_path / "maze.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    out = capsys.readouterr().out
    assert "The minimum distance is: 7036" in out
    assert "The number of best tiles is: 45" in out