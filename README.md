# adventkit

A small toolkit for grid- and graph-based programming puzzles, together with
ready-made solvers for a run of daily puzzles: days 7, 8, 9, 11, 13, 14, 16,
17, 18, 19 and 20.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Solving a day's puzzle

Every solver is installed as a command. Give it the path of your puzzle input
(it reads `input.txt` in the current directory if you give none) and it
prints the answers to both parts:

| Command | Prints |
| --- | --- |
| `adventkit-day07 input.txt` | total of solvable equations with `+` and `*`, then also allowing concatenation |
| `adventkit-day08 input.txt` | unique antinode positions, then unique resonant antinode positions |
| `adventkit-day09 input.txt` | checksum after moving single blocks, then after moving whole files |
| `adventkit-day11 input.txt` | number of stones after 25 and after 75 blinks |
| `adventkit-day13 input.txt` | token cost with at most 100 presses per button, then with prizes moved 10000000000000 further and no press limit |
| `adventkit-day14 input.txt` | safety factor after 100 seconds in a 101 × 103 room, then a drawing of the robots at the first anomalous second |
| `adventkit-day16 input.txt` | lowest maze score, then the number of tiles on any best route |
| `adventkit-day17 input.txt` | the program's output, then the register A value that makes it output itself |
| `adventkit-day18 input.txt` | shortest escape distance, then the first byte that blocks the exit |
| `adventkit-day19 input.txt` | number of patterns that can be made, then the total number of ways to make them |
| `adventkit-day20 input.txt` | number of cheats saving at least the threshold, for cheat radii 2 and 20 |

Some commands take options:

- `adventkit-day14 --tolerance 9.5` sets how many standard deviations from
  the mean a safety factor must lie to count as the picture.
- `adventkit-day18 --size 71 --bytes 1024` sets the grid's width and height
  and how many bytes have fallen for the first answer.
- `adventkit-day20 --threshold 100` sets the minimum time a cheat must save.

## Using the building blocks

### Positions

`adventkit.position.Position` is a row/column pair. Positions can be added,
subtracted, multiplied and divided element-wise, by another position or by a
plain number (integer division truncates toward zero):

```python
from adventkit.position import Position

a = Position(1, 2)
b = Position(3, 4)
a + b                      # Position(row=4, column=6)
a * 3                      # Position(row=3, column=6)
a.manhattan_distance(b)    # 4
```

`Position.from_usize(row, column)` raises `ValueError` if either coordinate
does not fit in a signed 16-bit integer.

### Directions

`adventkit.direction.Direction` (`UP`, `DOWN`, `LEFT`, `RIGHT`) moves a
position one step (`travel`), one step but only within a boundary
(`travel_with_bounds`, which gives `None` when the step would leave the
grid), or one step wrapping round the edges (`travel_with_wrap`). The
`travel_n…` variants take `n` steps.

### Grids

`adventkit.grid.Grid.from_str(text, mapper)` builds a grid from lines of
text, passing every character through `mapper`. `get` returns `None` outside
the grid, `set` ignores positions outside it, `dimensions` gives the number
of rows and the length of the first row, and `print` draws the grid with a
function mapping each value to a character.

### Weighted graphs

`adventkit.graph.Graph` holds nodes keyed by any hashable value. Add
`Edge(source, destination, weight)` values, run `dijkstra` (or the
depth-first `dfs`) from a start node, then read the distances and the nodes
on every recorded best path:

```python
from adventkit.graph import Edge, Graph

graph = Graph()
graph.add_edge(Edge("a", "b", 2))
graph.add_edge(Edge("b", "c", 3))
graph.add_edge(Edge("a", "c", 10))

graph.dijkstra("a")
graph.get_node_distance("c")   # 5
graph.get_path_nodes("c")      # ['c', 'b', 'a']
```

Starting a search from a node that is not in the graph raises `KeyError`.
A search records its results on the nodes, so build a fresh graph for each
search.

### Solvers as functions

Each day's module can be used directly as well, for example:

```python
from adventkit.day11 import parse_stones, total_stones

stones = parse_stones("125 17")
total_stones(stones, 25)   # 55312
```

## What is not included

Only the days listed above have solvers; there are no commands for any other
day's puzzle.