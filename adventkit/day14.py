"""Restroom redoubt: robots wrapping around a room, and the moment they form a picture."""

from __future__ import annotations

import argparse
import statistics
from dataclasses import dataclass
from math import prod
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

Vector = Tuple[int, int]

ROOM = (101, 103)
_BATCH = 1000
_MAX_SEARCH = 100_000
_DEFAULT_TOLERANCE = 9.5


@dataclass(frozen=True)
class Robot:
    """A robot's (x, y) position and its velocity per second."""

    position: Vector
    velocity: Vector

    def move(self, n: int, boundary: Vector) -> Robot:
        """The robot after ``n`` seconds in a room that wraps at its edges."""
        (x, y), (vx, vy), (width, height) = self.position, self.velocity, boundary
        return Robot(((x + n * vx) % width, (y + n * vy) % height), self.velocity)


def _read_vector(text: str) -> Vector:
    x_text, y_text = text.split(",", 1)
    return int(x_text[2:]), int(y_text)


def parse_robots(text: str) -> List[Robot]:
    """Read lines of the form ``p=x,y v=dx,dy``."""
    robots = []
    for line in text.splitlines():
        try:
            position, velocity = line.split(" ", 1)
            robots.append(Robot(_read_vector(position), _read_vector(velocity)))
        except ValueError as error:
            raise ValueError(f"malformed robot line: {line!r}") from error
    return robots


def safety_factor(robots: Sequence[Robot], boundary: Vector) -> int:
    """Product of the robot counts in each quadrant; robots on a midline are ignored."""
    cx, cy = boundary[0] // 2, boundary[1] // 2
    quadrants = [0, 0, 0, 0]
    for robot in robots:
        x, y = robot.position
        if x == cx or y == cy:
            continue
        quadrants[(x > cx) + 2 * (y > cy)] += 1
    return prod(quadrants)


def standard_deviation(data: Sequence[float]) -> float:
    """Population standard deviation; zero for no data."""
    if not data:
        return 0.0
    return statistics.pstdev(float(value) for value in data)


def move_all_robots(robots: Sequence[Robot], time: int, boundary: Vector) -> List[Robot]:
    """Every robot after ``time`` seconds."""
    return [robot.move(time, boundary) for robot in robots]


def find_anomalies(scores: Sequence[float], tolerance: float) -> List[int]:
    """Indices of scores more than ``tolerance`` standard deviations from the mean."""
    if not scores:
        return []
    mean = sum(scores) / len(scores)
    spread = standard_deviation(scores)
    return [index for index, score in enumerate(scores) if abs(score - mean) > tolerance * spread]


def render_robots(robots: Sequence[Robot], boundary: Vector) -> str:
    """Draw the room, one line per row, with a robot glyph where any robot stands."""
    occupied = {robot.position for robot in robots}
    width, height = boundary
    return "\n".join(
        "".join("🤖" if (x, y) in occupied else "  " for x in range(width))
        for y in range(height)
    )


def _scores(robots: Sequence[Robot], boundary: Vector, start: int, stop: int) -> List[int]:
    return [
        safety_factor(move_all_robots(robots, time, boundary), boundary)
        for time in range(start, stop)
    ]


def find_easter_egg(
    robots: Sequence[Robot], boundary: Vector, tolerance: float = _DEFAULT_TOLERANCE
) -> Optional[int]:
    """First second whose safety factor is anomalous, or None if the search gives up."""
    scores = _scores(robots, boundary, 0, _BATCH)
    anomalies = find_anomalies(scores, tolerance)
    while not anomalies:
        if len(scores) > _MAX_SEARCH:
            return None
        scores.extend(_scores(robots, boundary, len(scores), len(scores) + _BATCH))
        anomalies = find_anomalies(scores, tolerance)
    return anomalies[0]


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Track the security robots.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--tolerance", type=float, default=_DEFAULT_TOLERANCE)
    args = parser.parse_args(argv)

    robots = parse_robots(args.input.read_text())
    moved = move_all_robots(robots, 100, ROOM)
    print(f"The safety factor after 100 seconds is: {safety_factor(moved, ROOM)}")

    time = find_easter_egg(robots, ROOM, args.tolerance)
    if time is None:
        print("The easter egg was not found! Try reducing the tolerance value.")
        return
    print(render_robots(move_all_robots(robots, time, ROOM), ROOM))
    print()
    print(f"Easter egg found after {time} seconds")
    print("(If the image displayed is not a christmas tree, try increasing the tolerance)")


if __name__ == "__main__":
    main()