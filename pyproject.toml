[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventkit"
version = "0.1.0"
description = "Grid, direction and graph helpers plus solvers for a season of daily programming puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "grid", "graph", "dijkstra", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adventkit-day07 = "adventkit.day07:main"
adventkit-day08 = "adventkit.day08:main"
adventkit-day09 = "adventkit.day09:main"
adventkit-day11 = "adventkit.day11:main"
adventkit-day13 = "adventkit.day13:main"
adventkit-day14 = "adventkit.day14:main"
adventkit-day16 = "adventkit.day16:main"
adventkit-day17 = "adventkit.day17:main"
adventkit-day18 = "adventkit.day18:main"
adventkit-day19 = "adventkit.day19:main"
adventkit-day20 = "adventkit.day20:main"

[tool.hatch.build.targets.wheel]
packages = ["adventkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
