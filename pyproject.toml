[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolve"
version = "0.1.0"
description = "Solvers for a selection of Advent of Code puzzles, working on puzzle input given as text."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "algorithms", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[tool.hatch.build.targets.wheel]
packages = ["aocsolve"]

[tool.hatch.build.targets.sdist]
include = ["aocsolve", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
