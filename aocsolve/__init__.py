"""Solvers for a selection of Advent of Code puzzles, one module per day, plus input-splitting helpers."""

__version__ = "0.1.0"