"""Solvers for classic programming-contest puzzles, with a small command-line tool."""

__version__ = "0.1.0"