"""Advent of Code puzzle solvers and the grid toolkit they share."""

__version__ = "0.1.0"