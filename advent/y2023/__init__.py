"""Puzzle solvers for the 2023 event."""