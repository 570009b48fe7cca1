"""Puzzle solvers for the 2022 event."""