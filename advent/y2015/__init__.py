"""Puzzle solvers for the 2015 event."""