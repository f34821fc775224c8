"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats, SearchOutcome
from .stack_solver import StackSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "SearchOutcome",
    "StackSolver",
]
