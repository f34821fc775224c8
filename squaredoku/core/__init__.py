"""Core module for Sudoku board representation and validation."""

from .enums import SudokuSize, SudokuType, Difficulty
from .exceptions import SudokuError, InvalidArgumentError, UnsupportedVariantError
from .board import Sudoku, NormalSudoku, create_empty_sudoku
from .validator import (
    is_valid_placement,
    is_valid_board,
    count_solutions,
    has_unique_solution,
    validate_solution,
)

__all__ = [
    "SudokuSize",
    "SudokuType",
    "Difficulty",
    "SudokuError",
    "InvalidArgumentError",
    "UnsupportedVariantError",
    "Sudoku",
    "NormalSudoku",
    "create_empty_sudoku",
    "is_valid_placement",
    "is_valid_board",
    "count_solutions",
    "has_unique_solution",
    "validate_solution",
]
