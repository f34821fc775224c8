"""Generalized Sudoku boards (4x4 up to 49x49) with an exhaustive stack solver."""

from .core import (
    SudokuSize,
    SudokuType,
    Difficulty,
    SudokuError,
    InvalidArgumentError,
    UnsupportedVariantError,
    Sudoku,
    NormalSudoku,
    create_empty_sudoku,
)

__version__ = "1.0.0"

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
]
