"""Validation utilities for Sudoku puzzles."""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .board import NormalSudoku


def is_valid_placement(board: NormalSudoku, field: int, number: int) -> bool:
    """
    Check if placing number at field is valid.
    
    Args:
        board: The Sudoku board.
        field: Field index.
        number: Value to check (1 to board side).
        
    Returns:
        True if the number is not yet in the field's row, column or block.
    """
    return board.is_valid_move(field, number)


def is_valid_board(board: NormalSudoku) -> bool:
    """
    Check if the entire board state is valid (no conflicts).
    
    Args:
        board: The Sudoku board to validate.
        
    Returns:
        True if no constraints are violated.
    """
    return board.is_consistent()


def count_solutions(board: NormalSudoku, limit: Optional[int] = None) -> int:
    """
    Count the number of solutions for a puzzle.
    
    Args:
        board: The puzzle board.
        limit: Maximum solutions to count before stopping; None counts all.
        
    Returns:
        Number of solutions found (up to limit).
    """
    return board.count_solutions(limit=limit)


def has_unique_solution(board: NormalSudoku) -> bool:
    """
    Check if a puzzle has exactly one solution.
    
    Args:
        board: The puzzle board.
        
    Returns:
        True if the puzzle has exactly one solution.
    """
    return board.has_unique_solution()


def validate_solution(puzzle: NormalSudoku, solution: NormalSudoku) -> bool:
    """
    Validate that a solution correctly solves the puzzle.
    
    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.
        
    Returns:
        True if solution is valid and matches puzzle clues.
    """
    if puzzle.size is not solution.size:
        return False
    
    # Check that solution respects original clues
    clues = puzzle.grid != 0
    if (puzzle.grid[clues] != solution.grid[clues]).any():
        return False
    
    # Check that solution is complete and valid
    return solution.is_solved()
