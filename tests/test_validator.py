"""Unit tests for validation utilities."""

import pytest
from squaredoku.core.board import NormalSudoku
from squaredoku.core.enums import SudokuSize
from squaredoku.core.validator import (
    is_valid_placement,
    is_valid_board,
    count_solutions,
    has_unique_solution,
    validate_solution,
)


SOLVED_4X4 = [
    [1, 2, 3, 4],
    [3, 4, 1, 2],
    [2, 1, 4, 3],
    [4, 3, 2, 1],
]

TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


class TestValidator:
    """Tests for validation utilities."""
    
    def test_is_valid_placement(self):
        """Test placement validation."""
        board = NormalSudoku(SudokuSize.NORMAL)
        board.grid[0, 0] = 5
        
        # Can't place 5 in same row
        assert not is_valid_placement(board, 5, 5)
        
        # Can't place 5 in same column
        assert not is_valid_placement(board, 45, 5)
        
        # Can't place 5 in same box
        assert not is_valid_placement(board, 10, 5)
        
        # Can place different value
        assert is_valid_placement(board, 5, 7)
    
    def test_is_valid_board(self):
        """Test board validation."""
        assert is_valid_board(NormalSudoku(SudokuSize.TINY))
        assert is_valid_board(NormalSudoku.from_matrix(SOLVED_4X4))
        
        board = NormalSudoku(SudokuSize.TINY)
        board.grid[0, 0] = 2
        board.grid[1, 1] = 2  # Duplicate in block
        assert not is_valid_board(board)
    
    def test_validate_solution(self):
        """Test checking a solution against its puzzle."""
        solution = NormalSudoku.from_matrix(SOLVED_4X4)
        puzzle = solution.copy()
        puzzle.grid[0, :] = 0
        assert validate_solution(puzzle, solution)
        
        other = NormalSudoku.from_matrix([
            [4, 3, 2, 1],
            [2, 1, 4, 3],
            [3, 4, 1, 2],
            [1, 2, 3, 4],
        ])
        assert not validate_solution(solution, other)
        assert not validate_solution(NormalSudoku(SudokuSize.NORMAL), other)


class TestUniqueness:
    """Tests for the uniqueness query."""
    
    def test_empty_4x4_not_unique(self):
        """Test that an empty 4x4 board has many solutions."""
        board = NormalSudoku(SudokuSize.TINY)
        assert not has_unique_solution(board)
        assert count_solutions(board) == 288
        assert count_solutions(board, limit=2) == 2
    
    def test_solved_4x4_unique(self):
        """Test that a solved board has exactly one solution."""
        board = NormalSudoku.from_matrix(SOLVED_4X4)
        assert has_unique_solution(board)
        assert board.solve() == board
    
    def test_one_empty_field_unique(self):
        """Test the uniqueness of a 9x9 board missing one value."""
        board = NormalSudoku.from_string(TEST_SOLUTION[:80] + "0")
        assert has_unique_solution(board)
        assert board.solve().to_string() == TEST_SOLUTION
    
    def test_two_solutions(self):
        """Test a board with exactly two completions."""
        board = NormalSudoku.from_matrix([
            [0, 0, 3, 4],
            [3, 4, 1, 2],
            [0, 0, 4, 3],
            [4, 3, 2, 1],
        ])
        assert count_solutions(board) == 2
        assert not has_unique_solution(board)
    
    def test_unsolvable(self):
        """Test that an unsolvable board is not unique."""
        board = NormalSudoku.from_matrix([
            [1, 1, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
        ])
        assert count_solutions(board) == 0
        assert not has_unique_solution(board)
        assert board.solve() is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
