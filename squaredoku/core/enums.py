"""Size, type and difficulty tables for Sudoku boards."""

from __future__ import annotations
from enum import Enum

from .exceptions import InvalidArgumentError


class SudokuType(Enum):
    """Board variants. Only NORMAL is implemented."""
    NORMAL = "normal"
    SAMURAI = "samurai"


class Difficulty(Enum):
    """Difficulty labels for puzzles."""
    VERY_EASY = "very-easy"
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    VERY_HARD = "very-hard"


class SudokuSize(Enum):
    """
    Supported grid sizes.
    
    The value is the side length N of the grid. Every side is a perfect
    square so the grid splits into sqrt(N) x sqrt(N) blocks.
    """
    TINY = 4
    NORMAL = 9
    LARGE = 16
    HUGE = 25
    EXTREME = 36
    ENORMOUS = 49
    
    @property
    def side(self) -> int:
        """Number of rows (and columns) of the grid."""
        return self.value
    
    @property
    def box_size(self) -> int:
        """Side length of one block."""
        return _BOX_SIZES[self]
    
    def field_count(self, sudoku_type: SudokuType = SudokuType.NORMAL) -> int:
        """
        Get the number of fields of a board of this size.
        
        A samurai board is five overlapping grids sharing four blocks.
        """
        if sudoku_type is SudokuType.NORMAL:
            return self.side * self.side
        if sudoku_type is SudokuType.SAMURAI:
            return self.side * self.side * 5 - self.box_size * self.box_size * 4
        raise InvalidArgumentError(f"Unknown sudoku type: {sudoku_type!r}")
    
    @classmethod
    def from_side(cls, side: int) -> SudokuSize:
        """Look up the size with the given side length."""
        for size in cls:
            if size.side == side:
                return size
        raise InvalidArgumentError(f"Invalid matrix size! Unsupported side length {side}")


_BOX_SIZES = {
    SudokuSize.TINY: 2,
    SudokuSize.NORMAL: 3,
    SudokuSize.LARGE: 4,
    SudokuSize.HUGE: 5,
    SudokuSize.EXTREME: 6,
    SudokuSize.ENORMOUS: 7,
}
