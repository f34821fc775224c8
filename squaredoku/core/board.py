"""Sudoku board representation for every supported grid size."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
import logging
import numpy as np

from .enums import SudokuSize, SudokuType
from .exceptions import InvalidArgumentError, UnsupportedVariantError
from . import grid as gridlib

log = logging.getLogger(__name__)

# One character per value: 0-9, then A-Z for 10-35, then a-n for 36-49.
ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmn"


class Sudoku(ABC):
    """
    Abstract Sudoku board.
    
    Fields are addressed by a single index; see ``squaredoku.core.grid``
    for the numbering. Boards never share storage: every variant produced
    by copying or solving owns its own grid.
    """
    
    def __init__(self, sudoku_type: SudokuType, size: SudokuSize):
        self._type = sudoku_type
        self._size = size
    
    @property
    def type(self) -> SudokuType:
        return self._type
    
    @property
    def size(self) -> SudokuSize:
        return self._size
    
    @abstractmethod
    def copy(self) -> Sudoku:
        """Create an independent copy of the board."""
    
    @abstractmethod
    def is_valid_move(self, field: int, number: int) -> bool:
        """
        Check if placing number at field is allowed by the rules.
        
        This does not check whether the move leads to a solution.
        """
    
    @abstractmethod
    def get_number_at_field(self, field: int) -> int:
        """Get the number at field, 0 if the field is empty."""
    
    @abstractmethod
    def solve(self) -> Optional[Sudoku]:
        """Get a solved copy of the board, or None if it has no solution."""
    
    @abstractmethod
    def has_unique_solution(self) -> bool:
        """Check whether the board has exactly one solution."""


def create_empty_sudoku(
    sudoku_type: SudokuType = SudokuType.NORMAL,
    size: SudokuSize = SudokuSize.NORMAL
) -> Sudoku:
    """
    Create an empty board of the given type and size.
    
    Raises:
        UnsupportedVariantError: For board types that are not implemented.
    """
    if sudoku_type is SudokuType.NORMAL:
        return NormalSudoku(size)
    if sudoku_type is SudokuType.SAMURAI:
        raise UnsupportedVariantError("Samurai sudokus are not supported")
    raise InvalidArgumentError(f"Unknown sudoku type: {sudoku_type!r}")


class NormalSudoku(Sudoku):
    """
    A single square grid with square blocks.
    
    The grid is stored as an N x N numpy array indexed [row, col], with 0
    marking an empty field.
    """
    
    def __init__(self, size: SudokuSize = SudokuSize.NORMAL, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.
        
        Args:
            size: Grid size.
            grid: Optional initial grid, copied. If None, creates an empty board.
        """
        super().__init__(SudokuType.NORMAL, size)
        side = size.side
        
        if grid is not None:
            if grid.shape != (side, side):
                raise InvalidArgumentError(f"Invalid matrix size! Grid shape must be ({side}, {side})")
            self.grid = grid.astype(np.int32, copy=True)
        else:
            self.grid = np.zeros((side, side), dtype=np.int32)
    
    @property
    def side(self) -> int:
        return self.size.side
    
    @property
    def box_size(self) -> int:
        return self.size.box_size
    
    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]]) -> NormalSudoku:
        """
        Create a board from a matrix indexed [row][col].
        
        The matrix can be 4x4, 9x9, 16x16, 25x25, 36x36 or 49x49. Zeros
        mark empty fields. The matrix is copied.
        """
        try:
            rows = [list(row) for row in matrix]
        except TypeError:
            raise InvalidArgumentError("Invalid matrix size! Expected a 2-D matrix") from None
        
        size = SudokuSize.from_side(len(rows))
        for i, row in enumerate(rows):
            if len(row) != size.side:
                raise InvalidArgumentError(
                    f"Invalid matrix size! Row {i} has {len(row)} fields, expected {size.side}"
                )
        
        values = np.asarray(rows)
        if values.dtype.kind not in "iu":
            raise InvalidArgumentError("Invalid matrix value! Values must be integers")
        grid = values.astype(np.int32)
        if grid.min() < 0 or grid.max() > size.side:
            raise InvalidArgumentError(f"Invalid matrix value! Values must be 0-{size.side}")
        return cls(size, grid)
    
    @classmethod
    def from_string(cls, s: str) -> NormalSudoku:
        """
        Create a board from its compact string form.
        
        Args:
            s: One character per field in field order. '0' or '.' for
               empty, 1-9, then A-Z for 10-35 and a-n for 36-49.
        """
        s = s.strip()
        side = int(round(len(s) ** 0.5))
        if side * side != len(s):
            raise InvalidArgumentError(f"Invalid matrix size! String length {len(s)} is not a square")
        size = SudokuSize.from_side(side)
        
        values = []
        for c in s:
            if c == '.':
                values.append(0)
                continue
            value = ALPHABET.find(c)
            if value < 0 or value > side:
                raise InvalidArgumentError(f"Invalid character {c!r} for a {side}x{side} board")
            values.append(value)
        
        return cls(size, np.array(values, dtype=np.int32).reshape(side, side))
    
    def to_string(self) -> str:
        """Convert the board to its compact string form, 0 for empty."""
        return ''.join(ALPHABET[v] for v in self.grid.ravel().tolist())
    
    def to_matrix(self) -> List[List[int]]:
        """Get the grid as nested lists indexed [row][col]."""
        return self.grid.tolist()
    
    def copy(self) -> NormalSudoku:
        return NormalSudoku(self.size, self.grid)
    
    def get_number_at_field(self, field: int) -> int:
        """
        Get the number at field, 0 if the field is empty.
        
        Fields are numbered row by row: field N is the first field of the
        second row, not of the second column.
        """
        row, col = gridlib.field_to_cell(field, self.side)
        return int(self.grid[row, col])
    
    def get_block(self, block: int) -> np.ndarray:
        """
        Get the values inside a block.
        
        Blocks are numbered the same way as fields. The returned array is a
        copy, so changing it leaves the board untouched.
        """
        return gridlib.extract_block(self.grid, block, self.box_size)
    
    def is_valid_move(self, field: int, number: int) -> bool:
        return gridlib.is_legal(self.grid, field, number, self.box_size)
    
    def count_empty(self) -> int:
        """Count the number of empty fields."""
        return int(np.sum(self.grid == 0))
    
    def count_filled(self) -> int:
        """Count the number of filled fields."""
        return int(np.sum(self.grid != 0))
    
    def is_complete(self) -> bool:
        """Check if all fields are filled."""
        return self.count_empty() == 0
    
    def is_consistent(self) -> bool:
        """
        Check that no row, column or block repeats a value.
        
        Empty fields are ignored, so a partially filled board can be
        consistent and still have no solution.
        """
        return not gridlib.has_conflicts(self.grid, self.box_size)
    
    def is_solved(self) -> bool:
        """Check if the board is completely and correctly filled."""
        return self.is_complete() and self.is_consistent()
    
    def solve(self) -> Optional[NormalSudoku]:
        from ..solvers.stack_solver import StackSolver
        
        solution, stats = StackSolver().solve(self)
        log.debug("Solve finished: %s after %d steps", stats.outcome.value, stats.iterations)
        return solution
    
    def count_solutions(self, limit: Optional[int] = None) -> int:
        """
        Count the solutions of the board.
        
        Args:
            limit: Stop after this many solutions. None enumerates all of
                   them, which is only practical for small or nearly
                   filled boards.
        """
        from ..solvers.stack_solver import StackSolver
        
        count, _ = StackSolver().count_solutions(self, limit=limit)
        return count
    
    def has_unique_solution(self) -> bool:
        # A second solution already settles the verdict.
        return self.count_solutions(limit=2) == 1
    
    def __repr__(self) -> str:
        return f"NormalSudoku(size={self.side}, filled={self.count_filled()})"
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NormalSudoku):
            return False
        return self.size is other.size and np.array_equal(self.grid, other.grid)
    
    def __hash__(self) -> int:
        return hash(self.to_string())
