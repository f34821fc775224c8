"""
Addressing and legality primitives on raw numpy grids.

Fields are numbered row by row::

    +-----+-----+
    | 0  1| 2  3|
    | 4  5| 6  7|
    +-----+-----+
    | 8  9|10 11|
    |12 13|14 15|
    +-----+-----+

Blocks are numbered the same way over the grid of blocks.
"""

from __future__ import annotations
from typing import Optional, Tuple
import numpy as np

from .exceptions import InvalidArgumentError


def field_to_cell(field: int, side: int) -> Tuple[int, int]:
    """Map a field index to its (row, col) position."""
    if field < 0 or field >= side * side:
        raise InvalidArgumentError(f"Invalid field number! Expected 0-{side * side - 1}, got {field}")
    return field // side, field % side


def cell_to_field(row: int, col: int, side: int) -> int:
    """Map a (row, col) position to its field index."""
    return row * side + col


def block_index(row: int, col: int, box_size: int) -> int:
    """Get the index of the block containing (row, col)."""
    return (row // box_size) * box_size + (col // box_size)


def extract_block(grid: np.ndarray, block: int, box_size: int) -> np.ndarray:
    """
    Get a copy of the values inside a block.
    
    Args:
        grid: Square grid of side box_size**2.
        block: Block index, 0 to side-1.
        box_size: Side length of one block.
        
    Returns:
        A new box_size x box_size array.
    """
    side = box_size * box_size
    if block < 0 or block >= side:
        raise InvalidArgumentError(f"Invalid block number! Expected 0-{side - 1}, got {block}")
    top = (block // box_size) * box_size
    left = (block % box_size) * box_size
    return grid[top:top + box_size, left:left + box_size].copy()


def is_legal(grid: np.ndarray, field: int, number: int, box_size: int) -> bool:
    """
    Check whether number may be placed at field without breaking the rules.
    
    Only the block, row and column of the field are inspected; whether the
    move leads to a solution is not checked. The grid is never modified.
    """
    side = grid.shape[0]
    row, col = field_to_cell(field, side)
    if number < 1 or number > side:
        raise InvalidArgumentError(f"The given number is invalid! Expected 1-{side}, got {number}")
    
    if number in extract_block(grid, block_index(row, col, box_size), box_size):
        return False
    
    if number in grid[row, :]:
        return False
    
    if number in grid[:, col]:
        return False
    
    return True


def first_empty_field(grid: np.ndarray) -> Optional[int]:
    """Get the lowest field index holding 0, or None for a full grid."""
    empty = np.flatnonzero(grid == 0)
    if empty.size == 0:
        return None
    return int(empty[0])


def has_conflicts(grid: np.ndarray, box_size: int) -> bool:
    """Check whether any row, column or block repeats a filled value."""
    side = grid.shape[0]
    units = [grid[i, :] for i in range(side)]
    units += [grid[:, j] for j in range(side)]
    units += [extract_block(grid, b, box_size).ravel() for b in range(side)]
    
    for unit in units:
        filled = unit[unit != 0]
        if len(filled) != len(set(filled.tolist())):
            return True
    return False
