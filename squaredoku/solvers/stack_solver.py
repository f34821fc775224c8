"""Depth-first search over board snapshots kept on an explicit stack."""

from __future__ import annotations
from typing import Iterator, Optional, Tuple
import logging

from .base_solver import BaseSolver, SearchOutcome, SolverStats
from ..core.board import NormalSudoku
from ..core.exceptions import InvalidArgumentError
from ..core.grid import first_empty_field, has_conflicts, is_legal

log = logging.getLogger(__name__)


class StackSolver(BaseSolver):
    """
    Exhaustive backtracking search without recursion.
    
    The frontier is a last-in-first-out list of grids. Each popped grid is
    branched on its first empty field only: one copy is pushed for every
    number that is legal there, smallest first, so the largest candidate
    is explored next. A popped grid without empty fields is a solution
    unless its clues already repeat a value.
    
    No propagation or cell-ordering heuristics are applied, so the cost
    grows quickly with the number of empty fields on large boards. Use
    max_steps to bound a run.
    """
    
    name = "Stack DFS"
    
    def __init__(self, max_steps: Optional[int] = None, track_memory: bool = False):
        """
        Initialize the solver.
        
        Args:
            max_steps: Maximum number of grids to pop before giving up.
                       None searches until the frontier is empty.
            track_memory: Record peak memory of each run.
        """
        if max_steps is not None and max_steps < 1:
            raise InvalidArgumentError(f"max_steps must be positive, got {max_steps}")
        super().__init__(track_memory=track_memory)
        self.max_steps = max_steps
    
    def _solve(self, board: NormalSudoku) -> Optional[NormalSudoku]:
        """Return the first solution reached."""
        search = self._search(board)
        solution = next(search, None)
        search.close()
        
        if solution is not None:
            self.stats.outcome = SearchOutcome.SOLVED
        return solution
    
    def count_solutions(
        self,
        board: NormalSudoku,
        limit: Optional[int] = None
    ) -> Tuple[int, SolverStats]:
        """
        Count the solutions reachable from board.
        
        Args:
            board: The puzzle.
            limit: Stop once this many solutions are found. None enumerates
                   the whole search tree.
            
        Returns:
            Tuple of (solution count, stats). The count is a lower bound when
            stats.outcome is BUDGET_EXCEEDED.
        """
        if limit is not None and limit < 1:
            raise InvalidArgumentError(f"limit must be positive, got {limit}")
        self.reset_stats()
        
        count = 0
        with self._tracking():
            search = self._search(board)
            for _ in search:
                count += 1
                if limit is not None and count >= limit:
                    self.stats.outcome = SearchOutcome.LIMIT_REACHED
                    break
            search.close()
        
        self.stats.solved = count > 0
        return count, self.stats
    
    def _search(self, board: NormalSudoku) -> Iterator[NormalSudoku]:
        """Yield solutions in the order the stack reaches them."""
        side = board.side
        box_size = board.box_size
        stack = [board.grid.copy()]
        log.debug("Searching %dx%d board with %d empty fields", side, side, board.count_empty())
        
        while stack:
            if self.max_steps is not None and self.stats.iterations >= self.max_steps:
                self.stats.outcome = SearchOutcome.BUDGET_EXCEEDED
                log.warning(
                    "Step budget of %d exhausted with %d boards left on the stack",
                    self.max_steps, len(stack)
                )
                return
            
            grid = stack.pop()
            self.stats.iterations += 1
            
            field = first_empty_field(grid)
            if field is None:
                # Clues that already clash are only caught once the grid is full
                if has_conflicts(grid, box_size):
                    self.stats.backtracks += 1
                    continue
                self.stats.solutions_found += 1
                yield NormalSudoku(board.size, grid)
                continue
            
            row, col = divmod(field, side)
            pushed = 0
            for number in range(1, side + 1):
                if is_legal(grid, field, number, box_size):
                    child = grid.copy()
                    child[row, col] = number
                    stack.append(child)
                    pushed += 1
            
            self.stats.nodes_explored += pushed
            if pushed == 0:
                self.stats.backtracks += 1
            self.stats.max_frontier = max(self.stats.max_frontier, len(stack))
        
        self.stats.outcome = SearchOutcome.EXHAUSTED
        log.debug(
            "Frontier exhausted after %d steps, %d solutions",
            self.stats.iterations, self.stats.solutions_found
        )
