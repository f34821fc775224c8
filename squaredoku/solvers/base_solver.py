"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, Iterator, Tuple
import time
import tracemalloc

from ..core.board import NormalSudoku


class SearchOutcome(Enum):
    """How a search run ended."""
    SOLVED = "solved"                     # stopped at the first solution
    EXHAUSTED = "exhausted"               # frontier emptied, nothing left to explore
    LIMIT_REACHED = "limit_reached"       # stopped after the requested solution count
    BUDGET_EXCEEDED = "budget_exceeded"   # step budget ran out first


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0
    
    # Algorithm-specific metrics
    backtracks: int = 0
    nodes_explored: int = 0
    solutions_found: int = 0
    max_frontier: int = 0
    outcome: Optional[SearchOutcome] = None
    
    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "solutions_found": self.solutions_found,
            "max_frontier": self.max_frontier,
            "outcome": self.outcome.value if self.outcome else None,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for Sudoku solvers."""
    
    name: str = "BaseSolver"
    
    def __init__(self, track_memory: bool = True):
        """
        Args:
            track_memory: Record peak memory with tracemalloc. Tracing slows
                          the search down noticeably.
        """
        self.track_memory = track_memory
        self.stats = SolverStats(algorithm=self.name)
    
    def solve(self, board: NormalSudoku) -> Tuple[Optional[NormalSudoku], SolverStats]:
        """
        Solve a Sudoku puzzle with timing and memory tracking.
        
        Args:
            board: The puzzle to solve.
            
        Returns:
            Tuple of (solution or None, stats).
        """
        self.reset_stats()
        
        with self._tracking():
            solution = self._solve(board.copy())
        
        self.stats.solved = solution is not None and solution.is_solved()
        return solution, self.stats
    
    @contextmanager
    def _tracking(self) -> Iterator[None]:
        """Measure wall time and, if enabled, peak memory into self.stats."""
        # Leave an outer trace (e.g. a profiler) running
        owns_trace = self.track_memory and not tracemalloc.is_tracing()
        if owns_trace:
            tracemalloc.start()
        
        start_time = time.perf_counter()
        try:
            yield
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            if owns_trace:
                _, peak = tracemalloc.get_traced_memory()
                tracemalloc.stop()
                self.stats.memory_bytes = peak
    
    @abstractmethod
    def _solve(self, board: NormalSudoku) -> Optional[NormalSudoku]:
        """
        Internal solve method to be implemented by subclasses.
        
        Args:
            board: A copy of the puzzle to solve (can be modified).
            
        Returns:
            The solved board, or None if no solution found.
        """
    
    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)
