"""Benchmarking the stack solver over a set of puzzles."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import json
import logging
import os

from tqdm import tqdm

from ..core.board import NormalSudoku
from ..solvers import SearchOutcome, StackSolver

log = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle_id: int
    size: int
    clues: int
    solved: bool
    outcome: str
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    unique: Optional[bool] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "size": self.size,
            "clues": self.clues,
            "solved": self.solved,
            "outcome": self.outcome,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "unique": self.unique,
            **self.extra
        }


def load_puzzles(path: str) -> List[NormalSudoku]:
    """
    Load puzzles from a file.
    
    JSON files hold a list of puzzle strings or of objects with a
    "puzzle" key. Any other file holds one puzzle string per line; blank
    lines and lines starting with '#' are skipped.
    """
    with open(path, "r") as f:
        if path.endswith(".json"):
            entries = json.load(f)
            strings = [e["puzzle"] if isinstance(e, dict) else e for e in entries]
        else:
            strings = [
                line.strip() for line in f
                if line.strip() and not line.lstrip().startswith("#")
            ]
    
    return [NormalSudoku.from_string(s) for s in strings]


class Benchmark:
    """
    Runs the stack solver on each puzzle and collects performance metrics.
    """
    
    def __init__(
        self,
        puzzles: List[NormalSudoku],
        max_steps: Optional[int] = None,
        check_uniqueness: bool = False
    ):
        """
        Initialize the benchmark.
        
        Args:
            puzzles: Boards to solve.
            max_steps: Step budget per puzzle (None for unbounded).
            check_uniqueness: Also count solutions up to two for each puzzle.
        """
        self.puzzles = puzzles
        self.max_steps = max_steps
        self.check_uniqueness = check_uniqueness
        self.solver = StackSolver(max_steps=max_steps, track_memory=True)
        self.results: List[BenchmarkResult] = []
    
    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the benchmark.
        
        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []
        
        for puzzle_id, puzzle in enumerate(tqdm(self.puzzles, desc="Benchmarking", disable=not show_progress)):
            self.results.append(self._run_single(puzzle_id, puzzle))
        
        return self.results
    
    def _run_single(self, puzzle_id: int, puzzle: NormalSudoku) -> BenchmarkResult:
        """Run the solver on a single puzzle."""
        _, stats = self.solver.solve(puzzle)
        
        result = BenchmarkResult(
            puzzle_id=puzzle_id,
            size=puzzle.side,
            clues=puzzle.count_filled(),
            solved=stats.solved,
            outcome=stats.outcome.value,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            extra={"max_frontier": stats.max_frontier}
        )
        
        if self.check_uniqueness:
            count, count_stats = StackSolver(max_steps=self.max_steps).count_solutions(puzzle, limit=2)
            if count_stats.outcome is SearchOutcome.BUDGET_EXCEEDED and count < 2:
                result.extra["uniqueness"] = "unknown"
            else:
                result.unique = count == 1
        
        log.debug("Puzzle %d: %s in %.4fs", puzzle_id, result.outcome, result.time_seconds)
        return result
    
    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics grouped by board size."""
        summary = {
            "total_puzzles": len(self.results),
            "max_steps": self.max_steps,
            "results_by_size": {}
        }
        
        for size in sorted(set(r.size for r in self.results)):
            size_results = [r for r in self.results if r.size == size]
            solved = [r for r in size_results if r.solved]
            times = [r.time_seconds for r in size_results]
            steps = [r.iterations for r in size_results]
            
            summary["results_by_size"][str(size)] = {
                "accuracy": len(solved) / len(size_results) * 100,
                "avg_time_seconds": sum(times) / len(times),
                "max_time_seconds": max(times),
                "min_time_seconds": min(times),
                "avg_iterations": sum(steps) / len(steps),
                "budget_exceeded": sum(1 for r in size_results if r.outcome == SearchOutcome.BUDGET_EXCEEDED.value),
                "total_solved": len(solved),
                "total_tested": len(size_results)
            }
        
        return summary
    
    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and summary to JSON files."""
        os.makedirs(output_dir, exist_ok=True)
        
        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)
        
        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)
        
        log.info("Results saved to %s", output_dir)
