"""Command-line interface for the squaredoku solver."""

import argparse
import logging
import sys

from .core.board import NormalSudoku
from .core.exceptions import InvalidArgumentError
from .solvers import SearchOutcome, StackSolver

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="squaredoku",
        description="Exhaustive solver for 4x4 to 49x49 Sudoku boards",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a 4x4 puzzle
  squaredoku solve --puzzle "1.3..4.1..4.4..1"

  # Check that a puzzle has exactly one solution
  squaredoku check --puzzle "530070000600195000..."

  # Benchmark every puzzle of a file
  squaredoku benchmark --input puzzles.txt --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    
    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string, one character per field ('0' or '.' for empty)"
    )
    solve_parser.add_argument(
        "--max-steps", type=int, default=None,
        help="Give up after popping this many boards (default: no limit)"
    )
    
    # Check command
    check_parser = subparsers.add_parser("check", help="Count the solutions of a puzzle")
    check_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string, one character per field ('0' or '.' for empty)"
    )
    check_parser.add_argument(
        "--limit", "-l", type=int, default=2,
        help="Stop counting after this many solutions, 0 for all (default: 2)"
    )
    check_parser.add_argument(
        "--max-steps", type=int, default=None,
        help="Give up after popping this many boards (default: no limit)"
    )
    
    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Benchmark the solver on a puzzle file")
    bench_parser.add_argument(
        "--input", "-i", type=str, required=True,
        help="JSON list or text file with one puzzle string per line"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--max-steps", type=int, default=None,
        help="Step budget per puzzle (default: no limit)"
    )
    bench_parser.add_argument(
        "--check-uniqueness", action="store_true",
        help="Also check each puzzle for a unique solution"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )
    
    return parser


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )
    
    if args.command is None:
        parser.print_help()
        return 1
    
    commands = {
        "solve": cmd_solve,
        "check": cmd_check,
        "benchmark": cmd_benchmark,
    }
    try:
        return commands[args.command](args)
    except InvalidArgumentError as e:
        log.error("%s", e)
        return 1


def _parse_puzzle(puzzle: str):
    try:
        return NormalSudoku.from_string(puzzle)
    except InvalidArgumentError as e:
        log.error("Error parsing puzzle: %s", e)
        return None


def cmd_solve(args) -> int:
    """Handle the solve command."""
    board = _parse_puzzle(args.puzzle)
    if board is None:
        return 1
    
    log.info("Solving %dx%d puzzle with %d clues", board.side, board.side, board.count_filled())
    solution, stats = StackSolver(max_steps=args.max_steps, track_memory=True).solve(board)
    
    if stats.solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
        print(solution.to_string())
    elif stats.outcome is SearchOutcome.BUDGET_EXCEEDED:
        print(f"✗ Step budget of {args.max_steps:,} exhausted")
    else:
        print("✗ No solution")
    
    print(f"  Iterations: {stats.iterations:,}")
    print(f"  Backtracks: {stats.backtracks:,}")
    print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
    return 0 if stats.solved else 2


def cmd_check(args) -> int:
    """Handle the check command."""
    board = _parse_puzzle(args.puzzle)
    if board is None:
        return 1
    
    limit = args.limit or None
    count, stats = StackSolver(max_steps=args.max_steps).count_solutions(board, limit=limit)
    
    if stats.outcome is SearchOutcome.BUDGET_EXCEEDED:
        print(f"Found at least {count} solution(s) before the step budget ran out")
        return 2
    
    qualifier = "at least " if stats.outcome is SearchOutcome.LIMIT_REACHED else ""
    print(f"Solutions: {qualifier}{count}")
    print(f"Unique: {'yes' if count == 1 else 'no'}")
    return 0


def cmd_benchmark(args) -> int:
    """Handle the benchmark command."""
    from .benchmark import Benchmark, load_puzzles
    
    try:
        puzzles = load_puzzles(args.input)
    except (OSError, ValueError, KeyError) as e:
        log.error("Could not load puzzles from %s: %s", args.input, e)
        return 1
    
    print("=" * 60)
    print("STACK SOLVER BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {len(puzzles)}")
    print(f"Step budget: {args.max_steps if args.max_steps else 'none'}")
    print(f"Output directory: {args.output}")
    print("=" * 60)
    
    benchmark = Benchmark(
        puzzles,
        max_steps=args.max_steps,
        check_uniqueness=args.check_uniqueness
    )
    results = benchmark.run()
    summary = benchmark.get_summary()
    
    print("\nBy Board Size:")
    print("-" * 50)
    for size, stats in summary["results_by_size"].items():
        print(f"\n{size}x{size}:")
        print(f"  Accuracy: {stats['accuracy']:.1f}% ({stats['total_solved']}/{stats['total_tested']})")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Iterations: {stats['avg_iterations']:.1f}")
    
    benchmark.save_results(args.output)
    
    if not args.no_charts:
        from .benchmark.visualizer import Visualizer
        
        charts = Visualizer(results, args.output).generate_all()
        print(f"\nCharts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
