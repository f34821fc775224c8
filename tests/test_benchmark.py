"""Tests for the benchmark runner and charts."""

import json
import os

import matplotlib
matplotlib.use("Agg")

import pytest
from squaredoku.benchmark import Benchmark, load_puzzles
from squaredoku.benchmark.visualizer import Visualizer
from squaredoku.core.board import NormalSudoku


PUZZLES = [
    "0034" "3412" "0043" "4321",
    "1234" "3412" "2143" "4321",
    "1234" "3412" "2143" "4310",
    "0" * 81,
]


@pytest.fixture
def boards():
    return [NormalSudoku.from_string(s) for s in PUZZLES]


class TestBenchmark:
    """Tests for Benchmark."""
    
    def test_run(self, boards):
        """Test that every puzzle gets a result."""
        benchmark = Benchmark(boards, max_steps=50, check_uniqueness=True)
        results = benchmark.run(show_progress=False)
        
        assert len(results) == 4
        assert [r.outcome for r in results] == ["solved", "solved", "exhausted", "budget_exceeded"]
        assert results[0].unique is False
        assert results[1].unique is True
        assert results[2].unique is False
        assert results[3].unique is None
        assert results[3].extra["uniqueness"] == "unknown"
    
    def test_summary(self, boards):
        """Test summary grouping by board size."""
        benchmark = Benchmark(boards, max_steps=50)
        benchmark.run(show_progress=False)
        summary = benchmark.get_summary()
        
        assert summary["total_puzzles"] == 4
        assert summary["results_by_size"]["4"]["total_tested"] == 3
        assert summary["results_by_size"]["4"]["total_solved"] == 2
        assert summary["results_by_size"]["9"]["budget_exceeded"] == 1
    
    def test_save_results(self, boards, tmp_path):
        """Test writing result files."""
        benchmark = Benchmark(boards[:2])
        benchmark.run(show_progress=False)
        benchmark.save_results(str(tmp_path))
        
        with open(tmp_path / "benchmark_results.json") as f:
            results = json.load(f)
        assert len(results) == 2
        assert results[1]["solved"] is True
        assert os.path.exists(tmp_path / "benchmark_summary.json")


class TestLoadPuzzles:
    """Tests for reading puzzle files."""
    
    def test_text_file(self, tmp_path):
        """Test one puzzle per line with comments."""
        path = tmp_path / "puzzles.txt"
        path.write_text("# tiny\n" + PUZZLES[0] + "\n\n" + PUZZLES[3] + "\n")
        
        boards = load_puzzles(str(path))
        assert [b.side for b in boards] == [4, 9]
    
    def test_json_file(self, tmp_path):
        """Test JSON lists of strings and objects."""
        path = tmp_path / "puzzles.json"
        path.write_text(json.dumps([PUZZLES[0], {"puzzle": PUZZLES[1]}]))
        
        boards = load_puzzles(str(path))
        assert boards[1].is_solved()


class TestVisualizer:
    """Tests for chart generation."""
    
    def test_generate_all(self, boards, tmp_path):
        """Test that charts are written."""
        benchmark = Benchmark(boards, max_steps=50)
        results = benchmark.run(show_progress=False)
        
        charts = Visualizer(results, str(tmp_path)).generate_all()
        
        assert len(charts) == 2
        for chart in charts:
            assert os.path.exists(chart)
