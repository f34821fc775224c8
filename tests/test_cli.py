"""Tests for the command-line interface."""

import matplotlib
matplotlib.use("Agg")

from squaredoku.cli import main


def test_solve(capsys):
    """Test solving a puzzle from the command line."""
    assert main(["solve", "--puzzle", "0034341200434321"]) == 0
    out = capsys.readouterr().out
    assert "Solved" in out
    assert "1234341221434321" in out or "2134341212434321" in out


def test_solve_unsolvable(capsys):
    """Test the exit code for an unsolvable puzzle."""
    assert main(["solve", "--puzzle", "1100" + "0" * 12]) == 2
    assert "No solution" in capsys.readouterr().out


def test_solve_budget(capsys):
    """Test the exit code when the step budget runs out."""
    assert main(["solve", "--puzzle", "0" * 81, "--max-steps", "10"]) == 2
    assert "budget" in capsys.readouterr().out


def test_bad_puzzle():
    """Test that an unparseable puzzle fails."""
    assert main(["solve", "--puzzle", "123"]) == 1


def test_bad_budget():
    """Test that a non-positive budget fails."""
    assert main(["solve", "--puzzle", "0" * 16, "--max-steps", "0"]) == 1


def test_check(capsys):
    """Test counting solutions."""
    assert main(["check", "--puzzle", "0" * 16, "--limit", "0"]) == 0
    out = capsys.readouterr().out
    assert "Solutions: 288" in out
    assert "Unique: no" in out


def test_check_unique(capsys):
    """Test the verdict for a unique puzzle."""
    assert main(["check", "--puzzle", "1234341221434320"]) == 0
    out = capsys.readouterr().out
    assert "Solutions: 1" in out
    assert "Unique: yes" in out


def test_benchmark(tmp_path, capsys):
    """Test the benchmark command end to end."""
    puzzles = tmp_path / "puzzles.txt"
    puzzles.write_text("0034341200434321\n1234341221434320\n")
    output = tmp_path / "results"
    
    assert main(["benchmark", "--input", str(puzzles), "--output", str(output)]) == 0
    assert (output / "benchmark_results.json").exists()
    assert (output / "time_by_size.png").exists()


def test_no_command(capsys):
    """Test that running without a command prints help."""
    assert main([]) == 1
