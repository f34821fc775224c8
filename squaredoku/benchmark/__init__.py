"""Benchmarking module for the stack solver."""

from .benchmark import Benchmark, BenchmarkResult, load_puzzles

__all__ = ["Benchmark", "BenchmarkResult", "load_puzzles"]
