"""Visualization utilities for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Chart generator for stack solver benchmark results.
    
    Compares solve time and search steps across board sizes.
    """
    
    # Color per outcome
    COLORS = {
        "solved": "#2ecc71",           # Green
        "exhausted": "#e74c3c",        # Red
        "budget_exceeded": "#f39c12",  # Orange
    }
    
    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.
        
        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)
        
        # Set style
        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")
    
    def generate_all(self) -> List[str]:
        """
        Generate all charts.
        
        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_by_size(),
            self.plot_steps_by_clues(),
        ]
    
    def plot_time_by_size(self) -> str:
        """Create bar chart of average solve time per board size."""
        fig, ax = plt.subplots(figsize=(10, 6))
        
        sizes = sorted(set(r.size for r in self.results))
        labels = [f"{s}x{s}" for s in sizes]
        avg_times = [
            np.mean([r.time_seconds for r in self.results if r.size == s])
            for s in sizes
        ]
        
        bars = ax.bar(labels, avg_times, edgecolor='black', linewidth=0.5)
        
        # Add value labels on bars
        for bar, avg in zip(bars, avg_times):
            ax.annotate(f'{avg:.4f}s',
                       xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                       xytext=(0, 3),
                       textcoords="offset points",
                       ha='center', va='bottom', fontsize=10)
        
        ax.set_xlabel('Board Size', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Average Solve Time by Board Size', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)
        
        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_by_size.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)
        
        return path
    
    def plot_steps_by_clues(self) -> str:
        """Create scatter plot of search steps against the number of clues."""
        fig, ax = plt.subplots(figsize=(10, 6))
        
        sns.scatterplot(
            x=[r.clues for r in self.results],
            y=[r.iterations for r in self.results],
            hue=[r.outcome for r in self.results],
            style=[f"{r.size}x{r.size}" for r in self.results],
            palette=self.COLORS,
            ax=ax
        )
        
        ax.set_yscale('log')
        ax.set_xlabel('Clues', fontsize=12)
        ax.set_ylabel('Boards Popped (log scale)', fontsize=12)
        ax.set_title('Search Steps by Clue Count', fontsize=14, fontweight='bold')
        
        plt.tight_layout()
        path = os.path.join(self.output_dir, "steps_by_clues.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)
        
        return path
