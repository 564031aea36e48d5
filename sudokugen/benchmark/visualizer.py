"""Visualization utilities for generation benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Chart generator for generation benchmark results.

    Shows how long grids take to build and where the backtracking happens.
    """

    COLOR = "#3498db"

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

        sns.set_theme(style="whitegrid")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_distribution(),
            self.plot_backtracks_distribution(),
            self.plot_retries_by_row(),
        ]

    def _save(self, name: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, name)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        return path

    def plot_time_distribution(self) -> str:
        """Histogram of generation times."""
        fig, ax = plt.subplots(figsize=(10, 6))

        times = [r.time_seconds for r in self.results]
        sns.histplot(times, ax=ax, color=self.COLOR, edgecolor='black', linewidth=0.5)
        ax.axvline(np.mean(times), color='gray', linestyle='--', alpha=0.6,
                   label=f'mean {np.mean(times):.4f}s')

        ax.set_xlabel('Time (seconds)', fontsize=12)
        ax.set_ylabel('Grids', fontsize=12)
        ax.set_title('Grid Generation Time', fontsize=14, fontweight='bold')
        ax.legend()

        return self._save("time_distribution.png")

    def plot_backtracks_distribution(self) -> str:
        """Histogram of cross-row backtracks per grid."""
        fig, ax = plt.subplots(figsize=(10, 6))

        backtracks = [r.backtracks for r in self.results]
        sns.histplot(backtracks, ax=ax, discrete=True, color="#e74c3c",
                     edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Backtracks', fontsize=12)
        ax.set_ylabel('Grids', fontsize=12)
        ax.set_title('Row Backtracks per Grid', fontsize=14, fontweight='bold')

        return self._save("backtracks_distribution.png")

    def plot_retries_by_row(self) -> str:
        """Bar chart of how often each row had to be restarted."""
        fig, ax = plt.subplots(figsize=(10, 6))

        rows = len(self.results[0].retries_by_row) if self.results else 0
        totals = [sum(r.retries_by_row[y] for r in self.results) for y in range(rows)]
        bars = ax.bar(np.arange(rows), totals, color=self.COLOR, edgecolor='black', linewidth=0.5)

        for bar, total in zip(bars, totals):
            ax.annotate(f'{total}',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Row', fontsize=12)
        ax.set_ylabel('Restarts', fontsize=12)
        ax.set_title('Row Restarts Across All Runs', fontsize=14, fontweight='bold')
        ax.set_xticks(np.arange(rows))
        ax.set_ylim(bottom=0)

        return self._save("retries_by_row.png")
