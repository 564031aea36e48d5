"""Benchmarking framework for the grid generator."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import json
import os

from tqdm import tqdm

from ..core.errors import SudokuError
from ..generator import SudokuGenerator


@dataclass
class BenchmarkResult:
    """Results from a single generation run."""
    run_id: int
    valid: bool
    time_seconds: float
    assignments: int
    row_retries: int
    backtracks: int
    retries_by_row: List[int] = field(default_factory=list)
    backtracks_by_row: List[int] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "run_id": self.run_id,
            "valid": self.valid,
            "time_seconds": self.time_seconds,
            "assignments": self.assignments,
            "row_retries": self.row_retries,
            "backtracks": self.backtracks,
            "retries_by_row": self.retries_by_row,
            "backtracks_by_row": self.backtracks_by_row,
            "error": self.error,
        }


class GenerationBenchmark:
    """
    Runs the generator repeatedly and collects how hard each grid was to build.

    Every run shares one seeded generator, so a benchmark is reproducible
    from its seed.
    """

    def __init__(
        self,
        runs: int = 50,
        seed: Optional[int] = None,
        max_backtracks: Optional[int] = 10_000,
    ):
        """
        Initialize the benchmark.

        Args:
            runs: Number of grids to generate.
            seed: Random seed for reproducibility.
            max_backtracks: Backtrack cap handed to the generator.
        """
        self.runs = runs
        self.seed = seed
        self.generator = SudokuGenerator(seed=seed, max_backtracks=max_backtracks)
        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []
        for run_id in tqdm(range(self.runs), desc="Generating", disable=not show_progress):
            self.results.append(self._run_single(run_id))
        return self.results

    def _run_single(self, run_id: int) -> BenchmarkResult:
        """Generate a single grid and record its stats."""
        error = None
        try:
            self.generator.generate()
        except SudokuError as e:
            error = str(e)

        stats = self.generator.stats
        return BenchmarkResult(
            run_id=run_id,
            valid=stats.valid and error is None,
            time_seconds=stats.time_seconds,
            assignments=stats.assignments,
            row_retries=stats.row_retries,
            backtracks=stats.backtracks,
            retries_by_row=list(stats.retries_by_row),
            backtracks_by_row=list(stats.backtracks_by_row),
            error=error,
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary: Dict[str, Any] = {
            "total_runs": len(self.results),
            "seed": self.seed,
        }
        if not self.results:
            return summary

        valid = [r for r in self.results if r.valid]
        times = [r.time_seconds for r in self.results]
        backtracks = [r.backtracks for r in self.results]
        retries = [r.row_retries for r in self.results]

        summary.update({
            "validity": len(valid) / len(self.results) * 100,
            "total_valid": len(valid),
            "avg_time_seconds": sum(times) / len(times),
            "max_time_seconds": max(times),
            "min_time_seconds": min(times),
            "avg_backtracks": sum(backtracks) / len(backtracks),
            "max_backtracks": max(backtracks),
            "avg_row_retries": sum(retries) / len(retries),
            "max_row_retries": max(retries),
            "retries_by_row": [
                sum(r.retries_by_row[y] for r in self.results)
                for y in range(len(self.results[0].retries_by_row))
            ],
            "errors": [r.error for r in self.results if r.error],
        })
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

        print(f"Results saved to {output_dir}")
