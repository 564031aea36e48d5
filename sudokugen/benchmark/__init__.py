"""Benchmark module for measuring the grid generator."""

from .benchmark import GenerationBenchmark, BenchmarkResult
from .visualizer import Visualizer

__all__ = ["GenerationBenchmark", "BenchmarkResult", "Visualizer"]
