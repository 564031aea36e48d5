"""Command-line interface for the Sudoku grid generator."""

import argparse
import logging
import sys

from tqdm import tqdm

from .core.errors import SudokuError
from .generator import SudokuGenerator, Difficulty, mask
from .benchmark import GenerationBenchmark
from .benchmark.visualizer import Visualizer


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        description="Sudoku Grid Generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 medium difficulty puzzles
  python -m sudokugen.cli generate --count 5 --difficulty medium

  # Remove exactly 6 digits per row, column and quadrant
  python -m sudokugen.cli generate --remove 6 --show-solution

  # Measure the generator over 100 grids
  python -m sudokugen.cli benchmark --runs 100 --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log the generator's row retries and backtracks"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d",
        choices=[d.value for d in Difficulty],
        default="medium",
        help="Difficulty level (default: medium)"
    )
    gen_parser.add_argument(
        "--remove", "-r", type=int, default=None,
        help="Digits to remove per row, column and quadrant (0-9); overrides --difficulty"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--show-solution", action="store_true",
        help="Also print the solved grid"
    )
    gen_parser.add_argument(
        "--show-budget", action="store_true",
        help="Print the removal budget left in each row, column and quadrant"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Benchmark the grid generator")
    bench_parser.add_argument(
        "--runs", "-n", type=int, default=50,
        help="Number of grids to generate (default: 50)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    bench_parser.add_argument(
        "--max-backtracks", type=int, default=10_000,
        help="Row step-backs allowed per grid before giving up (default: 10000)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "generate":
            cmd_generate(args)
        elif args.command == "benchmark":
            cmd_benchmark(args)
    except SudokuError as e:
        print(f"Error: {e}")
        sys.exit(1)


def cmd_generate(args):
    """Handle the generate command."""
    generator = SudokuGenerator(seed=args.seed)
    if args.remove is not None:
        per_unit = args.remove
        label = f"{per_unit} removed per unit"
    else:
        per_unit = Difficulty(args.difficulty).removals_per_unit
        label = args.difficulty

    for i in tqdm(range(1, args.count + 1), desc="Generating", disable=args.count < 2):
        solution = generator.generate()
        puzzle, budget = mask(solution, per_unit, rng=generator.rng)

        print(f"\n--- Puzzle {i} ({label}, {puzzle.count_filled()} clues) ---")
        print(puzzle)

        if args.show_solution:
            print("\nSolution:")
            print(solution)

        if args.show_budget:
            print("\nRemaining removal budget:")
            print(budget)

    print(f"\nTotal puzzles generated: {args.count}")


def cmd_benchmark(args):
    """Handle the benchmark command."""
    if args.runs < 1:
        print("Error: --runs must be at least 1")
        sys.exit(1)

    print("=" * 60)
    print("SUDOKU GENERATOR BENCHMARK")
    print("=" * 60)
    print(f"Runs: {args.runs}")
    print(f"Seed: {args.seed}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    benchmark = GenerationBenchmark(
        runs=args.runs,
        seed=args.seed,
        max_backtracks=args.max_backtracks
    )
    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    print(f"  Valid grids: {summary['validity']:.1f}% ({summary['total_valid']}/{summary['total_runs']})")
    print(f"  Avg Time: {summary['avg_time_seconds']:.4f}s")
    print(f"  Avg Backtracks: {summary['avg_backtracks']:.2f} (max {summary['max_backtracks']})")
    print(f"  Avg Row Retries: {summary['avg_row_retries']:.2f} (max {summary['max_row_retries']})")
    print(f"  Retries by row: {summary['retries_by_row']}")

    benchmark.save_results(args.output)

    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
