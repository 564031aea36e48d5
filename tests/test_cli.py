"""Tests for the command-line interface."""

import pytest

from sudokugen.cli import build_parser, main


class TestCLI:
    """Tests for the generate and benchmark commands."""

    def test_no_command_exits(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 1

    def test_generate(self, capsys):
        main(["generate", "--seed", "1", "--remove", "3"])
        out = capsys.readouterr().out
        assert "Puzzle 1 (3 removed per unit" in out
        assert " ------- ------- ------- " in out
        assert "Total puzzles generated: 1" in out

    def test_generate_with_solution_and_budget(self, capsys):
        main(["generate", "--seed", "2", "--difficulty", "hard", "--show-solution", "--show-budget"])
        out = capsys.readouterr().out
        assert "hard" in out
        assert "Solution:" in out
        assert "Remaining removal budget:" in out
        assert "    ------- ------- ------- " in out

    def test_generate_seed_is_reproducible(self, capsys):
        main(["generate", "--seed", "5", "--count", "2"])
        first = capsys.readouterr().out
        main(["generate", "--seed", "5", "--count", "2"])
        second = capsys.readouterr().out
        assert first == second

    def test_invalid_budget_reports_error(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["generate", "--seed", "1", "--remove", "12"])
        assert excinfo.value.code == 1
        assert "Error:" in capsys.readouterr().out

    def test_benchmark(self, tmp_path, capsys):
        main(["benchmark", "--runs", "2", "--seed", "3", "--output", str(tmp_path), "--no-charts"])
        out = capsys.readouterr().out
        assert "Valid grids: 100.0% (2/2)" in out
        assert (tmp_path / "benchmark_results.json").exists()
        assert (tmp_path / "benchmark_summary.json").exists()

    def test_parser_defaults(self):
        args = build_parser().parse_args(["generate"])
        assert args.count == 1
        assert args.difficulty == "medium"
        assert args.remove is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
