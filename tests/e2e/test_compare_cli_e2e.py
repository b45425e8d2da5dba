"""End-to-end tests for the csvprettydiff command.

This module runs the command as a subprocess, the way it is used from a
shell, and checks the complete pipeline from files on disk to printed output.
"""

import subprocess
import sys

import pytest


def run_cli(*args, cwd=None):
    """Run ``python -m csvprettydiff`` with configuration files disabled."""
    return subprocess.run(
        [sys.executable, "-m", "csvprettydiff", *args, "--no-config"],
        capture_output=True,
        text=True,
        encoding="utf-8",
        cwd=cwd,
        timeout=60,
    )


@pytest.mark.e2e
@pytest.mark.cli
@pytest.mark.slow
class TestCompareCLI:
    """End-to-end tests for comparing two files."""

    def test_diff_of_report_exports(self, tmp_path):
        """Test two exports with banners and a changed value."""
        old = tmp_path / "sales-2023.csv"
        new = tmp_path / "sales-2024.csv"
        old.write_text("Sales export\nregion,total\nnorth,100\nsouth,90\n", encoding="utf-8")
        new.write_text("Sales export\nregion,total\nnorth,100\nsouth,1250\n", encoding="utf-8")

        result = run_cli(str(old), str(new), "--color", "never")

        assert result.returncode == 0, result.stderr
        lines = result.stdout.splitlines()
        assert "-| south  | 90    |" in lines
        assert "+| south  | 1250  |" in lines
        assert " | north  | 100   |" in lines

    def test_print_simple(self, tmp_path):
        """Test printing both files in the simple layout."""
        old = tmp_path / "a.tsv"
        new = tmp_path / "b.tsv"
        old.write_text("名前\tage\n太郎\t3\n", encoding="utf-8")
        new.write_text("name\tage\nbob\t40\n", encoding="utf-8")

        result = run_cli(str(old), str(new), "--tsv", "--format", "simple", "--print")

        assert result.returncode == 0, result.stderr
        assert " 名前   age\n------ -----\n 太郎   3\n" in result.stdout
        assert " name   age\n------ -----\n bob    40\n" in result.stdout

    def test_missing_file_exit_code(self, tmp_path):
        """Test the exit code for a missing input file."""
        existing = tmp_path / "a.csv"
        existing.write_text("a\n", encoding="utf-8")

        result = run_cli(str(existing), str(tmp_path / "missing.csv"))

        assert result.returncode == 4
        assert "Source file not found" in result.stderr

    def test_malformed_exit_code(self, tmp_path):
        """Test the exit code for malformed input."""
        bad = tmp_path / "bad.csv"
        good = tmp_path / "good.csv"
        bad.write_text('a,b\n"unterminated\n', encoding="utf-8")
        good.write_text("a,b\n", encoding="utf-8")

        result = run_cli(str(bad), str(good))

        assert result.returncode == 6
        assert "Error:" in result.stderr

    def test_verbose_logs_skipped_lines(self, tmp_path):
        """Test --verbose reports preamble lines on stderr."""
        old = tmp_path / "a.csv"
        new = tmp_path / "b.csv"
        old.write_text("title\na,b\n1,2\n", encoding="utf-8")
        new.write_text("a,b\n1,2\n", encoding="utf-8")

        result = run_cli(str(old), str(new), "--verbose")

        assert result.returncode == 0
        assert "skipping preceding line 1: 'title'" in result.stderr
