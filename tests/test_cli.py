"""
Tests for dewey.cli module.

Tests the command line including:
- compare output for every outcome and the overflow flag
- tokens output
- check exit codes for clean lists, load errors and configured fixtures
- configuration errors and --version
"""

from __future__ import annotations

from pathlib import Path
import shutil

import pytest

from dewey import __version__
from dewey.cli import main


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_test_dir: Path, monkeypatch):
    """Run every CLI test from an empty directory so no dewey.yaml is picked up."""
    monkeypatch.chdir(tmp_test_dir)


def run_cli(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestCompare:
    """Tests for 'dewey compare'."""

    @pytest.mark.parametrize(
        "left, right, expected",
        [
            ("1.0", "1rc1", "1.0 > 1rc1"),
            ("1", "1.0", "1 = 1.0"),
            ("1", "1pl1", "1 < 1pl1"),
            ("7.3.2", "7.3ce.1", "7.3.2 and 7.3ce.1 are incomparable"),
        ],
    )
    def test_outcomes(self, capsys, left, right, expected):
        """Test output and exit code for each outcome."""
        assert run_cli(["compare", left, right]) == 0
        assert capsys.readouterr().out.strip() == expected

    def test_overflow_flag(self, capsys):
        """Test that --overflow changes the result past 64 bits."""
        big = str(1 << 64)

        assert run_cli(["compare", big, "0"]) == 0
        assert capsys.readouterr().out.strip() == f"{big} = 0"

        assert run_cli(["compare", big, "0", "--overflow", "saturate"]) == 0
        assert capsys.readouterr().out.strip() == f"{big} > 0"

    def test_overflow_from_config(self, capsys, create_yaml_file):
        """Test that dewey.yaml in the working directory is honored."""
        create_yaml_file("dewey.yaml", {"overflow": "saturate"})
        big = str(1 << 64)

        assert run_cli(["compare", big, "0"]) == 0
        assert capsys.readouterr().out.strip() == f"{big} > 0"

    def test_leading_dash_after_separator(self, capsys):
        """Test versions starting with '-' after '--'."""
        assert run_cli(["compare", "--", "-1", "1"]) == 0
        assert "are incomparable" in capsys.readouterr().out

    def test_bad_config(self, capsys, tmp_test_dir: Path):
        """Test that a config error exits 1 with a message."""
        missing = tmp_test_dir / "missing.yaml"
        assert run_cli(["compare", "1", "2", "--config", str(missing)]) == 1
        assert "Error: file not found" in capsys.readouterr().out


class TestTokens:
    """Tests for 'dewey tokens'."""

    def test_tokens(self, capsys):
        """Test one component per line, ending with End."""
        assert run_cli(["tokens", "1.2pl3"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Num(1)",
            "DashOrDot",
            "Num(2)",
            "PatchLevel",
            "Num(3)",
            "End",
        ]

    def test_tokens_chars(self, capsys):
        """Test fallback characters are shown lower-cased."""
        assert run_cli(["tokens", "Xé"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Char('x')",
            "Char('é')",
            "End",
        ]


class TestCheck:
    """Tests for 'dewey check'."""

    def test_clean_fixture(self, capsys, versions_path: Path):
        """Test a fixture list without divergences."""
        assert run_cli(["check", str(versions_path)]) == 0
        out = capsys.readouterr().out
        assert "HARNESS RESULTS" in out
        assert "Versions:      44" in out
        assert "[SUCCESS] 1 fixture list(s) checked" in out

    def test_missing_fixture(self, capsys, tmp_test_dir: Path):
        """Test that an unreadable list fails the run."""
        assert run_cli(["check", str(tmp_test_dir / "nope.txt")]) == 1
        out = capsys.readouterr().out
        assert "Error: cannot read fixture list" in out
        assert "[FAILED] 1 of 1 fixture list(s) failed." in out

    def test_partial_failure(self, capsys, versions_path: Path, tmp_test_dir: Path):
        """Test that one bad source fails the run but the others still run."""
        code = run_cli(["check", str(versions_path), str(tmp_test_dir / "nope.txt")])
        out = capsys.readouterr().out
        assert code == 1
        assert "HARNESS RESULTS" in out
        assert "[FAILED] 1 of 2 fixture list(s) failed." in out

    def test_no_sources(self, capsys):
        """Test that check needs a source from argv or dewey.yaml."""
        assert run_cli(["check"]) == 1
        assert "no fixture lists given" in capsys.readouterr().out

    def test_configured_fixtures(self, capsys, tmp_test_dir: Path, versions_path: Path, create_yaml_file):
        """Test falling back to fixtures listed in dewey.yaml."""
        shutil.copy(versions_path, tmp_test_dir / "versions.txt")
        create_yaml_file("dewey.yaml", {"fixtures": ["versions.txt"]})

        assert run_cli(["check"]) == 0
        assert "[SUCCESS] 1 fixture list(s) checked" in capsys.readouterr().out

    def test_divergence_exit_code(self, capsys, versions_path: Path, monkeypatch):
        """Test that divergences are reported and exit 1."""
        from dewey.versioning import Ordering, Version

        monkeypatch.setattr(Version, "compare", lambda self, other: Ordering.LESS)

        assert run_cli(["check", str(versions_path)]) == 1
        out = capsys.readouterr().out
        assert "Not equal to themselves (44):" in out
        assert "Asymmetric pairs" in out

    def test_verbose_progress(self, capsys, versions_path: Path):
        """Test that --verbose shows harness details."""
        assert run_cli(["check", str(versions_path), "--verbose"]) == 0
        out = capsys.readouterr().out
        assert "[1/2] Loading fixture list:" in out
        assert "[FIXTURE] Loaded 44 version(s)" in out


def test_version_flag(capsys):
    """Test --version output."""
    assert run_cli(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"dewey {__version__}"


def test_command_required(capsys):
    """Test that a subcommand is required."""
    assert run_cli([]) == 2
