"""
Tests for dewey.harness module.

Tests the all-pairs regression harness including:
- Outcome counts on a small mixed list
- Divergence detection (irreflexive and asymmetric results)
- Loading and checking fixture lists from files and URLs
"""

from __future__ import annotations

from pathlib import Path

import pytest
import requests_mock

from dewey.exceptions import FixtureError
from dewey.harness import check_fixture, run_all_pairs
from dewey.results import HarnessResult, PairDivergence
from dewey.versioning import Ordering, Version


class TestRunAllPairs:
    """Tests for run_all_pairs."""

    def test_counts(self, sample_versions):
        """Test outcome counts over every ordered pair."""
        result = run_all_pairs(sample_versions)

        assert result.versions == 5
        assert result.pairs == 25
        assert result.equal == 7  # 5 self-pairs plus "1" / "1.0" both ways
        assert result.less == 8
        assert result.greater == 8
        assert result.incomparable == 2  # "7.3.2" / "7.3ce.1" both ways
        assert result.ok
        assert result.source == "<memory>"

    def test_counts_add_up(self, versions_path: Path):
        """Test that every pair lands in exactly one bucket."""
        from dewey.io import load_versions

        versions = load_versions(versions_path)
        result = run_all_pairs(versions)

        total = result.less + result.equal + result.greater + result.incomparable
        assert total == result.pairs == len(versions) ** 2
        assert result.less == result.greater
        assert result.ok

    def test_empty_list(self):
        """Test that an empty list is trivially fine."""
        result = run_all_pairs([])
        assert result.pairs == 0
        assert result.ok

    def test_detects_divergences(self, monkeypatch):
        """Test that a broken comparator is reported."""
        monkeypatch.setattr(Version, "compare", lambda self, other: Ordering.LESS)

        result = run_all_pairs(["a", "b"])

        assert not result.ok
        assert result.irreflexive == ("a", "b")
        assert result.asymmetric == (
            PairDivergence("a", "b", Ordering.LESS, Ordering.LESS),
        )
        assert result.less == 4

    def test_incomparable_one_way_is_a_divergence(self, monkeypatch):
        """Test that None must be mirrored by None."""
        real_compare = Version.compare

        def half_broken(self, other):
            if self.text == "x":
                return None
            return real_compare(self, other)

        monkeypatch.setattr(Version, "compare", half_broken)
        result = run_all_pairs(["x", "y"])

        assert result.irreflexive == ("x",)
        assert result.asymmetric == (PairDivergence("x", "y", None, Ordering.GREATER),)

    def test_overflow_policy_is_used(self):
        """Test that the overflow policy reaches the comparator."""
        big = str(1 << 64)
        wrapped = run_all_pairs([big, "0"])
        saturated = run_all_pairs([big, "0"], overflow="saturate")
        assert wrapped.equal == 4
        assert saturated.equal == 2


class TestCheckFixture:
    """Tests for check_fixture."""

    def test_check_file(self, versions_path: Path):
        """Test a full run over the bundled fixture list."""
        result = check_fixture(versions_path)

        assert isinstance(result, HarnessResult)
        assert result.versions == 44
        assert result.source == str(versions_path)
        assert result.incomparable > 0
        assert result.ok

    def test_check_url(self):
        """Test a run over a remote list."""
        url = "https://example.com/versions.txt"
        with requests_mock.Mocker() as m:
            m.get(url, text="1\n1rc1\n")
            result = check_fixture(url)

        assert result.pairs == 4
        assert result.less == 1
        assert result.greater == 1
        assert result.equal == 2

    def test_step_output(self, versions_path: Path, debug_logger, log_stream):
        """Test progress reporting through the logger."""
        check_fixture(versions_path, logger=debug_logger)
        output = log_stream.getvalue()
        assert "[1/2] Loading fixture list:" in output
        assert f"[2/2] Comparing {44 * 44} pairs..." in output
        assert "[HARNESS] less=" in output

    def test_missing_fixture(self, tmp_test_dir: Path):
        """Test that load errors propagate."""
        with pytest.raises(FixtureError):
            check_fixture(tmp_test_dir / "nope.txt")
