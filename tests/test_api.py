"""
Tests for the one-call uniq_files() library entry point.
"""
import logging

import pytest
from uniqfiles import uniq_files, ConfigurationError, DuplicateReport


class TestUniqFiles:
    def test_documented_example(self, abc_files):
        a, b, c = abc_files["A"], abc_files["B"], abc_files["C"]

        assert uniq_files([a, b, c]) == sorted([a, b])
        assert uniq_files([a, b, c], report_duplicate=1) == sorted([a, b, c])
        assert uniq_files([a, b, c], report_duplicate=0) == [b]
        assert uniq_files([a, b, c], count=True) == {a: 2, b: 1, c: 2}

    def test_accepts_enum_and_digest_options(self, abc_files):
        a, b, c = abc_files["A"], abc_files["B"], abc_files["C"]

        files = uniq_files(
            [a, b, c], report_unique=False, report_duplicate=DuplicateReport.ALL, digest="sha256", workers=2
        )

        assert files == sorted([a, c])

    def test_diagnostics_sink(self, temp_dir, abc_files):
        seen = []

        uniq_files([abc_files["A"], str(temp_dir / "nope")], diagnostics=seen.append)

        assert [d.path for d in seen] == [str(temp_dir / "nope")]

    def test_skipped_files_are_logged_as_warnings(self, temp_dir, abc_files, caplog):
        missing = str(temp_dir / "missing.txt")

        with caplog.at_level(logging.WARNING, logger="uniqfiles"):
            files = uniq_files([abc_files["A"], missing])

        assert files == [abc_files["A"]]
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert any(missing in r.getMessage() for r in warnings)

    def test_empty_list_raises(self):
        with pytest.raises(ConfigurationError):
            uniq_files([])

    def test_invalid_option_raises(self, abc_files):
        with pytest.raises(ConfigurationError):
            uniq_files([abc_files["A"]], report_duplicate=5)
