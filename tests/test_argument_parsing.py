"""
Tests for CLI argument parsing and mapping onto ReportParams.
"""
import sys
from unittest import mock
import pytest
from uniqfiles.cli import CLIApplication
from uniqfiles.core.models import DuplicateReport


def _params(argv):
    app = CLIApplication()
    return app.create_params(app.parse_args(argv))


class TestArgumentParsing:
    """Test CLI argument parsing with argparse."""

    def test_defaults(self):
        params = _params(["a.txt"])

        assert params.report_unique is True
        assert params.report_duplicate is DuplicateReport.FIRST
        assert params.count is False
        assert params.digest == "xxh128"
        assert params.workers == 1

    def test_reads_sys_argv_when_no_args_given(self):
        app = CLIApplication()

        with mock.patch.object(sys, 'argv', ['uniq-files', 'a.txt', 'b.txt']):
            args = app.parse_args()

        assert args.files == ["a.txt", "b.txt"]

    def test_files_are_optional_for_argparse(self):
        """An empty list is rejected by the command layer, not by argparse."""
        assert CLIApplication.parse_args([]).files == []

    @pytest.mark.parametrize("flag, expected", [
        ("0", DuplicateReport.NONE),
        ("1", DuplicateReport.ALL),
        ("2", DuplicateReport.FIRST),
        ("none", DuplicateReport.NONE),
        ("ALL", DuplicateReport.ALL),
        ("first", DuplicateReport.FIRST),
    ])
    def test_report_duplicate_values(self, flag, expected):
        assert _params(["--report-duplicate", flag, "a"]).report_duplicate is expected

    def test_report_duplicate_rejects_unknown(self):
        with pytest.raises(SystemExit):
            CLIApplication.parse_args(["--report-duplicate", "3", "a"])

    def test_unique_alias(self):
        """-u == --report-unique --report-duplicate=0"""
        for flag in ("-u", "--unique"):
            params = _params([flag, "a"])
            assert params.report_unique is True
            assert params.report_duplicate is DuplicateReport.NONE

    def test_duplicates_alias(self):
        """-d == --no-report-unique --report-duplicate=1"""
        for flag in ("-d", "--duplicates"):
            params = _params([flag, "a"])
            assert params.report_unique is False
            assert params.report_duplicate is DuplicateReport.ALL

    def test_later_flags_override_alias(self):
        params = _params(["-d", "--report-duplicate", "2", "a"])
        assert params.report_unique is False
        assert params.report_duplicate is DuplicateReport.FIRST

        params = _params(["--no-report-unique", "-u", "a"])
        assert params.report_unique is True

        params = _params(["-u", "-d", "a"])
        assert params.report_unique is False
        assert params.report_duplicate is DuplicateReport.ALL

    def test_count_and_engine_options(self):
        params = _params(["-c", "--digest", "SHA256", "-j", "4", "--chunk-size", "64K", "a"])

        assert params.count is True
        assert params.digest == "sha256"
        assert params.workers == 4
        assert params.chunk_size == 64 * 1024

    def test_invalid_chunk_size_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _params(["--chunk-size", "huge", "a"])

        assert exc_info.value.code == 1
        assert "Invalid size format" in capsys.readouterr().err

    def test_invalid_workers_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _params(["-j", "0", "a"])

        assert exc_info.value.code == 1
        assert "workers" in capsys.readouterr().err

    def test_unknown_digest_rejected_by_argparse(self):
        with pytest.raises(SystemExit):
            CLIApplication.parse_args(["--digest", "crc32", "a"])
