#!/usr/bin/env python3
"""
uniq-files CLI: report or omit files with duplicate content.
Interface is a bit like the `uniq` Unix command: paths in, selected paths out.
Nothing is ever modified or deleted; the output is meant to be reviewed or piped.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import os
import sys
import time
from typing import List, Dict, Optional, NoReturn, Union

from uniqfiles.aliases import (
    DIGEST_CHOICES, DIGEST_HELP_TEXT, EPILOG_TEXT, PRESET_ALIASES,
    REPORT_DUPLICATE_ALIASES, REPORT_DUPLICATE_CHOICES, REPORT_DUPLICATE_HELP_TEXT,
)
from uniqfiles.commands import UniqFilesCommand, CommandResult
from uniqfiles.core.errors import ConfigurationError, OperationCancelled
from uniqfiles.core.models import DuplicateReport, ReportParams, DEFAULT_CHUNK_SIZE, DEFAULT_DIGEST
from uniqfiles.logging_config import configure_logging
from uniqfiles.utils.convert_utils import ConvertUtils


class _PresetAction(argparse.Action):
    """Sets several options at once (-u, -d); later flags still override it."""

    def __init__(self, option_strings, dest, preset: str, **kwargs):
        self.preset = preset
        super().__init__(option_strings, dest, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        for key, value in PRESET_ALIASES[self.preset].items():
            setattr(namespace, key, value)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="uniq-files",
            description="Report or omit duplicate file contents",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "files",
            nargs="*",
            metavar="FILE",
            help="Files to check, in the order that decides which duplicate comes first"
        )

        # Reporting options (processed in command-line order)
        parser.add_argument(
            "-u", "--unique",
            action=_PresetAction,
            preset="unique",
            dest="report_unique",
            help="Only unique files: alias for --report-unique --report-duplicate=0"
        )
        parser.add_argument(
            "-d", "--duplicates",
            action=_PresetAction,
            preset="duplicates",
            dest="report_unique",
            help="Only duplicates, all of them: alias for --no-report-unique --report-duplicate=1"
        )
        parser.add_argument(
            "--report-unique",
            action="store_const",
            const=True,
            dest="report_unique",
            help="Report files whose content is found once (default)"
        )
        parser.add_argument(
            "--no-report-unique",
            action="store_const",
            const=False,
            dest="report_unique",
            help="Do not report unique files"
        )
        parser.add_argument(
            "--report-duplicate",
            choices=REPORT_DUPLICATE_CHOICES,
            metavar="{0,1,2}",
            type=str.lower,
            help=REPORT_DUPLICATE_HELP_TEXT
        )
        parser.add_argument(
            "--count", "-c",
            action="store_true",
            help="Print each file's number of occurrences instead of filtering\n"
                 "(1 = unique, 2 = one duplicate, and so on)"
        )

        # Engine options
        parser.add_argument(
            "--digest",
            choices=DIGEST_CHOICES,
            default=DEFAULT_DIGEST,
            type=str.lower,
            help=DIGEST_HELP_TEXT
        )
        parser.add_argument(
            "--workers", "-j",
            default=1,
            type=int,
            metavar='N',
            help="Number of threads used to stat and hash files. Default: 1"
        )
        parser.add_argument(
            "--chunk-size",
            default=str(DEFAULT_CHUNK_SIZE),
            type=str,
            metavar='SIZE',
            help="Read buffer per file while hashing (e.g., 64K, 1M). Default: 1M"
        )

        # Output options
        parser.add_argument(
            "--null", "-0",
            action="store_true",
            help="Terminate output lines with NUL instead of newline"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Do not print warnings about skipped files"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and statistics"
        )

        parser.set_defaults(report_unique=True, report_duplicate=None)
        return parser.parse_args(args)

    def create_params(self, args: argparse.Namespace) -> ReportParams:
        """Create ReportParams from CLI arguments."""
        try:
            chunk_size = ConvertUtils.human_to_bytes(args.chunk_size)
        except ValueError as e:
            self.error_exit(f"Invalid size format: {e}")

        report_duplicate = args.report_duplicate
        if report_duplicate is None:
            report_duplicate = DuplicateReport.FIRST
        elif not isinstance(report_duplicate, DuplicateReport):
            report_duplicate = REPORT_DUPLICATE_ALIASES[report_duplicate]

        try:
            return ReportParams(
                report_unique=args.report_unique,
                report_duplicate=report_duplicate,
                count=args.count,
                digest=args.digest,
                workers=args.workers,
                chunk_size=chunk_size,
            )
        except ConfigurationError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        sys.stderr.flush()

    @staticmethod
    def stopped_flag() -> bool:
        """Check if operation should stop (placeholder for signal handling)."""
        return False

    def run_classification(self, files: List[str], params: ReportParams) -> CommandResult:
        """Execute the classify-and-report workflow."""
        command = UniqFilesCommand()
        result = command.execute(
            files,
            params,
            progress_callback=self.progress_callback if self.verbose else None,
            stopped_flag=self.stopped_flag
        )
        if not result.ok:
            self.error_exit(result.message)

        if self.verbose:
            sys.stderr.write("\n")
            print(result.stats.print_summary(), file=sys.stderr)
            if result.diagnostics:
                print(f"Skipped files: {len(result.diagnostics)}", file=sys.stderr)
        return result

    @staticmethod
    def format_results(payload: Union[List[str], Dict[str, int]]) -> List[str]:
        """Lines to print: paths, or '<count>\\t<path>' sorted by path in count mode."""
        if isinstance(payload, dict):
            return [f"{payload[path]}\t{path}" for path in sorted(payload)]
        return list(payload)

    def output_results(self, payload: Union[List[str], Dict[str, int]], null: bool = False) -> None:
        terminator = "\0" if null else "\n"
        for line in self.format_results(payload):
            sys.stdout.write(line + terminator)
        sys.stdout.flush()

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        configure_logging(verbose=self.verbose, quiet=self.quiet)

        params = self.create_params(args)
        result = self.run_classification(args.files, params)
        self.output_results(result.payload, null=args.null)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except (KeyboardInterrupt, OperationCancelled):
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
