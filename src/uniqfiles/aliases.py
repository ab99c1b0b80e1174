from uniqfiles.core.models import DuplicateReport
from uniqfiles.core.hasher import DIGEST_ALGORITHMS

REPORT_DUPLICATE_ALIASES = {
    "0": DuplicateReport.NONE,
    "1": DuplicateReport.ALL,
    "2": DuplicateReport.FIRST,
    "none": DuplicateReport.NONE,
    "all": DuplicateReport.ALL,
    "first": DuplicateReport.FIRST,
}

REPORT_DUPLICATE_CHOICES = list(REPORT_DUPLICATE_ALIASES.keys())

REPORT_DUPLICATE_HELP_TEXT = (
    "Which duplicate files to report:\n"
    "  0, none  : do not report duplicates\n"
    "  1, all   : report every file of each duplicate class\n"
    "  2, first : report only the first file of each class (default)\n"
    "Example: file1 contains 'a', file2 'b', file3 'a'.\n"
    "  2 reports file1 and file2, 1 reports all three, 0 reports file2 only.\n"
)

# Option presets, applied in command-line order together with the explicit flags
PRESET_ALIASES = {
    "unique": {"report_unique": True, "report_duplicate": DuplicateReport.NONE},
    "duplicates": {"report_unique": False, "report_duplicate": DuplicateReport.ALL},
}

DIGEST_CHOICES = sorted(DIGEST_ALGORITHMS.keys())

DIGEST_HELP_TEXT = (
    "Content digest used for files whose sizes collide:\n"
    "  xxh128 : xxHash3 128-bit, fast (default)\n"
    "  md5    : MD5\n"
    "  sha256 : SHA-256\n"
)

EPILOG_TEXT = """
Examples:
  List each distinct content once (unique files + first of each duplicate class)
  %(prog)s *.jpg

  Only files that have no duplicate
  %(prog)s -u *.jpg

  Every duplicate file (e.g. to review before deleting)
  %(prog)s -d *.jpg

  Count occurrences of each file's content
  %(prog)s -c ~/Downloads/*

  Feed the result to xargs safely
  %(prog)s -d -0 ~/Downloads/* | xargs -0 ls -l
"""
