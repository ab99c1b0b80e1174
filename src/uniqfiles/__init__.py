"""
uniqfiles: report or omit files with duplicate content.

Core features:
- Two-phase classification: size grouping first, full-content digest only where sizes collide
- Unique / all-duplicates / first-of-duplicates reporting, or raw occurrence counts
- Pluggable digest algorithms (xxh128 by default, md5, sha256)
- CLI interface (`uniq-files`) in the spirit of the Unix `uniq` command
"""

# Get version
from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("uniqfiles")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API: what users should import directly
from uniqfiles.api import uniq_files
from uniqfiles.commands import UniqFilesCommand, CommandResult
from uniqfiles.core import (
    UniqFilesClassifierImpl, ReportingPolicy, ReportParams, DuplicateReport,
    ClassificationResult, Diagnostic, ConfigurationError, OperationCancelled)
from uniqfiles.utils.convert_utils import ConvertUtils

__all__ = [
    "uniq_files",
    "UniqFilesCommand",
    "CommandResult",
    "UniqFilesClassifierImpl",
    "ReportingPolicy",
    "ReportParams",
    "DuplicateReport",
    "ClassificationResult",
    "Diagnostic",
    "ConfigurationError",
    "OperationCancelled",
    "ConvertUtils",
    "__version__",
]
