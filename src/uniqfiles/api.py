"""
One-call library entry point, mirroring the `uniq` style of the CLI.
"""
import logging
from typing import Dict, List, Optional, Union, Callable

from uniqfiles.core.classifier import UniqFilesClassifierImpl
from uniqfiles.core.models import Diagnostic, DiagnosticSink, DuplicateReport, ReportParams, DEFAULT_DIGEST, DEFAULT_CHUNK_SIZE
from uniqfiles.core.policy import ReportingPolicy

logger = logging.getLogger(__name__)


def uniq_files(
        files: List[str],
        report_unique: bool = True,
        report_duplicate: Union[DuplicateReport, int] = DuplicateReport.FIRST,
        count: bool = False,
        digest: str = DEFAULT_DIGEST,
        workers: int = 1,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        diagnostics: Optional[DiagnosticSink] = None,
        stopped_flag: Optional[Callable[[], bool]] = None,
) -> Union[List[str], Dict[str, int]]:
    """
    Report or omit duplicate file contents.

    Given a list of paths, checks each file's size and, where sizes collide,
    its content. Returns the sorted paths selected by report_unique and
    report_duplicate, or the path -> occurrence count mapping when count is set.

    Example (file1 contains 'a', file2 'b', file3 'a'):
        uniq_files([file1, file2, file3])                      -> [file1, file2]
        uniq_files([file1, file2, file3], report_duplicate=1)  -> [file1, file2, file3]
        uniq_files([file1, file2, file3], count=True)          -> {file1: 2, file2: 1, file3: 2}

    Skipped files are logged at WARNING and also passed to `diagnostics`, if given.

    Raises:
        ConfigurationError: empty file list or invalid option
    """
    params = ReportParams(
        report_unique=report_unique,
        report_duplicate=report_duplicate,
        count=count,
        digest=digest,
        workers=workers,
        chunk_size=chunk_size,
    )

    def report(diagnostic: Diagnostic) -> None:
        logger.warning(str(diagnostic))
        if diagnostics:
            diagnostics(diagnostic)

    result = UniqFilesClassifierImpl().classify(
        files, params, stopped_flag=stopped_flag, diagnostics=report
    )
    return ReportingPolicy.apply(result, params)
