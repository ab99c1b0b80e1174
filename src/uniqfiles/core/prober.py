"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/prober.py
Stats the input paths and records their sizes.
Features:
- Keeps the original input order (FileRecord.index)
- Follows symlinks like stat(2) does
- Skips paths that cannot be stat'd or are not regular files, with a diagnostic
- Optional thread pool for slow (network) file systems
"""

import os
import stat
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Callable, Tuple

from uniqfiles.core.errors import OperationCancelled
from uniqfiles.core.interfaces import SizeProber
from uniqfiles.core.models import FileRecord, Diagnostic, DiagnosticKind, DiagnosticSink

logger = logging.getLogger(__name__)


class SizeProberImpl(SizeProber):
    """
    Produces one FileRecord per input path with its size populated.

    Attributes:
        workers: Number of threads used for stat calls (1 = inline)
    """

    def __init__(self, workers: int = 1):
        self.workers = max(1, workers)

    def probe(
        self,
        paths: List[str],
        diagnostics: Optional[DiagnosticSink] = None,
        stopped_flag: Optional[Callable[[], bool]] = None,
    ) -> List[FileRecord]:
        records = [FileRecord(index=i, path=str(p)) for i, p in enumerate(paths)]
        logger.debug(f"Probing {len(records)} paths with {self.workers} worker(s)")

        if self.workers == 1:
            outcomes = []
            for record in records:
                if stopped_flag and stopped_flag():
                    raise OperationCancelled("Probing cancelled")
                outcomes.append(self._stat_size(record.path))
        else:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                futures = [executor.submit(self._stat_size, r.path) for r in records]
                outcomes = []
                for future in futures:
                    if stopped_flag and stopped_flag():
                        for pending in futures:
                            pending.cancel()
                        raise OperationCancelled("Probing cancelled")
                    outcomes.append(future.result())

        # Outcomes are collected in submission order, so index order is kept
        for record, (size, error) in zip(records, outcomes):
            if error is not None:
                diagnostic = Diagnostic(DiagnosticKind.PROBE, record.path, error)
                logger.debug(str(diagnostic))
                if diagnostics:
                    diagnostics(diagnostic)
                continue
            record.size = size

        return records

    @staticmethod
    def _stat_size(path: str) -> Tuple[Optional[int], Optional[str]]:
        """Returns (size, None) for a regular file, (None, reason) otherwise."""
        try:
            st = os.stat(path)
        except OSError as e:
            return None, e.strerror or str(e)

        if not stat.S_ISREG(st.st_mode):
            if stat.S_ISDIR(st.st_mode):
                return None, "Is a directory"
            return None, "Not a regular file"
        return st.st_size, None
