"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

classifier.py
Implements the two-phase classification pipeline:
    probe → size groups → full-content digest of ambiguous sizes → classes → counts

Files alone in their size group are unique without being read.
"""
import time
import logging
from typing import List, Optional, Callable

from uniqfiles.core.aggregator import ClassAggregatorImpl
from uniqfiles.core.errors import ConfigurationError, OperationCancelled
from uniqfiles.core.grouper import FileGrouperImpl
from uniqfiles.core.hasher import ContentHasherImpl, get_digest_algorithm
from uniqfiles.core.interfaces import (
    UniqFilesClassifier, ContentHasher, SizeProber, FileGrouper, ClassAggregator,
)
from uniqfiles.core.models import (
    ClassificationResult, ClassificationStats, Diagnostic, DiagnosticSink, ReportParams, Stage,
)
from uniqfiles.core.prober import SizeProberImpl

logger = logging.getLogger(__name__)


# =============================
# Main Classifier Class
# =============================
class UniqFilesClassifierImpl(UniqFilesClassifier):
    """
    Runs one classification pass and collects per-stage statistics.
    Collaborators are built from ReportParams unless injected.
    """
    def __init__(
        self,
        hasher: Optional[ContentHasher] = None,
        prober: Optional[SizeProber] = None,
        grouper: Optional[FileGrouper] = None,
        aggregator: Optional[ClassAggregator] = None,
    ):
        self.hasher = hasher
        self.prober = prober
        self.grouper = grouper or FileGrouperImpl()
        self.aggregator = aggregator or ClassAggregatorImpl(self.grouper)

    def classify(
        self,
        paths: List[str],
        params: Optional[ReportParams] = None,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, object], None]] = None,
        diagnostics: Optional[DiagnosticSink] = None,
    ) -> ClassificationResult:
        """
        Main classification pipeline.
        Args:
            paths: Input paths, in the order that decides representatives
            params: Engine options (digest, workers, chunk_size); reporting options are not used here
            stopped_flag (Optional[Callable[[], bool]]): Function that returns True if the pass should stop.
            progress_callback (Optional[Callable[[str, int, int], None]]): Reports progress per stage.
            diagnostics: Receives one Diagnostic per skipped file
        Returns:
            ClassificationResult
        """
        if not paths:
            raise ConfigurationError("Please specify files")
        params = params or ReportParams()
        prober = self.prober or SizeProberImpl(workers=params.workers)
        hasher = self.hasher or ContentHasherImpl(
            algorithm=get_digest_algorithm(params.digest),
            chunk_size=params.chunk_size,
            workers=params.workers,
        )

        stats = ClassificationStats()
        collected: List[Diagnostic] = []

        def report(diagnostic: Diagnostic) -> None:
            collected.append(diagnostic)
            if diagnostics:
                diagnostics(diagnostic)

        total_start_time = time.time()

        # Stage 1: stat every path
        start_time = time.time()
        records = prober.probe(list(paths), diagnostics=report, stopped_flag=stopped_flag)
        probed = [r for r in records if r.is_probed]
        stats.update_stage("probe", 0, len(probed), time.time() - start_time)
        self._notify(progress_callback, Stage.PROBE, len(probed), len(records))

        # Stage 2: size groups; only shared sizes need hashing
        start_time = time.time()
        size_groups = self.grouper.group_by_size(probed)
        ambiguous = {size: group for size, group in size_groups.items() if len(group) >= 2}
        stats.update_stage("size", len(size_groups), len(probed), time.time() - start_time)
        to_hash = [r for group in ambiguous.values() for r in group]
        logger.debug(
            f"Size grouping: {len(probed)} files -> "
            f"{len(size_groups) - len(ambiguous)} unique by size, "
            f"{len(ambiguous)} shared size(s) with {len(to_hash)} files to hash"
        )

        # Stage 3: full-content digests
        if stopped_flag and stopped_flag():
            raise OperationCancelled("Classification cancelled before hashing")
        start_time = time.time()
        hashed = hasher.hash_records(
            to_hash,
            diagnostics=report,
            stopped_flag=stopped_flag,
            progress_callback=progress_callback,
        )
        stats.bytes_hashed = sum(r.size for r in hashed)
        stats.update_stage("hash", 0, len(hashed), time.time() - start_time)

        # Stage 4: content classes and counts
        start_time = time.time()
        hash_groups = self.aggregator.build_hash_groups(hashed)
        counts = self.aggregator.occurrence_counts(probed, hash_groups)
        representatives = self.aggregator.representatives(hash_groups)
        stats.update_stage("classify", len(hash_groups), len(counts), time.time() - start_time)
        self._notify(progress_callback, Stage.CLASSIFY, len(counts), len(records))

        stats.total_time = time.time() - total_start_time
        logger.debug(
            f"Classified {len(counts)} of {len(records)} files "
            f"({len(collected)} skipped) in {stats.total_time:.3f}s"
        )

        return ClassificationResult(
            records=records,
            hash_groups=hash_groups,
            counts=counts,
            representatives=representatives,
            diagnostics=collected,
            stats=stats,
        )

    @staticmethod
    def _notify(
        progress_callback: Optional[Callable[[str, int, object], None]],
        stage: Stage,
        current: int,
        total: int,
    ) -> None:
        if progress_callback:
            progress_callback(stage.value, current, total)

