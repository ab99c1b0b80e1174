"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the classification pass.
Structural typing via `typing.Protocol` keeps every stage replaceable
without touching the classification logic.

Key Components:
---------------
- Digester / DigestAlgorithm: streaming content fingerprint (xxHash, MD5, SHA-256...).
- SizeProber: stats input paths and produces FileRecords.
- ContentHasher: computes full-content digests for ambiguous files.
- FileGrouper: groups records by size or by digest.
- ClassAggregator: builds hash groups, occurrence counts and representatives.
- UniqFilesClassifier: the pipeline coordinating all stages.
"""

from typing import Protocol, List, Dict, Optional, Callable
from uniqfiles.core.models import (
    FileRecord,
    HashGroup,
    ReportParams,
    ClassificationResult,
    DiagnosticSink,
)


# ===== Interfaces =====

class Digester(Protocol):
    """Incremental digest: fed chunk by chunk, read once at the end."""
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class DigestAlgorithm(Protocol):
    """
    Interface for pluggable digest functions.

    Allows plugging in xxHash, MD5, SHA-256 or anything with the same shape
    without affecting size grouping, aggregation or reporting.
    """
    name: str

    def new(self) -> Digester:
        """Returns a fresh digester for one file."""
        ...


class SizeProber(Protocol):
    def probe(
        self,
        paths: List[str],
        diagnostics: Optional[DiagnosticSink] = None,
        stopped_flag: Optional[Callable[[], bool]] = None,
    ) -> List[FileRecord]:
        """
        Stat every path, in input order.

        Returns:
            One FileRecord per path; unprobeable paths keep size=None.
        """
        ...


class ContentHasher(Protocol):
    def compute_digest(self, record: FileRecord, stopped_flag: Optional[Callable[[], bool]] = None) -> str:
        """Digest of the full content. Raises OSError when the file cannot be read."""
        ...

    def hash_records(
        self,
        records: List[FileRecord],
        diagnostics: Optional[DiagnosticSink] = None,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, object], None]] = None,
    ) -> List[FileRecord]:
        """Set `digest` on every readable record and return the hashed ones in index order."""
        ...


class FileGrouper(Protocol):
    def group_by_size(self, records: List[FileRecord]) -> Dict[int, List[FileRecord]]:
        """Group probed records by size in bytes, singletons included."""
        ...

    def group_by_digest(self, records: List[FileRecord]) -> Dict[str, List[FileRecord]]:
        """Group hashed records by digest, each list ordered by input index."""
        ...


class ClassAggregator(Protocol):
    def build_hash_groups(self, hashed: List[FileRecord]) -> Dict[str, HashGroup]:
        """Content classes of the hashed records, members in input order."""
        ...

    def occurrence_counts(
        self,
        probed: List[FileRecord],
        hash_groups: Dict[str, HashGroup],
    ) -> Dict[str, int]:
        """Occurrence count per path for every classifiable record."""
        ...

    def representatives(self, hash_groups: Dict[str, HashGroup]) -> Dict[str, str]:
        """First path (by input order) of every content class."""
        ...


class UniqFilesClassifier(Protocol):
    """
    Interface for the main classification engine.

    Coordinates probing, size grouping, hashing and aggregation.
    """
    def classify(
        self,
        paths: List[str],
        params: ReportParams,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, object], None]] = None,
        diagnostics: Optional[DiagnosticSink] = None,
    ) -> ClassificationResult:
        """
        Run one classification pass.

        Raises:
            ConfigurationError: empty path list, before any file I/O.
            OperationCancelled: stopped_flag returned True.
        """
        ...
