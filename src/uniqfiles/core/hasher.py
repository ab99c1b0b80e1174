"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements full-content hashing of files using pluggable digest algorithms.

Content is streamed in fixed-size chunks, so memory use does not depend
on file size. Computed digests are cached on the FileRecord.
"""

import hashlib
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Callable

import xxhash

from uniqfiles.core.errors import ConfigurationError, OperationCancelled
from uniqfiles.core.interfaces import ContentHasher, DigestAlgorithm, Digester
from uniqfiles.core.models import (
    FileRecord, Diagnostic, DiagnosticKind, DiagnosticSink, DEFAULT_CHUNK_SIZE, DEFAULT_DIGEST, Stage,
)

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other digest algorithm
class XXHashDigester(DigestAlgorithm):
    """xxHash3 with a 128-bit output."""
    name = "xxh128"

    def new(self) -> Digester:
        return xxhash.xxh3_128()


class Md5Digester(DigestAlgorithm):
    name = "md5"

    def new(self) -> Digester:
        return hashlib.md5()


class Sha256Digester(DigestAlgorithm):
    name = "sha256"

    def new(self) -> Digester:
        return hashlib.sha256()


DIGEST_ALGORITHMS: Dict[str, DigestAlgorithm] = {
    algorithm.name: algorithm
    for algorithm in (XXHashDigester(), Md5Digester(), Sha256Digester())
}


def get_digest_algorithm(name: str = DEFAULT_DIGEST) -> DigestAlgorithm:
    """Looks up a shipped digest algorithm by name."""
    try:
        return DIGEST_ALGORITHMS[name.strip().lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown digest algorithm: '{name}'. "
            f"Valid options: {', '.join(sorted(DIGEST_ALGORITHMS))}"
        )


class ContentHasherImpl(ContentHasher):
    """
    A hasher that supports any algorithm via the DigestAlgorithm interface.
    Streams files chunk by chunk; optionally hashes several files in parallel.
    """

    def __init__(
        self,
        algorithm: Optional[DigestAlgorithm] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        workers: int = 1,
    ):
        self.algorithm = algorithm or XXHashDigester()
        self.chunk_size = chunk_size
        self.workers = max(1, workers)

    def compute_digest(self, record: FileRecord, stopped_flag: Optional[Callable[[], bool]] = None) -> str:
        """
        Computes and caches the hex digest of the whole file.

        Raises:
            OSError: If the file cannot be opened or read
            OperationCancelled: If stopped_flag fires between chunks
        """
        if record.digest is not None:
            return record.digest

        digester = self.algorithm.new()
        with open(record.path, 'rb') as f:
            while True:
                if stopped_flag and stopped_flag():
                    raise OperationCancelled(f"Hashing of {record.path} cancelled")
                chunk = f.read(self.chunk_size)
                if not chunk:
                    break
                digester.update(chunk)

        record.digest = digester.hexdigest()
        return record.digest

    def hash_records(
        self,
        records: List[FileRecord],
        diagnostics: Optional[DiagnosticSink] = None,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, object], None]] = None,
    ) -> List[FileRecord]:
        ordered = sorted(records, key=lambda r: r.index)
        total = len(ordered)
        logger.debug(f"Hashing {total} files with {self.algorithm.name} ({self.workers} worker(s))")

        if self.workers == 1 or total < 2:
            outcomes = []
            for done, record in enumerate(ordered, 1):
                outcomes.append(self._try_digest(record, stopped_flag))
                if progress_callback:
                    progress_callback(Stage.HASH.value, done, total)
        else:
            outcomes = self._hash_parallel(ordered, stopped_flag, progress_callback)

        hashed = []
        for record, error in zip(ordered, outcomes):
            if error is not None:
                diagnostic = Diagnostic(DiagnosticKind.READ, record.path, error)
                logger.debug(str(diagnostic))
                if diagnostics:
                    diagnostics(diagnostic)
                continue
            hashed.append(record)
        return hashed

    def _hash_parallel(
        self,
        ordered: List[FileRecord],
        stopped_flag: Optional[Callable[[], bool]],
        progress_callback: Optional[Callable[[str, int, object], None]],
    ) -> List[Optional[str]]:
        """One task per file; outcomes are returned in the order of `ordered`."""
        total = len(ordered)
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = [executor.submit(self._try_digest, r, stopped_flag) for r in ordered]
            outcomes = []
            try:
                for done, future in enumerate(futures, 1):
                    outcomes.append(future.result())
                    if progress_callback:
                        progress_callback(Stage.HASH.value, done, total)
            except OperationCancelled:
                for pending in futures:
                    pending.cancel()
                raise
        return outcomes

    def _try_digest(self, record: FileRecord, stopped_flag: Optional[Callable[[], bool]]) -> Optional[str]:
        """Returns None on success, or the reason the file could not be read."""
        try:
            self.compute_digest(record, stopped_flag)
        except OSError as e:
            record.digest = None
            return e.strerror or str(e)
        return None
