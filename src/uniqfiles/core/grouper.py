"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Implements size and digest grouping of FileRecords.
Groups always list their members in original input order.
"""

from typing import List, Dict, Any, Callable
from collections import defaultdict
from uniqfiles.core.interfaces import FileGrouper
from uniqfiles.core.models import FileRecord


class FileGrouperImpl(FileGrouper):
    """
    Partitions records by a computed key. Unlike a duplicate finder, singleton
    groups are kept: a size group of one certifies its file as unique.
    """

    def group_by_size(self, records: List[FileRecord]) -> Dict[int, List[FileRecord]]:
        """Groups probed records by their size. Unprobed records are skipped."""
        return self._group_by([r for r in records if r.is_probed], lambda r: r.size)

    def group_by_digest(self, records: List[FileRecord]) -> Dict[str, List[FileRecord]]:
        """Groups hashed records by content digest. Unhashed records are skipped."""
        return self._group_by([r for r in records if r.is_hashed], lambda r: r.digest)

    @staticmethod
    def _group_by(records: List[FileRecord], key_func: Callable[[FileRecord], Any]) -> Dict[Any, List[FileRecord]]:
        """
        Helper method to group records by any computed key.
        Args:
            records: List of records to group
            key_func: Function that computes a hashable key from a FileRecord
        Returns:
            Dict[key, List[FileRecord]] with each list sorted by input index
        """
        groups = defaultdict(list)
        for record in sorted(records, key=lambda r: r.index):
            groups[key_func(record)].append(record)
        return dict(groups)
