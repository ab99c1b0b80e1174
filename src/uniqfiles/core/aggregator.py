"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/aggregator.py
Turns hashed records into content classes and occurrence counts.
"""

from typing import List, Dict, Optional

from uniqfiles.core.grouper import FileGrouperImpl
from uniqfiles.core.interfaces import ClassAggregator, FileGrouper
from uniqfiles.core.models import FileRecord, HashGroup


class ClassAggregatorImpl(ClassAggregator):
    """
    Builds HashGroups and assigns every classifiable record its occurrence count.

    A record is classifiable when it was probed and either sits alone in its
    size group (never hashed) or was hashed successfully. Records whose size
    was shared but whose content could not be read are left out entirely.
    """

    def __init__(self, grouper: Optional[FileGrouper] = None):
        self.grouper = grouper or FileGrouperImpl()

    def build_hash_groups(self, hashed: List[FileRecord]) -> Dict[str, HashGroup]:
        groups = {}
        for digest, files in self.grouper.group_by_digest(hashed).items():
            groups[digest] = HashGroup(digest=digest, size=files[0].size, files=files)
        return groups

    def occurrence_counts(
        self,
        probed: List[FileRecord],
        hash_groups: Dict[str, HashGroup],
    ) -> Dict[str, int]:
        size_groups = self.grouper.group_by_size(probed)

        counts = {}
        for record in sorted(probed, key=lambda r: r.index):
            if not record.is_probed:
                continue
            if record.digest is not None:
                counts[record.path] = hash_groups[record.digest].occurrence_count
            elif len(size_groups[record.size]) == 1:
                counts[record.path] = 1
            # shared size but unreadable: indeterminate, not reported
        return counts

    def representatives(self, hash_groups: Dict[str, HashGroup]) -> Dict[str, str]:
        return {digest: group.representative.path for digest, group in hash_groups.items()}
