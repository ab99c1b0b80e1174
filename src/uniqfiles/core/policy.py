"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/policy.py
Pure reporting logic: decides which classified files are surfaced.
"""
from typing import Dict, List, Union

from uniqfiles.core.models import ClassificationResult, DuplicateReport, ReportParams


class ReportingPolicy:
    """
    Applies ReportParams to a ClassificationResult.

    - count=True: the full path -> occurrence count mapping, unfiltered
    - otherwise: paths sorted by path, where
        unique files (count 1) are kept when report_unique is set, and
        duplicate files (count > 1) are kept per report_duplicate
        (NONE: none, ALL: every member, FIRST: the class representative only)
    """

    @staticmethod
    def apply(result: ClassificationResult, params: ReportParams) -> Union[List[str], Dict[str, int]]:
        if params.count:
            return dict(result.counts)
        return ReportingPolicy.filter_paths(result, params)

    @staticmethod
    def filter_paths(result: ClassificationResult, params: ReportParams) -> List[str]:
        path_digests = {r.path: r.digest for r in result.records if r.digest is not None}

        files = []
        for path in sorted(result.counts):
            if result.counts[path] == 1:
                if params.report_unique:
                    files.append(path)
            elif params.report_duplicate is DuplicateReport.ALL:
                files.append(path)
            elif params.report_duplicate is DuplicateReport.FIRST:
                if path == result.representatives[path_digests[path]]:
                    files.append(path)
        return files
