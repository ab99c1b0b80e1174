"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for size/content classification of files.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Union, Callable
from enum import Enum

from uniqfiles.core.errors import ConfigurationError
from uniqfiles.utils.convert_utils import ConvertUtils


# =============================
# Enums
# =============================

class DuplicateReport(Enum):
    """
    Which members of a duplicate class end up in the filtered output.
    Values match the integers accepted by --report-duplicate.
    """
    NONE = 0
    ALL = 1
    FIRST = 2

    @classmethod
    def coerce(cls, value: Union["DuplicateReport", int, str]) -> "DuplicateReport":
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            # True/False read as "all"/"none"
            return cls.ALL if value else cls.NONE
        error = ConfigurationError(f"Invalid report_duplicate value: {value!r} (expected 0, 1 or 2)")
        if isinstance(value, float) and not value.is_integer():
            raise error
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise error


class DiagnosticKind(str, Enum):
    PROBE = "probe"
    READ = "read"


class Stage(str, Enum):
    PROBE = "Size probing"
    SIZE = "Size grouping"
    HASH = "Content hashing"
    CLASSIFY = "Class aggregation"


# ======================
#  Core Data Models
# ======================

@dataclass
class FileRecord:
    """
    A single input path moving through the classification pass.
    `index` is the position in the original input and drives all ordering.
    """
    index: int
    path: str
    size: Optional[int] = None
    digest: Optional[str] = None

    @property
    def is_probed(self) -> bool:
        return self.size is not None

    @property
    def is_hashed(self) -> bool:
        return self.digest is not None

    def __repr__(self):
        return f"<FileRecord #{self.index} path={self.path}, size={self.size}>"


@dataclass
class HashGroup:
    """
    Files sharing one content digest, ordered by original input index.
    The first file is the representative of the class.
    """
    digest: str
    size: int
    files: List[FileRecord] = field(default_factory=list)

    @property
    def occurrence_count(self) -> int:
        return len(self.files)

    @property
    def representative(self) -> FileRecord:
        return self.files[0]

    def add_file(self, file: FileRecord) -> None:
        if file.digest != self.digest:
            raise ValueError("Cannot add file with different digest to a group.")
        self.files.append(file)

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.occurrence_count >= 2

    def __repr__(self):
        return f"<HashGroup digest={self.digest[:12]}, size={self.size}, count={len(self.files)}>"


@dataclass(frozen=True)
class Diagnostic:
    """A recoverable per-file problem. The file is excluded, the pass continues."""
    kind: DiagnosticKind
    path: str
    message: str

    def __str__(self) -> str:
        if self.kind is DiagnosticKind.PROBE:
            return f"Can't stat file `{self.path}`: {self.message}, skipped"
        return f"Can't read file `{self.path}`: {self.message}, skipped"


DiagnosticSink = Callable[[Diagnostic], None]


class ClassificationStats:
    """
    Statistics collected during a classification pass.
    """
    def __init__(self):
        self.total_time: float = 0.0
        self.stage_stats: Dict[str, Dict[str, Union[int, float]]] = {}
        self.bytes_hashed: int = 0
        self._listeners: List[Callable[[str, Dict], None]] = []

    def add_listener(self, listener: Callable[[str, Dict], None]):
        """Adds a listener to receive updates when stats are updated."""
        self._listeners.append(listener)

    def update_stage(
            self,
            stage_name: str,
            groups_found: int,
            files_processed: int,
            duration: float
    ) -> None:
        if stage_name not in self.stage_stats:
            self.stage_stats[stage_name] = {
                "groups": 0,
                "files": 0,
                "time": 0.0
            }
        self.stage_stats[stage_name]["groups"] += groups_found
        self.stage_stats[stage_name]["files"] += files_processed
        self.stage_stats[stage_name]["time"] += duration

        for listener in self._listeners:
            listener(stage_name, self.stage_stats[stage_name])

    def print_summary(self) -> str:
        labels = {
            "probe": "Probed files",
            "size": "Size groups",
            "hash": "Hashed files",
            "classify": "Content classes",
        }

        lines = [
            "Classification statistics:",
            f"Total execution time: {self.total_time:.3f}s",
            f"Content hashed: {ConvertUtils.bytes_to_human(self.bytes_hashed)}",
            "Stage: GROUPS / FILES / TIME",
        ]

        for stage, data in self.stage_stats.items():
            label = labels.get(stage.lower(), stage.title())
            lines.append(f"{label}: {data['groups']} / {data['files']} / {data['time']:.3f}s")

        return "\n".join(lines)


@dataclass
class ClassificationResult:
    """
    Everything one classification pass produced.
    Read-only once returned by the classifier.
    """
    records: List[FileRecord]
    hash_groups: Dict[str, HashGroup]
    counts: Dict[str, int]
    representatives: Dict[str, str]
    diagnostics: List[Diagnostic] = field(default_factory=list)
    stats: ClassificationStats = field(default_factory=ClassificationStats)

    def is_unique(self, path: str) -> bool:
        return self.counts.get(path) == 1

    def representative_of(self, path: str) -> Optional[str]:
        """Path of the first file sharing `path`'s content, or None for unique/absent files."""
        for record in self.records:
            if record.path == path and record.digest is not None:
                group = self.hash_groups.get(record.digest)
                if group is not None and group.is_duplicate():
                    return self.representatives[record.digest]
                return None
        return None


"""
DTO for reporting parameters with built-in validation.
Interface-agnostic, used by the library API, the command layer and the CLI.
"""

DEFAULT_DIGEST = "xxh128"
DEFAULT_CHUNK_SIZE = 1024 * 1024


@dataclass
class ReportParams:
    """Reporting and engine options for one classification pass."""
    report_unique: bool = True
    report_duplicate: DuplicateReport = DuplicateReport.FIRST
    count: bool = False
    digest: str = DEFAULT_DIGEST
    workers: int = 1
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        self.report_unique = bool(self.report_unique)
        self.report_duplicate = DuplicateReport.coerce(self.report_duplicate)
        self.count = bool(self.count)

        if not isinstance(self.digest, str) or not self.digest.strip():
            raise ConfigurationError("Digest algorithm must be a non-empty name")
        self.digest = self.digest.strip().lower()

        # registry lives in hasher, which imports this module
        from uniqfiles.core.hasher import DIGEST_ALGORITHMS
        if self.digest not in DIGEST_ALGORITHMS:
            raise ConfigurationError(
                f"Unknown digest algorithm: '{self.digest}'. "
                f"Valid options: {', '.join(sorted(DIGEST_ALGORITHMS))}"
            )

        if self.workers < 1:
            raise ConfigurationError("Number of workers must be at least 1")

        if self.chunk_size <= 0:
            raise ConfigurationError("Chunk size must be positive")

    @property
    def reports_nothing(self) -> bool:
        return not self.count and not self.report_unique and \
            self.report_duplicate is DuplicateReport.NONE

    @staticmethod
    def unique_only(**kwargs) -> 'ReportParams':
        """Preset behind -u: unique files only, no duplicates."""
        return ReportParams(report_unique=True, report_duplicate=DuplicateReport.NONE, **kwargs)

    @staticmethod
    def duplicates_only(**kwargs) -> 'ReportParams':
        """Preset behind -d: every duplicate, no unique files."""
        return ReportParams(report_unique=False, report_duplicate=DuplicateReport.ALL, **kwargs)
