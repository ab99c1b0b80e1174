"""
Core classification engine: prober, hasher, grouper, aggregator and reporting policy.

This package contains the algorithmic part of uniqfiles:
- SizeProberImpl: stats input paths, keeps input order, skips what it cannot stat
- FileGrouperImpl: size and digest grouping in input order
- ContentHasherImpl + digest algorithms: streamed full-content hashing (xxh128, md5, sha256)
- ClassAggregatorImpl: content classes, occurrence counts and representatives
- ReportingPolicy: unique / duplicate / count reporting
- UniqFilesClassifierImpl: the pipeline (size → digest → classes)

No CLI dependencies, suitable for library usage.
"""

from .errors import UniqFilesError, ConfigurationError, OperationCancelled
from .models import (
    FileRecord, HashGroup, Diagnostic, DiagnosticKind, ClassificationResult,
    ClassificationStats, DuplicateReport, ReportParams, Stage)
from .prober import SizeProberImpl
from .grouper import FileGrouperImpl
from .hasher import (
    ContentHasherImpl, XXHashDigester, Md5Digester, Sha256Digester,
    DIGEST_ALGORITHMS, get_digest_algorithm)
from .aggregator import ClassAggregatorImpl
from .policy import ReportingPolicy
from .classifier import UniqFilesClassifierImpl

__all__ = [
    "UniqFilesError",
    "ConfigurationError",
    "OperationCancelled",
    "FileRecord",
    "HashGroup",
    "Diagnostic",
    "DiagnosticKind",
    "ClassificationResult",
    "ClassificationStats",
    "DuplicateReport",
    "ReportParams",
    "Stage",
    "SizeProberImpl",
    "FileGrouperImpl",
    "ContentHasherImpl",
    "XXHashDigester",
    "Md5Digester",
    "Sha256Digester",
    "DIGEST_ALGORITHMS",
    "get_digest_algorithm",
    "ClassAggregatorImpl",
    "ReportingPolicy",
    "UniqFilesClassifierImpl",
]
