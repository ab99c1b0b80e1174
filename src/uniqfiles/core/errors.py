"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Fatal errors of a classification pass. Per-file problems are not errors,
they are reported as Diagnostic records (see core/models.py).
"""


class UniqFilesError(Exception):
    """Base class for all uniqfiles errors."""
    status = 500


class ConfigurationError(UniqFilesError, ValueError):
    """Invalid input list or options, raised before any file I/O."""
    status = 400


class OperationCancelled(UniqFilesError):
    """The caller aborted the pass through its stopped_flag."""
    status = 499
