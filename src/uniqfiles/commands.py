"""
Unified command orchestrator for file classification.
This is the SINGLE source of truth for the classify-then-report workflow, used by
the CLI and by library callers that want a status/message result instead of exceptions.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Dict, Optional, Callable, Union

from uniqfiles.core.classifier import UniqFilesClassifierImpl
from uniqfiles.core.errors import ConfigurationError
from uniqfiles.core.interfaces import UniqFilesClassifier
from uniqfiles.core.models import ClassificationResult, ClassificationStats, Diagnostic, ReportParams
from uniqfiles.core.policy import ReportingPolicy

logger = logging.getLogger(__name__)

STATUS_OK = 200
STATUS_CONFIGURATION_ERROR = ConfigurationError.status


@dataclass
class CommandResult:
    """
    Outcome of one command run.
    `payload` is a sorted list of paths, or a path -> count mapping in count mode.
    """
    status: int
    message: str
    payload: Union[List[str], Dict[str, int], None] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)
    stats: Optional[ClassificationStats] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


class UniqFilesCommand:
    """
    Orchestrates the entire workflow:
    1. Validate the path list (nothing is read when it is empty)
    2. Run the classification pass
    3. Apply the reporting policy

    Usage:
        command = UniqFilesCommand()
        result = command.execute(["a.txt", "b.txt"], ReportParams(report_duplicate=1))
        if result.ok:
            print(result.payload)
    """

    def __init__(self, classifier: Optional[UniqFilesClassifier] = None):
        self.classifier = classifier or UniqFilesClassifierImpl()
        self.result: Optional[ClassificationResult] = None

    def execute(
            self,
            paths: Optional[List[str]],
            params: Optional[ReportParams] = None,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
            stopped_flag: Optional[Callable[[], bool]] = None
    ) -> CommandResult:
        """
        Execute classification and reporting with given parameters.

        Args:
            paths: Input paths, in the order that decides class representatives
            params: Validated report parameters (defaults when omitted)
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None
            stopped_flag: () -> bool (returns True if operation should stop)

        Returns:
            CommandResult with status 200, or 400 for a configuration error

        Raises:
            OperationCancelled: If stopped_flag fired during the pass
        """
        params = params or ReportParams()
        if params.reports_nothing:
            logger.debug("Neither unique nor duplicate files requested, result will be empty")

        try:
            self.result = self.classifier.classify(
                paths or [],
                params,
                stopped_flag=stopped_flag,
                progress_callback=progress_callback,
                diagnostics=self._log_diagnostic,
            )
        except ConfigurationError as e:
            logger.debug(f"Configuration error: {e}")
            return CommandResult(status=e.status, message=str(e))

        payload = ReportingPolicy.apply(self.result, params)
        return CommandResult(
            status=STATUS_OK,
            message="OK",
            payload=payload,
            diagnostics=list(self.result.diagnostics),
            stats=self.result.stats,
        )

    @staticmethod
    def _log_diagnostic(diagnostic: Diagnostic) -> None:
        logger.warning(str(diagnostic))

    def get_result(self) -> ClassificationResult:
        """Get the classification behind the last successful execution."""
        if self.result is None:
            raise RuntimeError("Execute command first before accessing the classification")
        return self.result
