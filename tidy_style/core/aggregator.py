"""
Violation Aggregator Module

This module provides the error sink for style checks: it records every
violation, keeps the run-wide "bad" flag and produces summary statistics.
"""

from typing import Callable, Dict, List, Optional, Tuple
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
import logging

logger = logging.getLogger(__name__)


class FileStatus(Enum):
    """File status categories."""
    OK = "OK"
    ERROR = "Error"


@dataclass(frozen=True)
class Violation:
    """A single style violation."""
    path: str
    message: str
    line: Optional[int] = None
    rule: Optional[str] = None

    def __str__(self):
        if self.line is None:
            return f"{self.path}: {self.message}"
        return f"{self.path}:{self.line}: {self.message}"


@dataclass
class FileInfo:
    """Information about a single checked file."""
    filepath: str
    filename: str
    status: FileStatus
    error_count: int


@dataclass
class ReportSummary:
    """Summary statistics for a whole run."""
    total_files: int
    ok_files: int
    error_files: int
    total_errors: int
    success_rate: float
    most_common_errors: List[Tuple[str, int]]


class StyleReport:
    """
    Error sink shared by every file checked during a run.

    This class provides:
    - Recording of violations in the order they are found
    - The monotonic ``bad`` flag that decides the exit status
    - Listeners notified as each violation arrives
    - Per-file status and run summary statistics
    """

    def __init__(self):
        """Initialize an empty report."""
        self.violations: List[Violation] = []
        self.checked_files: List[str] = []
        self._listeners: List[Callable[[Violation], None]] = []
        self._bad = False

    @property
    def bad(self) -> bool:
        """True once any violation has been reported."""
        return self._bad

    def add_listener(self, listener: Callable[[Violation], None]):
        """Register a callback invoked with every new violation."""
        self._listeners.append(listener)

    def file_checked(self, path: str):
        """Record that a file went through the style checks."""
        self.checked_files.append(str(path))

    def error(self, path: str, message: str, line: Optional[int] = None,
              rule: Optional[str] = None) -> Violation:
        """
        Report a violation.

        Args:
            path: File the violation was found in
            message: Human-readable description
            line: 1-based line number, or None for file-level violations
            rule: Name of the rule that fired

        Returns:
            The recorded Violation
        """
        violation = Violation(str(path), message, line, rule)
        self.violations.append(violation)
        self._bad = True

        for listener in self._listeners:
            listener(violation)

        return violation

    def violations_for(self, path: str) -> List[Violation]:
        """Get the violations reported for one file."""
        path = str(path)
        return [v for v in self.violations if v.path == path]

    def messages(self) -> List[str]:
        """Get every violation formatted as a diagnostic line."""
        return [str(v) for v in self.violations]

    def files(self) -> List[FileInfo]:
        """Get status information for every checked file."""
        files = []
        for filepath in self.checked_files:
            error_count = len(self.violations_for(filepath))
            files.append(FileInfo(
                filepath=filepath,
                filename=Path(filepath).name,
                status=FileStatus.ERROR if error_count else FileStatus.OK,
                error_count=error_count
            ))
        return files

    def generate_summary(self) -> ReportSummary:
        """Generate summary statistics for the run."""
        files = self.files()
        total_files = len(files)
        error_files = sum(1 for f in files if f.status == FileStatus.ERROR)
        ok_files = total_files - error_files

        rule_counts: Dict[str, int] = {}
        for violation in self.violations:
            rule = violation.rule or 'other'
            rule_counts[rule] = rule_counts.get(rule, 0) + 1

        most_common = sorted(rule_counts.items(), key=lambda item: (-item[1], item[0]))

        return ReportSummary(
            total_files=total_files,
            ok_files=ok_files,
            error_files=error_files,
            total_errors=len(self.violations),
            success_rate=(ok_files / total_files * 100) if total_files > 0 else 100.0,
            most_common_errors=most_common
        )
