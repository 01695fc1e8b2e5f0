"""
Style Scanner Module

This module walks source trees, reads candidate files and runs the style
checks on them, collecting violations in a StyleReport.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Sequence
import logging

from .aggregator import StyleReport
from .style import COLS, StyleChecker
from .walker import make_filter, walk

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = ('.rs', '.py', '.js', '.sh', '.c', '.cpp', '.h')

# Emacs lock files
SWAP_FILE_PREFIX = '.#'


class ScanError(Exception):
    """A file could not be opened, read or decoded."""

    def __init__(self, path, cause: Exception):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"{self.path}: {cause}")


class StyleScanner:
    """
    Scanner class for running the style checks over files and directories.

    This class provides methods to:
    - Decide which files are candidates for checking
    - Scan individual files or entire directory trees
    - Collect every violation in a shared StyleReport
    """

    def __init__(self, max_columns: int = COLS,
                 extensions: Optional[Sequence[str]] = None,
                 exclude: Iterable[str] = (),
                 report: Optional[StyleReport] = None):
        """
        Initialize the scanner.

        Args:
            max_columns: Maximum line length in characters
            extensions: File name suffixes to check
            exclude: Extra directory names to skip while walking
            report: Sink for violations; a new one is created if omitted
        """
        self.max_columns = max_columns
        self.extensions = tuple(extensions) if extensions else DEFAULT_EXTENSIONS
        self.exclude = frozenset(exclude)
        self.report = report if report is not None else StyleReport()
        self.checker = StyleChecker(self.report, max_columns=max_columns)

    def is_candidate(self, filename: str) -> bool:
        """Check whether a file name is subject to the style checks."""
        if filename.startswith(SWAP_FILE_PREFIX):
            return False
        return filename.endswith(self.extensions)

    def read_file(self, path: Path) -> str:
        """
        Read a file as UTF-8 text, keeping CR characters intact.

        Raises:
            ScanError: If the file cannot be opened, read or decoded
        """
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {path}: {e}")
            raise ScanError(path, e) from e

    def scan_file(self, path) -> bool:
        """
        Scan a single file if it is a candidate.

        Args:
            path: Path to the file

        Returns:
            True if the file was checked, False if it was filtered out
        """
        path = Path(path)
        if not self.is_candidate(path.name):
            logger.debug(f"Skipping non-candidate file: {path}")
            return False

        logger.debug(f"Checking {path}")
        contents = self.read_file(path)
        self.checker.check_file(path, contents, filename=path.name)
        return True

    def scan_directory(self, directory) -> List[Path]:
        """
        Scan every candidate file below a directory.

        Args:
            directory: Root of the tree to scan

        Returns:
            Paths of the files that were checked

        Raises:
            ScanError: If a directory or file cannot be read
        """
        checked = []
        try:
            for path in walk(directory, skip=make_filter(self.exclude)):
                if self.scan_file(path):
                    checked.append(path)
        except OSError as e:
            failed = e.filename or directory
            logger.error(f"Failed to list {failed}: {e}")
            raise ScanError(failed, e) from e

        logger.info(f"Checked {len(checked)} files under {directory}")
        return checked

    def scan_paths(self, paths: Iterable) -> StyleReport:
        """Scan files and directories, returning the shared report."""
        for path in paths:
            self.scan_directory(path)
        return self.report
