"""
Directive Registry Module

This module tracks the ``ignore-tidy-<check>`` directives of a single file.
A directive disables one suppressible check for the whole file, and must be
exercised at least once; an unused directive is reported as a violation.
"""

from enum import Enum
from typing import Callable, Dict, Iterator, Tuple
import logging

logger = logging.getLogger(__name__)


class Directive(Enum):
    """Suppression status of one check within one file."""
    DENY = "deny"                    # No directive, violations are reported
    IGNORE_UNUSED = "ignore-unused"  # Directive present, nothing suppressed yet
    IGNORE_USED = "ignore-used"      # Directive present and needed


# Check name -> label used in "ignoring <label> unnecessarily"
SUPPRESSIBLE_CHECKS: Dict[str, str] = {
    'cr': 'CR characters',
    'tab': 'tab characters',
    'linelength': 'line length',
    'end-whitespace': 'trailing whitespace',
    'copyright': 'copyright',
}

DIRECTIVE_PREFIXES = ("// ignore-tidy-", "# ignore-tidy-")


def suppression_for(contents: str, check: str) -> Directive:
    """
    Determine the initial suppression status of a check for a file.

    The directive may appear anywhere in the file; the test is a plain
    substring match over the full contents.

    Args:
        contents: Full text of the file
        check: Check name, e.g. ``tab`` or ``linelength``

    Returns:
        Directive.IGNORE_UNUSED if a directive is present, else Directive.DENY
    """
    if any(f"{prefix}{check}" in contents for prefix in DIRECTIVE_PREFIXES):
        return Directive.IGNORE_UNUSED
    return Directive.DENY


class Suppressions:
    """
    Suppression statuses of all suppressible checks for one file.

    Created once per file and threaded through the line scan. Each call to
    `report` either emits the violation or records that the matching
    directive was needed.
    """

    def __init__(self, statuses: Dict[str, Directive]):
        self.statuses = statuses

    @classmethod
    def from_contents(cls, contents: str) -> 'Suppressions':
        """Build the statuses of every suppressible check from file contents."""
        return cls({check: suppression_for(contents, check) for check in SUPPRESSIBLE_CHECKS})

    def status(self, check: str) -> Directive:
        """Get the current suppression status of a check."""
        return self.statuses[check]

    def report(self, check: str, emit: Callable[[str], None], message: str) -> bool:
        """
        Apply the suppression protocol to one candidate violation.

        Args:
            check: Suppressible check name
            emit: Callback that reports the violation
            message: Violation message

        Returns:
            True if the violation was reported, False if it was suppressed
        """
        if self.status(check) is Directive.DENY:
            emit(message)
            return True

        self.statuses[check] = Directive.IGNORE_USED
        return False

    def unused(self) -> Iterator[Tuple[str, str]]:
        """Yield (check, label) for every directive that never suppressed anything."""
        for check, label in SUPPRESSIBLE_CHECKS.items():
            if self.status(check) is Directive.IGNORE_UNUSED:
                logger.debug(f"Directive ignore-tidy-{check} was never exercised")
                yield check, label
