"""
tidy-style

A textual style-conformance checker for source trees.
"""

__version__ = "1.0.0"

from .core.scanner import StyleScanner, ScanError
from .core.style import StyleChecker
from .core.aggregator import StyleReport, Violation
from .core.parser import line_is_url

__all__ = [
    'StyleScanner',
    'ScanError',
    'StyleChecker',
    'StyleReport',
    'Violation',
    'line_is_url'
]
