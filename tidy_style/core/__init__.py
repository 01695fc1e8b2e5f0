"""
Core modules for style rule detection and reporting.
"""

from .scanner import StyleScanner, ScanError
from .style import StyleChecker
from .aggregator import StyleReport, Violation
from .directives import Directive, Suppressions, suppression_for
from .parser import line_is_url, long_line_is_ok

__all__ = [
    'StyleScanner',
    'ScanError',
    'StyleChecker',
    'StyleReport',
    'Violation',
    'Directive',
    'Suppressions',
    'suppression_for',
    'line_is_url',
    'long_line_is_ok'
]
