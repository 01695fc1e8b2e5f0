"""
Style Rules Module

This module checks the contents of a single source file against the fixed
set of style rules:

* No lines over 100 characters, except URL comments.
* No tabs.
* No trailing whitespace.
* No CR characters.
* No `TODO` or `XXX` directives.
* No copyright notices attributed to the Rust Project Developers.
* No unexplained "```ignore" or "```rust,ignore" doc examples.
* No `llvm_unreachable` in C++ sources.
* Exactly one trailing newline and no leading blank line.

The tab, line length, trailing whitespace, CR and copyright rules can be
opted out of per file with an ``ignore-tidy-<check>`` comment directive.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional
import logging

from .aggregator import StyleReport
from .directives import Suppressions
from .parser import long_line_is_ok

logger = logging.getLogger(__name__)

COLS = 100

# The TODO/XXX rules would flag their own description in this file.
OWN_FILENAME = "style.py"

COPYRIGHT_PREFIXES = ("// Copyright", "# Copyright", "Copyright")
LEGACY_COPYRIGHT_HOLDERS = ("Rust Developers", "Rust Project Developers")
IGNORED_DOCTEST_ENDINGS = ("```ignore", "```rust,ignore")

UNEXPLAINED_IGNORE_DOCTEST_INFO = """unexplained "```ignore" doctest; try one:

* make the test actually pass, by adding necessary imports and declarations, or
* use "```text", if the code is not Rust code, or
* use "```compile_fail,Ennnn", if the code is expected to fail at compile time, or
* use "```should_panic", if the code is expected to fail at run time, or
* use "```no_run", if the code should type-check but not necessary linkable/runnable, or
* explain it like "```ignore (cannot-test-this-because-xxxx)", if the annotation cannot be avoided.

"""

LLVM_UNREACHABLE_INFO = """\
C++ code used llvm_unreachable, which triggers undefined behavior
when executed when assertions are disabled.
Use llvm::report_fatal_error for increased robustness."""

# Rule name -> description, in evaluation order
RULES = {
    'linelength': f"Lines longer than {COLS} characters, except bare URL comments",
    'tab': "Tab characters",
    'end-whitespace': "Spaces or tabs at the end of a line",
    'cr': "Carriage return characters",
    'todo': "TODO markers; use FIXME",
    'xxx': "XXX markers in // comments; use FIXME",
    'copyright': "Copyright notices attributed to the Rust Project Developers",
    'ignore-doctest': "Doc examples annotated ignore without an explanation",
    'llvm-unreachable': "llvm_unreachable in C++ sources",
    'empty-file': "Files with no content",
    'leading-newline': "Blank first line",
    'trailing-newline': "Missing or repeated trailing newline",
    'unused-directive': "ignore-tidy directives that suppress nothing",
}


@dataclass
class FileState:
    """Blank-line counters for one file."""
    leading_new_lines: bool = False
    trailing_new_lines: int = 0


class StyleChecker:
    """
    Applies the style rules to file contents and reports to a StyleReport.

    Content problems never raise; every line and every file-level rule is
    evaluated regardless of how many violations came before.
    """

    def __init__(self, report: StyleReport, max_columns: int = COLS):
        """
        Initialize the checker.

        Args:
            report: Sink receiving every violation
            max_columns: Maximum line length in characters
        """
        self.report = report
        self.max_columns = max_columns

    def check_file(self, path, contents: str, filename: Optional[str] = None):
        """
        Check the full contents of one file.

        Args:
            path: Path used in diagnostics
            contents: Full text of the file
            filename: Base name used by name-dependent rules, defaults to the
                last component of ``path``
        """
        path = str(path)
        filename = filename or Path(path).name
        self.report.file_checked(path)

        if not contents:
            self.report.error(path, "empty file", rule='empty-file')
            return

        suppressions = Suppressions.from_contents(contents)
        state = FileState()

        for index, line in enumerate(contents.split('\n')):
            self.check_line(path, filename, index, line, suppressions, state)

        if state.leading_new_lines:
            self.report.error(path, "leading newline", rule='leading-newline')

        if state.trailing_new_lines == 0:
            self.report.error(path, "missing trailing newline", rule='trailing-newline')
        elif state.trailing_new_lines > 1:
            self.report.error(
                path,
                f"too many trailing newlines ({state.trailing_new_lines})",
                rule='trailing-newline'
            )

        for _check, label in suppressions.unused():
            self.report.error(path, f"ignoring {label} unnecessarily", rule='unused-directive')

    def check_line(self, path: str, filename: str, index: int, line: str,
                   suppressions: Suppressions, state: FileState):
        """Evaluate every per-line rule for the line at 0-based ``index``."""

        def err(rule: str) -> Callable[[str], None]:
            return lambda message: self.report.error(path, message, index + 1, rule)

        if len(line) > self.max_columns and not long_line_is_ok(line):
            suppressions.report(
                'linelength', err('linelength'), f"line longer than {self.max_columns} chars"
            )
        if '\t' in line:
            suppressions.report('tab', err('tab'), "tab character")
        if line.endswith((' ', '\t')):
            suppressions.report('end-whitespace', err('end-whitespace'), "trailing whitespace")
        if '\r' in line:
            suppressions.report('cr', err('cr'), "CR character")
        if filename != OWN_FILENAME:
            if 'TODO' in line:
                err('todo')("TODO is deprecated; use FIXME")
            if '//' in line and ' XXX' in line:
                err('xxx')("XXX is deprecated; use FIXME")
        if (line.startswith(COPYRIGHT_PREFIXES)
                and any(holder in line for holder in LEGACY_COPYRIGHT_HOLDERS)):
            suppressions.report(
                'copyright',
                err('copyright'),
                "copyright notices attributed to the Rust Project Developers are deprecated"
            )
        if line.endswith(IGNORED_DOCTEST_ENDINGS):
            err('ignore-doctest')(UNEXPLAINED_IGNORE_DOCTEST_INFO)
        if filename.endswith('.cpp') and 'llvm_unreachable' in line:
            err('llvm-unreachable')(LLVM_UNREACHABLE_INFO)

        if line == '':
            if index == 0:
                state.leading_new_lines = True
            else:
                state.trailing_new_lines += 1
        else:
            state.trailing_new_lines = 0
