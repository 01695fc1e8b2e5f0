"""
Unit tests for the directive registry module.
"""

import pytest

from tidy_style.core.directives import (
    Directive, Suppressions, SUPPRESSIBLE_CHECKS, suppression_for
)


def directive(check, marker="//"):
    """Build the ignore-tidy comment disabling ``check``."""
    return f"{marker} ignore-tidy-{check}"


class TestSuppressionFor:
    """Test detection of ignore-tidy directives."""

    @pytest.mark.parametrize("contents", [
        f"{directive('tab')}\n",
        f"{directive('tab', '#')}\n",
        f"fn main() {{}} {directive('tab')}\n",
        f"first line\nsecond line\n    {directive('tab', '#')} trailing words\n",
    ])
    def test_directive_present(self, contents):
        """Test that the directive is found anywhere in the file."""
        assert suppression_for(contents, 'tab') is Directive.IGNORE_UNUSED

    @pytest.mark.parametrize("contents", [
        "",
        "ignore-tidy-tab\n",
        "//ignore-tidy-tab\n",
        "#ignore-tidy-tab\n",
        f"{directive('cr')}\n",
        "/* ignore-tidy-tab */\n",
    ])
    def test_directive_absent(self, contents):
        """Test that near misses do not count as directives."""
        assert suppression_for(contents, 'tab') is Directive.DENY

    def test_directives_are_per_check(self):
        contents = f"{directive('linelength')}\n"
        assert suppression_for(contents, 'linelength') is Directive.IGNORE_UNUSED
        assert suppression_for(contents, 'tab') is Directive.DENY


class TestSuppressions:
    """Test the suppression protocol."""

    def setup_method(self):
        """Set up test fixtures."""
        self.emitted = []

    def test_from_contents_covers_every_check(self):
        suppressions = Suppressions.from_contents(f"{directive('cr', '#')}\n")

        assert set(suppressions.statuses) == set(SUPPRESSIBLE_CHECKS)
        assert suppressions.status('cr') is Directive.IGNORE_UNUSED
        assert suppressions.status('tab') is Directive.DENY

    def test_deny_reports(self):
        """Test that a violation without a directive is emitted."""
        suppressions = Suppressions.from_contents("")

        reported = suppressions.report('tab', self.emitted.append, "tab character")

        assert reported is True
        assert self.emitted == ["tab character"]
        assert suppressions.status('tab') is Directive.DENY

    def test_ignore_suppresses_and_marks_used(self):
        """Test that a directive swallows the violation and records its use."""
        suppressions = Suppressions.from_contents(f"{directive('tab')}\n")

        reported = suppressions.report('tab', self.emitted.append, "tab character")

        assert reported is False
        assert self.emitted == []
        assert suppressions.status('tab') is Directive.IGNORE_USED

    def test_used_stays_used(self):
        suppressions = Suppressions.from_contents(f"{directive('tab')}\n")

        suppressions.report('tab', self.emitted.append, "tab character")
        suppressions.report('tab', self.emitted.append, "tab character")

        assert self.emitted == []
        assert suppressions.status('tab') is Directive.IGNORE_USED

    def test_unused_lists_only_unexercised_directives(self):
        contents = f"{directive('tab')}\n{directive('copyright')}\n{directive('cr', '#')}\n"
        suppressions = Suppressions.from_contents(contents)
        suppressions.report('tab', self.emitted.append, "tab character")

        unused = list(suppressions.unused())

        assert unused == [('cr', 'CR characters'), ('copyright', 'copyright')]

    def test_unused_empty_without_directives(self):
        assert list(Suppressions.from_contents("plain\n").unused()) == []
