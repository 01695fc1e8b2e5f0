"""
Property-based tests for the style rules using Hypothesis.

These tests generate lines and file contents and verify that the URL
parser, the line length rule, the trailing newline counter and the
suppression protocol behave consistently across all inputs.
"""

from hypothesis import given, strategies as st

from tidy_style.core.aggregator import StyleReport
from tidy_style.core.parser import line_is_url
from tidy_style.core.style import COLS, StyleChecker


# Strategies for generating test data
url_chars = st.text(
    alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyz0123456789-_./?=&%#"),
    min_size=1,
    max_size=300
)
comment_markers = st.sampled_from(["//", "///", "//!"])
schemes = st.sampled_from(["http://", "https://"])
words = st.text(alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyz"), min_size=1, max_size=12)
line_text = st.text(
    alphabet=st.characters(exclude_characters="\n", exclude_categories=("Cs",)),
    max_size=COLS
)


@st.composite
def url_line(draw):
    """Generate a URL comment, optionally with a Markdown link label."""
    marker = draw(comment_markers)
    url = draw(schemes) + draw(url_chars)
    if draw(st.booleans()):
        label = "[" + draw(words) + "]:"
        return f"{marker} {label} {url}"
    return f"{marker} {url}"


def check(contents, path="prop.rs"):
    """Run the checker over contents and return the report."""
    report = StyleReport()
    StyleChecker(report).check_file(path, contents)
    return report


class TestStyleProperties:
    """Property-based tests for the style rules."""

    @given(url_line())
    def test_url_lines_are_recognized(self, line):
        """Property: every generated URL comment is accepted."""
        assert line_is_url(line) is True

    @given(url_line(), words)
    def test_trailing_prose_rejects_url_line(self, line, word):
        """Property: any token after the URL rejects the line."""
        assert line_is_url(f"{line} {word}") is False

    @given(words, url_line())
    def test_leading_prose_rejects_url_line(self, word, line):
        """Property: any token before the comment marker rejects the line."""
        assert line_is_url(f"{word} {line}") is False

    @given(url_line())
    def test_url_lines_never_flagged_for_length(self, line):
        """Property: long URL comments are exempt from the length rule."""
        report = check(line + "\n")
        assert not any(v.rule == 'linelength' for v in report.violations)

    @given(line_text)
    def test_short_lines_never_flagged_for_length(self, line):
        """Property: lines within the limit are never flagged for length."""
        report = check(line + "\n")
        assert not any(v.rule == 'linelength' for v in report.violations)

    @given(st.integers(min_value=COLS + 1, max_value=400))
    def test_long_plain_lines_flagged(self, length):
        """Property: plain lines over the limit are always flagged."""
        report = check("x" * length + "\n")
        assert report.messages() == ["prop.rs:1: line longer than 100 chars"]

    @given(st.integers(min_value=0, max_value=10))
    def test_trailing_newline_count(self, count):
        """Property: exactly one trailing newline is required."""
        messages = check("foo" + "\n" * count).messages()

        if count == 0:
            assert messages == ["prop.rs: missing trailing newline"]
        elif count == 1:
            assert messages == []
        else:
            assert messages == [f"prop.rs: too many trailing newlines ({count})"]

    @given(st.integers(min_value=0, max_value=5), st.booleans())
    def test_tab_suppression_symmetry(self, tabs, directive):
        """Property: a tab directive either hides every tab or is reported as unused."""
        lines = ["// ignore-tidy-" + "tab"] if directive else []
        lines += ["\tfoo"] * tabs
        messages = check("\n".join(lines + ["bar", ""])).messages()

        tab_errors = [m for m in messages if m.endswith("tab character")]
        unused = [m for m in messages if m.endswith("ignoring tab characters unnecessarily")]

        if directive:
            assert tab_errors == []
            assert len(unused) == (0 if tabs else 1)
        else:
            assert len(tab_errors) == tabs
            assert unused == []

    @given(st.text(max_size=300))
    def test_checking_is_deterministic(self, contents):
        """Property: checking the same contents twice yields the same report."""
        first = check(contents)
        second = check(contents)

        assert first.messages() == second.messages()
        assert first.bad == second.bad
        assert first.bad == bool(first.violations)
