"""
URL Line Parser Module

This module recognizes comment lines that consist of nothing but a bare URL,
optionally preceded by a Markdown reference-style link label. Such lines may
exceed the column limit, because a URL cannot be split across lines.
"""

from enum import Enum
from typing import Callable, Dict, List, Tuple
import logging

logger = logging.getLogger(__name__)


class LineState(Enum):
    """Parser states for `line_is_url`."""
    EXPECT_COMMENT_START = "expect-comment-start"
    EXPECT_LINK_LABEL_OR_URL = "expect-link-label-or-url"
    EXPECT_URL = "expect-url"
    END = "end"


COMMENT_MARKERS = ("//", "///", "//!")


def _is_comment_start(token: str) -> bool:
    return token in COMMENT_MARKERS


def _is_link_label(token: str) -> bool:
    return len(token) >= 4 and token.startswith("[") and token.endswith("]:")


def _is_url(token: str) -> bool:
    return token.startswith(("http://", "https://"))


def _is_url_or_relative(token: str) -> bool:
    return _is_url(token) or token.startswith("../")


# Transitions are tried in order; the first matching predicate wins.
TRANSITIONS: Dict[LineState, List[Tuple[Callable[[str], bool], LineState]]] = {
    LineState.EXPECT_COMMENT_START: [
        (_is_comment_start, LineState.EXPECT_LINK_LABEL_OR_URL),
    ],
    LineState.EXPECT_LINK_LABEL_OR_URL: [
        (_is_link_label, LineState.EXPECT_URL),
        (_is_url, LineState.END),
    ],
    LineState.EXPECT_URL: [
        (_is_url_or_relative, LineState.END),
    ],
    LineState.END: [],
}


def line_is_url(line: str) -> bool:
    """
    Check whether a line is a line comment holding only a URL.

    The accepted shapes are ``// URL`` and ``// [label]: URL`` (also with
    ``///`` or ``//!``). The label may not contain whitespace. Any token
    that does not fit the current state rejects the whole line.

    Args:
        line: A single line of text, without its line terminator

    Returns:
        True if the line is a URL comment
    """
    state = LineState.EXPECT_COMMENT_START

    for token in line.split():
        for matches, next_state in TRANSITIONS[state]:
            if matches(token):
                state = next_state
                break
        else:
            return False

    return state is LineState.END


def long_line_is_ok(line: str) -> bool:
    """Check whether an overlong line is exempt from the length rule."""
    if line_is_url(line):
        logger.debug(f"Long line exempted as URL: {line[:40]}...")
        return True

    return False
