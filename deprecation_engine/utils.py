"""
Utility functions for the deprecation engine.
"""

import re
from bisect import bisect_left
from typing import List


def newline_offsets(text: str) -> List[int]:
    """Sorted offsets of every newline character in text."""
    return [m.start() for m in re.finditer("\n", text)]


def line_number_at(offsets: List[int], pos: int) -> int:
    """1-based line number of position pos, given the text's newline offsets."""
    return 1 + bisect_left(offsets, pos)


def count_occurrences(text: str, snippet: str) -> int:
    """Number of non-overlapping occurrences of snippet in text (0 for empty)."""
    if not snippet:
        return 0
    return text.count(snippet)


def locate_snippet(text: str, snippet: str) -> str:
    """Resolve snippet against text: exact first, then whitespace-trimmed.

    Returns the string actually present in text, or "" when neither form is.
    """
    if snippet and snippet in text:
        return snippet
    trimmed = (snippet or "").strip()
    if trimmed and trimmed in text:
        return trimmed
    return ""

