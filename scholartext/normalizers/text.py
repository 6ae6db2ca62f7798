"""
Plain-text normalization shared by the HTML and PDF readers.

Line structure is preserved: section markers are matched at line
starts, so only horizontal whitespace is collapsed.
"""

from __future__ import annotations

import re

# C0/C1 control characters except tab and newline
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_HORIZONTAL_SPACE = re.compile(r"[ \t\u00a0]+")
_SPACE_AROUND_NEWLINE = re.compile(r" *\n *")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def normalize_text(text: str) -> str:
    """Collapse whitespace and strip control characters.

    - ``\\r\\n`` and ``\\r`` become ``\\n``
    - runs of spaces/tabs become a single space
    - spaces at line edges are removed
    - 3+ consecutive newlines become exactly 2

    Args:
        text: Raw text from a reader.

    Returns:
        Normalized text, trimmed.
    """
    if not text:
        return ""

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _CONTROL_CHARS.sub("", text)
    text = _HORIZONTAL_SPACE.sub(" ", text)
    text = _SPACE_AROUND_NEWLINE.sub("\n", text)
    text = collapse_blank_lines(text)
    return text.strip()


def collapse_blank_lines(text: str) -> str:
    """Collapse 3+ consecutive newlines to exactly 2."""
    return _EXCESS_NEWLINES.sub("\n\n", text)


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens."""
    return len(text.split())
