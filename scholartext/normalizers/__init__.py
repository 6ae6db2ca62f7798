"""
Text normalizers.

Readers produce text with inconsistent whitespace and stray control
characters; normalize_text() turns it into the single normalized
form the segmenter expects.
"""

from scholartext.normalizers.text import (
    collapse_blank_lines,
    count_words,
    normalize_text,
)

__all__ = [
    "normalize_text",
    "collapse_blank_lines",
    "count_words",
]
