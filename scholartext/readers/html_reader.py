"""
Hypertext to plain text conversion.

Regex-based on purpose: rendered papers are large, and all we need is
readable text with paragraph boundaries intact. Block-closing tags are
turned into newlines before the remaining tags are stripped, otherwise
headings would run into the following paragraph.
"""

from __future__ import annotations

import logging
import re

from scholartext.normalizers.text import normalize_text

logger = logging.getLogger(__name__)

_SCRIPT_BLOCK = re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE | re.DOTALL)
_STYLE_BLOCK = re.compile(r"<style[^>]*>.*?</style>", re.IGNORECASE | re.DOTALL)
_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)

_LINE_BREAK = re.compile(r"<br\s*/?>", re.IGNORECASE)
_PARAGRAPH_END = re.compile(r"</p\s*>", re.IGNORECASE)
_DIV_END = re.compile(r"</div\s*>", re.IGNORECASE)
_HEADING_END = re.compile(r"</h[1-6]\s*>", re.IGNORECASE)

# Other block elements break the line on both sides, so a heading after
# a list, figure or table still starts its own line
_BLOCK_ELEMENTS = r"(?:h[1-6]|section|article|ul|ol|li|figure|figcaption|table|tr|blockquote)"
_BLOCK_START = re.compile(r"<" + _BLOCK_ELEMENTS + r"\b[^>]*>", re.IGNORECASE)
_BLOCK_END = re.compile(r"</" + _BLOCK_ELEMENTS + r"\s*>", re.IGNORECASE)

_ANY_TAG = re.compile(r"<[^>]*>")

# Fixed whitelist; &amp; goes last so "&amp;lt;" decodes to "&lt;", not "<"
_ENTITIES = (
    ("&nbsp;", " "),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&amp;", "&"),
)


def sanitize_html(markup: str | bytes) -> str:
    """Convert hypertext to normalized plain text.

    Never raises; returns an empty string if conversion fails.

    Args:
        markup: HTML as text, or bytes decoded as UTF-8.

    Returns:
        Plain text with paragraph boundaries kept as blank lines.
    """
    try:
        if isinstance(markup, bytes):
            markup = markup.decode("utf-8", errors="replace")

        text = _SCRIPT_BLOCK.sub("", markup)
        text = _STYLE_BLOCK.sub("", text)
        text = _COMMENT.sub("", text)

        text = _LINE_BREAK.sub("\n", text)
        text = _PARAGRAPH_END.sub("\n\n", text)
        text = _DIV_END.sub("\n", text)
        text = _HEADING_END.sub("\n", text)
        text = _BLOCK_START.sub("\n", text)
        text = _BLOCK_END.sub("\n", text)

        text = _ANY_TAG.sub("", text)

        for entity, char in _ENTITIES:
            text = text.replace(entity, char)

        return normalize_text(text)
    except Exception as e:
        logger.warning("HTML text extraction failed: %s", e)
        return ""
