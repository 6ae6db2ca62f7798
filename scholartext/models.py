"""
Data models for scholartext.

These models represent the transient inputs and the final output
of a content extraction. Nothing here is persisted; every object
is created fresh per request.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ContentSource(Enum):
    """Which representation produced the extracted content."""

    HTML = "html"
    PDF = "pdf"
    ABSTRACT = "abstract"


@dataclass(frozen=True)
class RawDocument:
    """Raw bytes fetched from one representation of a paper."""

    data: bytes
    source: ContentSource  # HTML or PDF
    url: str

    def as_text(self) -> str:
        """Decode the payload as UTF-8, replacing undecodable bytes."""
        return self.data.decode("utf-8", errors="replace")

    @property
    def looks_like_pdf(self) -> bool:
        """Whether the payload starts with the PDF magic bytes."""
        return self.data.lstrip()[:5] == b"%PDF-"


@dataclass(frozen=True)
class Section:
    """A titled, ordered span of document text."""

    title: str
    content: str
    ordinal: int  # 1-based, contiguous, in document order
    word_count: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON shape consumed by the narration assembler."""
        return {
            "title": self.title,
            "content": self.content,
            "ordinal": self.ordinal,
            "wordCount": self.word_count,
        }


@dataclass
class ContentBundle:
    """
    The main output type for callers.

    `full_text` is the normalized text that was actually segmented;
    the counts are derived from it, never from the sections.

    Example:
        >>> bundle = await scholartext.extract_content(pdf_url, abstract)
        >>> bundle.source
        <ContentSource.HTML: 'html'>
        >>> for section in bundle.sections:
        ...     print(section.ordinal, section.title)
    """

    full_text: str
    sections: list[Section] = field(default_factory=list)
    word_count: int = 0
    character_count: int = 0
    source: ContentSource = ContentSource.ABSTRACT

    @property
    def has_sections(self) -> bool:
        """Whether any section survived segmentation."""
        return len(self.sections) > 0

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary with camelCase keys, e.g. ``{"fullText": ...}``
        """
        return {
            "fullText": self.full_text,
            "sections": [section.to_dict() for section in self.sections],
            "wordCount": self.word_count,
            "characterCount": self.character_count,
            "source": self.source.value,
        }
