"""Segmenter profiles.

Profiles capture the source-specific segmentation settings: which
partition sources to try, in which order, and how long a section
body must be to count.

- GENERAL_PROFILE: text from the hypertext rendering (all sources)
- PDF_PROFILE: text from PyMuPDF (numbered headings only, shorter bodies)
- ABSTRACT_PROFILE: the caller's abstract (paragraph merge only)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from scholartext.models import ContentSource

if TYPE_CHECKING:
    from scholartext.config import ExtractionConfig


@dataclass(frozen=True)
class SegmenterProfile:
    """Configuration for one segmentation path.

    Attributes:
        name: Profile identifier (e.g., "general", "pdf").
        description: Human-readable description.
        sources: Partition source names in priority order.
        min_section_chars: Minimum body length for a section (and paragraph
            length for the fallback).
        min_marker_gap: Minimum gap after a heading before the next marker.
        min_sections: Sections a partition needs to qualify.
        fallback_title: Title of the single merged-paragraph section.
        validators: Validator names to apply ("title_quality").
    """

    name: str
    description: str
    sources: tuple[str, ...] = ("numbered", "roman", "keyword")
    min_section_chars: int = 100
    min_marker_gap: int = 20
    min_sections: int = 2
    fallback_title: str = "Full Content"
    validators: tuple[str, ...] = ("title_quality",)


GENERAL_PROFILE = SegmenterProfile(
    name="general",
    description="Sanitized hypertext: numbered, roman and keyword headings",
    sources=("numbered", "roman", "keyword"),
    min_section_chars=100,
)

PDF_PROFILE = SegmenterProfile(
    name="pdf",
    description="PDF text: numbered headings only, shorter bodies allowed",
    sources=("numbered",),
    min_section_chars=50,
)

ABSTRACT_PROFILE = SegmenterProfile(
    name="abstract",
    description="Caller-supplied abstract: every non-empty paragraph is kept",
    sources=(),
    min_section_chars=0,
    validators=(),
)

PROFILES: dict[str, SegmenterProfile] = {
    "general": GENERAL_PROFILE,
    "pdf": PDF_PROFILE,
    "abstract": ABSTRACT_PROFILE,
}

_SOURCE_PROFILES = {
    ContentSource.HTML: GENERAL_PROFILE,
    ContentSource.PDF: PDF_PROFILE,
    ContentSource.ABSTRACT: ABSTRACT_PROFILE,
}


def get_profile(
    source: ContentSource,
    config: ExtractionConfig | None = None,
) -> SegmenterProfile:
    """Get the segmentation profile for a content source.

    Args:
        source: Provenance of the text to segment.
        config: Optional config whose thresholds override the defaults.

    Returns:
        The matching SegmenterProfile.
    """
    profile = _SOURCE_PROFILES[source]
    if config is None or source is ContentSource.ABSTRACT:
        return profile

    min_chars = (
        config.pdf_min_section_chars
        if source is ContentSource.PDF
        else config.min_section_chars
    )
    return replace(
        profile,
        min_section_chars=min_chars,
        min_marker_gap=config.min_marker_gap,
    )
