"""
Section extraction module.

Implements cascading section segmentation for papers without
outline metadata:
- Numbered headings ("1. Introduction")
- Roman-numeral headings ("I. Introduction")
- Keyword headers ("Introduction")
- Fallback: paragraphs merged into a single section

The partition with the most qualifying sections wins; ties go to the
earlier source.

Profiles select the chain per content source:
- GENERAL_PROFILE: sanitized hypertext
- PDF_PROFILE: PDF text, numbered headings only
- ABSTRACT_PROFILE: the caller's abstract
"""

from scholartext.extractors.cascading import (
    SectionSegmenter,
    SegmentationResult,
    segment,
    segment_pdf_text,
)
from scholartext.extractors.profiles import (
    ABSTRACT_PROFILE,
    GENERAL_PROFILE,
    PDF_PROFILE,
    PROFILES,
    SegmenterProfile,
    get_profile,
)
from scholartext.extractors.sources import (
    KEYWORD_HEADERS,
    KeywordHeaderSource,
    NumberedSectionSource,
    PartitionCandidate,
    SOURCE_TYPES,
    PartitionSource,
    RomanNumeralSource,
    SectionMarker,
    merge_paragraphs,
)
from scholartext.extractors.validators import (
    VALIDATOR_TYPES,
    QualityGate,
    TitleQualityValidator,
    ValidationIssue,
    ValidationRule,
)

__all__ = [
    # Main segmenter
    "SectionSegmenter",
    "SegmentationResult",
    "segment",
    "segment_pdf_text",
    # Profiles
    "SegmenterProfile",
    "get_profile",
    "PROFILES",
    "GENERAL_PROFILE",
    "PDF_PROFILE",
    "ABSTRACT_PROFILE",
    # Sources
    "PartitionSource",
    "NumberedSectionSource",
    "RomanNumeralSource",
    "KeywordHeaderSource",
    "PartitionCandidate",
    "SectionMarker",
    "KEYWORD_HEADERS",
    "SOURCE_TYPES",
    "merge_paragraphs",
    # Validators
    "QualityGate",
    "ValidationRule",
    "TitleQualityValidator",
    "ValidationIssue",
    "VALIDATOR_TYPES",
]
