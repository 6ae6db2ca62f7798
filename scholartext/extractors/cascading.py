"""
Cascading section segmenter.

Partitions normalized text into titled sections. No outline metadata
is available, so the structure is guessed from heading patterns:
1. Numbered headings ("2. Related Work")
2. Roman-numeral headings ("II. Related Work")
3. Canonical keyword headers ("Related Work")
4. Fallback: all substantial paragraphs merged into one section

Every source proposes a complete candidate partition. The partition
with the most qualifying sections wins; on a tie the earlier source
keeps its place. Sources are not fused.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from scholartext.extractors.profiles import (
    GENERAL_PROFILE,
    PDF_PROFILE,
    SegmenterProfile,
)
from scholartext.extractors.sources import (
    SOURCE_TYPES,
    PartitionCandidate,
    PartitionSource,
    merge_paragraphs,
)
from scholartext.extractors.validators import (
    VALIDATOR_TYPES,
    ValidationIssue,
    ValidationRule,
)
from scholartext.models import Section
from scholartext.normalizers.text import count_words

logger = logging.getLogger(__name__)

FALLBACK_STRATEGY = "paragraphs"


@dataclass
class SegmentationResult:
    """Result of segmentation, with the evidence behind it."""

    sections: list[Section]
    strategy: str | None  # Winning source name, "paragraphs", or None
    candidate_counts: dict[str, int]  # Qualifying sections per source
    validation_issues: list[ValidationIssue]
    processing_log: list[str] = field(default_factory=list)
    profile_used: str | None = None


class SectionSegmenter:
    """Partitions text into sections with a prioritized heuristic chain.

    Usage:
        segmenter = SectionSegmenter()
        for section in segmenter.segment(text):
            print(section.ordinal, section.title)

    Profile-based usage:
        segmenter = SectionSegmenter.for_profile(PDF_PROFILE)
        # or
        segmenter = SectionSegmenter.for_pdf()
    """

    def __init__(
        self,
        *,
        profile: SegmenterProfile = GENERAL_PROFILE,
        sources: list[PartitionSource] | None = None,
        validators: list[ValidationRule] | None = None,
    ):
        """Initialize the segmenter.

        Args:
            profile: Segmentation settings (sources, thresholds, validators).
            sources: Explicit partition sources, overriding the profile's.
            validators: Explicit validators, overriding the profile's.
        """
        self.profile = profile
        self.min_section_chars = profile.min_section_chars
        self.min_sections = profile.min_sections
        self.fallback_title = profile.fallback_title

        if sources is not None:
            self.sources = sources
        else:
            self.sources = [
                SOURCE_TYPES[name](min_marker_gap=profile.min_marker_gap)
                for name in profile.sources
            ]

        if validators is not None:
            self.validators = validators
        else:
            self.validators = [
                VALIDATOR_TYPES[name]() for name in profile.validators if name in VALIDATOR_TYPES
            ]

    @classmethod
    def for_profile(cls, profile: SegmenterProfile) -> SectionSegmenter:
        """Create a segmenter configured for a specific profile."""
        return cls(profile=profile)

    @classmethod
    def for_pdf(cls) -> SectionSegmenter:
        """Create the simplified segmenter used for PDF text."""
        return cls(profile=PDF_PROFILE)

    def segment(self, text: str) -> list[Section]:
        """Partition text into sections.

        Pure and deterministic; never raises.

        Args:
            text: Normalized document text.

        Returns:
            Sections in document order, ordinals 1..n (may be empty).
        """
        return self.segment_with_details(text).sections

    def segment_with_details(self, text: str) -> SegmentationResult:
        """Partition text and report how the partition was chosen.

        Args:
            text: Normalized document text.

        Returns:
            SegmentationResult with sections, strategy and validation issues.
        """
        text = text or ""
        log: list[str] = []
        counts: dict[str, int] = {}

        best: list[PartitionCandidate] = []
        strategy: str | None = None

        for source in self.sources:
            candidates = self._partition_safely(source, text, log)
            if len(candidates) < self.min_sections:
                counts[source.name] = 0
                continue

            counts[source.name] = len(candidates)
            log.append(f"Source {source.name} proposed {len(candidates)} sections")

            # Strictly greater: on a tie the earlier source wins
            if len(candidates) > len(best):
                best = candidates
                strategy = source.name

        if not best:
            best = merge_paragraphs(text, self.min_section_chars, self.fallback_title)
            if best:
                strategy = FALLBACK_STRATEGY
                log.append("No heading pattern qualified, merged paragraphs")
            else:
                log.append("No qualifying content")

        issues = []
        for validator in self.validators:
            issues.extend(validator.check(best))

        for issue in issues:
            log.append(f"{issue.severity}: {issue.message}")
            logger.debug("Validation %s (%s): %s", issue.type, issue.severity, issue.message)

        sections = self._to_sections(best)
        logger.debug(
            "Segmented %d chars into %d sections (strategy=%s)",
            len(text),
            len(sections),
            strategy,
        )

        return SegmentationResult(
            sections=sections,
            strategy=strategy,
            candidate_counts=counts,
            validation_issues=issues,
            processing_log=log,
            profile_used=self.profile.name,
        )

    def _partition_safely(
        self,
        source: PartitionSource,
        text: str,
        log: list[str],
    ) -> list[PartitionCandidate]:
        """Run one source with error handling."""
        try:
            return source.partition(text, self.min_section_chars)
        except Exception as e:
            log.append(f"Source {source.name} failed: {e}")
            logger.warning("Source %s failed: %s", source.name, e)
            return []

    def _to_sections(self, candidates: list[PartitionCandidate]) -> list[Section]:
        """Number surviving candidates 1..n in document order."""
        ordered = sorted(candidates, key=lambda c: c.start)
        return [
            Section(
                title=candidate.title,
                content=candidate.content,
                ordinal=i,
                word_count=count_words(candidate.content),
            )
            for i, candidate in enumerate(ordered, start=1)
        ]


def segment(text: str) -> list[Section]:
    """Convenience function: segment text with the general-purpose chain.

    Args:
        text: Normalized document text.

    Returns:
        List of sections.
    """
    return SectionSegmenter().segment(text)


def segment_pdf_text(text: str) -> list[Section]:
    """Convenience function: segment PDF text (numbered headings only).

    Args:
        text: Normalized PDF text.

    Returns:
        List of sections.
    """
    return SectionSegmenter.for_pdf().segment(text)
