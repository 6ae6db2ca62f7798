"""
Section partition sources.

Each source proposes a candidate partition of the text based on one
kind of section marker:
- NumberedSectionSource: "3. Results"
- RomanNumeralSource: "III. Results"
- KeywordHeaderSource: a bare "Results" header line

Sources are independent and stateless between calls; the
SectionSegmenter decides which partition wins. Markers must start a
line, which keeps in-sentence numbering ("see Fig. 2. The ...")
from opening a section.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

DEFAULT_MIN_MARKER_GAP = 20

KEYWORD_HEADERS = (
    "Abstract",
    "Introduction",
    "Related Work",
    "Methodology",
    "Methods",
    "Method",
    "Experimental Setup",
    "Experiments",
    "Experiment",
    "Results",
    "Result",
    "Discussion",
    "Conclusions",
    "Conclusion",
    "References",
    "Bibliography",
    "Appendix",
    "Acknowledgments",
    "Acknowledgment",
    "Acknowledgements",
    "Acknowledgement",
)


@dataclass(frozen=True)
class SectionMarker:
    """A matched section heading in the source text."""

    start: int  # Position of the heading
    end: int  # Position where the body begins
    title: str


@dataclass(frozen=True)
class PartitionCandidate:
    """A proposed section from one partition source.

    The body has already passed the minimum-length gate.
    """

    start: int  # Position of the heading in the text
    end: int  # Position where the next kept heading (or the text) ends
    title: str
    content: str
    source: str  # "numbered", "roman", "keyword", "paragraphs"


class PartitionSource(ABC):
    """Abstract base for candidate partition sources."""

    name: str = "base"

    def __init__(self, min_marker_gap: int = DEFAULT_MIN_MARKER_GAP):
        """Initialize the source.

        Args:
            min_marker_gap: Markers starting closer than this to the end of the previous
                kept heading are ignored as spurious (table-of-contents runs).
        """
        self.min_marker_gap = min_marker_gap

    @property
    @abstractmethod
    def pattern(self) -> re.Pattern[str]:
        """Heading pattern; group 1 is the title."""

    def find_markers(self, text: str) -> list[SectionMarker]:
        """Find non-overlapping markers in document order."""
        markers: list[SectionMarker] = []
        for match in self.pattern.finditer(text):
            start = match.start(1)
            if markers and start - markers[-1].end < self.min_marker_gap:
                continue
            markers.append(
                SectionMarker(start=start, end=match.end(), title=match.group(1).strip())
            )
        return markers

    def partition(self, text: str, min_chars: int) -> list[PartitionCandidate]:
        """Split text at this source's markers.

        Each body runs from the end of its marker to the start of the next
        marker. Bodies shorter than min_chars are dropped; they do not merge
        into a neighbour.

        Args:
            text: Normalized document text.
            min_chars: Minimum stripped body length.

        Returns:
            Surviving candidates in document order (may be empty).
        """
        markers = self.find_markers(text)
        if len(markers) < 2:
            return []

        candidates = []
        for i, marker in enumerate(markers):
            end = markers[i + 1].start if i + 1 < len(markers) else len(text)
            content = text[marker.end : end].strip()
            if content and len(content) >= min_chars:
                candidates.append(
                    PartitionCandidate(
                        start=marker.start,
                        end=end,
                        title=marker.title,
                        content=content,
                        source=self.name,
                    )
                )
        return candidates


class NumberedSectionSource(PartitionSource):
    """Numbered headings: "1. Introduction", "12.Conclusion".

    The title runs to the end of the line or the first period.
    """

    name = "numbered"
    _pattern = re.compile(r"^[ \t]*(\d+\.[ \t]*[A-Z][^.\n]*\.?)", re.MULTILINE)

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern


class RomanNumeralSource(PartitionSource):
    """Roman-numeral headings: "IV. Experiments"."""

    name = "roman"
    _pattern = re.compile(r"^[ \t]*([IVXLC]+\.[ \t]*[A-Z][^.\n]*\.?)", re.MULTILINE)

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern


class KeywordHeaderSource(PartitionSource):
    """Canonical paper headers on their own line ("Results", "Abstract:").

    Matching is case-insensitive; the header may be followed by a colon.
    """

    name = "keyword"
    _pattern = re.compile(
        r"^[ \t]*(" + "|".join(re.escape(k) for k in KEYWORD_HEADERS) + r")[ \t]*(?::|$)",
        re.MULTILINE | re.IGNORECASE,
    )

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern


_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def merge_paragraphs(
    text: str,
    min_chars: int,
    title: str = "Full Content",
) -> list[PartitionCandidate]:
    """Fallback partition: one section made of all substantial paragraphs.

    Args:
        text: Normalized document text.
        min_chars: Paragraphs must be longer than this to be kept.
        title: Title for the merged section.

    Returns:
        A single candidate, or an empty list if no paragraph qualifies.
    """
    paragraphs = [p.strip() for p in _PARAGRAPH_BREAK.split(text)]
    kept = [p for p in paragraphs if len(p) > min_chars]
    if not kept:
        return []

    return [
        PartitionCandidate(
            start=0,
            end=len(text),
            title=title,
            content="\n\n".join(kept),
            source="paragraphs",
        )
    ]


SOURCE_TYPES: dict[str, type[PartitionSource]] = {
    NumberedSectionSource.name: NumberedSectionSource,
    RomanNumeralSource.name: RomanNumeralSource,
    KeywordHeaderSource.name: KeywordHeaderSource,
}
