"""
Validation rules for extracted text and sections.

QualityGate decides whether fetched text is real article content;
it is the only blocking check. The section validators only report
issues (graceful degradation): they never change the segmentation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from scholartext.config import DEFAULT_REDIRECT_MARKERS
from scholartext.exceptions import QualityError

if TYPE_CHECKING:
    from scholartext.extractors.sources import PartitionCandidate


class QualityGate:
    """Reject text that is too short or is a redirect stub.

    Usage:
        gate = QualityGate()
        gate.check(text)  # raises QualityError
        if gate.passes(text):
            ...
    """

    def __init__(
        self,
        min_chars: int = 500,
        redirect_markers: tuple[str, ...] = DEFAULT_REDIRECT_MARKERS,
    ):
        """Initialize the gate.

        Args:
            min_chars: Minimum text length for real content.
            redirect_markers: Literal phrases that identify a redirect stub.
        """
        self.min_chars = min_chars
        self.redirect_markers = tuple(redirect_markers)

    def check(self, text: str) -> None:
        """Raise QualityError if text is not real content."""
        if len(text) < self.min_chars:
            raise QualityError(f"Content too short ({len(text)} chars < {self.min_chars})")

        for marker in self.redirect_markers:
            if marker in text:
                raise QualityError(f"Content looks like a redirect stub ({marker!r})")

    def passes(self, text: str) -> bool:
        """Whether text clears the gate."""
        try:
            self.check(text)
        except QualityError:
            return False
        return True


@dataclass
class ValidationIssue:
    """A problem found in a segmentation."""

    type: str  # "long_title"
    message: str
    severity: str  # "info"
    section_titles: list[str]  # Affected section titles


class ValidationRule(ABC):
    """Abstract base for section validation rules."""

    name: str = "base"

    @abstractmethod
    def check(self, candidates: list[PartitionCandidate]) -> list[ValidationIssue]:
        """Check sections for issues.

        Returns list of issues found (empty if all good).
        """
        pass


class TitleQualityValidator(ValidationRule):
    """Check section titles for likely false positives.

    A numbered "heading" that swallowed a whole sentence is usually a
    numbered list item, not a section.
    """

    name = "title_quality"

    def __init__(self, max_title_length: int = 120):
        """Initialize validator.

        Args:
            max_title_length: Maximum characters for a plausible title.
        """
        self.max_title_length = max_title_length

    def check(self, candidates: list[PartitionCandidate]) -> list[ValidationIssue]:
        """Check section titles for quality."""
        issues = []

        for candidate in candidates:
            title = candidate.title.strip()

            if len(title) > self.max_title_length:
                issues.append(
                    ValidationIssue(
                        type="long_title",
                        message=f"Section title is too long ({len(title)} chars)",
                        severity="info",
                        section_titles=[title[:50] + "..."],
                    )
                )

        return issues


VALIDATOR_TYPES: dict[str, type[ValidationRule]] = {
    TitleQualityValidator.name: TitleQualityValidator,
}
