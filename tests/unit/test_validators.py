"""
Unit tests for the quality gate and section validators.
"""

import pytest
from conftest import body

from scholartext.exceptions import QualityError
from scholartext.extractors import (
    PartitionCandidate,
    QualityGate,
    TitleQualityValidator,
)


def candidate(start: int, end: int, title: str = "1. Introduction") -> PartitionCandidate:
    return PartitionCandidate(
        start=start, end=end, title=title, content=body(120), source="numbered"
    )


class TestQualityGate:
    """Test the content quality gate."""

    def test_long_text_passes(self):
        """Real content clears the gate."""
        gate = QualityGate()
        gate.check(body(600))
        assert gate.passes(body(600))

    def test_short_text_rejected(self):
        """Text under 500 chars is rejected."""
        gate = QualityGate()
        with pytest.raises(QualityError, match="too short"):
            gate.check(body(499))
        assert not gate.passes(body(499))

    def test_exact_threshold_passes(self):
        """Exactly 500 chars is enough."""
        assert QualityGate().passes(body(500))

    def test_redirect_stub_rejected(self):
        """Short redirect page is rejected."""
        stub = "Redirecting to the article. You should be redirected automatically."
        assert not QualityGate().passes(stub)

    def test_redirect_marker_rejected_even_when_long(self):
        """A marker phrase rejects text of any length."""
        text = body(400) + " You should be redirected to the new location " + body(400)
        with pytest.raises(QualityError, match="redirect"):
            QualityGate().check(text)

    def test_custom_markers(self):
        """Marker phrases are configurable."""
        gate = QualityGate(min_chars=10, redirect_markers=("Moved Permanently",))
        assert not gate.passes("301 Moved Permanently " + body(50))
        assert gate.passes("Redirecting " + body(50))

    def test_quality_error_is_library_error(self):
        """QualityError belongs to the library hierarchy."""
        from scholartext import ScholarTextError

        with pytest.raises(ScholarTextError):
            QualityGate().check("")


class TestTitleQualityValidator:
    """Test title validation."""

    def test_normal_title_passes(self):
        """Ordinary titles raise no issue."""
        assert TitleQualityValidator().check([candidate(0, 100)]) == []

    def test_long_title_reported(self):
        """Sentence-length titles are reported."""
        issues = TitleQualityValidator(max_title_length=20).check(
            [candidate(0, 100, "1. A numbered list item that ran on")]
        )
        assert [i.type for i in issues] == ["long_title"]
        assert issues[0].severity == "info"
