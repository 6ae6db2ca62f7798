"""
Basic tests to verify package structure and imports work.
"""

import pytest


def test_import():
    """Test that the package can be imported."""
    import scholartext

    assert scholartext.__version__ == "0.1.0"


def test_public_api():
    """Test that public API is accessible."""
    from scholartext import (
        ContentBundle,
        ContentSource,
        ExtractionConfig,
        Section,
        extract_batch,
        extract_content,
        extract_content_sync,
    )

    assert callable(extract_content)
    assert callable(extract_content_sync)
    assert callable(extract_batch)
    assert ContentBundle is not None
    assert ContentSource is not None
    assert ExtractionConfig is not None
    assert Section is not None


def test_all_names_exported():
    """Everything in __all__ exists."""
    import scholartext

    for name in scholartext.__all__:
        assert hasattr(scholartext, name), name


def test_exceptions():
    """Test exception hierarchy."""
    from scholartext import (
        ExtractionTimeoutError,
        NetworkError,
        ParseError,
        QualityError,
        ScholarTextError,
    )

    assert issubclass(NetworkError, ScholarTextError)
    assert issubclass(ExtractionTimeoutError, ScholarTextError)
    assert issubclass(ExtractionTimeoutError, TimeoutError)
    assert issubclass(ParseError, ScholarTextError)
    assert issubclass(QualityError, ScholarTextError)


class TestExtractionConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self, sample_config):
        """Defaults match the documented budgets and thresholds."""
        assert sample_config.html_timeout_ms == 5000
        assert sample_config.pdf_timeout_ms == 10000
        assert sample_config.pdf_parse_timeout_ms == 8000
        assert sample_config.min_content_chars == 500
        assert sample_config.min_section_chars == 100
        assert sample_config.pdf_min_section_chars == 50
        assert sample_config.min_marker_gap == 20
        assert sample_config.try_html is True
        assert sample_config.redirect_markers == ("Redirecting", "You should be redirected")

    def test_markers_become_tuple(self):
        """A list of markers is stored as a tuple."""
        from scholartext import ExtractionConfig

        config = ExtractionConfig(redirect_markers=["Moved"])
        assert config.redirect_markers == ("Moved",)

    @pytest.mark.parametrize(
        "field_name",
        ["html_timeout_ms", "pdf_timeout_ms", "pdf_parse_timeout_ms"],
    )
    def test_non_positive_timeout_rejected(self, field_name):
        """Timeouts must be positive."""
        from scholartext import ExtractionConfig

        with pytest.raises(ValueError, match=field_name):
            ExtractionConfig(**{field_name: 0})

    @pytest.mark.parametrize(
        "field_name",
        ["min_content_chars", "min_section_chars", "pdf_min_section_chars", "min_marker_gap"],
    )
    def test_negative_threshold_rejected(self, field_name):
        """Thresholds cannot be negative."""
        from scholartext import ExtractionConfig

        with pytest.raises(ValueError, match=field_name):
            ExtractionConfig(**{field_name: -1})

    def test_empty_user_agent_rejected(self):
        """A User-Agent is required."""
        from scholartext import ExtractionConfig

        with pytest.raises(ValueError, match="user_agent"):
            ExtractionConfig(user_agent="")
