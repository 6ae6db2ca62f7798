"""
Configuration for scholartext content extraction.

The defaults reproduce the timeouts and thresholds the extraction
pipeline was tuned with; override them only for unusual sources.
"""

from dataclasses import dataclass

DEFAULT_REDIRECT_MARKERS: tuple[str, ...] = (
    "Redirecting",
    "You should be redirected",
)


@dataclass
class ExtractionConfig:
    """
    Configuration for content extraction.

    All options have sensible defaults. Create a config only
    if you need to customize behavior.

    Example:
        >>> config = ExtractionConfig(
        ...     html_timeout_ms=3000,
        ...     try_html=False,
        ... )
        >>> bundle = await scholartext.extract_content(pdf_url, abstract, config)
    """

    # Fetch budgets (milliseconds)
    html_timeout_ms: int = 5000
    pdf_timeout_ms: int = 10000

    # Parse budget, independent of fetch time
    pdf_parse_timeout_ms: int = 8000

    # Quality gate for fetched text
    min_content_chars: int = 500
    redirect_markers: tuple[str, ...] = DEFAULT_REDIRECT_MARKERS

    # Segmentation thresholds
    min_section_chars: int = 100  # General-purpose path
    pdf_min_section_chars: int = 50  # PDF-only path
    min_marker_gap: int = 20  # Minimum gap after a heading before the next marker

    # Source options
    try_html: bool = True  # False = go straight to the PDF rendering
    user_agent: str = "scholartext/0.1.0"

    def __post_init__(self):
        """Validate configuration."""
        for name in ("html_timeout_ms", "pdf_timeout_ms", "pdf_parse_timeout_ms"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be > 0, got {value}")

        for name in (
            "min_content_chars",
            "min_section_chars",
            "pdf_min_section_chars",
            "min_marker_gap",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

        if not self.user_agent.strip():
            raise ValueError("user_agent must not be empty")

        # Accept lists from callers but store an immutable tuple
        self.redirect_markers = tuple(self.redirect_markers)
