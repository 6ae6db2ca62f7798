"""
scholartext: Extract scholarly papers as segmented plain text.

This library fetches a paper's hypertext or PDF rendering, normalizes
it to plain text and partitions it into titled sections, ready for
narration and summary generators.

Example:
    >>> import scholartext
    >>> bundle = scholartext.extract_content_sync(
    ...     "https://arxiv.org/pdf/2401.00001.pdf",
    ...     abstract_text="We study ...",
    ... )
    >>> for section in bundle.sections:
    ...     print(section.ordinal, section.title, section.word_count)
    >>> bundle.to_dict()["source"]
    'html'
"""

from scholartext.config import ExtractionConfig
from scholartext.exceptions import (
    ExtractionTimeoutError,
    NetworkError,
    ParseError,
    QualityError,
    ScholarTextError,
)
from scholartext.extract import (
    ContentAssembler,
    ContentExtractor,
    ExtractionState,
    extract_batch,
    extract_content,
    extract_content_sync,
    html_url_for,
)
from scholartext.extractors import (
    QualityGate,
    SectionSegmenter,
    segment,
    segment_pdf_text,
)
from scholartext.models import (
    ContentBundle,
    ContentSource,
    RawDocument,
    Section,
)
from scholartext.readers import (
    Fetcher,
    PDFTextExtractor,
    extract_pdf_text,
    fetch,
    sanitize_html,
)

__version__ = "0.1.0"
__all__ = [
    # Main API
    "extract_content",
    "extract_content_sync",
    "extract_batch",
    "html_url_for",
    # Pipeline components
    "ContentExtractor",
    "ContentAssembler",
    "ExtractionState",
    "Fetcher",
    "PDFTextExtractor",
    "QualityGate",
    "SectionSegmenter",
    # Component functions
    "fetch",
    "extract_pdf_text",
    "sanitize_html",
    "segment",
    "segment_pdf_text",
    # Configuration
    "ExtractionConfig",
    # Models
    "ContentBundle",
    "ContentSource",
    "RawDocument",
    "Section",
    # Exceptions
    "ScholarTextError",
    "NetworkError",
    "ExtractionTimeoutError",
    "ParseError",
    "QualityError",
]
