"""Document reading module.

Fetching (httpx), PDF text extraction (PyMuPDF) and HTML sanitizing.
"""

from scholartext.readers.fetcher import Fetcher, fetch
from scholartext.readers.html_reader import sanitize_html
from scholartext.readers.pdf_reader import (
    DEFAULT_PARSE_TIMEOUT_MS,
    PDFTextExtractor,
    extract_pdf_text,
)

__all__ = [
    # Classes
    "Fetcher",
    "PDFTextExtractor",
    # Functions
    "fetch",
    "extract_pdf_text",
    "sanitize_html",
    # Constants
    "DEFAULT_PARSE_TIMEOUT_MS",
]
