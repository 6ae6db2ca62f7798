"""
PDF text extraction using PyMuPDF (fitz).

Converts PDF bytes to linear text. Parsing runs in a separate worker
process under its own timeout, separate from the fetch budget:
malformed or adversarial PDFs can keep a parser busy indefinitely, and
a process (unlike a thread) can be killed when the budget runs out.

Structure detection is handled by the extractors module
(SectionSegmenter); this module only produces normalized text.
"""

from __future__ import annotations

import asyncio
import logging
import multiprocessing

import fitz  # PyMuPDF

from scholartext.exceptions import ParseError
from scholartext.normalizers.text import normalize_text

logger = logging.getLogger(__name__)

DEFAULT_PARSE_TIMEOUT_MS = 8000

# spawn: forking a process that runs an event loop and client threads is unsafe
_WORKER_CONTEXT = multiprocessing.get_context("spawn")


def _settle(
    future: asyncio.Future, result: object = None, error: BaseException | None = None
) -> None:
    """Complete a future from the event loop unless the waiter already gave up."""
    if future.done():
        return
    if error is not None:
        future.set_exception(error)
    else:
        future.set_result(result)


class PDFTextExtractor:
    """Extracts plain text from PDF bytes.

    Usage:
        extractor = PDFTextExtractor()
        text = await extractor.extract(pdf_bytes)
        if text is None:
            ...  # timeout or unreadable PDF

    The instance is pickled into the worker process, so subclasses must
    be importable at module level.
    """

    def __init__(self, *, timeout_ms: int = DEFAULT_PARSE_TIMEOUT_MS):
        """Initialize the extractor.

        Args:
            timeout_ms: Default parse budget in milliseconds.
        """
        self.timeout_ms = timeout_ms

    async def extract(self, data: bytes, timeout_ms: int | None = None) -> str | None:
        """Extract text, returning None on timeout or parse failure.

        The worker process is terminated when the budget expires, so a
        hung parse never outlives its timeout.

        Args:
            data: PDF file bytes.
            timeout_ms: Parse budget; defaults to the instance setting.

        Returns:
            Normalized text, or None if parsing failed or timed out.
        """
        budget = timeout_ms if timeout_ms is not None else self.timeout_ms
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        pool = _WORKER_CONTEXT.Pool(processes=1)
        try:
            pool.apply_async(
                self.read_text,
                (data,),
                callback=lambda text: loop.call_soon_threadsafe(_settle, future, text),
                error_callback=lambda e: loop.call_soon_threadsafe(_settle, future, None, e),
            )
            return await asyncio.wait_for(future, timeout=budget / 1000)
        except asyncio.TimeoutError:
            logger.warning("PDF parsing timed out after %d ms", budget)
            return None
        except Exception as e:
            logger.warning("PDF parsing failed: %s", e)
            return None
        finally:
            pool.terminate()

    def read_text(self, data: bytes) -> str:
        """Parse PDF bytes synchronously.

        Args:
            data: PDF file bytes.

        Returns:
            Page texts joined by blank lines, normalized.

        Raises:
            ParseError: If the bytes are not a readable PDF.
        """
        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise ParseError(f"Failed to open PDF: {e}") from e

        try:
            # MuPDF sniffs content and may open markup or plain text as another format
            if not doc.is_pdf:
                raise ParseError("Not a PDF document")
            if doc.needs_pass:
                raise ParseError("PDF is encrypted")
            if doc.page_count == 0:
                raise ParseError("PDF has no pages")

            try:
                pages = [page.get_text("text") for page in doc]
            except Exception as e:
                raise ParseError(f"Failed to read PDF text: {e}") from e
        finally:
            doc.close()

        text = normalize_text("\n\n".join(p for p in pages if p.strip()))
        logger.info("PDF extracted: %d pages, %d characters", len(pages), len(text))
        return text


async def extract_pdf_text(
    data: bytes,
    timeout_ms: int = DEFAULT_PARSE_TIMEOUT_MS,
) -> str | None:
    """Convenience function for PDF text extraction.

    Args:
        data: PDF file bytes.
        timeout_ms: Parse budget in milliseconds.

    Returns:
        Normalized text, or None on timeout or parse failure.
    """
    return await PDFTextExtractor(timeout_ms=timeout_ms).extract(data)
