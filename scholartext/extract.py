"""
Content extraction orchestrator.

This module provides the main `extract_content()` coroutine that turns a
paper's PDF URL (plus its abstract) into a ContentBundle by wiring
together:
- Fetcher (raw bytes, one attempt per representation)
- sanitize_html / PDFTextExtractor (plain text)
- QualityGate (reject stubs and near-empty pages)
- SectionSegmenter (sections)
- ContentAssembler (final bundle)

Fallback order: hypertext rendering, then PDF rendering, then the
abstract. Extraction never raises; the worst case is an abstract-only
bundle, with no sections when the abstract is empty.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from scholartext.config import ExtractionConfig
from scholartext.exceptions import ScholarTextError
from scholartext.extractors.cascading import SectionSegmenter
from scholartext.extractors.profiles import get_profile
from scholartext.extractors.validators import QualityGate
from scholartext.models import ContentBundle, ContentSource, RawDocument, Section
from scholartext.normalizers.text import count_words, normalize_text
from scholartext.readers.fetcher import Fetcher
from scholartext.readers.html_reader import sanitize_html
from scholartext.readers.pdf_reader import PDFTextExtractor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

logger = logging.getLogger(__name__)


class ExtractionState(Enum):
    """Stages of one extraction."""

    START = "start"
    TRY_HTML = "try_html"
    TRY_PDF = "try_pdf"
    ABSTRACT_FALLBACK = "abstract_fallback"
    SEGMENT = "segment"
    DONE = "done"


def html_url_for(pdf_url: str) -> str:
    """Derive the hypertext rendering URL from a PDF URL.

    Example:
        >>> html_url_for("https://arxiv.org/pdf/2401.00001.pdf")
        'https://arxiv.org/html/2401.00001'
    """
    return pdf_url.replace(".pdf", "", 1).replace("/pdf/", "/html/", 1)


# ═══════════════════════════════════════════════════════════════════════════════
# Content Assembler
# ═══════════════════════════════════════════════════════════════════════════════


class ContentAssembler:
    """Builds the final ContentBundle.

    Counts come from the text that was segmented, never from a re-join
    of the sections: material between sections would otherwise be lost.
    """

    def build(
        self,
        full_text: str,
        sections: list[Section],
        source: ContentSource,
    ) -> ContentBundle:
        """Assemble a bundle from segmented text."""
        return ContentBundle(
            full_text=full_text,
            sections=sections,
            word_count=count_words(full_text),
            character_count=len(full_text),
            source=source,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Extraction Orchestrator
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass
class ExtractionContext:
    """State accumulated during one extraction."""

    document_url: str
    abstract_text: str
    state: ExtractionState = ExtractionState.START
    processing_log: list[str] = field(default_factory=list)

    # Set when a stage succeeds
    text: str = ""
    source: ContentSource | None = None

    def advance(self, state: ExtractionState, message: str | None = None) -> None:
        """Move to the next state, recording why."""
        self.state = state
        if message:
            self.processing_log.append(message)
            logger.info("%s: %s", state.value, message)


class ContentExtractor:
    """Runs the hypertext → PDF → abstract fallback chain.

    Instances hold only configuration and collaborators, so one extractor
    can serve any number of concurrent extractions.

    Usage:
        extractor = ContentExtractor()
        bundle = await extractor.extract(pdf_url, abstract)
    """

    def __init__(
        self,
        config: ExtractionConfig | None = None,
        *,
        fetcher: Fetcher | None = None,
        pdf_extractor: PDFTextExtractor | None = None,
    ) -> None:
        """
        Initialize the extractor.

        Args:
            config: Extraction configuration (uses defaults if None)
            fetcher: Fetcher to use (built from config if None)
            pdf_extractor: PDF text extractor (built from config if None)
        """
        self.config = config or ExtractionConfig()
        self.fetcher = fetcher or Fetcher(user_agent=self.config.user_agent)
        self.pdf_extractor = pdf_extractor or PDFTextExtractor(
            timeout_ms=self.config.pdf_parse_timeout_ms
        )
        self.quality_gate = QualityGate(
            min_chars=self.config.min_content_chars,
            redirect_markers=self.config.redirect_markers,
        )
        self.assembler = ContentAssembler()

    async def extract(self, document_url: str, abstract_text: str = "") -> ContentBundle:
        """
        Extract and segment a paper's content.

        Never raises.

        Args:
            document_url: URL of the paper's PDF rendering
            abstract_text: Abstract used when both renderings fail

        Returns:
            ContentBundle tagged with the representation that produced it
        """
        ctx = ExtractionContext(
            document_url=(document_url or "").strip(),
            abstract_text=abstract_text or "",
        )

        try:
            sections = await self._run(ctx)
        except Exception as e:
            # Stages handle their own errors; this guards the glue between them
            logger.warning("Extraction failed for %s: %s", ctx.document_url, e)
            ctx.processing_log.append(f"Extraction failed: {e}")
            sections = self._use_abstract(ctx)

        ctx.advance(ExtractionState.DONE)
        return self.assembler.build(ctx.text, sections, ctx.source or ContentSource.ABSTRACT)

    async def extract_many(self, requests: Iterable[tuple[str, str]]) -> list[ContentBundle]:
        """Extract (document_url, abstract_text) pairs concurrently, preserving order."""
        return list(
            await asyncio.gather(*(self.extract(url, abstract) for url, abstract in requests))
        )

    async def _run(self, ctx: ExtractionContext) -> list[Section]:
        """Walk the state machine up to SEGMENT."""
        if not ctx.document_url:
            ctx.advance(ExtractionState.ABSTRACT_FALLBACK, "No document URL")
            return self._use_abstract(ctx)

        if self.config.try_html:
            ctx.advance(ExtractionState.TRY_HTML)
            sections = await self._attempt_safely(self._try_html, ctx)
            if sections is not None:
                return sections

        ctx.advance(ExtractionState.TRY_PDF)
        sections = await self._attempt_safely(self._try_pdf, ctx)
        if sections is not None:
            return sections

        ctx.advance(ExtractionState.ABSTRACT_FALLBACK, "Both renderings failed, using abstract")
        return self._use_abstract(ctx)

    async def _attempt_safely(
        self,
        stage: Callable[[ExtractionContext], Awaitable[list[Section] | None]],
        ctx: ExtractionContext,
    ) -> list[Section] | None:
        """Run one stage; an unexpected error falls through to the next stage."""
        try:
            return await stage(ctx)
        except Exception as e:
            ctx.processing_log.append(f"Stage {ctx.state.value} failed: {e}")
            logger.warning("Stage %s failed: %s", ctx.state.value, e)
            return None

    async def _try_html(self, ctx: ExtractionContext) -> list[Section] | None:
        """Fetch the hypertext rendering; None means fall through."""
        url = html_url_for(ctx.document_url)
        try:
            raw = await self._fetch(url, ContentSource.HTML, self.config.html_timeout_ms)
            text = sanitize_html(raw.data)
            self.quality_gate.check(text)
        except ScholarTextError as e:
            ctx.processing_log.append(f"HTML extraction failed: {e}")
            logger.warning("HTML extraction failed for %s: %s", url, e)
            return None

        return self._segment(ctx, text, ContentSource.HTML)

    async def _try_pdf(self, ctx: ExtractionContext) -> list[Section] | None:
        """Fetch the PDF rendering; None means fall through."""
        try:
            raw = await self._fetch(ctx.document_url, ContentSource.PDF, self.config.pdf_timeout_ms)
        except ScholarTextError as e:
            ctx.processing_log.append(f"PDF fetch failed: {e}")
            logger.warning("PDF fetch failed for %s: %s", ctx.document_url, e)
            return None

        text = await self.pdf_extractor.extract(raw.data, self.config.pdf_parse_timeout_ms)
        if text:
            result = self._segmenter(ContentSource.PDF).segment_with_details(text)
            ctx.processing_log.extend(result.processing_log)
            if result.sections:
                ctx.text = text
                ctx.source = ContentSource.PDF
                ctx.advance(
                    ExtractionState.SEGMENT,
                    f"PDF text: {len(result.sections)} sections (strategy={result.strategy})",
                )
                return result.sections
            ctx.processing_log.append("PDF text produced no sections")
        else:
            ctx.processing_log.append("PDF text extraction failed")

        # The "PDF" may really be markup (e.g. an interstitial page)
        if raw.looks_like_pdf:
            ctx.processing_log.append("PDF payload is binary, not retrying as markup")
            return None

        text = sanitize_html(raw.data)
        if not self.quality_gate.passes(text):
            ctx.processing_log.append("PDF payload is not usable as text either")
            return None

        return self._segment(ctx, text, ContentSource.HTML)

    def _use_abstract(self, ctx: ExtractionContext) -> list[Section]:
        """Fall back to the caller's abstract."""
        ctx.text = normalize_text(ctx.abstract_text)
        ctx.source = ContentSource.ABSTRACT
        if not ctx.text:
            ctx.processing_log.append("Abstract is empty, no content available")
            logger.warning("No content available for %s", ctx.document_url or "<no url>")
        return self._segment(ctx, ctx.text, ContentSource.ABSTRACT)

    def _segment(self, ctx: ExtractionContext, text: str, source: ContentSource) -> list[Section]:
        """Segment accepted text and record the provenance."""
        ctx.text = text
        ctx.source = source
        result = self._segmenter(source).segment_with_details(text)
        ctx.processing_log.extend(result.processing_log)
        ctx.advance(
            ExtractionState.SEGMENT,
            f"{source.value}: {len(text)} chars, {len(result.sections)} sections "
            f"(strategy={result.strategy})",
        )
        return result.sections

    def _segmenter(self, source: ContentSource) -> SectionSegmenter:
        return SectionSegmenter(profile=get_profile(source, self.config))

    async def _fetch(self, url: str, source: ContentSource, timeout_ms: int) -> RawDocument:
        data = await self.fetcher.fetch(url, timeout_ms)
        return RawDocument(data=data, source=source, url=url)


# ═══════════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════════


async def extract_content(
    document_url: str,
    abstract_text: str = "",
    config: ExtractionConfig | None = None,
) -> ContentBundle:
    """
    Extract a paper's content as segmented plain text.

    Tries the hypertext rendering, then the PDF, then the abstract.
    Never raises.

    Args:
        document_url: URL of the paper's PDF rendering
        abstract_text: Abstract used as the last resort
        config: Extraction configuration (uses defaults if None)

    Returns:
        ContentBundle; `source` tells which representation was used

    Example:
        >>> bundle = await extract_content(
        ...     "https://arxiv.org/pdf/2401.00001.pdf",
        ...     abstract_text="We study ...",
        ... )
        >>> print(bundle.source.value, len(bundle.sections))
    """
    return await ContentExtractor(config).extract(document_url, abstract_text)


def extract_content_sync(
    document_url: str,
    abstract_text: str = "",
    config: ExtractionConfig | None = None,
) -> ContentBundle:
    """Blocking wrapper around extract_content() for scripts.

    Must not be called from inside a running event loop.
    """
    return asyncio.run(extract_content(document_url, abstract_text, config))


async def extract_batch(
    requests: Iterable[tuple[str, str]],
    config: ExtractionConfig | None = None,
) -> list[ContentBundle]:
    """
    Extract several papers concurrently.

    Args:
        requests: (document_url, abstract_text) pairs
        config: Extraction configuration shared by all requests

    Returns:
        Bundles in the same order as the requests
    """
    return await ContentExtractor(config).extract_many(requests)
