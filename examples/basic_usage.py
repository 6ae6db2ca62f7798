#!/usr/bin/env python3
"""
Basic scholartext Usage Example

This example demonstrates the core workflow:
1. Extract a paper's content from its PDF URL
2. Customize timeouts and thresholds
3. Inspect sections and provenance
4. Serialize for a downstream service
5. Use the pipeline pieces on their own
"""

import asyncio
import json
import logging

import scholartext
from scholartext import ExtractionConfig

PDF_URL = "https://arxiv.org/pdf/2401.00001.pdf"
ABSTRACT = (
    "Sparse autoencoders are designed to extract interpretable features "
    "from language models. We show that dense latents are features, not bugs."
)


async def main():
    # ─────────────────────────────────────────────────────────────────────────
    # 1. Basic Extraction
    # ─────────────────────────────────────────────────────────────────────────

    # Tries the HTML rendering, then the PDF, then the abstract. Never raises.
    bundle = await scholartext.extract_content(PDF_URL, abstract_text=ABSTRACT)

    print(f"Source: {bundle.source.value}")
    print(f"  Sections: {len(bundle.sections)}")
    print(f"  Words: {bundle.word_count:,}")
    print(f"  Characters: {bundle.character_count:,}")

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Custom Configuration
    # ─────────────────────────────────────────────────────────────────────────

    config = ExtractionConfig(
        html_timeout_ms=3000,  # Give up on the HTML rendering sooner
        pdf_parse_timeout_ms=15000,  # Large PDFs need longer to parse
        min_section_chars=150,  # Ignore short bodies (figure captions etc.)
        try_html=False,  # Go straight to the PDF
    )

    bundle = await scholartext.extract_content(PDF_URL, ABSTRACT, config)

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Inspect Sections
    # ─────────────────────────────────────────────────────────────────────────

    for section in bundle.sections:
        print(f"{section.ordinal:>2}. {section.title} ({section.word_count} words)")
        print(f"    {section.content[:80]}...")

    if not bundle.has_sections:
        print("No content available for this paper")

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Serialize
    # ─────────────────────────────────────────────────────────────────────────

    # camelCase keys: fullText, sections, wordCount, characterCount, source
    payload = json.dumps(bundle.to_dict())
    print(f"Payload: {len(payload):,} bytes")


async def components_example():
    """Use the pipeline pieces directly."""
    from scholartext import Fetcher, PDFTextExtractor, sanitize_html, segment, segment_pdf_text

    fetcher = Fetcher()

    # Each piece raises scholartext errors; only extract_content() swallows them
    try:
        markup = await fetcher.fetch(scholartext.html_url_for(PDF_URL), timeout_ms=5000)
        for section in segment(sanitize_html(markup)):
            print(f"HTML {section.ordinal}: {section.title}")
    except scholartext.ScholarTextError as e:
        print(f"HTML rendering unavailable: {e}")

    try:
        data = await fetcher.fetch(PDF_URL, timeout_ms=10000)
    except scholartext.ExtractionTimeoutError:
        print("PDF download timed out")
        return

    text = await PDFTextExtractor(timeout_ms=8000).extract(data)
    if text is not None:
        for section in segment_pdf_text(text):
            print(f"PDF {section.ordinal}: {section.title}")


async def batch_example():
    """Extract several papers concurrently."""
    requests = [
        ("https://arxiv.org/pdf/2401.00001.pdf", "First abstract"),
        ("https://arxiv.org/pdf/2401.00002.pdf", "Second abstract"),
        ("", "A paper with no PDF link"),
    ]

    bundles = await scholartext.extract_batch(requests)

    for (url, _), bundle in zip(requests, bundles):
        print(f"{url or '<no url>'}: {bundle.source.value}, {len(bundle.sections)} sections")


if __name__ == "__main__":
    # Stage transitions and fallbacks are logged under "scholartext"
    logging.basicConfig(level=logging.INFO)
    print("scholartext Usage Examples")
    print("=" * 50)
    asyncio.run(main())
