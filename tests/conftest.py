"""
Pytest configuration and fixtures for scholartext tests.
"""

from __future__ import annotations

import textwrap
import time
from collections.abc import Callable

import fitz  # PyMuPDF
import httpx
import pytest

from scholartext.readers import PDFTextExtractor

# Sample paper with numbered sections and a trailing keyword header
SAMPLE_PAPER_TEXT = """\
1. Introduction

Sparse autoencoders (SAEs) are designed to extract interpretable features from language models by enforcing a sparsity constraint. Ideally, training an SAE would yield latents that are both sparse and semantically meaningful. However, many SAE latents activate frequently (i.e., are dense), raising concerns that they may be undesirable artifacts of the training procedure.

2. Related Work

Previous work on sparse autoencoders has focused primarily on achieving sparsity through various regularization techniques. The relationship between sparsity and interpretability has been extensively studied in the context of feature learning.

3. Methodology

We systematically investigate the geometry, function, and origin of dense latents and show that they are not only persistent but often reflect meaningful model representations. We first demonstrate that dense latents tend to form antipodal pairs that reconstruct specific directions in the residual stream.

4. Experimental Setup

Our experiments are conducted on a variety of language models including GPT-2, BERT, and RoBERTa. We use standard evaluation metrics to assess the quality of extracted features.

5. Results

The results show that dense latents serve functional roles in language model computation and should not be dismissed as training noise. We observe consistent patterns across different model architectures.

6. Discussion

Our findings indicate that the traditional focus on sparsity may be misguided. Dense latents often contain valuable information about model behavior and should be studied in their own right.

7. Conclusion

In conclusion, we have demonstrated that dense SAE latents are features, not bugs. They play important functional roles in language model computation and should be studied systematically.

References

[1] Previous work on sparse autoencoders
[2] Studies on interpretability in neural networks
[3] Analysis of language model representations"""

SAMPLE_ABSTRACT = (
    "Sparse autoencoders are designed to extract interpretable features from "
    "language models. We show that dense latents are features, not bugs."
)


def body(length: int) -> str:
    """Filler text of exactly `length` characters (no periods, no newlines)."""
    if length <= 0:
        return ""
    text = ("latent feature data " * (length // 20 + 2))[:length]
    return text[:-1] + "x"


def paper_html(paragraph_count: int = 3) -> str:
    """A rendered paper with numbered h2 headings."""
    titles = ["Introduction", "Related Work", "Methodology", "Results", "Conclusion"]
    paragraphs = SAMPLE_PAPER_TEXT.split("\n\n")[1::2]
    parts = [
        "<html><head><title>Dense Latents Are Features</title>",
        "<style>p { margin: 0; }</style>",
        "<script>window.MathJax = {tex: {inlineMath: [['$', '$']]}};</script>",
        "</head><body>",
        "<h1>Dense SAE Latents Are Features, Not Bugs</h1>",
    ]
    for i in range(paragraph_count):
        parts.append(f"<h2>{i + 1}. {titles[i]}</h2>")
        parts.append(f"<p>{paragraphs[i]}</p>")
    parts.append("</body></html>")
    return "\n".join(parts)


class StalledPDFTextExtractor(PDFTextExtractor):
    """A parser that hangs, for timeout tests.

    Defined at module level so the worker process can unpickle it.
    """

    def read_text(self, data: bytes) -> str:
        time.sleep(30)
        return "too late"


def make_pdf(text: str, *, width: int = 80, lines_per_page: int = 45) -> bytes:
    """Render plain text into an in-memory PDF.

    Lines are wrapped to `width` characters; blank lines are dropped by the
    PDF text layer, so only line structure survives a round trip.
    """
    lines: list[str] = []
    for line in text.splitlines():
        lines.extend(textwrap.wrap(line, width) or [""])

    doc = fitz.open()
    for start in range(0, len(lines), lines_per_page):
        page = doc.new_page()
        page.insert_text((50, 60), "\n".join(lines[start : start + lines_per_page]), fontsize=9)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture(scope="session")
def sample_text() -> str:
    """Sample paper text with seven numbered sections."""
    return SAMPLE_PAPER_TEXT


@pytest.fixture(scope="session")
def sample_abstract() -> str:
    """Short abstract used by fallback tests."""
    return SAMPLE_ABSTRACT


@pytest.fixture(scope="session")
def sample_html() -> str:
    """Rendered paper markup with three numbered sections."""
    return paper_html()


@pytest.fixture(scope="session")
def sample_pdf() -> bytes:
    """In-memory PDF of the sample paper."""
    return make_pdf(SAMPLE_PAPER_TEXT)


@pytest.fixture
def sample_config():
    """Return a default ExtractionConfig for testing."""
    from scholartext import ExtractionConfig

    return ExtractionConfig()


@pytest.fixture
def mock_transport() -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport from a {path: response-or-exception} mapping.

    Unknown paths return 404. Requested URLs are recorded on
    `transport.requested`.
    """

    def _build(routes: dict) -> httpx.MockTransport:
        requested: list[str] = []

        async def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            route = routes.get(request.url.path)
            if route is None:
                return httpx.Response(404, content=b"Not Found")
            if callable(route):
                route = await route(request)
            if isinstance(route, Exception):
                raise route
            # Fresh response per request; routes may be hit concurrently
            return httpx.Response(route.status_code, headers=route.headers, content=route.content)

        transport = httpx.MockTransport(handler)
        transport.requested = requested
        return transport

    return _build
