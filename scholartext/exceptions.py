"""
Exception classes for scholartext.

All scholartext exceptions inherit from ScholarTextError,
making it easy to catch all library errors.

These are raised by the individual pipeline stages (fetching,
PDF parsing, quality checks). The extraction orchestrator catches
them and moves on to the next fallback stage, so callers of
``extract_content()`` never see them.

Example:
    >>> try:
    ...     data = await fetcher.fetch(url, timeout_ms=5000)
    ... except scholartext.ExtractionTimeoutError:
    ...     print("Too slow")
    ... except scholartext.ScholarTextError as e:
    ...     print(f"Fetch failed: {e}")
"""


class ScholarTextError(Exception):
    """
    Base exception for all scholartext errors.

    Catch this to handle any scholartext-specific error.
    """

    pass


class NetworkError(ScholarTextError):
    """
    Raised when a document cannot be retrieved.

    Covers refused connections, DNS failures, unsupported URL
    schemes and HTTP error statuses.
    """

    pass


class ExtractionTimeoutError(ScholarTextError, TimeoutError):
    """
    Raised when a fetch or parse exceeds its time budget.

    Also a builtin TimeoutError, so generic timeout handlers catch it.
    """

    pass


class ParseError(ScholarTextError):
    """
    Raised when a PDF is malformed, encrypted or otherwise unreadable.
    """

    pass


class QualityError(ScholarTextError):
    """
    Raised when extracted text is not real article content.

    Example:
        >>> QualityGate().check("Redirecting...")
        QualityError: Content too short (14 chars < 500)
    """

    pass
