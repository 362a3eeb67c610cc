"""
Exception types raised by the document and search layers.
"""
from typing import Optional


class LuminaError(Exception):
    """Base class for all reader errors."""


class DocumentLoadError(LuminaError):
    """The PDF file could not be opened."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        super().__init__(f"Error loading PDF {path!r}: {reason}" if reason else f"Error loading PDF {path!r}")


class DocumentNotLoaded(LuminaError):
    """A search was requested before the document text was indexed."""


class PageExtractionError(LuminaError):
    """Text for a single page could not be extracted."""

    def __init__(self, page: int, reason: Optional[str] = None):
        self.page = page
        self.reason = reason
        message = f"Failed to extract text from page {page}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SearchExecutionError(LuminaError):
    """Unexpected failure while scanning the corpus."""
