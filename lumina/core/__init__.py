"""
Core business logic for Lumina PDF Reader.
"""

from .errors import (
    DocumentLoadError,
    DocumentNotLoaded,
    LuminaError,
    PageExtractionError,
    SearchExecutionError,
)
from .store import DocumentFile, ViewerStore

__all__ = [
    "DocumentFile",
    "ViewerStore",
    "LuminaError",
    "DocumentLoadError",
    "DocumentNotLoaded",
    "PageExtractionError",
    "SearchExecutionError",
]
