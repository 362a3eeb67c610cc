"""
Search functionality for PDF documents.
"""

from .indexer import DocumentIndexer, PageTextExtractor, build_corpus
from .models import (
    Corpus,
    HighlightRun,
    RunKind,
    SearchOutcome,
    SearchResult,
    SearchStatus,
    TextItem,
)
from .navigator import ResultNavigator
from .search_engine import PDFSearchEngine, find_matches, iter_occurrences, normalize_query
from .search_highlight import SearchHighlight, classify_item, runs_to_html
from .session import SearchSession

__all__ = [
    "Corpus",
    "DocumentIndexer",
    "HighlightRun",
    "PDFSearchEngine",
    "PageTextExtractor",
    "ResultNavigator",
    "RunKind",
    "SearchHighlight",
    "SearchOutcome",
    "SearchResult",
    "SearchSession",
    "SearchStatus",
    "TextItem",
    "build_corpus",
    "classify_item",
    "find_matches",
    "iter_occurrences",
    "normalize_query",
    "runs_to_html",
]
