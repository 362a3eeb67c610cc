"""
Text search over an indexed document corpus with result management.

Matching is literal, case-insensitive substring containment within a
single text item. A phrase split across two items (for example a line
break inside the phrase) is not found.
"""
import logging
import re
from typing import Iterator, List, Optional, Tuple

from ..errors import DocumentNotLoaded, SearchExecutionError
from .models import Corpus, SearchResult

logger = logging.getLogger(__name__)


def normalize_query(query: Optional[str]) -> Optional[str]:
    """
    Strip a raw query string.

    Returns:
        The stripped query, or None if nothing searchable remains
    """
    if query is None:
        return None
    query = query.strip()
    return query or None


def find_matches(query: str, corpus: Corpus) -> List[SearchResult]:
    """
    Find every text item containing ``query``, case-insensitively.

    Each item contributes at most one result no matter how many times the
    query occurs in it. Results come out in reading order: page ascending,
    then item index ascending.

    Args:
        query: Non-empty text to look for
        corpus: Indexed document text

    Returns:
        Ordered list of matching item references
    """
    # Same pattern as iter_occurrences so every result has a highlight span
    pattern = compile_query(query)
    return [
        SearchResult(page=item.page, item_index=item.item_index)
        for item in corpus.items()
        if pattern.search(item.text)
    ]


def compile_query(query: str) -> "re.Pattern[str]":
    """Compile ``query`` as a literal, case-insensitive pattern."""
    return re.compile(re.escape(query), re.IGNORECASE)


def iter_occurrences(text: str, query: str) -> Iterator[Tuple[int, int]]:
    """
    Yield (start, end) spans of every non-overlapping occurrence of
    ``query`` in ``text``.
    """
    if not query:
        return
    for match in compile_query(query).finditer(text):
        yield match.start(), match.end()


class PDFSearchEngine:
    """Runs searches against the corpus of the current document."""

    def __init__(self):
        self._corpus: Optional[Corpus] = None
        self.current_search_term: str = ""

    def set_corpus(self, corpus: Corpus) -> None:
        """
        Set the corpus to search in.

        Args:
            corpus: Text index of the current document
        """
        self._corpus = corpus
        self.current_search_term = ""

    def clear_corpus(self) -> None:
        self._corpus = None
        self.current_search_term = ""

    def has_corpus(self) -> bool:
        return self._corpus is not None

    @property
    def corpus(self) -> Optional[Corpus]:
        return self._corpus

    def execute_search(self, search_term: str) -> List[SearchResult]:
        """
        Perform a new search across the entire document.

        Args:
            search_term: Non-empty text to search for

        Returns:
            Ordered list of results

        Raises:
            DocumentNotLoaded: No corpus has been set yet
            SearchExecutionError: The scan failed unexpectedly
        """
        if self._corpus is None:
            raise DocumentNotLoaded("Document text has not been indexed")

        self.current_search_term = search_term
        try:
            results = find_matches(search_term, self._corpus)
        except Exception as e:
            raise SearchExecutionError(f"Search for {search_term!r} failed: {e}") from e

        logger.debug("Search for %r matched %d items", search_term, len(results))
        return results
