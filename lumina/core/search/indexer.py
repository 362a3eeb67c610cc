"""
Builds the searchable corpus from per-page text extraction.
"""
import asyncio
import logging
from typing import Any, Mapping, Optional, Protocol, Sequence, Tuple

from ..errors import PageExtractionError
from .models import Corpus, TextItem

logger = logging.getLogger(__name__)


class PageTextExtractor(Protocol):
    """Anything that can produce the ordered text items of a 1-based page."""

    async def get_page_text(self, page_number: int) -> Sequence[Mapping[str, Any]]:
        ...


async def build_corpus(page_count: int, extractor: PageTextExtractor) -> Corpus:
    """
    Extract the text items of every page and assemble them into a corpus.

    All pages are requested concurrently and the corpus is only returned
    once every page has been attempted. A page whose extraction fails
    contributes no items; the remaining pages are still indexed.

    Args:
        page_count: Number of pages in the document
        extractor: Source of per-page text items

    Returns:
        Corpus with one entry per page, items in extraction order
    """
    if page_count < 0:
        raise ValueError(f"page_count must not be negative, got {page_count}")
    if page_count == 0:
        return Corpus.empty()

    pages = await asyncio.gather(
        *(_extract_page(extractor, page_number) for page_number in range(1, page_count + 1))
    )
    return Corpus(tuple(pages))


async def _extract_page(extractor: PageTextExtractor, page_number: int) -> Tuple[TextItem, ...]:
    try:
        raw_items = await extractor.get_page_text(page_number)
        return tuple(
            TextItem(page=page_number, item_index=idx, text=str(item.get("text", "")))
            for idx, item in enumerate(raw_items)
        )
    except PageExtractionError as e:
        logger.warning("%s; page will not be searchable", e)
        return ()
    except Exception as e:
        logger.warning("Error extracting text from page %d: %s", page_number, e)
        return ()


class DocumentIndexer:
    """
    Indexes documents and drops corpora built for a superseded document.

    Every call to begin() starts a new document generation; an index run
    started under an older generation yields None when it completes.
    """

    def __init__(self):
        self._generation = 0
        self._document_id: Optional[str] = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def document_id(self) -> Optional[str]:
        return self._document_id

    def begin(self, document_id: Optional[str]) -> int:
        """Start a new document epoch and return its generation."""
        self._generation += 1
        self._document_id = document_id
        return self._generation

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def index(self, generation: int, page_count: int,
                    extractor: PageTextExtractor) -> Optional[Corpus]:
        """
        Build the corpus for the document started under ``generation``.

        Returns:
            The corpus, or None if another document was selected meanwhile
        """
        corpus = await build_corpus(page_count, extractor)
        if not self.is_current(generation):
            logger.debug(
                "Discarding corpus for generation %d (current is %d)",
                generation, self._generation,
            )
            return None

        logger.info(
            "Indexed %d items across %d pages for %s",
            corpus.item_count, corpus.page_count, self._document_id,
        )
        return corpus
