"""
Page-by-page text view with inline search highlights.
"""
import html
import logging
from typing import Optional

from PyQt5.QtWidgets import QTextBrowser

from lumina.core.search import Corpus, SearchHighlight, SearchResult
from lumina.styles import ThemeColors, ThemeManager

logger = logging.getLogger(__name__)


def page_anchor(page: int) -> str:
    return f"page-{page}"


class PageTextView(QTextBrowser):
    """
    Shows every page's text items, marking up search matches.

    The view re-renders when the highlight snapshot changes generation or
    the current result moves, and scrolls to the page of the current result.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setOpenLinks(False)
        self._corpus: Optional[Corpus] = None
        self._highlight = SearchHighlight()
        self._theme: ThemeColors = ThemeManager.DARK_THEME
        self._placeholder = "No PDF Selected"
        self._render()

    def set_theme(self, theme: ThemeColors):
        self._theme = theme
        self._render()

    def set_corpus(self, corpus: Optional[Corpus], placeholder: str = "No PDF Selected"):
        self._corpus = corpus
        self._placeholder = placeholder
        self._highlight = SearchHighlight()
        self._render()

    def update_highlights(self, highlight: SearchHighlight):
        """Re-render if the search generation or the current result changed."""
        previous = self._highlight
        self._highlight = highlight
        if not previous.is_stale(highlight.generation) and previous.current == highlight.current:
            return

        self._render()
        if highlight.current is not None:
            self.scroll_to_result(highlight.current)

    def scroll_to_result(self, result: SearchResult):
        self.scrollToAnchor(page_anchor(result.page))

    def _render(self):
        try:
            self.setHtml(self._build_html())
        except Exception:
            logger.exception("Failed to render page text")

    def _build_html(self) -> str:
        if self._corpus is None:
            return f"<p>{html.escape(self._placeholder)}</p>"
        if self._corpus.page_count == 0:
            return "<p>This document has no pages.</p>"

        theme = self._theme
        parts = []
        for page_number in range(1, self._corpus.page_count + 1):
            item_indices, _ = self._highlight.get_highlights_for_page(page_number)
            header = f"Page {page_number}"
            if item_indices:
                header += f" ({len(item_indices)} matching)"
            parts.append(
                f'<a name="{page_anchor(page_number)}"></a>'
                f'<h3 style="color: {theme.text_muted};">{header}</h3>'
            )

            items = self._corpus.page_items(page_number)
            if not items:
                parts.append(f'<p style="color: {theme.text_muted};"><i>No text</i></p>')
                continue

            for item in items:
                markup = self._highlight.render_html(
                    item.page, item.item_index, item.text,
                    theme.search_match, theme.search_active,
                )
                parts.append(f"<p>{markup}</p>")
        return "\n".join(parts)
