"""
Per-item search highlight classification and markup.
"""
import html
from typing import AbstractSet, Iterable, List, Optional, Tuple

from .models import HighlightRun, RunKind, SearchResult
from .search_engine import iter_occurrences

DEFAULT_MATCH_COLOR = "#ffff66"
DEFAULT_ACTIVE_COLOR = "#ffa500"


def classify_item(page: int, item_index: int, text: str, query: str,
                  result_keys: AbstractSet[Tuple[int, int]],
                  current: Optional[SearchResult]) -> List[HighlightRun]:
    """
    Split one text item into plain and matched runs.

    Items that are not in the result set are returned as a single plain run
    without scanning. In the current result's item every occurrence is
    marked active; in other result items every occurrence is marked matched.

    Args:
        page: 1-based page number of the item
        item_index: Position of the item within its page
        text: Raw item text
        query: Query the results were computed for
        result_keys: (page, item_index) pairs of the result set
        current: Result the navigator is positioned on

    Returns:
        Runs whose concatenated text equals ``text``
    """
    if not query or (page, item_index) not in result_keys:
        return [HighlightRun(text)]

    is_active = current is not None and current.key() == (page, item_index)
    match_kind = RunKind.ACTIVE if is_active else RunKind.MATCHED

    runs: List[HighlightRun] = []
    position = 0
    for start, end in iter_occurrences(text, query):
        if start > position:
            runs.append(HighlightRun(text[position:start]))
        runs.append(HighlightRun(text[start:end], match_kind))
        position = end

    if position < len(text) or not runs:
        runs.append(HighlightRun(text[position:]))
    return runs


def runs_to_html(runs: Iterable[HighlightRun],
                 match_color: str = DEFAULT_MATCH_COLOR,
                 active_color: str = DEFAULT_ACTIVE_COLOR) -> str:
    """Render runs as inline HTML, escaping the text."""
    parts = []
    for run in runs:
        escaped = html.escape(run.text)
        if run.kind is RunKind.ACTIVE:
            parts.append(
                f'<span class="search-match-active" '
                f'style="background-color: {active_color};">{escaped}</span>'
            )
        elif run.kind is RunKind.MATCHED:
            parts.append(
                f'<span class="search-match" '
                f'style="background-color: {match_color};">{escaped}</span>'
            )
        else:
            parts.append(escaped)
    return "".join(parts)


class SearchHighlight:
    """
    Immutable view of one search state used while pages render.

    A new instance is taken from the session after every search, query
    change or navigation step; ``generation`` identifies the search epoch
    it was taken in.
    """

    def __init__(self, query: str = "", results: Iterable[SearchResult] = (),
                 current: Optional[SearchResult] = None, generation: int = 0):
        self.query = query
        self.results = tuple(results)
        self.current = current
        self.generation = generation
        self._keys = frozenset(r.key() for r in self.results)

    def render(self, page: int, item_index: int, text: str) -> List[HighlightRun]:
        return classify_item(page, item_index, text, self.query, self._keys, self.current)

    def render_html(self, page: int, item_index: int, text: str,
                    match_color: str = DEFAULT_MATCH_COLOR,
                    active_color: str = DEFAULT_ACTIVE_COLOR) -> str:
        return runs_to_html(self.render(page, item_index, text), match_color, active_color)

    def is_result(self, page: int, item_index: int) -> bool:
        return (page, item_index) in self._keys

    def is_stale(self, generation: int) -> bool:
        return generation != self.generation

    def get_highlights_for_page(self, page: int) -> Tuple[List[int], int]:
        """
        Get search highlights for a specific page.

        Args:
            page: 1-based page number

        Returns:
            Tuple of (item indices with matches, position of the current
            result among them or -1)
        """
        item_indices = []
        current_idx_on_page = -1

        for result in self.results:
            if result.page == page:
                item_indices.append(result.item_index)
                if result == self.current:
                    current_idx_on_page = len(item_indices) - 1

        return item_indices, current_idx_on_page
