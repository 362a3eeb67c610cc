from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True)
class TextItem:
    """One text fragment of a page, in extraction order."""
    page: int
    item_index: int
    text: str


@dataclass(frozen=True, order=True)
class SearchResult:
    """Reference to a matching TextItem by (page, item_index)."""
    page: int
    item_index: int

    def key(self) -> Tuple[int, int]:
        """Convert to a (page, item_index) tuple for lookups."""
        return (self.page, self.item_index)


@dataclass(frozen=True)
class Corpus:
    """
    Snapshot of every page's text items for one document load.

    ``pages[0]`` holds the items of page 1. Items keep the extractor's order.
    """
    pages: Tuple[Tuple[TextItem, ...], ...] = ()

    @classmethod
    def empty(cls) -> "Corpus":
        return cls(())

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def item_count(self) -> int:
        return sum(len(items) for items in self.pages)

    def items(self) -> Iterator[TextItem]:
        """Iterate all items in reading order (page, then item index)."""
        for page_items in self.pages:
            yield from page_items

    def page_items(self, page: int) -> Tuple[TextItem, ...]:
        """
        Get the items of a 1-based page.

        Returns:
            The page's items, or an empty tuple for pages out of range
        """
        if 1 <= page <= len(self.pages):
            return self.pages[page - 1]
        return ()

    def get_item(self, page: int, item_index: int) -> Optional[TextItem]:
        items = self.page_items(page)
        if 0 <= item_index < len(items):
            return items[item_index]
        return None


class RunKind(Enum):
    """Classification of a highlighted run of text."""
    PLAIN = "plain"
    MATCHED = "matched"
    ACTIVE = "active-matched"


@dataclass(frozen=True)
class HighlightRun:
    text: str
    kind: RunKind = RunKind.PLAIN


class SearchOutcome(Enum):
    """Terminal state of the last search action."""
    IDLE = "idle"
    INDEXING = "indexing"
    FOUND = "found"
    NO_RESULTS = "no_results"
    NOT_LOADED = "not_loaded"
    ERROR = "error"


@dataclass(frozen=True)
class SearchStatus:
    """What the search bar shows after each session action."""
    outcome: SearchOutcome = SearchOutcome.IDLE
    result_count: int = 0
    current_position: Optional[int] = None  # 1-based
    message: str = ""
    generation: int = 0
    current: Optional[SearchResult] = None

    @property
    def position_label(self) -> str:
        """Position text such as "2 of 5", blank when nothing is focused."""
        if self.current_position is None:
            return ""
        return f"{self.current_position} of {self.result_count}"
