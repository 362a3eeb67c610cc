from typing import List, Optional, Sequence

from .models import SearchResult


class ResultNavigator:
    """
    Cursor over an ordered result set with wraparound.

    The cursor is None while there are no results; otherwise it is always a
    valid index into the results.
    """

    def __init__(self):
        self._results: List[SearchResult] = []
        self._index: Optional[int] = None

    def reset(self, results: Sequence[SearchResult]) -> None:
        """Replace the result set and move to the first result."""
        self._results = list(results)
        self._index = 0 if self._results else None

    def clear(self) -> None:
        self.reset([])

    def next_result(self) -> Optional[int]:
        """
        Move to the next result, wrapping to the first.

        Returns:
            New cursor index, or None if there are no results
        """
        if not self._results:
            return None
        self._index = (self._index + 1) % len(self._results)
        return self._index

    def previous_result(self) -> Optional[int]:
        """
        Move to the previous result, wrapping to the last.

        Returns:
            New cursor index, or None if there are no results
        """
        if not self._results:
            return None
        self._index = (self._index - 1 + len(self._results)) % len(self._results)
        return self._index

    def current_result(self) -> Optional[SearchResult]:
        if self._index is None:
            return None
        return self._results[self._index]

    @property
    def current_index(self) -> Optional[int]:
        """Current result index (0-based, None if Empty)."""
        return self._index

    @property
    def result_count(self) -> int:
        return len(self._results)

    @property
    def results(self) -> List[SearchResult]:
        return list(self._results)

    @property
    def is_empty(self) -> bool:
        return not self._results

    def position_label(self) -> str:
        """Human readable position, e.g. "2 of 5"; blank when Empty."""
        if self._index is None:
            return ""
        return f"{self._index + 1} of {len(self._results)}"
