"""
Search state for the document currently shown in the viewer.

SearchSession is the single writer of the corpus, query, result set and
navigator cursor. All changes go through its named actions and every
action notifies subscribers with the resulting SearchStatus.
"""
import asyncio
import logging
from typing import Callable, List, Optional

from ...config import StatusMessages
from ..errors import DocumentNotLoaded, SearchExecutionError
from .indexer import DocumentIndexer, PageTextExtractor
from .models import Corpus, SearchOutcome, SearchResult, SearchStatus
from .navigator import ResultNavigator
from .search_engine import PDFSearchEngine, normalize_query
from .search_highlight import SearchHighlight

logger = logging.getLogger(__name__)

StatusListener = Callable[[SearchStatus], None]


class SearchSession:
    """Owns indexing, searching and result navigation for one viewer."""

    def __init__(self, messages: Optional[StatusMessages] = None):
        self.messages = messages or StatusMessages()

        self._indexer = DocumentIndexer()
        self._engine = PDFSearchEngine()
        self._navigator = ResultNavigator()

        self._query: str = ""
        self._searched_query: str = ""
        self._search_generation: int = 0
        self._search_request: int = 0
        self._outcome = SearchOutcome.IDLE
        self._message: str = ""

        self._indexing: bool = False
        self._index_ready: Optional[asyncio.Event] = None

        self._listeners: List[StatusListener] = []

    # ----- Read access -----

    @property
    def query(self) -> str:
        return self._query

    @property
    def searched_query(self) -> str:
        """Query the current results were computed for."""
        return self._searched_query

    @property
    def generation(self) -> int:
        """Search generation, bumped on every search, clear and document change."""
        return self._search_generation

    @property
    def document_generation(self) -> int:
        return self._indexer.generation

    @property
    def document_id(self) -> Optional[str]:
        return self._indexer.document_id

    @property
    def corpus(self) -> Optional[Corpus]:
        return self._engine.corpus

    @property
    def is_indexing(self) -> bool:
        return self._indexing

    @property
    def results(self) -> List[SearchResult]:
        return self._navigator.results

    def current_result(self) -> Optional[SearchResult]:
        return self._navigator.current_result()

    def status(self) -> SearchStatus:
        index = self._navigator.current_index
        return SearchStatus(
            outcome=self._outcome,
            result_count=self._navigator.result_count,
            current_position=None if index is None else index + 1,
            message=self._message,
            generation=self._search_generation,
            current=self._navigator.current_result(),
        )

    def highlighter(self) -> SearchHighlight:
        """Snapshot of the state the page view needs to mark up text items."""
        return SearchHighlight(
            query=self._searched_query,
            results=self._navigator.results,
            current=self._navigator.current_result(),
            generation=self._search_generation,
        )

    # ----- Subscribers -----

    def subscribe(self, listener: StatusListener) -> Callable[[], None]:
        """
        Register a listener called with the new status after each action.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> SearchStatus:
        status = self.status()
        for listener in list(self._listeners):
            try:
                listener(status)
            except Exception:
                logger.exception("Search status listener %r failed", listener)
        return status

    # ----- Document actions -----

    def begin_document(self, document_id: Optional[str]) -> int:
        """
        Switch to a new document and discard all text and results.

        Returns:
            Document generation that the corpus must be applied with
        """
        generation = self._indexer.begin(document_id)
        self._engine.clear_corpus()
        self._reset_results()
        self._indexing = document_id is not None
        self._index_ready = None
        logger.debug("Document %s started generation %d", document_id, generation)
        self._notify()
        return generation

    def apply_corpus(self, generation: int, corpus: Corpus) -> bool:
        """
        Install a finished corpus if it belongs to the current document.

        Returns:
            False if the corpus was built for a superseded document
        """
        if not self._indexer.is_current(generation):
            logger.debug(
                "Dropping corpus of generation %d, current document generation is %d",
                generation, self._indexer.generation,
            )
            return False

        self._engine.set_corpus(corpus)
        self._indexing = False
        if self._outcome is SearchOutcome.INDEXING:
            self._outcome = SearchOutcome.IDLE
            self._message = ""
        self._notify()
        return True

    def fail_indexing(self, generation: int, reason: str) -> None:
        """Record that the document at ``generation`` could not be indexed."""
        if not self._indexer.is_current(generation):
            return
        logger.error("Indexing document %s failed: %s", self._indexer.document_id, reason)
        self._indexing = False
        self._notify()

    async def load_document(self, document_id: str, page_count: int,
                            extractor: PageTextExtractor) -> bool:
        """
        Start a new document and index its text.

        Returns:
            True if the corpus was installed, False if a newer document
            was selected before indexing finished
        """
        generation = self.begin_document(document_id)
        ready = self._index_ready = asyncio.Event()
        try:
            corpus = await self._indexer.index(generation, page_count, extractor)
        finally:
            ready.set()

        if corpus is None:
            return False
        return self.apply_corpus(generation, corpus)

    def close_document(self) -> None:
        self.begin_document(None)

    # ----- Query and search actions -----

    def set_query(self, text: str) -> SearchStatus:
        """
        Update the query text as typed.

        A blank query clears results and status and cancels any pending
        search; other text is only stored until a search is executed.
        """
        self._query = text
        if normalize_query(text) is not None:
            return self.status()

        self._search_request += 1
        self._reset_results()
        return self._notify()

    def execute_search(self, query: Optional[str] = None) -> SearchStatus:
        """
        Search the corpus and position the navigator on the first result.

        Args:
            query: Text to search, defaults to the current query

        Returns:
            Status after the search; failures are reported in the status
        """
        self._search_request += 1
        return self._run_search(query)

    async def execute_search_when_ready(self, query: Optional[str] = None) -> SearchStatus:
        """
        Like execute_search, but first wait for a pending index build.

        If another search is requested or the query is cleared while this
        one waits, this one is dropped and the current status returned.
        """
        self._search_request += 1
        request = self._search_request

        while self._indexing and self._index_ready is not None and not self._index_ready.is_set():
            await self._index_ready.wait()

        if request != self._search_request:
            logger.debug("Search request %d superseded by %d", request, self._search_request)
            return self.status()
        return self._run_search(query)

    def _run_search(self, query: Optional[str]) -> SearchStatus:
        if query is not None:
            self._query = query
        term = normalize_query(self._query)

        if term is None:
            self._reset_results()
            return self._notify()

        try:
            results = self._engine.execute_search(term)
        except DocumentNotLoaded:
            self._reset_results()
            if self._indexing:
                self._outcome = SearchOutcome.INDEXING
                self._message = self.messages.indexing
            else:
                self._outcome = SearchOutcome.NOT_LOADED
                self._message = self.messages.not_loaded
            return self._notify()
        except SearchExecutionError:
            logger.exception("Search for %r failed", term)
            self._reset_results()
            self._outcome = SearchOutcome.ERROR
            self._message = self.messages.search_error
            return self._notify()

        if results:
            outcome, message = SearchOutcome.FOUND, self.messages.found(len(results))
        else:
            outcome, message = SearchOutcome.NO_RESULTS, self.messages.no_results

        self._searched_query = term
        self._navigator.reset(results)
        self._search_generation += 1
        self._outcome = outcome
        self._message = message
        return self._notify()

    def next_result(self) -> SearchStatus:
        """Move to the next result, wrapping around after the last."""
        if self._navigator.next_result() is None:
            return self.status()
        return self._notify()

    def previous_result(self) -> SearchStatus:
        """Move to the previous result, wrapping around before the first."""
        if self._navigator.previous_result() is None:
            return self.status()
        return self._notify()

    def _reset_results(self) -> None:
        self._navigator.clear()
        self._searched_query = ""
        self._search_generation += 1
        self._outcome = SearchOutcome.IDLE
        self._message = ""
