"""
Viewer state: the opened documents and which one is being shown.
"""
import logging
import os
from dataclasses import dataclass
from typing import Callable, List, Optional

from .document.pdf_reader import document_id_for_path
from .search.session import SearchSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentFile:
    id: str
    name: str
    path: str


StoreListener = Callable[["ViewerStore"], None]


class ViewerStore:
    """
    Single-writer container for the viewer's document state.

    Selecting a different current document restarts the search session so
    results from the previous document never survive the switch.
    """

    def __init__(self, session: Optional[SearchSession] = None):
        self.documents: List[DocumentFile] = []
        self.current_document: Optional[DocumentFile] = None
        self.session = session or SearchSession()
        self._listeners: List[StoreListener] = []

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Store listener %r failed", listener)

    def add_document(self, file_path: str) -> DocumentFile:
        """
        Add a PDF to the document list.

        Args:
            file_path: Path to the PDF file

        Returns:
            The new entry, or the existing one if the path was already added
        """
        path = os.path.abspath(file_path)
        doc_id = document_id_for_path(path)
        existing = self.get_document(doc_id)
        if existing is not None:
            return existing

        document = DocumentFile(id=doc_id, name=os.path.basename(path), path=path)
        self.documents.append(document)
        self._notify()
        return document

    def get_document(self, document_id: str) -> Optional[DocumentFile]:
        for document in self.documents:
            if document.id == document_id:
                return document
        return None

    def set_current_document(self, document: Optional[DocumentFile]) -> Optional[int]:
        """
        Select the document to show.

        Args:
            document: Entry from ``documents`` or None to show nothing

        Returns:
            Document generation to index the new document under, or None
            when no document is selected
        """
        self.current_document = document
        if document is None:
            self.session.close_document()
            generation = None
        else:
            generation = self.session.begin_document(document.id)
        self._notify()
        return generation

    def remove_document(self, document_id: str) -> bool:
        document = self.get_document(document_id)
        if document is None:
            return False

        self.documents.remove(document)
        if self.current_document is not None and self.current_document.id == document_id:
            self.set_current_document(None)
        else:
            self._notify()
        return True
