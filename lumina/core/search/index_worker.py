"""
Background worker that indexes a PDF's text without freezing the UI.
"""

import asyncio
import logging

from PyQt5.QtCore import QThread, pyqtSignal

from ..document.pdf_reader import PDFDocumentReader
from ..errors import DocumentLoadError
from .indexer import build_corpus

logger = logging.getLogger(__name__)


class IndexWorker(QThread):
    """
    Builds the corpus for one document generation.

    The worker opens its own handle on the file so the UI thread keeps
    exclusive use of the viewer's document. Results are delivered with the
    generation they were started for; the receiver decides whether they are
    still wanted.
    """

    # Signals
    finished_indexing = pyqtSignal(int, object)  # generation, Corpus
    error = pyqtSignal(int, str)  # generation, error message

    def __init__(self, file_path: str, generation: int, parent=None):
        super().__init__(parent)
        self._file_path = file_path
        self._generation = generation

    @property
    def generation(self) -> int:
        return self._generation

    def run(self):
        """Execute the indexing in the background thread."""
        reader = PDFDocumentReader()
        try:
            page_count = reader.load_pdf(self._file_path)
            corpus = asyncio.run(build_corpus(page_count, reader))
        except DocumentLoadError as e:
            self.error.emit(self._generation, str(e))
            return
        except Exception as e:
            logger.exception("Indexing %s failed", self._file_path)
            self.error.emit(self._generation, str(e))
            return
        finally:
            reader.close_document()

        self.finished_indexing.emit(self._generation, corpus)
