"""
Main application window for Lumina PDF Reader.
"""

import logging
import os
from typing import List, Optional

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QKeySequence
from PyQt5.QtWidgets import (
    QFileDialog,
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QShortcut,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from lumina.config import Settings
from lumina.core.search import Corpus, SearchSession, SearchStatus
from lumina.core.search.index_worker import IndexWorker
from lumina.core.store import DocumentFile, ViewerStore
from lumina.styles import ThemeManager
from lumina.ui.toolbars import SearchBar
from lumina.ui.widgets import DocumentList, PageTextView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, file_path: Optional[str] = None, settings: Optional[Settings] = None):
        super().__init__()
        self.settings = settings or Settings()

        # Initialize core components
        self._init_core_components()

        # Setup UI
        self._setup_window()
        self._setup_ui()
        self._setup_connections()

        # Apply initial theme
        self._apply_theme()

        # Load file if provided
        if file_path and os.path.exists(file_path):
            self.load_pdf(file_path)

    def _init_core_components(self):
        """Initialize core business logic components."""
        self.session = SearchSession(self.settings.messages)
        self.store = ViewerStore(self.session)

        # Index workers still running; older ones finish and are dropped
        self._index_workers: List[IndexWorker] = []

        self.dark_mode = self.settings.dark_mode

    def _setup_window(self):
        self.setWindowTitle("Lumina PDF Reader")
        self.resize(1200, 800)

    def _setup_ui(self):
        central = QWidget(self)
        self.setCentralWidget(central)

        root_layout = QHBoxLayout(central)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)

        self.document_list = DocumentList(central)
        root_layout.addWidget(self.document_list)

        content_layout = QVBoxLayout()
        content_layout.setContentsMargins(0, 0, 0, 0)
        content_layout.setSpacing(0)

        # Top bar
        top_frame = QFrame(central)
        top_frame.setObjectName("TopFrame")
        top_layout = QHBoxLayout(top_frame)
        top_layout.setContentsMargins(10, 6, 10, 6)

        self.open_button = self._create_tool_button("Open", "Open PDF (Ctrl+O)", self.open_pdf)
        self.close_button = self._create_tool_button("Close", "Close PDF", self.close_pdf)
        top_layout.addWidget(self.open_button)
        top_layout.addWidget(self.close_button)

        self.file_name_label = QLabel("No PDF Loaded", top_frame)
        top_layout.addWidget(self.file_name_label)
        top_layout.addStretch()

        self.search_button = self._create_tool_button("Search", "Search (Ctrl+F)", self.show_search_bar)
        self.theme_button = self._create_tool_button("Theme", "Toggle dark mode", self.toggle_theme)
        top_layout.addWidget(self.search_button)
        top_layout.addWidget(self.theme_button)

        content_layout.addWidget(top_frame)

        self.page_view = PageTextView(central)
        content_layout.addWidget(self.page_view)
        root_layout.addLayout(content_layout)

        # Floating search bar
        self.search_bar = SearchBar(self)
        self.search_bar.raise_()

    def _create_tool_button(self, text: str, tooltip: str, slot) -> QToolButton:
        btn = QToolButton(self)
        btn.setText(text)
        btn.setToolTip(tooltip)
        btn.clicked.connect(slot)
        return btn

    def _setup_connections(self):
        self.search_bar.query_changed.connect(self.session.set_query)
        self.search_bar.search_requested.connect(self._execute_search)
        self.search_bar.next_result_requested.connect(self._find_next)
        self.search_bar.prev_result_requested.connect(self._find_prev)
        self.search_bar.close_requested.connect(self._clear_search)

        self.document_list.document_selected.connect(self._on_document_selected)

        self.store.subscribe(self._on_store_changed)
        self.session.subscribe(self._on_search_status)

        QShortcut(QKeySequence.Open, self, activated=self.open_pdf)
        QShortcut(QKeySequence.Find, self, activated=self.show_search_bar)
        QShortcut(QKeySequence(Qt.Key_F3), self, activated=self._find_next)
        QShortcut(QKeySequence(Qt.SHIFT + Qt.Key_F3), self, activated=self._find_prev)
        QShortcut(QKeySequence(Qt.Key_Escape), self, activated=self._hide_search_bar)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._position_search_bar()

    def _position_search_bar(self):
        margin = 16
        x = self.width() - self.search_bar.width() - margin
        self.search_bar.move(max(margin, x), 56)

    # Theme Methods

    def _apply_theme(self):
        theme = ThemeManager.get_theme_colors(
            self.dark_mode, self.settings.match_color, self.settings.active_color
        )
        ThemeManager.apply_theme(self, theme)
        self.page_view.set_theme(theme)

    def toggle_theme(self):
        self.dark_mode = not self.dark_mode
        self._apply_theme()

    # Document Management Methods

    def open_pdf(self):
        """Open a PDF file dialog."""
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open PDF", "", "PDF Files (*.pdf)"
        )
        if file_path:
            self.load_pdf(file_path)

    def load_pdf(self, file_path: str):
        """Add a PDF to the document list and show it."""
        document = self.store.add_document(file_path)
        self._show_document(document)

    def _on_document_selected(self, document_id: str):
        document = self.store.get_document(document_id)
        if document is not None and document != self.store.current_document:
            self._show_document(document)

    def _show_document(self, document: DocumentFile):
        generation = self.store.set_current_document(document)
        self.page_view.set_corpus(None, self.settings.messages.indexing)
        self._start_indexing(document, generation)

    def _start_indexing(self, document: DocumentFile, generation: int):
        worker = IndexWorker(document.path, generation, self)
        worker.finished_indexing.connect(self._on_index_finished)
        worker.error.connect(self._on_index_error)
        worker.finished.connect(lambda: self._release_worker(worker))
        self._index_workers.append(worker)
        worker.start()

    def _release_worker(self, worker: IndexWorker):
        if worker in self._index_workers:
            self._index_workers.remove(worker)
        worker.deleteLater()

    def _on_index_finished(self, generation: int, corpus: Corpus):
        if self.session.apply_corpus(generation, corpus):
            self.page_view.set_corpus(corpus)

    def _on_index_error(self, generation: int, message: str):
        if generation != self.session.document_generation:
            return
        self.session.fail_indexing(generation, message)
        self.page_view.set_corpus(None, "Error loading PDF")
        QMessageBox.critical(self, "Error", message)

    def close_pdf(self):
        """Close the current PDF."""
        if self.store.current_document is None:
            return

        self._hide_search_bar()
        self.store.set_current_document(None)
        self.page_view.set_corpus(None)

    def _on_store_changed(self, store: ViewerStore):
        current = store.current_document
        self.file_name_label.setText(current.name if current else "No PDF Loaded")
        self.document_list.load_documents(store.documents, current)

    # Search Methods

    def show_search_bar(self):
        """Show or hide the search bar."""
        if self.search_bar.isVisible():
            self.search_bar.hide()
        else:
            self._position_search_bar()
            self.search_bar.show_bar()

    def _hide_search_bar(self):
        """Hide the search bar."""
        self.search_bar.hide()
        self._clear_search()

    def _execute_search(self, search_term: str):
        self.session.execute_search(search_term)

    def _find_next(self):
        self.session.next_result()

    def _find_prev(self):
        self.session.previous_result()

    def _clear_search(self):
        """Clear search results."""
        self.search_bar.clear_search()
        self.session.set_query("")

    def _on_search_status(self, status: SearchStatus):
        self.search_bar.set_status(status)
        self.page_view.update_highlights(self.session.highlighter())

    def closeEvent(self, event):
        for worker in list(self._index_workers):
            worker.wait()
        super().closeEvent(event)
