from typing import List, Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QListWidget, QListWidgetItem

from lumina.core.store import DocumentFile


class DocumentList(QListWidget):
    """List of opened documents; clicking one makes it current."""

    document_selected = pyqtSignal(str)  # document id

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFixedWidth(220)
        self.itemClicked.connect(self._item_clicked)
        self.setToolTip("Click a document to view it.")

    def _item_clicked(self, item):
        doc_id = item.data(Qt.UserRole)
        if doc_id is not None:
            self.document_selected.emit(doc_id)

    def load_documents(self, documents: List[DocumentFile], current: Optional[DocumentFile]):
        self.blockSignals(True)
        self.clear()
        for document in documents:
            item = QListWidgetItem(document.name)
            item.setData(Qt.UserRole, document.id)
            item.setToolTip(document.path)
            self.addItem(item)
            if current is not None and document.id == current.id:
                item.setSelected(True)
                self.setCurrentItem(item)
        self.blockSignals(False)
