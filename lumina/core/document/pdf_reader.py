"""
PDF document loading and per-page text extraction.
"""

import asyncio
import hashlib
import logging
import os
from typing import Dict, List, Optional

import fitz  # PyMuPDF

from ..errors import DocumentLoadError, PageExtractionError

logger = logging.getLogger(__name__)


def document_id_for_path(file_path: str) -> str:
    """Stable identifier for a PDF, derived from its absolute path."""
    return hashlib.md5(os.path.abspath(file_path).encode()).hexdigest()


class PDFDocumentReader:
    """Handles PDF document loading and text extraction."""

    def __init__(self):
        self.doc: Optional[fitz.Document] = None
        self.total_pages: int = 0
        self.current_file_path: Optional[str] = None
        self.document_id: Optional[str] = None

    def load_pdf(self, file_path: str) -> int:
        """
        Load a PDF document.

        Args:
            file_path: Path to the PDF file

        Returns:
            Number of pages

        Raises:
            DocumentLoadError: The file could not be opened as a PDF
        """
        if self.doc:
            self.close_document()

        try:
            doc = fitz.open(file_path)
        except Exception as e:
            raise DocumentLoadError(file_path, str(e)) from e

        self._set_document(doc, file_path, document_id_for_path(file_path))
        return self.total_pages

    def load_bytes(self, data: bytes, name: str = "document.pdf") -> int:
        """
        Load a PDF from memory.

        Args:
            data: Raw PDF bytes
            name: Display name used as the file path

        Returns:
            Number of pages
        """
        if self.doc:
            self.close_document()

        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise DocumentLoadError(name, str(e)) from e

        self._set_document(doc, name, hashlib.md5(data).hexdigest())
        return self.total_pages

    def _set_document(self, doc: fitz.Document, file_path: str, document_id: str) -> None:
        self.doc = doc
        self.total_pages = doc.page_count
        self.current_file_path = file_path
        self.document_id = document_id
        logger.info("Loaded %s (%d pages)", file_path, self.total_pages)

    def close_document(self) -> None:
        """Close the current PDF document and clear all state."""
        if self.doc:
            self.doc.close()
            self.doc = None

        self.total_pages = 0
        self.current_file_path = None
        self.document_id = None

    async def get_page_text(self, page_number: int) -> List[Dict[str, str]]:
        """
        Extract the ordered text items of a page.

        Each text line of the page, in reading order, becomes one item.

        Args:
            page_number: 1-based page number

        Returns:
            List of ``{"text": ...}`` items

        Raises:
            PageExtractionError: The page does not exist or cannot be parsed
        """
        # Let other tasks run between pages
        await asyncio.sleep(0)

        if not self.doc:
            raise PageExtractionError(page_number, "no document loaded")
        if not 1 <= page_number <= self.total_pages:
            raise PageExtractionError(page_number, "page out of range")

        try:
            page = self.doc.load_page(page_number - 1)
            text_dict = page.get_text("dict", sort=True)
        except Exception as e:
            raise PageExtractionError(page_number, str(e)) from e

        return self._text_items(text_dict)

    @staticmethod
    def _text_items(text_dict: Dict) -> List[Dict[str, str]]:
        items = []
        for block in text_dict.get("blocks", []):
            # Skip image blocks
            if block.get("type") != 0:
                continue
            for line in block.get("lines", []):
                text = "".join(span.get("text", "") for span in line.get("spans", []))
                if text.strip():
                    items.append({"text": text})
        return items

    def get_page_count(self) -> int:
        """Get the total number of pages."""
        return self.total_pages
