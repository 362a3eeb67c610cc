"""
PDF document handling.
"""
from .pdf_reader import PDFDocumentReader, document_id_for_path

__all__ = ['PDFDocumentReader', 'document_id_for_path']
