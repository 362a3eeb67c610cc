"""
Custom widgets for document viewing.
"""

from .document_list import DocumentList
from .page_text_view import PageTextView

__all__ = [
    "DocumentList",
    "PageTextView",
]
