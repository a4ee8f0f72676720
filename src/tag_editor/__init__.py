"""
tag-editor: read, insert, update and delete named tags in XML documents.

The core operations work on ``xml.dom.minidom`` documents in place and keep
no state between calls.
"""

from .core import (
    DocumentParseError,
    InsertResult,
    InvalidArgumentError,
    Placement,
    TagEditorError,
    TreeInvariantError,
)
from .editor import DocumentEditor

__version__ = "0.1.0"

__all__ = [
    "DocumentEditor",
    "InsertResult",
    "Placement",
    "TagEditorError",
    "InvalidArgumentError",
    "TreeInvariantError",
    "DocumentParseError",
]
