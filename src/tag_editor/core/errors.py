"""
Exception taxonomy for tag editing operations.

Not-found conditions are never exceptions: lookups return ``None`` or an
empty list instead.
"""

from __future__ import annotations


class TagEditorError(Exception):
    """Base class for all tag editor errors."""


class InvalidArgumentError(TagEditorError, ValueError):
    """A required argument was missing or of the wrong kind."""


class TreeInvariantError(TagEditorError, RuntimeError):
    """The underlying tree is in a state the engine should never produce."""


class DocumentParseError(TagEditorError, ValueError):
    """Raw text could not be parsed into a document."""
