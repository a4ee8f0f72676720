"""
Command-line interface for tag-editor.
"""

from .app import app

__all__ = ["app"]
