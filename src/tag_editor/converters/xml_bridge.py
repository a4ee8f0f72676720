"""
XML bridge between files on disk and DOM documents.

Parsing goes through defusedxml so that untrusted input cannot trigger
entity expansion or external entity resolution. Serialization is left to the
DOM engine.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional
from xml.dom.minidom import Document
from xml.parsers.expat import ExpatError

from defusedxml import DefusedXmlException
from defusedxml import minidom as safe_minidom

from ..core.errors import DocumentParseError


class XMLBridge:
    """
    Loads and stores DOM documents.

    The bridge owns no documents; every call hands a fresh document to the
    caller or writes the caller's document out.
    """

    def __init__(self, encoding: str = "utf-8", indent: str = "  "):
        self.encoding = encoding
        self.indent = indent
        self.logger = logging.getLogger(__name__)

    def parse_string(self, text: str) -> Document:
        """Parse XML text into a document."""
        try:
            return safe_minidom.parseString(text)
        except (ExpatError, DefusedXmlException) as e:
            raise DocumentParseError(f"Failed to parse XML: {e}") from e

    def load(self, path: Path) -> Document:
        """
        Load an XML file.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            DocumentParseError: If the file is not well-formed XML.
        """
        if not path.exists():
            raise FileNotFoundError(f"XML file not found: {path}")

        self.logger.debug(f"Loading {path}")
        try:
            with open(path, 'rb') as f:
                return safe_minidom.parse(f)
        except (ExpatError, DefusedXmlException) as e:
            raise DocumentParseError(f"Failed to parse {path}: {e}") from e

    def to_string(self, document: Document, pretty: bool = False) -> str:
        """Serialize ``document`` to text."""
        if pretty:
            return document.toprettyxml(indent=self.indent)
        return document.toxml()

    def save(self, document: Document, path: Path, pretty: bool = False) -> None:
        """Write ``document`` to ``path``, replacing any existing file."""
        self.logger.debug(f"Saving {path}")
        with open(path, 'w', encoding=self.encoding) as f:
            f.write(self.to_string(document, pretty=pretty))
