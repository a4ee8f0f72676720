"""
DocumentEditor: the convenience facade over the core tag primitives.

The editor keeps no per-document state. Every method takes the document (or
an element in it) explicitly and edits it in place.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from xml.dom import Node
from xml.dom.minidom import Document, Element

from .config import EditorConfig, load_config
from .core import attributes, locator, structure, text_editor, values
from .core.structure import InsertResult


class DocumentEditor:
    """
    Reads, inserts, updates and deletes named tags in a DOM document.

    Configuration only affects how values are rendered; edits behave the same
    under any configuration.
    """

    def __init__(self, config: Optional[EditorConfig] = None):
        self.config = config or load_config()
        self.logger = logging.getLogger(__name__)

    # Lookup

    def find_all(self, scope: Node, tag_name: str) -> List[Element]:
        """Find all ``tag_name`` elements below ``scope`` in document order."""
        return locator.find_all(scope, tag_name)

    def get_elements(self, tag_name: str, scope: Node) -> List[Element]:
        return locator.get_elements(tag_name, scope)

    def check_tag_exists(self, document: Document, tag_name: str) -> bool:
        """Check whether ``tag_name`` occurs anywhere below the root."""
        return locator.exists(document, tag_name)

    exists = check_tag_exists

    # Attributes and text

    def set_attribute(self, element: Element, name: str, value: str) -> None:
        attributes.set_attribute(element, name, value)
        self.logger.debug(f"Set attribute {name}={value!r} on <{element.tagName}>")

    add_attribute_to_element = set_attribute

    def replace_first_child_or_append(self, element: Element, value: str) -> None:
        text_editor.replace_first_child_or_append(element, value)

    def replace_tag_value(self, document: Document, tag_name: str, value: str) -> None:
        """Replace the first child of every ``tag_name`` element with ``value``."""
        text_editor.replace_tag_value(document, tag_name, value)

    # Structure

    def insert_new_tag_below(
        self,
        document: Document,
        append_to: str,
        tag_name: str,
        value: str,
    ) -> InsertResult:
        """
        Insert a new tag under the first ``append_to`` element.

        See :func:`tag_editor.core.structure.insert_new_tag_below`; the result
        is ORPHANED when ``append_to`` does not exist in ``document``.
        """
        result = structure.insert_new_tag_below(document, append_to, tag_name, value)
        self.logger.debug(f"Inserted <{tag_name}> below <{append_to}> ({result.placement.value})")
        return result

    def insert_tag_value(self, document: Document, tag_name: str, value: Optional[str]) -> Element:
        return structure.insert_tag_value(document, tag_name, value)

    def insert_tag_in_element(self, parent: Element, tag_name: str, value: str) -> Element:
        element = structure.insert_tag_in_element(parent, tag_name, value)
        self.logger.debug(f"Inserted <{tag_name}> into <{parent.tagName}>")
        return element

    def delete_tag(self, document: Document, tag_name: str) -> None:
        structure.delete_tag(document, tag_name)

    def insert_or_update_tag_value(self, document: Document, tag_name: str, value: Optional[str]) -> None:
        """
        Update every ``tag_name`` element, or add one if there are none.

        Updating rewrites the first child of *all* matches. Inserting creates
        exactly one element, appended to the document root.
        """
        if self.check_tag_exists(document, tag_name):
            self.logger.debug(f"<{tag_name}> exists, updating")
            self.replace_tag_value(document, tag_name, value)
        else:
            self.logger.debug(f"<{tag_name}> missing, inserting at root")
            self.insert_tag_value(document, tag_name, value)

    # Values

    def first_child_concatenated_value(self, node: Node) -> str:
        return values.first_child_concatenated_value(node, self.config.null_marker)

    def get_tag_value(self, element: Optional[Node], tag_name: str) -> Optional[str]:
        """Get the value of the first ``tag_name`` element below ``element``."""
        return values.get_tag_value(element, tag_name, self.config.null_marker)

    def get_tag_values(self, element: Node, tag_name: str) -> List[Optional[str]]:
        """
        Get nested ``tag_name`` values, one per ``tag_name`` match.

        Each match is searched for a same-named descendant; see
        :func:`tag_editor.core.values.get_tag_values`.
        """
        return values.get_tag_values(element, tag_name, self.config.null_marker)
