"""
Text content editing.

Replacing an element's text only ever touches its first child. Any further
children survive the edit and end up after the new text node.
"""

from __future__ import annotations

import logging

from xml.dom.minidom import Document, Element

from .errors import InvalidArgumentError
from .locator import find_all

logger = logging.getLogger(__name__)


def _require_text(value: object) -> str:
    if value is None:
        raise InvalidArgumentError("Text value must not be None")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"Text value must be a string, got {type(value).__name__}")
    return value


def replace_first_child_or_append(element: Element, value: str) -> None:
    """
    Put a new text node holding ``value`` in place of the first child.

    If ``element`` has no children the text node becomes its only child.

    Raises:
        InvalidArgumentError: If ``value`` is not a string.
    """
    text = element.ownerDocument.createTextNode(_require_text(value))
    first_child = element.firstChild
    if first_child is not None:
        element.replaceChild(text, first_child)
    else:
        element.appendChild(text)


def replace_tag_value(document: Document, tag_name: str, value: str) -> None:
    """Replace the first child of every ``tag_name`` element with ``value``."""
    _require_text(value)
    matches = find_all(document.documentElement, tag_name)
    logger.debug(f"Replacing value of {len(matches)} <{tag_name}> element(s)")
    for element in matches:
        replace_first_child_or_append(element, value)
