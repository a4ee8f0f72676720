"""
Structural editing: creating, attaching and detaching elements.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from xml.dom.minidom import Document, Element

from .errors import InvalidArgumentError, TreeInvariantError
from .locator import find_all

logger = logging.getLogger(__name__)


class Placement(Enum):
    """Where a newly inserted element ended up."""
    ATTACHED = "attached"
    ORPHANED = "orphaned"


@dataclass
class InsertResult:
    """Outcome of :func:`insert_new_tag_below`."""

    element: Element
    parent: Element
    placement: Placement

    @property
    def attached(self) -> bool:
        return self.placement is Placement.ATTACHED


def insert_new_tag_below(
    document: Document,
    append_to: str,
    tag_name: str,
    value: str,
) -> InsertResult:
    """
    Insert ``<tag_name>value</tag_name>`` under the first ``append_to`` element.

    When no ``append_to`` element exists, a fresh one is created to hold the
    new tag but it is NOT attached to ``document``. The new structure is then
    invisible to every lookup on the document; ``result.placement`` is
    ``Placement.ORPHANED`` in that case.

    Args:
        document: Document to search for the parent.
        append_to: Tag name of the parent.
        tag_name: Tag name of the new element.
        value: Text content of the new element.

    Returns:
        The new element together with its parent and placement.

    Raises:
        InvalidArgumentError: If ``value`` is None.
    """
    if value is None:
        raise InvalidArgumentError(f"Value for new <{tag_name}> must not be None")

    matches = find_all(document.documentElement, append_to)
    if matches:
        parent = matches[0]
        placement = Placement.ATTACHED
    else:
        parent = document.createElement(append_to)
        placement = Placement.ORPHANED
        logger.warning(
            f"No <{append_to}> element found; <{tag_name}> is placed under a detached <{append_to}>"
        )

    new_element = document.createElement(tag_name)
    parent.appendChild(new_element)
    new_element.appendChild(document.createTextNode(value))
    return InsertResult(element=new_element, parent=parent, placement=placement)


def insert_tag_value(document: Document, tag_name: str, value: Optional[str]) -> Element:
    """
    Append a new ``tag_name`` element to the document root.

    A ``None`` value yields an element without children.
    """
    element = document.createElement(tag_name)
    document.documentElement.appendChild(element)
    if value is not None:
        element.appendChild(document.createTextNode(value))
    logger.debug(f"Inserted <{tag_name}> at document root")
    return element


def insert_tag_in_element(parent: Element, tag_name: str, value: str) -> Element:
    """
    Append ``<tag_name>value</tag_name>`` as the last child of ``parent``.

    Raises:
        InvalidArgumentError: If ``value`` is None. Nothing is modified.
    """
    if value is None:
        raise InvalidArgumentError(f"Value for new <{tag_name}> must not be None")

    owner = parent.ownerDocument
    new_element = owner.createElement(tag_name)
    parent.appendChild(new_element)
    new_element.appendChild(owner.createTextNode(value))
    return new_element


def delete_tag(document: Document, tag_name: str) -> None:
    """
    Detach every ``tag_name`` element from its parent.

    Matches are collected once before anything is removed. A match nested in
    another match is still detached from its own parent.

    Raises:
        TreeInvariantError: If a matched element has no parent.
    """
    matches = find_all(document.documentElement, tag_name)
    for element in matches:
        parent = element.parentNode
        if parent is None:
            raise TreeInvariantError(f"<{tag_name}> element has no parent node")
        parent.removeChild(element)
    if matches:
        logger.debug(f"Deleted {len(matches)} <{tag_name}> element(s)")
