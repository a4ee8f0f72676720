"""
Reading element values.

An element's value is the concatenation of its immediate children's values.
Text children contribute their data; element children contribute the null
marker, so ``<a>x<b/>y</a>`` reads as ``"xNoney"`` by default.
"""

from __future__ import annotations

from functools import singledispatch
from typing import List, Optional

from xml.dom import Node
from xml.dom.minidom import CharacterData, Element, ProcessingInstruction

from .locator import find_all

# Textual rendering of a node that carries no primitive value
NULL_MARKER = "None"


@singledispatch
def node_value(node: Node, null_marker: str = NULL_MARKER) -> str:
    """Return the primitive value of ``node`` as text."""
    value = node.nodeValue
    return null_marker if value is None else value


@node_value.register
def _(node: CharacterData, null_marker: str = NULL_MARKER) -> str:
    return node.data


@node_value.register
def _(node: ProcessingInstruction, null_marker: str = NULL_MARKER) -> str:
    return node.data


@node_value.register
def _(node: Element, null_marker: str = NULL_MARKER) -> str:
    return null_marker


def first_child_concatenated_value(node: Node, null_marker: str = NULL_MARKER) -> str:
    """
    Concatenate the values of all immediate children of ``node``.

    Element children are not skipped; each contributes ``null_marker``.
    Returns an empty string when ``node`` has no children.
    """
    return "".join(node_value(child, null_marker) for child in node.childNodes)


def get_tag_value(
    element: Optional[Node],
    tag_name: str,
    null_marker: str = NULL_MARKER,
) -> Optional[str]:
    """
    Get the value of the first ``tag_name`` element below ``element``.

    Args:
        element: Element (or document) to search in. May be None.
        tag_name: Tag name to look for.
        null_marker: Text used for element children.

    Returns:
        The concatenated child values of the first match, or None if
        ``element`` is None or nothing matches.
    """
    if element is None:
        return None
    matches = find_all(element, tag_name)
    if not matches:
        return None
    return first_child_concatenated_value(matches[0], null_marker)


def get_tag_values(
    element: Node,
    tag_name: str,
    null_marker: str = NULL_MARKER,
) -> List[Optional[str]]:
    """
    Get one value per ``tag_name`` element below ``element``.

    Each entry is looked up *inside* the matched element, i.e. it is the value
    of a nested ``tag_name`` element, not of the match itself. Matches without
    a same-named descendant therefore yield None.
    """
    return [
        get_tag_value(match, tag_name, null_marker)
        for match in find_all(element, tag_name)
    ]
