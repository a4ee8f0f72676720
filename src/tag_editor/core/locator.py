"""
Locate elements by tag name in document order.

Document order is pre-order: a parent before its children, children left to
right. The scope node is never part of its own results.
"""

from __future__ import annotations

from typing import Iterator, List

from xml.dom import Node
from xml.dom.minidom import Document, Element


def iter_descendants(scope: Node) -> Iterator[Node]:
    """Traverse the subtree below ``scope`` depth-first, excluding ``scope``."""
    stack = list(reversed(scope.childNodes))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.childNodes))


def find_all(scope: Node, tag_name: str) -> List[Element]:
    """
    Find every element below ``scope`` named ``tag_name``.

    Names are compared by exact string equality, so ``"*"`` only matches an
    element literally called ``*``.

    Returns:
        Matching elements in document order, or an empty list.
    """
    return [
        node for node in iter_descendants(scope)
        if node.nodeType == Node.ELEMENT_NODE and node.tagName == tag_name
    ]


def get_elements(tag_name: str, scope: Node) -> List[Element]:
    """Same as :func:`find_all` with the arguments swapped."""
    return find_all(scope, tag_name)


def exists(document: Document, tag_name: str) -> bool:
    """Check whether any element below the root is named ``tag_name``."""
    return len(find_all(document.documentElement, tag_name)) > 0


def is_attached(document: Document, node: Node) -> bool:
    """Check whether ``node`` is reachable from ``document``."""
    current = node
    while current is not None:
        if current is document:
            return True
        current = current.parentNode
    return False
