"""Attribute editing."""

from __future__ import annotations

from xml.dom.minidom import Element


def set_attribute(element: Element, name: str, value: str) -> None:
    """Create or overwrite attribute ``name`` on ``element``."""
    element.setAttribute(name, value)
