"""
Core tree query and mutation primitives.
"""

from .errors import DocumentParseError, InvalidArgumentError, TagEditorError, TreeInvariantError
from .locator import exists, find_all, get_elements, is_attached, iter_descendants
from .attributes import set_attribute
from .text_editor import replace_first_child_or_append, replace_tag_value
from .structure import (
    InsertResult,
    Placement,
    delete_tag,
    insert_new_tag_below,
    insert_tag_in_element,
    insert_tag_value,
)
from .values import (
    NULL_MARKER,
    first_child_concatenated_value,
    get_tag_value,
    get_tag_values,
    node_value,
)

__all__ = [
    "TagEditorError",
    "InvalidArgumentError",
    "TreeInvariantError",
    "DocumentParseError",
    "iter_descendants",
    "find_all",
    "get_elements",
    "exists",
    "is_attached",
    "set_attribute",
    "replace_first_child_or_append",
    "replace_tag_value",
    "Placement",
    "InsertResult",
    "insert_new_tag_below",
    "insert_tag_value",
    "insert_tag_in_element",
    "delete_tag",
    "NULL_MARKER",
    "node_value",
    "first_child_concatenated_value",
    "get_tag_value",
    "get_tag_values",
]
