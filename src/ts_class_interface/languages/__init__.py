"""Tree-sitter language support for source parsing."""

from ts_class_interface.languages.base import (
    find_child_by_type,
    find_children_by_type,
    find_first_error,
    get_node_text,
    has_child_token,
    position,
)
from ts_class_interface.languages.typescript import GRAMMARS, TypeScriptLanguageSupport

__all__ = [
    # Base utilities
    "find_child_by_type",
    "find_children_by_type",
    "find_first_error",
    "get_node_text",
    "has_child_token",
    "position",
    # TypeScript
    "GRAMMARS",
    "TypeScriptLanguageSupport",
]
