"""Shared helper functions for TypeScript extraction.

This module provides node type constants and small modifier lookups used by
both the class and the import extractors.
"""

from tree_sitter import Node

from ts_class_interface.languages.base import (
    find_child_by_type,
    get_node_text,
    has_child_token,
)
from ts_class_interface.models import Visibility

# TypeScript file extensions per grammar
TS_EXTENSIONS = [".ts", ".mts", ".cts"]
TSX_EXTENSIONS = [".tsx"]

# TypeScript AST node types for top-level declarations
CLASS_TYPES = frozenset({"class_declaration", "abstract_class_declaration", "class"})
INTERFACE_TYPE = "interface_declaration"
TYPE_ALIAS_TYPE = "type_alias_declaration"
IMPORT_TYPE = "import_statement"
EXPORT_TYPE = "export_statement"
AMBIENT_TYPE = "ambient_declaration"

# TypeScript AST node types inside a class body
FIELD_TYPE = "public_field_definition"
METHOD_TYPE = "method_definition"
METHOD_SIGNATURE_TYPE = "method_signature"
ABSTRACT_METHOD_TYPE = "abstract_method_signature"
METHOD_NODE_TYPES = frozenset(
    {METHOD_TYPE, METHOD_SIGNATURE_TYPE, ABSTRACT_METHOD_TYPE}
)
PARAMETER_TYPES = frozenset({"required_parameter", "optional_parameter"})

CONSTRUCTOR_NAME = "constructor"
ACCESSOR_TOKENS = ("get", "set", "static get")


def get_name(node: Node, source: bytes) -> str | None:
    """Return the text of the node's `name` field, if present."""
    name_node = node.child_by_field_name("name")
    if name_node is None:
        return None
    return get_node_text(name_node, source)


def get_visibility(node: Node, source: bytes) -> Visibility | None:
    """Extract visibility modifier from a node.

    Args:
        node: The AST node to extract visibility from
        source: Encoded source for text extraction

    Returns:
        Visibility or None when the member carries no modifier

    """
    modifier = find_child_by_type(node, "accessibility_modifier")
    if modifier is None:
        return None
    return Visibility(get_node_text(modifier, source))


def is_static(node: Node) -> bool:
    """Check if a node has a static modifier."""
    return has_child_token(node, "static") or has_child_token(node, "static get")


def is_async(node: Node) -> bool:
    """Check if a method is async."""
    return has_child_token(node, "async")


def is_optional(node: Node) -> bool:
    """Check if a member or parameter carries the `?` marker."""
    return node.type == "optional_parameter" or has_child_token(node, "?")


def is_accessor(node: Node) -> bool:
    """Check if a method node is a `get` or `set` accessor."""
    return any(has_child_token(node, token) for token in ACCESSOR_TOKENS)


def get_annotation_text(annotation: Node | None, source: bytes) -> str | None:
    """Return the type text of a `: Type` annotation node.

    Works for plain type annotations as well as `asserts` and type predicate
    return annotations, where the annotated construct is the last child.
    """
    if annotation is None or len(annotation.children) < 2:
        return None
    return get_node_text(annotation.children[-1], source)
