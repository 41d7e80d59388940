"""Tree-sitter node helpers shared by the language extractors."""

from tree_sitter import Node


def get_node_text(node: Node, source: bytes) -> str:
    """Return the source text a node spans."""
    return source[node.start_byte : node.end_byte].decode("utf-8")


def position(node: Node) -> tuple[int, int]:
    """Return the 1-based (line, column) where a node starts."""
    row, column = node.start_point
    return row + 1, column + 1


def find_child_by_type(node: Node, child_type: str) -> Node | None:
    """Return the first direct child of the given node type, if any."""
    return next((c for c in node.children if c.type == child_type), None)


def find_children_by_type(node: Node, child_type: str) -> list[Node]:
    """Return the direct children of the given node type, in order."""
    return [c for c in node.children if c.type == child_type]


def has_child_token(node: Node, token: str) -> bool:
    """Check for an anonymous keyword or punctuation child such as `static`."""
    return find_child_by_type(node, token) is not None


def find_first_error(node: Node) -> Node | None:
    """Find the first ERROR or MISSING node in document order.

    Subtrees without errors are not descended into. A node that reports an
    error below it but has no offending child is itself returned.

    """
    if node.type == "ERROR" or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        if (found := find_first_error(child)) is not None:
            return found
    return node
