"""Type reference classification.

A type expression is split on the compound separators `|`, `&` and the
keyword `extends`. Each resulting token is Primitive, UserDefined (a name in
the symbol table) or FreeGeneric (anything else, to be re-declared as a
generic parameter on the emitted interface member).
"""

import re
from collections.abc import Iterable
from enum import Enum

from ts_class_interface.models import SymbolTable


class TypeKind(Enum):
    """Classification of an atomic type token."""

    PRIMITIVE = "primitive"
    USER_DEFINED = "user_defined"
    FREE_GENERIC = "free_generic"


# Keyword types of TypeScript
PRIMITIVES: frozenset[str] = frozenset(
    {
        "number",
        "string",
        "boolean",
        "object",
        "any",
        "unknown",
        "void",
        "undefined",
        "null",
        "never",
        "bigint",
        "symbol",
    }
)

_TYPE_SEPARATOR = re.compile(r"\||&|\bextends\b")


def split_type_expression(type_expr: str | None) -> list[str]:
    """Split a type expression into trimmed, non-blank atomic tokens.

    Example:
        >>> split_type_expression("A | B & C |")
        ['A', 'B', 'C']

    """
    if not type_expr:
        return []
    tokens = (token.strip() for token in _TYPE_SEPARATOR.split(type_expr))
    return [token for token in tokens if token]


def classify(
    token: str, table: SymbolTable, primitives: Iterable[str] = PRIMITIVES
) -> TypeKind:
    """Classify a single type token.

    Primitives are checked before the symbol table, so a name imported under
    a primitive's spelling still classifies as primitive. A qualified name
    such as `ns.Foo` is UserDefined when its first segment is defined.

    Args:
        token: Atomic type token (already split and trimmed)
        table: Defined type names of the file
        primitives: Primitive type names

    Returns:
        The token's TypeKind

    """
    if token in primitives:
        return TypeKind.PRIMITIVE
    if token in table or token.split(".", 1)[0] in table:
        return TypeKind.USER_DEFINED
    return TypeKind.FREE_GENERIC


def collect_free_generics(
    type_expr: str | None,
    table: SymbolTable,
    primitives: Iterable[str] = PRIMITIVES,
) -> list[str]:
    """Return FreeGeneric tokens of an expression in first-occurrence order.

    Args:
        type_expr: Type expression, or None when the type is absent
        table: Defined type names of the file
        primitives: Primitive type names

    Returns:
        De-duplicated list of free generic tokens (empty for None)

    """
    primitives = frozenset(primitives)
    found: dict[str, None] = {}
    for token in split_type_expression(type_expr):
        if classify(token, table, primitives) is TypeKind.FREE_GENERIC:
            found.setdefault(token)
    return list(found)
