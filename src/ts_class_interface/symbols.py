"""Symbol table construction for one source file.

The table holds every type name a class member may legitimately refer to
without re-declaring it: imported names, sibling declarations and the
target class's own generic parameters.
"""

import logging
import re

from ts_class_interface.errors import MalformedGenericExpressionError
from ts_class_interface.models import (
    ClassDecl,
    DeclarationTree,
    InterfaceDecl,
    NamedImport,
    NamespaceImport,
    SymbolTable,
    TypeAliasDecl,
)

logger = logging.getLogger(__name__)

# Name part of a generic parameter ends at a default (`=`) or a bound (`extends`)
_GENERIC_NAME_DELIMITER = re.compile(r"=|\bextends\b")
# Variance and const modifiers written before the parameter name
_GENERIC_MODIFIERS = re.compile(r"^(?:(?:const|in|out)\s+)+")


def generic_parameter_name(expression: str) -> str:
    """Extract the parameter name from a raw generic expression.

    Leading `const`, `in` and `out` modifiers are not part of the name.

    Example:
        >>> generic_parameter_name("U extends string = 'a'")
        'U'
        >>> generic_parameter_name("in out T")
        'T'

    Raises:
        MalformedGenericExpressionError: If no name precedes the delimiters

    """
    head = _GENERIC_NAME_DELIMITER.split(expression, maxsplit=1)[0].strip()
    name = _GENERIC_MODIFIERS.sub("", head)
    if not name:
        raise MalformedGenericExpressionError(expression)
    return name


def build_defined_types(
    tree: DeclarationTree, target_generics: list[str]
) -> SymbolTable:
    """Build the set of type names defined in a file.

    Args:
        tree: Parsed declaration tree of the file
        target_generics: Raw generic expressions of the class being converted

    Returns:
        Immutable SymbolTable

    Raises:
        MalformedGenericExpressionError: If a generic expression has no name

    """
    names: list[str] = []

    for import_ in tree.imports:
        match import_:
            case NamespaceImport(alias=alias):
                names.append(alias)
            case NamedImport(default_alias=default_alias, specifiers=specifiers):
                if default_alias:
                    names.append(default_alias)
                names.extend(spec.alias or spec.specifier for spec in specifiers)

    for declaration in tree.declarations:
        match declaration:
            case ClassDecl() | InterfaceDecl() | TypeAliasDecl():
                names.append(declaration.name)

    names.extend(generic_parameter_name(expr) for expr in target_generics)

    table = SymbolTable(names)
    logger.debug("Built symbol table with %d defined types", len(table))
    return table
