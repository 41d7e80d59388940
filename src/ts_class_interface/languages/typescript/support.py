"""TypeScript language support implementation."""

import logging

from tree_sitter import Language, Node

from ts_class_interface.languages.typescript.class_extractor import (
    TypeScriptClassExtractor,
    class_name,
)
from ts_class_interface.languages.typescript.helpers import (
    AMBIENT_TYPE,
    CLASS_TYPES,
    EXPORT_TYPE,
    IMPORT_TYPE,
    INTERFACE_TYPE,
    TYPE_ALIAS_TYPE,
    get_name,
)
from ts_class_interface.languages.typescript.import_extractor import (
    TypeScriptImportExtractor,
)
from ts_class_interface.models import (
    Declaration,
    DeclarationTree,
    Import,
    InterfaceDecl,
    TypeAliasDecl,
)

logger = logging.getLogger(__name__)

GRAMMARS = ("typescript", "tsx")


class TypeScriptLanguageSupport:
    """TypeScript language support implementation.

    Provides TypeScript and TSX parsing and declaration extraction
    using tree-sitter-typescript.
    """

    def __init__(self) -> None:
        """Initialise the support with its class and import extractors."""
        self._class_extractor = TypeScriptClassExtractor()
        self._import_extractor = TypeScriptImportExtractor()

    def get_tree_sitter_language(self, grammar: str = "typescript") -> Language:
        """Return the tree-sitter language binding for a grammar.

        The TSX grammar accepts JSX but rejects `<T>value` type assertions,
        so plain TypeScript files use the typescript grammar.

        Args:
            grammar: "typescript" or "tsx"

        Raises:
            ValueError: If the grammar is unknown

        """
        import tree_sitter_typescript as tsts  # noqa: PLC0415

        if grammar == "typescript":
            return Language(tsts.language_typescript())
        if grammar == "tsx":
            return Language(tsts.language_tsx())
        raise ValueError(
            f"Unknown TypeScript grammar: {grammar}. Available: {list(GRAMMARS)}"
        )

    def extract(self, root_node: Node, source: bytes) -> DeclarationTree:
        """Extract top-level declarations and imports from a parsed file.

        Args:
            root_node: The root node of the parsed AST
            source: Encoded source code the tree was parsed from

        Returns:
            DeclarationTree with declarations and imports in source order

        """
        declarations: list[Declaration] = []
        imports: list[Import] = []

        for node in root_node.named_children:
            if node.type == IMPORT_TYPE:
                imports.extend(self._import_extractor.extract_import(node, source))
                continue
            declaration = self._extract_declaration(self._unwrap(node), source)
            if declaration is not None:
                declarations.append(declaration)

        logger.debug(
            "Extracted %d declarations and %d imports",
            len(declarations),
            len(imports),
        )
        return DeclarationTree(declarations=declarations, imports=imports)

    def _unwrap(self, node: Node) -> Node:
        """Return the declaration inside `export ...` and `declare ...` wrappers."""
        while node.type in (EXPORT_TYPE, AMBIENT_TYPE):
            inner = node.child_by_field_name("declaration")
            if inner is None and node.type == EXPORT_TYPE:
                # `export default class Foo {}` may parse as a class expression
                inner = node.child_by_field_name("value")
            if inner is None:
                inner = next(
                    (c for c in node.named_children if c.type != "decorator"), None
                )
            if inner is None:
                return node
            node = inner
        return node

    def _extract_declaration(self, node: Node, source: bytes) -> Declaration | None:
        if node.type in CLASS_TYPES:
            name = class_name(node, source)
            if name is None:
                return None
            return self._class_extractor.extract_class(node, name, source)

        if node.type in (INTERFACE_TYPE, TYPE_ALIAS_TYPE):
            name = get_name(node, source)
            if name is None:
                return None
            if node.type == INTERFACE_TYPE:
                return InterfaceDecl(name=name)
            return TypeAliasDecl(name=name)

        return None
