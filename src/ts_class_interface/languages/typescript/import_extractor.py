"""TypeScript import statement extraction."""

from tree_sitter import Node

from ts_class_interface.languages.base import (
    find_child_by_type,
    find_children_by_type,
    get_node_text,
)
from ts_class_interface.models import (
    Import,
    ImportSpecifier,
    NamedImport,
    NamespaceImport,
)


class TypeScriptImportExtractor:
    """Extracts the names an import statement brings into scope.

    Handles:
    - `import * as ns from "m"` (namespace import)
    - `import Default from "m"` and `import { a, b as c } from "m"`
    - the combined `import Default, { a } from "m"` and
      `import Default, * as ns from "m"` forms

    Side-effect imports (`import "m"`) and `import x = require("m")` bind no
    type names and yield nothing.
    """

    def extract_import(self, node: Node, source: bytes) -> list[Import]:
        """Extract an import_statement node.

        Args:
            node: import_statement AST node
            source: Encoded source code

        Returns:
            Zero, one or two Import models (a default alias and a namespace
            import may share one statement)

        """
        clause = find_child_by_type(node, "import_clause")
        if clause is None:
            return []

        default_node = find_child_by_type(clause, "identifier")
        default_alias = get_node_text(default_node, source) if default_node else None

        imports: list[Import] = []

        namespace = find_child_by_type(clause, "namespace_import")
        if namespace is not None:
            if default_alias:
                imports.append(NamedImport(default_alias=default_alias))
            alias_node = find_child_by_type(namespace, "identifier")
            if alias_node is not None:
                imports.append(NamespaceImport(alias=get_node_text(alias_node, source)))
            return imports

        named = find_child_by_type(clause, "named_imports")
        specifiers = self._get_specifiers(named, source) if named else []
        imports.append(NamedImport(default_alias=default_alias, specifiers=specifiers))
        return imports

    def _get_specifiers(self, named: Node, source: bytes) -> list[ImportSpecifier]:
        """Extract `name` / `name as alias` entries from a named_imports node."""
        specifiers: list[ImportSpecifier] = []
        for spec_node in find_children_by_type(named, "import_specifier"):
            name_node = spec_node.child_by_field_name("name")
            if name_node is None:
                continue
            alias_node = spec_node.child_by_field_name("alias")
            specifiers.append(
                ImportSpecifier(
                    specifier=get_node_text(name_node, source),
                    alias=get_node_text(alias_node, source) if alias_node else None,
                )
            )
        return specifiers
