"""Tests for TypeScript declaration and import extraction."""

import pytest
from tree_sitter import Parser

from ts_class_interface.languages.typescript import TypeScriptLanguageSupport
from ts_class_interface.models import (
    ClassDecl,
    DeclarationTree,
    ImportSpecifier,
    MethodMember,
    NamedImport,
    NamespaceImport,
    Parameter,
    PropertyMember,
    Visibility,
)


def _extract(source_code: str, grammar: str = "typescript") -> DeclarationTree:
    """Parse TypeScript source code and extract its declaration tree."""
    ts = TypeScriptLanguageSupport()
    parser = Parser()
    parser.language = ts.get_tree_sitter_language(grammar)
    source = source_code.encode("utf-8")
    tree = parser.parse(source)
    return ts.extract(tree.root_node, source)


def _only_class(source_code: str) -> ClassDecl:
    classes = _extract(source_code).classes
    assert len(classes) == 1
    return classes[0]


TS_CLASS_WITH_PROPERTIES = """
class Config {
    public readonly apiUrl: string = "https://api.example.com";
    private secretKey: string;
    protected timeout: number = 5000;
    static version: string = "1.0.0";
    retries?: number;
    untyped = 3;
    #hidden: string;
}
"""

TS_CLASS_WITH_METHODS = """
abstract class Service<T> {
    public async fetch(id: string, ...rest: number[]): Promise<T> {
        return this.cache[id];
    }

    protected static helper(flag = true): void {}

    abstract validate(item: T): boolean;

    describe?(): string;

    get ready(): boolean {
        return true;
    }

    set ready(value: boolean) {}

    #secret(): void {}
}
"""

TS_CLASS_WITH_OVERLOADS = """
class Formatter {
    format(value: string): string;
    format(value: number): string;
    format(value: any): string {
        return String(value);
    }

    static format(value: Date): string {
        return value.toISOString();
    }
}
"""

TS_WRAPPED_DECLARATIONS = """
export class Exported {}
export default class DefaultExported {}
declare class Ambient {
    run(): void;
}
export abstract class AbstractExported {}
export { Exported as Alias };
"""


class TestTypeScriptImportExtraction:
    """Tests for extracting import statements."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (
                'import * as path from "path";',
                [NamespaceImport(alias="path")],
            ),
            (
                'import React from "react";',
                [NamedImport(default_alias="React")],
            ),
            (
                'import { A, B as C } from "./letters";',
                [
                    NamedImport(
                        specifiers=[
                            ImportSpecifier(specifier="A"),
                            ImportSpecifier(specifier="B", alias="C"),
                        ]
                    )
                ],
            ),
            (
                'import Main, { Helper } from "./main";',
                [
                    NamedImport(
                        default_alias="Main",
                        specifiers=[ImportSpecifier(specifier="Helper")],
                    )
                ],
            ),
            (
                'import Main, * as all from "./main";',
                [NamedImport(default_alias="Main"), NamespaceImport(alias="all")],
            ),
            (
                'import type { Options } from "./options";',
                [NamedImport(specifiers=[ImportSpecifier(specifier="Options")])],
            ),
        ],
        ids=[
            "namespace",
            "default",
            "named",
            "default_and_named",
            "default_and_namespace",
            "type_only",
        ],
    )
    def test_extract_import_forms(self, source: str, expected: list) -> None:
        """Test each import form yields the names it brings into scope."""
        assert _extract(source).imports == expected

    def test_side_effect_import_binds_nothing(self) -> None:
        """Test that `import "module"` yields no import model."""
        assert _extract('import "./polyfills";').imports == []

    def test_imports_keep_source_order(self) -> None:
        """Test that imports are returned in file order."""
        source = 'import * as b from "b";\nimport * as a from "a";\n'

        aliases = [imp.alias for imp in _extract(source).imports]

        assert aliases == ["b", "a"]


class TestTypeScriptDeclarationExtraction:
    """Tests for extracting top-level declarations."""

    def test_wrapped_declarations_are_unwrapped(self) -> None:
        """Test that export and declare wrappers expose their classes."""
        names = [decl.name for decl in _extract(TS_WRAPPED_DECLARATIONS).classes]

        assert names == ["Exported", "DefaultExported", "Ambient", "AbstractExported"]

    def test_anonymous_default_class_is_skipped(self) -> None:
        """Test that `export default class {}` has no class declaration."""
        assert _extract("export default class {}").classes == []

    def test_class_generics_keep_raw_text(self) -> None:
        """Test that generic parameters keep their bounds and defaults."""
        cls = _only_class("class Pair<T, U extends string = 'a'> {}")

        assert cls.generics == ["T", "U extends string = 'a'"]

    def test_class_without_generics(self) -> None:
        """Test that a plain class has no generics and no members."""
        cls = _only_class("class Empty {}")

        assert cls == ClassDecl(name="Empty")

    def test_nested_classes_are_not_top_level(self) -> None:
        """Test that classes inside functions are not declarations of the file."""
        source = "function make() { class Inner {} return Inner; }"

        assert _extract(source).declarations == []


class TestTypeScriptClassMemberExtraction:
    """Tests for extracting class properties and methods."""

    def test_extract_properties(self) -> None:
        """Test extraction of fields with modifiers, types and markers."""
        cls = _only_class(TS_CLASS_WITH_PROPERTIES)

        assert cls.properties == [
            PropertyMember(name="apiUrl", type="string", visibility=Visibility.PUBLIC),
            PropertyMember(
                name="secretKey", type="string", visibility=Visibility.PRIVATE
            ),
            PropertyMember(
                name="timeout", type="number", visibility=Visibility.PROTECTED
            ),
            PropertyMember(name="version", type="string", is_static=True),
            PropertyMember(name="retries", type="number", is_optional=True),
            PropertyMember(name="untyped"),
        ]

    def test_extract_methods(self) -> None:
        """Test extraction of methods, abstract and optional signatures."""
        cls = _only_class(TS_CLASS_WITH_METHODS)

        assert cls.generics == ["T"]
        assert cls.methods == [
            MethodMember(
                name="fetch",
                visibility=Visibility.PUBLIC,
                is_async=True,
                parameters=[
                    Parameter(name="id", type="string"),
                    Parameter(name="rest", type="number[]", is_rest=True),
                ],
                return_type="Promise<T>",
            ),
            MethodMember(
                name="helper",
                visibility=Visibility.PROTECTED,
                is_static=True,
                parameters=[Parameter(name="flag", is_optional=True)],
                return_type="void",
            ),
            MethodMember(
                name="validate",
                is_abstract=True,
                parameters=[Parameter(name="item", type="T")],
                return_type="boolean",
            ),
            MethodMember(name="describe", is_optional=True, return_type="string"),
        ]

    def test_overload_signatures_replace_implementation(self) -> None:
        """Test that overloads are kept and their implementation dropped."""
        cls = _only_class(TS_CLASS_WITH_OVERLOADS)

        signatures = [
            (m.name, m.is_static, [p.type for p in m.parameters]) for m in cls.methods
        ]
        assert signatures == [
            ("format", False, ["string"]),
            ("format", False, ["number"]),
            ("format", True, ["Date"]),
        ]

    def test_constructor_parameter_properties(self) -> None:
        """Test that constructor parameter properties become properties."""
        source = """
class Account {
    id: number;
    constructor(
        private readonly owner: string,
        public balance?: number,
        readonly currency: string,
        plain: boolean,
    ) {}
    close(): void {}
}
"""
        cls = _only_class(source)

        assert [p.name for p in cls.properties] == [
            "id",
            "owner",
            "balance",
            "currency",
        ]
        assert cls.properties[1].visibility is Visibility.PRIVATE
        assert cls.properties[2].is_optional is True
        assert cls.properties[3].visibility is None
        assert [m.name for m in cls.methods] == ["close"]

    def test_type_predicate_return_type(self) -> None:
        """Test that type predicate return annotations keep their text."""
        cls = _only_class(
            "class Guard { isText(x: unknown): x is string { return true; } }"
        )

        assert cls.methods[0].return_type == "x is string"
