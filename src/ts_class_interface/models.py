"""Data models for parsed TypeScript declarations."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class Visibility(str, Enum):
    """Member accessibility modifier."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


class Parameter(BaseModel):
    """A parameter of a method."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str | None = None
    is_optional: bool = False
    is_rest: bool = False


class PropertyMember(BaseModel):
    """A class property (field or constructor parameter property)."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str | None = None
    visibility: Visibility | None = None
    is_optional: bool = False
    is_static: bool = False


class MethodMember(BaseModel):
    """A class method, abstract method or overload signature."""

    model_config = ConfigDict(frozen=True)

    name: str
    visibility: Visibility | None = None
    is_static: bool = False
    is_abstract: bool = False
    is_optional: bool = False
    is_async: bool = False
    parameters: list[Parameter] = []
    return_type: str | None = None


class ClassDecl(BaseModel):
    """A class declaration (including abstract classes)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["class"] = "class"
    name: str
    generics: list[str] = []  # raw type parameter text, bounds and defaults kept
    properties: list[PropertyMember] = []
    methods: list[MethodMember] = []


class InterfaceDecl(BaseModel):
    """An interface declaration. Only the name is tracked."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["interface"] = "interface"
    name: str


class TypeAliasDecl(BaseModel):
    """A type alias declaration. Only the name is tracked."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["type_alias"] = "type_alias"
    name: str


Declaration = Annotated[
    ClassDecl | InterfaceDecl | TypeAliasDecl,
    Field(discriminator="kind"),
]


class ImportSpecifier(BaseModel):
    """A single `name` or `name as alias` entry of a named import."""

    model_config = ConfigDict(frozen=True)

    specifier: str
    alias: str | None = None


class NamespaceImport(BaseModel):
    """`import * as alias from "module"`."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["namespace"] = "namespace"
    alias: str


class NamedImport(BaseModel):
    """`import Default, { a, b as c } from "module"`."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["named"] = "named"
    default_alias: str | None = None
    specifiers: list[ImportSpecifier] = []


Import = Annotated[NamespaceImport | NamedImport, Field(discriminator="kind")]


class DeclarationTree(BaseModel):
    """Top-level declarations and imports of one file, in source order."""

    model_config = ConfigDict(frozen=True)

    declarations: list[Declaration] = []
    imports: list[Import] = []

    @property
    def classes(self) -> list[ClassDecl]:
        """Class declarations in source order."""
        return [decl for decl in self.declarations if isinstance(decl, ClassDecl)]


@dataclass(frozen=True, slots=True)
class SymbolTable:
    """Immutable set of type names defined in one source file.

    Produced once by the symbol table builder and only queried afterwards.
    """

    names: frozenset[str] = frozenset()

    def __init__(self, names: Iterable[str] = ()) -> None:
        object.__setattr__(self, "names", frozenset(names))

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def __repr__(self) -> str:
        return f"SymbolTable({sorted(self.names)!r})"
