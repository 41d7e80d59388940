"""Rendering of class members as interface member signatures."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from ts_class_interface.classifier import PRIMITIVES, collect_free_generics
from ts_class_interface.models import (
    MethodMember,
    Parameter,
    PropertyMember,
    SymbolTable,
    Visibility,
)

# Type used when a member or parameter carries no annotation
DEFAULT_TYPE = "any"
_DEFAULT_VISIBILITY = Visibility.PUBLIC


class RenderedMethod(BaseModel):
    """A rendered method signature and the generics it re-declares."""

    model_config = ConfigDict(frozen=True)

    text: str
    free_generics: list[str] = []


def _visibility(visibility: Visibility | None) -> str:
    return (visibility or _DEFAULT_VISIBILITY).value


def render_property(prop: PropertyMember) -> str:
    """Render a property as `visibility [static] name[?]: type`.

    Example:
        >>> render_property(PropertyMember(name="value", type="T"))
        'public value: T'

    """
    parts = [
        _visibility(prop.visibility),
        "static" if prop.is_static else "",
        f"{prop.name}{'?' if prop.is_optional else ''}:",
        prop.type or DEFAULT_TYPE,
    ]
    return " ".join(part for part in parts if part)


def render_parameter(param: Parameter) -> str:
    """Render a parameter as `[...]name[?]: type`."""
    prefix = "..." if param.is_rest else ""
    marker = "?" if param.is_optional else ""
    return f"{prefix}{param.name}{marker}: {param.type or DEFAULT_TYPE}"


def render_method(
    method: MethodMember,
    table: SymbolTable,
    primitives: Iterable[str] = PRIMITIVES,
) -> RenderedMethod:
    """Render a method as an interface member signature.

    Qualifiers come in the fixed order visibility, abstract, static, async.
    Free generics are collected from the parameter types left to right and
    then the return type, and re-declared as `name<G1, G2>(...)`.

    Args:
        method: Method to render
        table: Defined type names of the file
        primitives: Primitive type names

    Returns:
        RenderedMethod with the signature text and its free generics

    """
    primitives = frozenset(primitives)
    free_generics: dict[str, None] = {}
    type_exprs = [param.type for param in method.parameters] + [method.return_type]
    for type_expr in type_exprs:
        for generic in collect_free_generics(type_expr, table, primitives):
            free_generics.setdefault(generic)

    generics = list(free_generics)
    generic_clause = f"<{', '.join(generics)}>" if generics else ""
    params = ", ".join(render_parameter(param) for param in method.parameters)
    optional = "?" if method.is_optional else ""

    parts = [
        _visibility(method.visibility),
        "abstract" if method.is_abstract else "",
        "static" if method.is_static else "",
        "async" if method.is_async else "",
        f"{method.name}{generic_clause}({params}){optional}:",
        method.return_type or DEFAULT_TYPE,
    ]
    return RenderedMethod(
        text=" ".join(part for part in parts if part),
        free_generics=generics,
    )
