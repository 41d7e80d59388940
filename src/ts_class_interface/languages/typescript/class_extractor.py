"""TypeScript class extraction.

This module turns class declaration nodes into ClassDecl models carrying
the generic parameter text, properties and methods needed to render an
interface.
"""

import logging

from tree_sitter import Node

from ts_class_interface.languages.base import (
    find_child_by_type,
    find_children_by_type,
    get_node_text,
    has_child_token,
    position,
)
from ts_class_interface.languages.typescript.helpers import (
    ABSTRACT_METHOD_TYPE,
    CONSTRUCTOR_NAME,
    FIELD_TYPE,
    METHOD_NODE_TYPES,
    METHOD_TYPE,
    PARAMETER_TYPES,
    get_annotation_text,
    get_name,
    get_visibility,
    is_accessor,
    is_async,
    is_optional,
    is_static,
)
from ts_class_interface.models import (
    ClassDecl,
    MethodMember,
    Parameter,
    PropertyMember,
)

logger = logging.getLogger(__name__)


class TypeScriptClassExtractor:
    """Extracts class declarations from TypeScript source code.

    Handles:
    - Fields, including optional and static ones
    - Constructor parameter properties (`constructor(private x: T)`)
    - Methods, overload signatures and abstract method signatures

    Private `#names`, accessors, index signatures and static blocks have no
    interface counterpart and are skipped.
    """

    def extract_class(self, node: Node, name: str, source: bytes) -> ClassDecl:
        """Extract a class declaration node into a ClassDecl.

        Args:
            node: class_declaration, abstract_class_declaration or class node
            name: Class name already read from the node
            source: Encoded source code

        Returns:
            ClassDecl with generics and members in declaration order

        """
        properties: list[PropertyMember] = []
        methods: list[MethodMember] = []

        body = node.child_by_field_name("body")
        if body is not None:
            self._extract_body(body, source, properties, methods)

        logger.debug(
            "Extracted class %s at line %d: %d properties, %d methods",
            name,
            position(node)[0],
            len(properties),
            len(methods),
        )
        return ClassDecl(
            name=name,
            generics=self._get_generics(node, source),
            properties=properties,
            methods=methods,
        )

    def _get_generics(self, node: Node, source: bytes) -> list[str]:
        """Return raw type parameter text, e.g. `U extends string = "a"`."""
        type_parameters = node.child_by_field_name("type_parameters")
        if type_parameters is None:
            return []
        return [
            get_node_text(param, source)
            for param in find_children_by_type(type_parameters, "type_parameter")
        ]

    def _extract_body(
        self,
        body: Node,
        source: bytes,
        properties: list[PropertyMember],
        methods: list[MethodMember],
    ) -> None:
        # Names (with staticness) that already have an overload signature
        overloaded: set[tuple[str, bool]] = set()

        for child in body.named_children:
            if child.type == FIELD_TYPE:
                prop = self._extract_field(child, source)
                if prop:
                    properties.append(prop)
                continue

            if child.type not in METHOD_NODE_TYPES:
                continue

            name = self._get_member_name(child, source)
            if name is None or is_accessor(child):
                continue

            if name == CONSTRUCTOR_NAME:
                properties.extend(self._extract_parameter_properties(child, source))
                continue

            key = (name, is_static(child))
            if child.type == METHOD_TYPE and key in overloaded:
                # Implementation signature of an overloaded method
                continue
            if child.type != METHOD_TYPE:
                overloaded.add(key)

            methods.append(self._extract_method(child, name, source))

    def _get_member_name(self, node: Node, source: bytes) -> str | None:
        """Return the member name, or None for `#private` members."""
        name_node = node.child_by_field_name("name")
        if name_node is None or name_node.type == "private_property_identifier":
            return None
        return get_node_text(name_node, source)

    def _extract_field(self, node: Node, source: bytes) -> PropertyMember | None:
        """Extract a class field as a property member."""
        name = self._get_member_name(node, source)
        if name is None:
            return None

        return PropertyMember(
            name=name,
            type=get_annotation_text(node.child_by_field_name("type"), source),
            visibility=get_visibility(node, source),
            is_optional=is_optional(node),
            is_static=is_static(node),
        )

    def _extract_method(self, node: Node, name: str, source: bytes) -> MethodMember:
        """Extract a method, overload signature or abstract signature."""
        return MethodMember(
            name=name,
            visibility=get_visibility(node, source),
            is_static=is_static(node),
            is_abstract=node.type == ABSTRACT_METHOD_TYPE,
            is_optional=is_optional(node),
            is_async=is_async(node),
            parameters=self.get_parameters(node, source),
            return_type=get_annotation_text(
                node.child_by_field_name("return_type"), source
            ),
        )

    def get_parameters(self, node: Node, source: bytes) -> list[Parameter]:
        """Extract method parameters.

        Args:
            node: The method AST node
            source: Encoded source code

        Returns:
            List of Parameter in declaration order

        """
        params_node = node.child_by_field_name("parameters")
        if params_node is None:
            return []

        return [
            self._extract_parameter(param_node, source)
            for param_node in params_node.named_children
            if param_node.type in PARAMETER_TYPES
        ]

    def _extract_parameter(self, node: Node, source: bytes) -> Parameter:
        """Extract parameter information."""
        pattern = node.child_by_field_name("pattern")
        is_rest = pattern is not None and pattern.type == "rest_pattern"

        if pattern is None:
            name = "<unknown>"
        elif is_rest:
            name = get_node_text(pattern, source).removeprefix("...").strip()
        else:
            name = get_node_text(pattern, source)

        # A parameter with a default value is optional to callers
        has_default = node.child_by_field_name("value") is not None

        return Parameter(
            name=name,
            type=get_annotation_text(node.child_by_field_name("type"), source),
            is_optional=is_optional(node) or has_default,
            is_rest=is_rest,
        )

    def _extract_parameter_properties(
        self, node: Node, source: bytes
    ) -> list[PropertyMember]:
        """Extract `constructor(private x: T)` parameter properties."""
        params_node = node.child_by_field_name("parameters")
        if params_node is None:
            return []

        properties: list[PropertyMember] = []
        for param_node in params_node.named_children:
            if param_node.type not in PARAMETER_TYPES:
                continue
            visibility = get_visibility(param_node, source)
            is_readonly = has_child_token(param_node, "readonly")
            if visibility is None and not is_readonly:
                continue

            pattern = param_node.child_by_field_name("pattern")
            if pattern is None:
                continue
            properties.append(
                PropertyMember(
                    name=get_node_text(pattern, source),
                    type=get_annotation_text(
                        param_node.child_by_field_name("type"), source
                    ),
                    visibility=visibility,
                    is_optional=is_optional(param_node),
                )
            )
        return properties


def class_name(node: Node, source: bytes) -> str | None:
    """Return a class node's name, or None for anonymous class expressions."""
    name = get_name(node, source)
    if name is None:
        name_node = find_child_by_type(node, "type_identifier")
        name = get_node_text(name_node, source) if name_node else None
    return name
