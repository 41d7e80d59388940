"""Class-to-interface conversion engine.

Pipeline per request: parse, build the symbol table, render each member,
assemble the interface. Any failure aborts the request; no partial output
is ever returned.
"""

import logging

from ts_class_interface.config import ConverterConfig
from ts_class_interface.errors import ClassNotFoundError
from ts_class_interface.members import render_method, render_property
from ts_class_interface.models import ClassDecl
from ts_class_interface.parser import SourceFile
from ts_class_interface.renderer import render_interface
from ts_class_interface.symbols import build_defined_types

logger = logging.getLogger(__name__)


class ClassToInterfaceConverter:
    """Derives interface declarations from the classes of one source file.

    The source is parsed once, when the converter is created; every later
    query reads the same declaration tree.
    """

    def __init__(self, text: str, config: ConverterConfig | None = None) -> None:
        """Parse the source text.

        Args:
            text: TypeScript source text
            config: Converter configuration (defaults apply when None)

        Raises:
            ParserError: If the source text is not valid TypeScript

        """
        self.config = config or ConverterConfig()
        self.source = SourceFile.parse(text, self.config.grammar)

    def list_class_names(self) -> list[str]:
        """Return class names in source order."""
        return [decl.name for decl in self.source.tree.classes]

    def get_class(self, name: str) -> ClassDecl:
        """Find a class declaration by name.

        Raises:
            ClassNotFoundError: If the file declares no class with that name

        """
        for decl in self.source.tree.classes:
            if decl.name == name:
                return decl
        raise ClassNotFoundError(name, self.list_class_names())

    def convert(self, class_name: str) -> str:
        """Render the interface equivalent of a class.

        Args:
            class_name: Name of the class to convert

        Returns:
            The interface declaration text

        Raises:
            ClassNotFoundError: If the class is not declared in the file
            MalformedGenericExpressionError: If a class generic has no name

        """
        decl = self.get_class(class_name)
        table = build_defined_types(self.source.tree, decl.generics)
        primitives = self.config.primitives

        property_lines = [render_property(prop) for prop in decl.properties]
        method_lines = [
            render_method(method, table, primitives).text for method in decl.methods
        ]

        logger.debug(
            "Converted class %s: %d properties, %d methods",
            class_name,
            len(property_lines),
            len(method_lines),
        )
        return render_interface(
            decl.name,
            decl.generics,
            property_lines,
            method_lines,
            indent=self.config.indent,
        )


def list_class_names(text: str, config: ConverterConfig | None = None) -> list[str]:
    """Return the class names declared in a source file, in source order."""
    return ClassToInterfaceConverter(text, config).list_class_names()


def convert(text: str, class_name: str, config: ConverterConfig | None = None) -> str:
    """Convert one class of a source file into an interface declaration."""
    return ClassToInterfaceConverter(text, config).convert(class_name)
