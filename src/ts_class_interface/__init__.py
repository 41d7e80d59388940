"""Derive TypeScript interface declarations from classes.

This package parses one TypeScript source file with tree-sitter and renders
an interface mirroring a chosen class's properties, methods and generics.

Use: ClassToInterfaceConverter(text).convert("ClassName")
"""

from .config import ConverterConfig
from .converter import ClassToInterfaceConverter, convert, list_class_names
from .errors import (
    ClassNotFoundError,
    ConverterConfigError,
    ConverterError,
    MalformedGenericExpressionError,
    ParserError,
)

__all__ = [
    "ClassNotFoundError",
    "ClassToInterfaceConverter",
    "ConverterConfig",
    "ConverterConfigError",
    "ConverterError",
    "MalformedGenericExpressionError",
    "ParserError",
    "convert",
    "list_class_names",
]
