"""Error classes for the class-to-interface converter.

This module provides:
- ConverterError: Base exception class for all converter errors
- ConverterConfigError: Configuration exception
- ParserError: Source parsing exception
- ClassNotFoundError: Requested class is absent from the source file
- MalformedGenericExpressionError: Generic parameter has no extractable name
"""


class ConverterError(Exception):
    """Base exception for all converter errors."""

    pass


class ConverterConfigError(ConverterError):
    """Raised when converter configuration is invalid."""

    pass


class ParserError(ConverterError):
    """Raised when source text cannot be parsed."""

    pass


class ClassNotFoundError(ConverterError):
    """Raised when the requested class is not declared in the source file."""

    def __init__(self, class_name: str, available: list[str] | None = None) -> None:
        """Initialise with the missing class name.

        Args:
            class_name: Name that was requested
            available: Class names that the file does declare

        """
        self.class_name = class_name
        self.available = available or []
        message = f"Class '{class_name}' not found"
        if self.available:
            message += f". Available classes: {self.available}"
        super().__init__(message)


class MalformedGenericExpressionError(ConverterError):
    """Raised when a generic parameter expression yields no parameter name."""

    def __init__(self, expression: str) -> None:
        """Initialise with the offending expression.

        Args:
            expression: Raw generic parameter text as captured from source

        """
        self.expression = expression
        super().__init__(f"Malformed generic parameter expression: {expression!r}")
