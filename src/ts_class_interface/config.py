"""Configuration for the class-to-interface converter."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ts_class_interface.classifier import PRIMITIVES
from ts_class_interface.errors import ConverterConfigError
from ts_class_interface.languages.typescript import GRAMMARS
from ts_class_interface.renderer import DEFAULT_INDENT


class ConverterConfig(BaseModel):
    """Configuration for ClassToInterfaceConverter with Pydantic validation.

    Controls which tree-sitter grammar parses the source, the indent unit of
    rendered member lines and any primitive type names beyond TypeScript's
    keyword types.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    grammar: str = Field(
        default="typescript",
        description="Tree-sitter grammar: 'typescript' or 'tsx'",
    )
    indent: str = Field(
        default=DEFAULT_INDENT,
        description="Indent unit prefixed to every interface member line",
    )
    extra_primitives: list[str] = Field(
        default_factory=list,
        description="Additional type names to classify as primitive",
    )

    @field_validator("grammar")
    @classmethod
    def validate_grammar(cls, v: str) -> str:
        """Normalise the grammar name and check it is supported."""
        normalised = v.strip().lower()
        if normalised not in GRAMMARS:
            raise ValueError(f"Grammar must be one of {list(GRAMMARS)}, got {v!r}")
        return normalised

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: str) -> str:
        """Require a non-empty, whitespace-only indent unit."""
        if not v or v.strip():
            raise ValueError("Indent must be a non-empty whitespace string")
        return v

    @property
    def primitives(self) -> frozenset[str]:
        """Return the full primitive set used for classification."""
        return PRIMITIVES | frozenset(self.extra_primitives)

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from a raw properties mapping.

        Args:
            properties: Raw properties containing:
                - grammar (str, optional): Tree-sitter grammar.
                - indent (str, optional): Indent unit.
                - extra_primitives (list[str], optional): Extra primitive names.

        Returns:
            Validated configuration object

        Raises:
            ConverterConfigError: If validation fails

        """
        try:
            return cls.model_validate(properties)
        except ValidationError as e:
            raise ConverterConfigError(f"Invalid converter configuration: {e}") from e
