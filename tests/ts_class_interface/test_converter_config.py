"""Tests for ConverterConfig validation."""

import pytest
from pydantic import ValidationError

from ts_class_interface.classifier import PRIMITIVES
from ts_class_interface.config import ConverterConfig
from ts_class_interface.errors import ConverterConfigError, ConverterError


class TestConverterConfig:
    """Tests for ConverterConfig."""

    def test_defaults(self) -> None:
        """Test the default grammar, indent and primitive set."""
        config = ConverterConfig()

        assert config.grammar == "typescript"
        assert config.indent == "    "
        assert config.primitives == PRIMITIVES

    @pytest.mark.parametrize(
        ("grammar", "expected"),
        [("typescript", "typescript"), ("TSX", "tsx"), (" TypeScript ", "typescript")],
    )
    def test_grammar_is_normalised(self, grammar: str, expected: str) -> None:
        """Test that grammar names are case and whitespace insensitive."""
        assert ConverterConfig(grammar=grammar).grammar == expected

    def test_unknown_grammar_is_rejected(self) -> None:
        """Test that only supported grammars validate."""
        with pytest.raises(ValidationError, match="Grammar must be one of"):
            ConverterConfig(grammar="javascript")

    @pytest.mark.parametrize("indent", ["", "ab", " x "])
    def test_invalid_indent_is_rejected(self, indent: str) -> None:
        """Test that the indent unit must be non-empty whitespace."""
        with pytest.raises(ValidationError, match="Indent must be"):
            ConverterConfig(indent=indent)

    def test_extra_primitives_extend_defaults(self) -> None:
        """Test that extra primitives are added to the built-in set."""
        config = ConverterConfig(extra_primitives=["Date", "RegExp"])

        assert config.primitives == PRIMITIVES | {"Date", "RegExp"}

    def test_config_is_frozen(self) -> None:
        """Test that configuration cannot change after validation."""
        config = ConverterConfig()

        with pytest.raises(ValidationError):
            config.indent = "  "  # type: ignore[misc]


class TestConverterConfigFromProperties:
    """Tests for building configuration from raw properties."""

    def test_from_properties(self) -> None:
        """Test a valid properties mapping."""
        config = ConverterConfig.from_properties(
            {"grammar": "tsx", "indent": "  ", "extra_primitives": ["Date"]}
        )

        assert config == ConverterConfig(
            grammar="tsx", indent="  ", extra_primitives=["Date"]
        )

    def test_empty_properties_use_defaults(self) -> None:
        """Test that an empty mapping gives the default configuration."""
        assert ConverterConfig.from_properties({}) == ConverterConfig()

    @pytest.mark.parametrize(
        "properties",
        [{"grammar": "cobol"}, {"indent": "x"}, {"unknown": True}],
        ids=["grammar", "indent", "extra_field"],
    )
    def test_invalid_properties_raise_config_error(self, properties: dict) -> None:
        """Test that validation failures surface as ConverterConfigError."""
        with pytest.raises(ConverterConfigError) as exc_info:
            ConverterConfig.from_properties(properties)

        assert isinstance(exc_info.value, ConverterError)
        assert isinstance(exc_info.value.__cause__, ValidationError)
