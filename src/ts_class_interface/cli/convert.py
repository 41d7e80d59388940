"""CLI command implementations for listing and converting classes."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from ts_class_interface.cli.errors import CLIError, cli_error_handler
from ts_class_interface.config import ConverterConfig
from ts_class_interface.converter import ClassToInterfaceConverter
from ts_class_interface.logging import setup_logging
from ts_class_interface.parser import SourceCodeParser

logger = logging.getLogger(__name__)
console = Console(stderr=True)


def _read_source(source_path: Path) -> str:
    try:
        return source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CLIError(f"Cannot read {source_path}: {e}", original_error=e) from e


def _build_config(
    source_path: Path, grammar: str | None, indent_size: int
) -> ConverterConfig:
    """Build converter configuration, detecting the grammar when not given."""
    if grammar is None:
        if not SourceCodeParser.is_supported_file(source_path):
            raise CLIError(
                f"Cannot detect grammar for {source_path.name}, pass --grammar"
            )
        grammar = SourceCodeParser.detect_grammar_from_file(source_path)
    return ConverterConfig.from_properties(
        {"grammar": grammar, "indent": " " * indent_size}
    )


def _select_class(converter: ClassToInterfaceConverter, class_name: str | None) -> str:
    """Return the class to convert, defaulting to a file's only class."""
    if class_name is not None:
        return class_name

    names = converter.list_class_names()
    if len(names) == 1:
        return names[0]
    if not names:
        raise CLIError("No classes found in source file")
    raise CLIError(f"Multiple classes found, choose one with --class: {names}")


def list_classes_command(
    source_path: Path, grammar: str | None = None, log_level: str = "INFO"
) -> None:
    """CLI command implementation for listing class names.

    Args:
        source_path: Path to the TypeScript source file
        grammar: Grammar override (detected from the extension if None)
        log_level: Logging level

    """
    setup_logging(level=log_level)

    with cli_error_handler("ls-classes", "Failed to list classes"):
        config = _build_config(source_path, grammar, indent_size=4)
        converter = ClassToInterfaceConverter(_read_source(source_path), config)
        names = converter.list_class_names()
        logger.info("Found %d classes in %s", len(names), source_path)
        for name in names:
            typer.echo(name)


def convert_command(  # noqa: PLR0913 - CLI entry point with many options
    source_path: Path,
    class_name: str | None = None,
    output_path: Path | None = None,
    grammar: str | None = None,
    indent_size: int = 4,
    log_level: str = "INFO",
) -> None:
    """CLI command implementation for converting a class into an interface.

    Args:
        source_path: Path to the TypeScript source file
        class_name: Class to convert (the file's only class if None)
        output_path: File to write the interface to (stdout if None)
        grammar: Grammar override (detected from the extension if None)
        indent_size: Number of spaces per indent level
        log_level: Logging level

    """
    setup_logging(level=log_level)

    with cli_error_handler("convert", "Conversion failed"):
        config = _build_config(source_path, grammar, indent_size)
        converter = ClassToInterfaceConverter(_read_source(source_path), config)
        selected = _select_class(converter, class_name)
        interface = converter.convert(selected)

        if output_path is None:
            typer.echo(interface)
            return

        output_path.write_text(interface + "\n", encoding="utf-8")
        console.print(
            f"[green]✅ Interface {selected} written to {output_path}[/green]"
        )
        logger.info("Interface %s saved to %s", selected, output_path)
