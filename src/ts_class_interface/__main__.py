"""Main entry point for the ts-class-interface command-line tool.

This module provides the command-line interface, including commands for:
- Converting a TypeScript class into an interface declaration
- Listing the classes a TypeScript file declares
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ts_class_interface.cli import convert_command, list_classes_command

app = typer.Typer(name="ts-class-interface")


@app.command()
def convert(  # noqa: PLR0913 - CLI entry point with many options
    source: Annotated[
        Path,
        typer.Argument(
            help="Path to the TypeScript source file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    class_name: Annotated[
        str | None,
        typer.Option(
            "--class",
            "-c",
            help="Class to convert (defaults to the file's only class)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the interface to this file instead of stdout",
            file_okay=True,
            dir_okay=False,
            writable=True,
        ),
    ] = None,
    grammar: Annotated[
        str | None,
        typer.Option(
            "--grammar",
            help="Tree-sitter grammar: typescript or tsx (detected from extension)",
            case_sensitive=False,
        ),
    ] = None,
    indent_size: Annotated[
        int,
        typer.Option("--indent-size", help="Spaces per indent level", min=1),
    ] = 4,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
            case_sensitive=False,
        ),
    ] = "INFO",
) -> None:
    """Convert a class into an equivalent interface declaration.

    Example:
        ts-class-interface convert src/box.ts --class Box
        ts-class-interface convert src/box.ts -c Box -o src/ibox.ts

    """
    convert_command(source, class_name, output, grammar, indent_size, log_level)


@app.command(name="ls-classes")
def list_classes(
    source: Annotated[
        Path,
        typer.Argument(
            help="Path to the TypeScript source file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    grammar: Annotated[
        str | None,
        typer.Option(
            "--grammar",
            help="Tree-sitter grammar: typescript or tsx (detected from extension)",
            case_sensitive=False,
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
            case_sensitive=False,
        ),
    ] = "INFO",
) -> None:
    """List the classes declared in a TypeScript file, in source order."""
    list_classes_command(source, grammar, log_level)


if __name__ == "__main__":
    app()
