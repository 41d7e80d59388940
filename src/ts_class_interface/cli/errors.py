"""Error reporting for the command-line interface."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import override

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ts_class_interface.errors import ClassNotFoundError, ParserError

logger = logging.getLogger(__name__)
console = Console(stderr=True)


class CLIError(Exception):
    """A failure detected by the command layer rather than the engine.

    Covers unreadable source files, a missing class selection and engine
    errors re-raised with the name of the command that hit them.
    """

    def __init__(
        self,
        message: str,
        command: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.command = command
        self.original_error = original_error

    @override
    def __str__(self) -> str:
        message = super().__str__()
        return f"{self.command}: {message}" if self.command else message


def _hint(error: Exception) -> str | None:
    """Suggest a next step for engine errors users commonly hit."""
    match error:
        case ClassNotFoundError(available=[_, *_] as names):
            return f"Classes in this file: {', '.join(names)}"
        case ParserError():
            return "Check the file syntax, or pass --grammar tsx for JSX sources"
        case _:
            return None


def _report(error: CLIError, title: str) -> None:
    # Text, not markup, so that type syntax such as `T[]` prints as written
    body = Text(str(error), style="red")
    hint = _hint(error.original_error) if error.original_error else None
    if hint:
        body.append(f"\n{hint}", style="dim")
    console.print(Panel(body, title=f"❌ {title}", border_style="red"))


@contextmanager
def cli_error_handler(command: str, title: str) -> Generator[None]:
    """Report any failure inside the block as a panel and exit with status 1.

    Args:
        command: Command name prefixed to wrapped engine errors
        title: Panel title

    """
    try:
        yield
    except CLIError as e:
        error = e
    except Exception as e:
        error = CLIError(str(e), command=command, original_error=e)
    else:
        return

    logger.error("%s: %s", title, error)
    _report(error, title)
    raise typer.Exit(1) from error
