"""CLI command implementations."""

from ts_class_interface.cli.convert import convert_command, list_classes_command
from ts_class_interface.cli.errors import CLIError

__all__ = [
    "CLIError",
    "convert_command",
    "list_classes_command",
]
