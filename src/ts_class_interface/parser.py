"""TypeScript source parser using tree-sitter."""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict
from tree_sitter import Parser

from ts_class_interface.errors import ParserError
from ts_class_interface.languages.base import find_first_error, position
from ts_class_interface.languages.typescript import (
    GRAMMARS,
    TypeScriptLanguageSupport,
)
from ts_class_interface.languages.typescript.helpers import (
    TS_EXTENSIONS,
    TSX_EXTENSIONS,
)
from ts_class_interface.models import DeclarationTree

logger = logging.getLogger(__name__)

# Constants
_DEFAULT_GRAMMAR = "typescript"
_DEFAULT_ENCODING = "utf-8"


class SourceCodeParser:
    """Parser turning TypeScript source text into a DeclarationTree."""

    # Supported grammars and their file extensions
    _SUPPORTED_GRAMMARS = {
        "typescript": TS_EXTENSIONS,
        "tsx": TSX_EXTENSIONS,
    }

    def __init__(self, grammar: str = _DEFAULT_GRAMMAR) -> None:
        """Initialise the parser.

        Args:
            grammar: Grammar to parse with (default: typescript)

        Raises:
            ParserError: If the grammar is not supported

        """
        self._validate_grammar_support(grammar)

        self.grammar = grammar
        self.language_support = TypeScriptLanguageSupport()
        self.parser = Parser()
        self.parser.language = self.language_support.get_tree_sitter_language(grammar)

    @staticmethod
    def detect_grammar_from_file(file_path: Path) -> str:
        """Detect the grammar to use from a file extension.

        Args:
            file_path: Path to the source file

        Returns:
            Grammar name

        Raises:
            ParserError: If the extension is not a TypeScript one

        """
        extension = file_path.suffix.lower()

        for grammar, extensions in SourceCodeParser._SUPPORTED_GRAMMARS.items():
            if extension in extensions:
                return grammar

        raise ParserError(f"Cannot detect grammar for file extension: {extension}")

    @staticmethod
    def is_supported_file(file_path: Path) -> bool:
        """Check if a file has a TypeScript extension."""
        extension = file_path.suffix.lower()
        return any(
            extension in extensions
            for extensions in SourceCodeParser._SUPPORTED_GRAMMARS.values()
        )

    def parse(self, source_code: str) -> DeclarationTree:
        """Parse source code into a declaration tree.

        Args:
            source_code: TypeScript source text

        Returns:
            DeclarationTree of top-level declarations and imports

        Raises:
            ParserError: If the source is not syntactically valid

        """
        source = source_code.encode(_DEFAULT_ENCODING)
        tree = self.parser.parse(source)
        root_node = tree.root_node

        error_node = find_first_error(root_node)
        if error_node is not None:
            line, column = position(error_node)
            kind = "missing token" if error_node.is_missing else "syntax error"
            raise ParserError(
                f"Invalid {self.grammar} source: {kind} at line {line}, column {column}"
            )

        return self.language_support.extract(root_node, source)

    def _validate_grammar_support(self, grammar: str) -> None:
        """Validate that a grammar is supported.

        Raises:
            ParserError: If grammar is not supported

        """
        if grammar not in self._SUPPORTED_GRAMMARS:
            raise ParserError(
                f"Unsupported grammar: {grammar}. Supported grammars: {list(GRAMMARS)}"
            )


class SourceFile(BaseModel):
    """Source text together with its one parsed declaration tree.

    Parsing happens once, in `parse`; every later query reads `tree`.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    tree: DeclarationTree

    @classmethod
    def parse(cls, text: str, grammar: str = _DEFAULT_GRAMMAR) -> "SourceFile":
        """Parse source text eagerly.

        Args:
            text: TypeScript source text
            grammar: Grammar to parse with

        Returns:
            SourceFile holding the text and its declaration tree

        Raises:
            ParserError: If the grammar is unsupported or the text is invalid

        """
        tree = SourceCodeParser(grammar).parse(text)
        logger.debug("Parsed %d characters with %s grammar", len(text), grammar)
        return cls(text=text, tree=tree)
