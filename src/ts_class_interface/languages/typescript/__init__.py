"""TypeScript language support."""

from ts_class_interface.languages.typescript.support import (
    GRAMMARS,
    TypeScriptLanguageSupport,
)

__all__ = ["GRAMMARS", "TypeScriptLanguageSupport"]
