"""Assembly of the final interface declaration text."""

DEFAULT_INDENT = "    "


def render_interface(
    name: str,
    class_generics: list[str],
    property_lines: list[str],
    method_lines: list[str],
    indent: str = DEFAULT_INDENT,
) -> str:
    """Assemble an interface declaration.

    Properties come first, then a blank line, then methods. Class generics
    are reproduced verbatim, bounds and defaults included.

    Example:
        >>> print(render_interface("Box", ["T"], ["private value: T"], []))
        interface Box<T> {
            private value: T
        <BLANKLINE>
        }

    Args:
        name: Interface name
        class_generics: Raw generic parameter expressions of the class
        property_lines: Rendered property signatures
        method_lines: Rendered method signatures
        indent: Indent unit prefixed to every member line

    Returns:
        The interface declaration text

    """
    generic_clause = f"<{', '.join(class_generics)}>" if class_generics else ""
    lines = [f"interface {name}{generic_clause} {{"]
    lines.extend(f"{indent}{line}" for line in property_lines)
    lines.append("")
    lines.extend(f"{indent}{line}" for line in method_lines)
    lines.append("}")
    return "\n".join(lines)
