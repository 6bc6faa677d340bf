"""
CSS rendering for resolved theme maps.

Turns a CSS variable -> value mapping into a declaration block for a
stylesheet, or into an inline ``style`` attribute value.
"""

from __future__ import annotations

from collections.abc import Mapping


def to_css_block(styles: Mapping[str, str], selector: str = ":root", indent: int = 2) -> str:
    """
    Convert a style mapping to a CSS rule.

    Args:
        styles: Property name -> value, in output order
        selector: Rule selector
        indent: Number of spaces for indentation

    Returns:
        CSS string with one declaration per line
    """
    prefix = " " * indent
    lines = [f"{selector} {{"]
    for key, value in styles.items():
        lines.append(f"{prefix}{key}: {value};")
    lines.append("}")
    return "\n".join(lines)


def to_inline_style(styles: Mapping[str, str]) -> str:
    """Convert a style mapping to an inline style attribute value."""
    return "; ".join(f"{key}: {value}" for key, value in styles.items())
