"""
CSS custom-property key normalization.

Stylesheets read ``--mdc-theme-*`` and ``--mdc-theme-on-*`` variables, so
the spelling produced here is an external contract:

    normalize_key("primaryBg")  -> "--mdc-theme-primary-bg"
    normalize_key("--custom")   -> "--custom"
    on_color_key("--mdc-theme-primary") -> "--mdc-theme-on-primary"
"""

from __future__ import annotations

import re

THEME_PREFIX = "--mdc-theme-"
RAW_PREFIX = "--"
ON_SEGMENT = "on-"

# camelCase boundary: lowercase letter or digit followed by an uppercase letter
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
# Anything that is not a letter or digit acts as a separator
_SEPARATORS = re.compile(r"[\W_]+")


def to_dash_case(value: str) -> str:
    """
    Convert an identifier or free text to dash-case.

    Args:
        value: camelCase, snake_case or space separated identifier

    Returns:
        Lowercase identifier with single dashes between words
    """
    dashed = _CAMEL_BOUNDARY.sub("-", value)
    dashed = _SEPARATORS.sub("-", dashed)
    return dashed.strip("-").lower()


def normalize_key(key: str, prefix: str = THEME_PREFIX) -> str:
    """
    Normalize a theme option key into a CSS custom-property name.

    Keys already starting with ``--`` are raw variable names and are
    returned unchanged.

    Args:
        key: Raw option key
        prefix: Variable prefix for non-raw keys

    Returns:
        CSS custom-property name
    """
    if key.startswith(RAW_PREFIX):
        return key
    return f"{prefix}{to_dash_case(key)}"


def _split_prefix(key: str, prefix: str) -> tuple[str, str]:
    if key.startswith(prefix):
        return prefix, key[len(prefix) :]
    return RAW_PREFIX, key[len(RAW_PREFIX) :]


def on_color_key(key: str, prefix: str = THEME_PREFIX) -> str:
    """
    Get the companion on-color variable name for a color variable.

    The ``on-`` segment goes directly after the theme prefix, or after the
    leading ``--`` for raw variable names outside that prefix.
    """
    head, name = _split_prefix(key, prefix)
    return f"{head}{ON_SEGMENT}{name}"


def is_on_color_key(key: str, prefix: str = THEME_PREFIX) -> bool:
    """Check whether a variable name already names an on-color slot."""
    _head, name = _split_prefix(key, prefix)
    return name.startswith(ON_SEGMENT)


def base_name(key: str, prefix: str = THEME_PREFIX) -> str:
    """Get the variable name without its theme (or raw) prefix."""
    return _split_prefix(key, prefix)[1]
