"""
mdc-theming - theme resolution for Material components.

Normalizes theme options into class tokens and expands color overrides
into ``--mdc-theme-*`` CSS variables with readable on-colors.
"""

from __future__ import annotations

from ._version import get_version
from .config import ThemeConfig, load_config
from .core import (
    ConfigError,
    OptionInputError,
    ThemingError,
    derive_colors,
    normalize_key,
    on_color_key,
    parse_theme_options,
    to_dash_case,
)
from .css import to_css_block, to_inline_style
from .resolver import (
    ThemeResolver,
    class_attribute,
    merge_styles,
    provider_style,
    resolve_colors,
    resolve_options,
    theme_class_names,
)

__version__ = get_version()

__all__ = [
    "__version__",
    # Engine
    "to_dash_case",
    "normalize_key",
    "on_color_key",
    "parse_theme_options",
    "derive_colors",
    # Resolver
    "resolve_options",
    "resolve_colors",
    "theme_class_names",
    "class_attribute",
    "merge_styles",
    "provider_style",
    "ThemeResolver",
    # Config and output
    "ThemeConfig",
    "load_config",
    "to_css_block",
    "to_inline_style",
    # Errors
    "ThemingError",
    "ConfigError",
    "OptionInputError",
]
