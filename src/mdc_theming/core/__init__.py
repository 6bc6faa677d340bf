"""Core theme resolution: option parsing, key normalization, color derivation."""

from .colors import RGB, brightness, contrast_ratio, is_light, parse_color
from .derive import ON_DARK, ON_LIGHT, derive_colors, derive_on_colors, normalize_colors
from .errors import ConfigError, OptionInputError, ThemingError
from .keys import THEME_PREFIX, is_on_color_key, normalize_key, on_color_key, to_dash_case
from .options import ThemeOptionInput, decode_option_input, parse_theme_options

__all__ = [
    # Keys
    "THEME_PREFIX",
    "to_dash_case",
    "normalize_key",
    "on_color_key",
    "is_on_color_key",
    # Options
    "ThemeOptionInput",
    "decode_option_input",
    "parse_theme_options",
    # Colors
    "RGB",
    "parse_color",
    "brightness",
    "is_light",
    "contrast_ratio",
    "ON_LIGHT",
    "ON_DARK",
    "normalize_colors",
    "derive_on_colors",
    "derive_colors",
    # Errors
    "ThemingError",
    "ConfigError",
    "OptionInputError",
]
