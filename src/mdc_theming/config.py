"""
Theme configuration.

Configuration is loaded from the [theme] table of a TOML file:

    [theme]
    on_light = "rgba(0, 0, 0, 0.87)"
    on_dark = "white"
    light_threshold = 128
    text_roles = false

    [theme.colors]
    primary = "#6200ee"
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.colors import LIGHT_THRESHOLD
from .core.derive import ON_DARK, ON_LIGHT
from .core.errors import ConfigError, OptionInputError
from .core.keys import THEME_PREFIX

CLASS_PREFIX = "mdc-theme--"


class ThemeConfig(BaseModel):
    """Settings for class-name and color resolution."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    variable_prefix: str = Field(
        default=THEME_PREFIX,
        pattern=r"^--",
        description="Prefix for normalized CSS variable names",
    )
    class_prefix: str = Field(default=CLASS_PREFIX, description="Prefix for theme class names")
    on_light: str = Field(default=ON_LIGHT, description="Foreground for light backgrounds")
    on_dark: str = Field(default=ON_DARK, description="Foreground for dark backgrounds")
    light_threshold: float = Field(
        default=LIGHT_THRESHOLD,
        ge=0.0,
        le=255.0,
        description="Brightness at or above which a color is light",
    )
    text_roles: bool = Field(default=False, description="Derive Material text-role variables")


def _read_toml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError("Config file not found", source=path)
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}", source=path) from e


def _theme_table(data: dict[str, Any]) -> dict[str, Any]:
    theme = data.get("theme", data)
    if not isinstance(theme, dict):
        return {}
    return theme


def load_config(path: Path | str) -> ThemeConfig:
    """
    Load a ThemeConfig from a TOML file.

    Settings are read from the [theme] table, or from the top level when
    the file has no such table.

    Raises:
        ConfigError: If the file is missing, malformed or holds invalid values
    """
    path = Path(path)
    settings = {k: v for k, v in _theme_table(_read_toml(path)).items() if k != "colors"}
    try:
        return ThemeConfig(**settings)
    except ValidationError as e:
        raise ConfigError(f"Invalid theme config: {e}", source=path) from e


def load_colors(path: Path | str) -> dict[str, str]:
    """
    Load color options from the [theme.colors] table of a TOML file.

    Raises:
        ConfigError: If the file is missing or malformed
        OptionInputError: If a color value is not a string
    """
    path = Path(path)
    colors = _theme_table(_read_toml(path)).get("colors", {})
    if not isinstance(colors, dict):
        raise OptionInputError("[theme.colors] must be a table", source=path)

    result: dict[str, str] = {}
    for key, value in colors.items():
        if not isinstance(value, str):
            raise OptionInputError(f"Color for {key!r} must be a string", source=path)
        result[key] = value
    return result
