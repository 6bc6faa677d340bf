"""
Automatic on-color derivation.

Expands a map of theme colors with a readable foreground ("on-color") for
every background color it can classify:

    derive_colors({"primary": "#ffffff"})
    -> {"--mdc-theme-primary": "#ffffff",
        "--mdc-theme-on-primary": "rgba(0, 0, 0, 0.87)"}

Explicitly supplied values always win over derived ones. Colors that cannot
be parsed are kept as-is without a companion.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .colors import LIGHT_THRESHOLD, is_light
from .keys import THEME_PREFIX, base_name, is_on_color_key, normalize_key, on_color_key

logger = logging.getLogger(__name__)

ON_LIGHT = "rgba(0, 0, 0, 0.87)"
ON_DARK = "white"

# Material text emphasis levels, keyed by role
TEXT_ROLES_ON_LIGHT: dict[str, str] = {
    "primary": "rgba(0, 0, 0, 0.87)",
    "secondary": "rgba(0, 0, 0, 0.54)",
    "hint": "rgba(0, 0, 0, 0.38)",
    "disabled": "rgba(0, 0, 0, 0.38)",
    "icon": "rgba(0, 0, 0, 0.38)",
}
TEXT_ROLES_ON_DARK: dict[str, str] = {
    "primary": "white",
    "secondary": "rgba(255, 255, 255, 0.7)",
    "hint": "rgba(255, 255, 255, 0.5)",
    "disabled": "rgba(255, 255, 255, 0.5)",
    "icon": "rgba(255, 255, 255, 0.5)",
}


def normalize_colors(options: Mapping[str, str], prefix: str = THEME_PREFIX) -> dict[str, str]:
    """
    Normalize option keys into CSS variable names.

    Later entries overwrite earlier ones that normalize to the same name.
    """
    resolved: dict[str, str] = {}
    for key, color in options.items():
        resolved[normalize_key(key, prefix)] = color
    return resolved


def _text_role_keys(key: str, prefix: str) -> dict[str, str]:
    """Map each text role to its variable name for a background variable."""
    head = prefix if key.startswith(prefix) else "--"
    name = base_name(key, prefix)
    return {role: f"{head}text-{role}-on-{name}" for role in TEXT_ROLES_ON_LIGHT}


def derive_on_colors(
    resolved: Mapping[str, str],
    *,
    on_light: str = ON_LIGHT,
    on_dark: str = ON_DARK,
    threshold: float = LIGHT_THRESHOLD,
    text_roles: bool = False,
    prefix: str = THEME_PREFIX,
) -> dict[str, str]:
    """
    Compute the on-color companions for an already normalized color map.

    Only entries missing from ``resolved`` are returned, so merging the
    result underneath ``resolved`` never overrides an explicit value.

    Args:
        resolved: CSS variable name -> color
        on_light: Foreground for light backgrounds
        on_dark: Foreground for dark backgrounds
        threshold: Brightness (0-255) at or above which a color is light
        text_roles: Also derive Material text-role variables
        prefix: Theme variable prefix

    Returns:
        Derived CSS variable name -> color
    """
    derived: dict[str, str] = {}

    for key, color in resolved.items():
        if is_on_color_key(key, prefix):
            continue

        light = is_light(color, threshold)
        if light is None:
            logger.debug("No on-color for %s: cannot parse %r", key, color)
            continue

        on_key = on_color_key(key, prefix)
        if on_key not in resolved:
            derived.setdefault(on_key, on_light if light else on_dark)

        if text_roles:
            table = TEXT_ROLES_ON_LIGHT if light else TEXT_ROLES_ON_DARK
            for role, role_key in _text_role_keys(key, prefix).items():
                if role_key not in resolved:
                    derived.setdefault(role_key, table[role])

    return derived


def derive_colors(
    options: Mapping[str, str],
    *,
    on_light: str = ON_LIGHT,
    on_dark: str = ON_DARK,
    threshold: float = LIGHT_THRESHOLD,
    text_roles: bool = False,
    prefix: str = THEME_PREFIX,
) -> dict[str, str]:
    """
    Normalize a color option map and add derived on-colors.

    Args:
        options: Raw key -> CSS color
        on_light: Foreground for light backgrounds
        on_dark: Foreground for dark backgrounds
        threshold: Brightness (0-255) at or above which a color is light
        text_roles: Also derive Material text-role variables
        prefix: Theme variable prefix

    Returns:
        Normalized input entries followed by derived companions
    """
    resolved = normalize_colors(options, prefix)
    derived = derive_on_colors(
        resolved,
        on_light=on_light,
        on_dark=on_dark,
        threshold=threshold,
        text_roles=text_roles,
        prefix=prefix,
    )
    resolved.update(derived)
    return resolved
