"""
CSS color parsing and brightness classification.

Parses the CSS color notations needed to decide whether a background is
light or dark. Named colors are resolved through webcolors; the
numeric notations are parsed here.

Supported: hex (#rgb, #rgba, #rrggbb, #rrggbbaa), rgb()/rgba(),
hsl()/hsla(), oklch() and the CSS named colors. Alpha is read but ignored.
Everything else (var(), color-mix(), currentcolor, transparent, CSS-wide
keywords) is unparseable and yields None.
"""

from __future__ import annotations

import colorsys
import math
import re
from typing import NamedTuple

import webcolors


class RGB(NamedTuple):
    """An sRGB color with 0-255 integer channels."""

    r: int
    g: int
    b: int


# Perceived brightness midpoint on the 0-255 scale
LIGHT_THRESHOLD = 128.0

_NAME = re.compile(r"^[a-z]+$")
_HEX = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
_FUNCTION = re.compile(r"^(rgba?|hsla?|oklch)\(([^()]*)\)$")


def _name_to_hex(name: str) -> str:
    """Resolve a CSS named color to hex, or return the name if unknown."""
    try:
        return webcolors.name_to_hex(name)
    except ValueError:
        return name


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _to_rgb(r: float, g: float, b: float) -> RGB:
    """Build an RGB from 0-1 float channels."""
    return RGB(*(round(_clamp(c) * 255) for c in (r, g, b)))


def _parse_hex(digits: str) -> RGB:
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits)
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _components(body: str) -> list[str]:
    """Split function arguments in comma or space syntax, dropping alpha."""
    body = body.split("/")[0]
    return body.replace(",", " ").split()


def _number(part: str, percent_scale: float) -> float:
    if part.endswith("%"):
        return float(part[:-1]) / 100.0 * percent_scale
    return float(part)


def _hue(part: str) -> float:
    """Parse a hue angle into degrees."""
    for unit, factor in (("deg", 1.0), ("grad", 0.9), ("rad", 180.0 / math.pi), ("turn", 360.0)):
        if part.endswith(unit):
            return float(part[: -len(unit)]) * factor % 360
    return float(part) % 360


def _parse_rgb(parts: list[str]) -> RGB:
    r, g, b = (_number(p, 255.0) / 255.0 for p in parts)
    return _to_rgb(r, g, b)


def _parse_hsl(parts: list[str]) -> RGB:
    h = _hue(parts[0]) / 360.0
    s = _clamp(_number(parts[1], 100.0) / 100.0)
    light = _clamp(_number(parts[2], 100.0) / 100.0)
    return _to_rgb(*colorsys.hls_to_rgb(h, light, s))


def _srgb_gamma(c: float) -> float:
    c = _clamp(c)
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * c ** (1 / 2.4) - 0.055


def _parse_oklch(parts: list[str]) -> RGB:
    lightness = _number(parts[0], 1.0)
    chroma = _number(parts[1], 0.4)
    hue = math.radians(_hue(parts[2]))
    a = chroma * math.cos(hue)
    b = chroma * math.sin(hue)

    # OKLab -> LMS (cube roots) -> linear sRGB
    l_ = (lightness + 0.3963377774 * a + 0.2158037573 * b) ** 3
    m_ = (lightness - 0.1055613458 * a - 0.0638541728 * b) ** 3
    s_ = (lightness - 0.0894841775 * a - 1.2914855480 * b) ** 3

    r = 4.0767416621 * l_ - 3.3077115913 * m_ + 0.2309699292 * s_
    g = -1.2684380046 * l_ + 2.6097574011 * m_ - 0.3413193965 * s_
    bl = -0.0041960863 * l_ - 0.7034186147 * m_ + 1.7076147010 * s_
    return _to_rgb(_srgb_gamma(r), _srgb_gamma(g), _srgb_gamma(bl))


_FUNCTION_PARSERS = {
    "rgb": _parse_rgb,
    "rgba": _parse_rgb,
    "hsl": _parse_hsl,
    "hsla": _parse_hsl,
    "oklch": _parse_oklch,
}


def parse_color(color: str) -> RGB | None:
    """
    Parse a CSS color string into RGB.

    Args:
        color: Any CSS color string

    Returns:
        RGB triple, or None when the notation is not understood
    """
    if not isinstance(color, str):
        return None
    value = color.strip().lower()
    if _NAME.match(value):
        value = _name_to_hex(value)

    if match := _HEX.match(value):
        return _parse_hex(match.group(1))

    if match := _FUNCTION.match(value):
        name, body = match.groups()
        parts = _components(body)
        if len(parts) < 3:
            return None
        try:
            return _FUNCTION_PARSERS[name](parts[:3])
        except (ValueError, OverflowError):
            return None

    return None


def brightness(rgb: RGB) -> float:
    """Perceived brightness on the 0-255 scale (ITU-R BT.601 weights)."""
    return (rgb.r * 299 + rgb.g * 587 + rgb.b * 114) / 1000


def is_light(color: str, threshold: float = LIGHT_THRESHOLD) -> bool | None:
    """
    Classify a color as light or dark.

    Returns:
        True for light, False for dark, None when the color is unparseable
    """
    rgb = parse_color(color)
    if rgb is None:
        return None
    return brightness(rgb) >= threshold


def _linear_channel(c: int) -> float:
    v = c / 255.0
    if v <= 0.03928:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGB) -> float:
    """WCAG 2.1 relative luminance (0-1)."""
    return (
        0.2126 * _linear_channel(rgb.r)
        + 0.7152 * _linear_channel(rgb.g)
        + 0.0722 * _linear_channel(rgb.b)
    )


def contrast_ratio(fg: str, bg: str) -> float | None:
    """WCAG contrast ratio between two colors, None if either is unparseable."""
    fg_rgb = parse_color(fg)
    bg_rgb = parse_color(bg)
    if fg_rgb is None or bg_rgb is None:
        return None
    lighter, darker = sorted(
        (relative_luminance(fg_rgb), relative_luminance(bg_rgb)), reverse=True
    )
    return (lighter + 0.05) / (darker + 0.05)
