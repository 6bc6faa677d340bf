"""
Theme resolver.

Entry points used by a rendering layer. A call resolves either class
tokens from a ``use`` value, or a CSS variable map from an ``options``
color map; the two paths are never merged.

Provider style precedence (lowest to highest):
1. Derived on-colors
2. Caller inline style
3. Caller option colors
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Mapping
from typing import NamedTuple

from .config import ThemeConfig
from .core.derive import derive_colors, derive_on_colors, normalize_colors
from .core.options import ThemeOptionInput, parse_theme_options

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = ThemeConfig()


def resolve_options(use: ThemeOptionInput = None) -> list[str]:
    """Resolve a ``use`` value into bare theme tokens."""
    return parse_theme_options(use)


def resolve_colors(
    options: Mapping[str, str], config: ThemeConfig = _DEFAULT_CONFIG
) -> dict[str, str]:
    """Resolve a color option map into CSS variables with derived on-colors."""
    return derive_colors(
        options,
        on_light=config.on_light,
        on_dark=config.on_dark,
        threshold=config.light_threshold,
        text_roles=config.text_roles,
        prefix=config.variable_prefix,
    )


def theme_class_names(
    use: ThemeOptionInput = None, prefix: str = _DEFAULT_CONFIG.class_prefix
) -> list[str]:
    """Resolve a ``use`` value into prefixed class names (``mdc-theme--primary``)."""
    return [f"{prefix}{token}" for token in resolve_options(use)]


def class_attribute(
    use: ThemeOptionInput = None, *extra: str | None, prefix: str = _DEFAULT_CONFIG.class_prefix
) -> str:
    """
    Build a class attribute value from caller classes and theme classes.

    Caller classes come first; blanks and duplicates are dropped.
    """
    names = parse_theme_options([*(e for e in extra if e), *theme_class_names(use, prefix)])
    return " ".join(names)


def merge_styles(*layers: Mapping[str, str] | None) -> dict[str, str]:
    """
    Merge style mappings in order; later layers win on conflicting keys.

    ``None`` layers are skipped.
    """
    merged: dict[str, str] = {}
    for layer in layers:
        if layer:
            merged.update(layer)
    return merged


def provider_style(
    options: Mapping[str, str],
    style: Mapping[str, str] | None = None,
    config: ThemeConfig = _DEFAULT_CONFIG,
) -> dict[str, str]:
    """
    Build the inline style for an element providing theme colors.

    Args:
        options: Raw color option map
        style: Caller inline style to merge
        config: Resolution settings

    Returns:
        Derived on-colors, then caller style, then option colors
    """
    resolved = normalize_colors(options, config.variable_prefix)
    derived = derive_on_colors(
        resolved,
        on_light=config.on_light,
        on_dark=config.on_dark,
        threshold=config.light_threshold,
        text_roles=config.text_roles,
        prefix=config.variable_prefix,
    )
    return merge_styles(derived, style, resolved)


class CacheInfo(NamedTuple):
    hits: int
    misses: int
    size: int


class ThemeResolver:
    """
    Resolver bound to a ThemeConfig, memoizing color resolution.

    Results are cached by the serialized option map, so two maps with the
    same entries in the same order share a result. Callers receive copies.
    """

    def __init__(self, config: ThemeConfig | None = None, max_entries: int = 256):
        self.config = config or ThemeConfig()
        self.max_entries = max_entries
        self._cache: dict[str, dict[str, str]] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def resolve_options(self, use: ThemeOptionInput = None) -> list[str]:
        return resolve_options(use)

    def class_names(self, use: ThemeOptionInput = None) -> list[str]:
        return theme_class_names(use, self.config.class_prefix)

    def resolve_colors(self, options: Mapping[str, str]) -> dict[str, str]:
        """Resolve a color option map, reusing an earlier result when possible."""
        key = json.dumps(list(options.items()))
        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                self._hits += 1
                logger.debug("Color cache hit (%d entries)", len(cached))
                return dict(cached)
            self._misses += 1

        result = resolve_colors(options, self.config)

        if self.max_entries <= 0:
            return dict(result)

        with self._lock:
            if len(self._cache) >= self.max_entries:
                # Evict the oldest entry
                self._cache.pop(next(iter(self._cache)))
            self._cache[key] = result
        return dict(result)

    def provider_style(
        self, options: Mapping[str, str], style: Mapping[str, str] | None = None
    ) -> dict[str, str]:
        return provider_style(options, style, self.config)

    def cache_info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(self._hits, self._misses, len(self._cache))

    def cache_clear(self) -> None:
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0
