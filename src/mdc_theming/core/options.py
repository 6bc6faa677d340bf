"""
Theme option parsing.

A theme option value arrives in one of several shapes:

    parse_theme_options("primary")                 -> ["primary"]
    parse_theme_options("primary primary accent")  -> ["primary", "accent"]
    parse_theme_options(["a", "b", "a"])           -> ["a", "b"]
    parse_theme_options({"a": True, "b": False})   -> ["a"]
    parse_theme_options(None)                      -> []

Each shape is first decoded into an explicit variant, then flattened into
bare tokens in first-seen order with duplicates and blanks removed.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

ThemeOptionInput = str | Sequence[str] | Mapping[str, bool] | None


@dataclass(frozen=True)
class NoTokens:
    """Absent input; no theme option applied."""


@dataclass(frozen=True)
class TokenString:
    """A single token or a space separated list of tokens."""

    value: str


@dataclass(frozen=True)
class TokenList:
    """An ordered sequence of token strings."""

    values: tuple[str, ...]


@dataclass(frozen=True)
class TokenFlags:
    """Tokens switched on or off by a boolean flag."""

    flags: tuple[tuple[str, bool], ...]


ThemeOption = NoTokens | TokenString | TokenList | TokenFlags


def _token_text(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Theme option tokens must be strings, got {type(value).__name__}")
    return value


def decode_option_input(value: ThemeOptionInput) -> ThemeOption:
    """
    Decode a raw theme option value into its variant.

    Raises:
        TypeError: If the value is not one of the supported shapes
    """
    if value is None:
        return NoTokens()
    if isinstance(value, str):
        return TokenString(value)
    if isinstance(value, Mapping):
        return TokenFlags(tuple((_token_text(k), bool(v)) for k, v in value.items()))
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return TokenList(tuple(_token_text(v) for v in value if v is not None and v != ""))
    raise TypeError(f"Unsupported theme option type: {type(value).__name__}")


def _split(value: str) -> list[str]:
    # str.split() without arguments drops empty fragments
    return value.split()


def _dedupe(tokens: Iterable[str]) -> list[str]:
    seen: dict[str, None] = {}
    for token in tokens:
        seen.setdefault(token, None)
    return list(seen)


def option_tokens(option: ThemeOption) -> list[str]:
    """Flatten a decoded option variant into ordered, unique tokens."""
    if isinstance(option, NoTokens):
        return []
    if isinstance(option, TokenString):
        return _dedupe(_split(option.value))
    if isinstance(option, TokenList):
        return _dedupe(token for value in option.values for token in _split(value))
    if isinstance(option, TokenFlags):
        return _dedupe(
            token for name, enabled in option.flags if enabled for token in _split(name)
        )
    raise TypeError(f"Unknown theme option variant: {option!r}")


def parse_theme_options(value: ThemeOptionInput = None) -> list[str]:
    """
    Parse a theme option value into bare theme tokens.

    Args:
        value: String, space separated string, sequence of strings,
            mapping of token to bool, or None

    Returns:
        Tokens in first-seen order, never empty strings, never duplicated
    """
    return option_tokens(decode_option_input(value))
