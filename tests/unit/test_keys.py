"""Tests for CSS custom-property key normalization."""

from __future__ import annotations

import pytest


class TestToDashCase:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("primary", "primary"),
            ("primaryBg", "primary-bg"),
            ("textPrimaryOnBackground", "text-primary-on-background"),
            ("surface2Dark", "surface2-dark"),
            ("primary_bg", "primary-bg"),
            ("Primary  Bg", "primary-bg"),
            ("already-dashed", "already-dashed"),
            ("--leading--and--trailing--", "leading-and-trailing"),
        ],
    )
    def test_dash_case(self, value: str, expected: str) -> None:
        from mdc_theming.core.keys import to_dash_case

        assert to_dash_case(value) == expected

    def test_non_ascii_passes_through(self) -> None:
        from mdc_theming.core.keys import to_dash_case

        assert to_dash_case("crèmeBrûlée") == "crème-brûlée"


class TestNormalizeKey:
    def test_camel_case_key(self) -> None:
        from mdc_theming.core.keys import normalize_key

        assert normalize_key("primaryBg") == "--mdc-theme-primary-bg"

    def test_raw_variable_unchanged(self) -> None:
        from mdc_theming.core.keys import normalize_key

        assert normalize_key("--custom") == "--custom"
        assert normalize_key("--mdc-theme-primary") == "--mdc-theme-primary"

    def test_single_dash_is_not_raw(self) -> None:
        from mdc_theming.core.keys import normalize_key

        assert normalize_key("-secondary") == "--mdc-theme-secondary"

    def test_custom_prefix(self) -> None:
        from mdc_theming.core.keys import normalize_key

        assert normalize_key("onSurface", prefix="--app-") == "--app-on-surface"


class TestOnColorKey:
    def test_theme_variable(self) -> None:
        from mdc_theming.core.keys import on_color_key

        assert on_color_key("--mdc-theme-primary") == "--mdc-theme-on-primary"
        assert on_color_key("--mdc-theme-primary-bg") == "--mdc-theme-on-primary-bg"

    def test_raw_variable(self) -> None:
        from mdc_theming.core.keys import on_color_key

        assert on_color_key("--brand") == "--on-brand"

    def test_is_on_color_key(self) -> None:
        from mdc_theming.core.keys import is_on_color_key

        assert is_on_color_key("--mdc-theme-on-primary") is True
        assert is_on_color_key("--on-brand") is True
        assert is_on_color_key("--mdc-theme-primary") is False
        assert is_on_color_key("--mdc-theme-onyx") is False
