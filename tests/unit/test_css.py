"""Tests for CSS rendering of resolved theme maps."""

from __future__ import annotations


class TestToCssBlock:
    def test_root_block(self) -> None:
        from mdc_theming.css import to_css_block

        css = to_css_block({"--mdc-theme-primary": "#000", "--mdc-theme-on-primary": "white"})
        assert css == ":root {\n  --mdc-theme-primary: #000;\n  --mdc-theme-on-primary: white;\n}"

    def test_selector_and_indent(self) -> None:
        from mdc_theming.css import to_css_block

        css = to_css_block({"--a": "1"}, selector='[data-theme="dark"]', indent=4)
        assert css == '[data-theme="dark"] {\n    --a: 1;\n}'

    def test_empty(self) -> None:
        from mdc_theming.css import to_css_block

        assert to_css_block({}) == ":root {\n}"


class TestToInlineStyle:
    def test_inline(self) -> None:
        from mdc_theming.css import to_inline_style

        assert to_inline_style({"--a": "1", "color": "red"}) == "--a: 1; color: red"

    def test_with_resolved_colors(self) -> None:
        from mdc_theming.css import to_inline_style
        from mdc_theming.resolver import resolve_colors

        style = to_inline_style(resolve_colors({"primary": "#000"}))
        assert style == "--mdc-theme-primary: #000; --mdc-theme-on-primary: white"
