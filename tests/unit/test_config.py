"""Tests for theme configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError


class TestThemeConfig:
    def test_defaults(self) -> None:
        from mdc_theming.config import ThemeConfig

        config = ThemeConfig()
        assert config.variable_prefix == "--mdc-theme-"
        assert config.class_prefix == "mdc-theme--"
        assert config.on_light == "rgba(0, 0, 0, 0.87)"
        assert config.on_dark == "white"
        assert config.light_threshold == 128.0
        assert config.text_roles is False

    def test_threshold_matches_derivation_default(self) -> None:
        import inspect

        from mdc_theming.config import ThemeConfig
        from mdc_theming.core.colors import LIGHT_THRESHOLD
        from mdc_theming.core.derive import derive_colors

        default = inspect.signature(derive_colors).parameters["threshold"].default
        assert ThemeConfig().light_threshold == LIGHT_THRESHOLD == default

    def test_frozen(self) -> None:
        from mdc_theming.config import ThemeConfig

        config = ThemeConfig()
        with pytest.raises(ValidationError):
            config.on_dark = "black"  # type: ignore[misc]

    def test_threshold_bounds(self) -> None:
        from mdc_theming.config import ThemeConfig

        with pytest.raises(ValidationError):
            ThemeConfig(light_threshold=300)


class TestLoadConfig:
    def test_theme_table(self, tmp_path: Path) -> None:
        from mdc_theming.config import load_config

        path = tmp_path / "theme.toml"
        path.write_text(
            """
[theme]
on_dark = "#fafafa"
light_threshold = 100
text_roles = true

[theme.colors]
primary = "#6200ee"
"""
        )
        config = load_config(path)
        assert config.on_dark == "#fafafa"
        assert config.light_threshold == 100.0
        assert config.text_roles is True

    def test_top_level_settings(self, tmp_path: Path) -> None:
        from mdc_theming.config import load_config

        path = tmp_path / "theme.toml"
        path.write_text('class_prefix = "app--"\n')
        assert load_config(path).class_prefix == "app--"

    def test_missing_file(self, tmp_path: Path) -> None:
        from mdc_theming.config import load_config
        from mdc_theming.core.errors import ConfigError

        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.toml")

    def test_malformed_toml(self, tmp_path: Path) -> None:
        from mdc_theming.config import load_config
        from mdc_theming.core.errors import ConfigError

        path = tmp_path / "theme.toml"
        path.write_text("[theme\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        from mdc_theming.config import load_config
        from mdc_theming.core.errors import ConfigError

        path = tmp_path / "theme.toml"
        path.write_text('[theme]\nvariable_prefix = "mdc-"\n')
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.source == path


class TestLoadColors:
    def test_colors_table(self, tmp_path: Path) -> None:
        from mdc_theming.config import load_colors

        path = tmp_path / "theme.toml"
        path.write_text('[theme.colors]\nprimary = "#6200ee"\nsecondaryBg = "teal"\n')
        assert load_colors(path) == {"primary": "#6200ee", "secondaryBg": "teal"}

    def test_no_colors(self, tmp_path: Path) -> None:
        from mdc_theming.config import load_colors

        path = tmp_path / "theme.toml"
        path.write_text("[theme]\ntext_roles = true\n")
        assert load_colors(path) == {}

    def test_non_string_color(self, tmp_path: Path) -> None:
        from mdc_theming.config import load_colors
        from mdc_theming.core.errors import OptionInputError

        path = tmp_path / "theme.toml"
        path.write_text("[theme.colors]\nprimary = 12\n")
        with pytest.raises(OptionInputError, match="primary"):
            load_colors(path)
