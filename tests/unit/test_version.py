"""Tests for version lookup."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from unittest.mock import patch


class TestGetVersion:
    def test_reads_distribution_metadata(self) -> None:
        from mdc_theming._version import get_version

        with patch("mdc_theming._version.version", return_value="1.2.3") as version:
            assert get_version() == "1.2.3"
        version.assert_called_once_with("mdc-theming")

    def test_not_installed(self) -> None:
        from mdc_theming._version import get_version

        with patch(
            "mdc_theming._version.version", side_effect=PackageNotFoundError("mdc-theming")
        ):
            assert get_version() == "0.0.0+unknown"
