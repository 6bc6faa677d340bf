"""
Error types for mdc-theming.

The resolution engine itself is total: empty option inputs, unparseable
colors and key collisions all have defined results. Only configuration
loading and command-line input parsing raise.
"""

from pathlib import Path


class ThemingError(Exception):
    """Base exception for all mdc-theming errors."""

    def __init__(self, message: str, source: Path | None = None):
        self.message = message
        self.source = source
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with its source file if available."""
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class ConfigError(ThemingError):
    """
    Raised when a theme configuration cannot be loaded.

    Examples:
    - Missing config file
    - Malformed TOML
    - Threshold outside the 0-255 brightness scale
    """

    pass


class OptionInputError(ThemingError):
    """
    Raised when command-line color options cannot be read.

    Examples:
    - Argument without a KEY=COLOR separator
    - Empty key
    - [theme.colors] table holding a non-string value
    """

    pass
