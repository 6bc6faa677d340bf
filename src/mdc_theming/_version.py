"""Installed version of the mdc-theming distribution."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION = "mdc-theming"


def get_version() -> str:
    """Get the version hatch recorded for the installed distribution."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        # Source checkout without an install
        return "0.0.0+unknown"
