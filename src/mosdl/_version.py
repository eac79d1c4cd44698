"""Installed version of the mosdl distribution."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "mosdl"


def get_version() -> str:
    """Return the installed version, or ``0.0.0`` when running from an uninstalled tree."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"
