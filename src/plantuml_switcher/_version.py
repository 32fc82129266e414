"""Installed version of plantuml-switcher."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION = "plantuml-switcher"


def get_version() -> str:
    """Version of the installed distribution, ``0.0.0`` when running from a bare checkout."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return "0.0.0"
