"""Version lookup for swatchsmith.

Installed distributions report their metadata version. A source checkout
without an install falls back to the ``[project]`` table in pyproject.toml.
"""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DIST_NAME = "swatchsmith"
UNKNOWN_VERSION = "0.0.0"

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _pyproject_version(path: Path) -> str | None:
    if not path.is_file():
        return None
    with path.open("rb") as f:
        project = tomllib.load(f).get("project", {})
    if project.get("name") != DIST_NAME:
        return None
    return project.get("version")


def get_version() -> str:
    """Return the swatchsmith version string."""
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return _pyproject_version(_PYPROJECT) or UNKNOWN_VERSION
