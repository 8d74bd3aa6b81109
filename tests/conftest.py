"""Shared pytest fixtures for swatchsmith tests."""

from pathlib import Path

import pytest

from swatchsmith.core.colors import PerceptualColor


@pytest.fixture
def blue_hex() -> str:
    """A saturated mid-lightness blue."""
    return "#3b82f6"


@pytest.fixture
def blue_oklch() -> str:
    """An in-gamut OKLCH seed color."""
    return "oklch(0.6 0.15 250)"


@pytest.fixture
def gray() -> PerceptualColor:
    """An achromatic working color."""
    return PerceptualColor(l=0.7, c=0.0, h=0.0)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Return an empty project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root
