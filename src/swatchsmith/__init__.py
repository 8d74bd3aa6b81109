"""
swatchsmith - perceptual shade ramps for design systems.

Generates 11- or 21-tone swatches (50-950 / 0-1000) from a single color in
the OKLCH color space.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import (
    InvalidInput,
    InvalidOptions,
    SwatchError,
    SwatchSpecError,
    UnparseableColor,
    UnsupportedFormat,
)
from .core.ir import ColorFormat, SwatchOptions, SwatchScale, SwatchVariant
from .core.swatch import Swatch, swatch

__version__ = get_version()

__all__ = [
    "__version__",
    "swatch",
    "Swatch",
    "SwatchOptions",
    "SwatchScale",
    "SwatchVariant",
    "ColorFormat",
    "SwatchError",
    "InvalidInput",
    "InvalidOptions",
    "UnparseableColor",
    "UnsupportedFormat",
    "SwatchSpecError",
]
