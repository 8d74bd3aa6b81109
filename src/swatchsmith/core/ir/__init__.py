"""
Intermediate representation for swatch options and swatchspec files.
"""

from .swatchspec import (
    VARIANT_CHROMA_MULTIPLIERS,
    ColorFormat,
    PaletteEntry,
    SwatchOptions,
    SwatchScale,
    SwatchSpecYAML,
    SwatchVariant,
)

__all__ = [
    "VARIANT_CHROMA_MULTIPLIERS",
    "ColorFormat",
    "PaletteEntry",
    "SwatchOptions",
    "SwatchScale",
    "SwatchSpecYAML",
    "SwatchVariant",
]
