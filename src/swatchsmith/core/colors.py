"""
Color parsing, classification and formatting backed by coloraide.

Colors enter the swatch pipeline as CSS strings, are worked on as OKLCH
triples (PerceptualColor), and leave as CSS strings in the requested format.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from coloraide import Color

from .errors import UnparseableColor, UnsupportedFormat
from .ir.swatchspec import ColorFormat

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_IDENT_RE = re.compile(r"^[a-z]+$", re.IGNORECASE)
_NOTATION_RE = re.compile(r"^(?P<model>rgba?|hsla?|oklab|oklch)\s*\(", re.IGNORECASE)

# Legacy alpha spellings share a family with their base notation
_NOTATION_ALIASES: dict[str, str] = {"rgba": "rgb", "hsla": "hsl"}


@dataclass(frozen=True)
class PerceptualColor:
    """
    A color in OKLCH.

    Attributes:
        l: Lightness (0-1)
        c: Chroma (>= 0, practically 0-0.4)
        h: Hue in degrees (0-360)
    """

    l: float  # noqa: E741
    c: float
    h: float


@dataclass(frozen=True)
class ColorParts:
    """Notation family extracted from a functional color string."""

    model: str


def _finite(value: float) -> float:
    """Achromatic colors report NaN hue (and sometimes chroma); treat as 0."""
    return 0.0 if math.isnan(value) else float(value)


def parse_color(value: str) -> PerceptualColor:
    """Parse any CSS color string into OKLCH coordinates.

    Args:
        value: Color string (hex, named, rgb(), hsl(), oklab(), oklch(), ...).

    Returns:
        PerceptualColor in OKLCH.

    Raises:
        UnparseableColor: If coloraide cannot interpret the string.
    """
    try:
        color = Color(value.strip())
    except ValueError as e:
        raise UnparseableColor(f"Unable to parse color: {value!r}") from e

    oklch = color.convert("oklch")
    parsed = PerceptualColor(
        l=_finite(oklch["lightness"]),
        c=_finite(oklch["chroma"]),
        h=_finite(oklch["hue"]),
    )
    logger.debug(f"Parsed {value!r} as {parsed}")
    return parsed


def format_color(color: PerceptualColor, format: str, precision: int | None = None) -> str:
    """Serialize an OKLCH color to a CSS string.

    hex, rgb and hsl outputs are gamut-fitted to sRGB.

    Args:
        color: OKLCH color.
        format: One of hex, rgb, hsl, oklab, oklch.
        precision: Significant digits for numeric channels (coloraide default if None).

    Returns:
        CSS color string.

    Raises:
        UnsupportedFormat: If the format is not recognized.
    """
    try:
        target = ColorFormat(format.lower())
    except (ValueError, AttributeError) as e:
        supported = ", ".join(f.value for f in ColorFormat)
        raise UnsupportedFormat(
            f"Unsupported color format {format!r} (expected one of: {supported})"
        ) from e

    kwargs = {} if precision is None else {"precision": precision}
    oklch = Color("oklch", [color.l, color.c, color.h])

    if target == ColorFormat.HEX:
        return oklch.convert("srgb").to_string(hex=True)
    if target == ColorFormat.RGB:
        return oklch.convert("srgb").to_string(**kwargs)
    if target == ColorFormat.HSL:
        return oklch.convert("hsl").to_string(**kwargs)
    if target == ColorFormat.OKLAB:
        return oklch.convert("oklab").to_string(**kwargs)
    return oklch.to_string(**kwargs)


def is_hex(value: str) -> bool:
    """Check if value is a hex color literal (#rgb, #rgba, #rrggbb, #rrggbbaa)."""
    return isinstance(value, str) and bool(_HEX_RE.match(value.strip()))


def is_named_color(value: str) -> bool:
    """Check if value is a CSS named color such as 'rebeccapurple'."""
    if not isinstance(value, str) or not _IDENT_RE.match(value.strip()):
        return False
    try:
        Color(value.strip())
    except ValueError:
        return False
    return True


def classify_notation(value: str) -> ColorParts:
    """Extract the notation family of a functional color string.

    Raises:
        UnparseableColor: If the string is not rgb(), hsl(), oklab() or oklch().
    """
    match = _NOTATION_RE.match(value.strip())
    if not match:
        raise UnparseableColor(f"Unrecognized color notation: {value!r}")
    model = match.group("model").lower()
    return ColorParts(model=_NOTATION_ALIASES.get(model, model))


def to_hex(value: str) -> str:
    """Convert any CSS color string to an sRGB hex literal."""
    return format_color(parse_color(value), ColorFormat.HEX)
