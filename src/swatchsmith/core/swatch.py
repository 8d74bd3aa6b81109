"""
Perceptual swatch generation in OKLCH.

A swatch maps tone labels (50, 100, ..., 950, or 0-1000 in steps of 50) to
colors that share the input's hue. Lightness comes from either a power curve
(dynamic scale) or a curated table (fixed scale); chroma follows a parabola in
lightness so near-white and near-black tones stay inside a plausible gamut.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from pydantic import ValidationError

from .colors import (
    PerceptualColor,
    classify_notation,
    format_color,
    is_hex,
    is_named_color,
    parse_color,
)
from .errors import InvalidInput, InvalidOptions
from .ir.swatchspec import (
    VARIANT_CHROMA_MULTIPLIERS,
    ColorFormat,
    SwatchOptions,
    SwatchScale,
    SwatchVariant,
)

logger = logging.getLogger(__name__)

Swatch = dict[int, str]
ToneTable = dict[int, float]

# Working lightness the base color is normalized to before shading
REFERENCE_LIGHTNESS = 0.7

# Extra lightness multiplier for the deep variant
DEEP_LIGHTNESS_FACTOR = 0.7

# Upper bound on generated chroma
MAX_CHROMA = 0.4

# Curated lightness per tone for the fixed scale.
# The dynamic-scale options (lightness_factor, max/min_lightness) do not apply here.
FIXED_TONES_11: dict[int, float] = {
    50: 0.97,
    100: 0.92,
    200: 0.85,
    300: 0.78,
    400: 0.69,
    500: 0.57,
    600: 0.46,
    700: 0.35,
    800: 0.24,
    900: 0.18,
    950: 0.10,
}

FIXED_TONES_21: dict[int, float] = {
    0: 0.99,
    50: 0.97,
    100: 0.94,
    150: 0.91,
    200: 0.87,
    250: 0.83,
    300: 0.78,
    350: 0.73,
    400: 0.67,
    450: 0.61,
    500: 0.55,
    550: 0.49,
    600: 0.43,
    650: 0.38,
    700: 0.33,
    750: 0.28,
    800: 0.23,
    850: 0.19,
    900: 0.15,
    950: 0.10,
    1000: 0.05,
}


# =============================================================================
# Options
# =============================================================================


def _describe_validation_error(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def resolve_options(
    options: SwatchOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> SwatchOptions:
    """Build validated SwatchOptions from an options object, a mapping and/or keywords.

    Keyword overrides win over values in ``options``.

    Raises:
        InvalidOptions: If any option violates its constraints.
    """
    if isinstance(options, SwatchOptions) and not overrides:
        return options

    if options is None:
        data: dict[str, Any] = {}
    elif isinstance(options, SwatchOptions):
        data = options.model_dump()
    elif isinstance(options, Mapping):
        data = dict(options)
    else:
        raise InvalidOptions(
            f"options must be SwatchOptions or a mapping, got {type(options).__name__}"
        )
    data.update(overrides)

    try:
        return SwatchOptions(**data)
    except ValidationError as e:
        raise InvalidOptions(_describe_validation_error(e)) from e


# =============================================================================
# Base color
# =============================================================================


def derive_base_color(
    color: str, variant: SwatchVariant | str = SwatchVariant.BASE
) -> PerceptualColor:
    """Parse the input and normalize it to the working color for shading.

    Lightness is reset to REFERENCE_LIGHTNESS and chroma is scaled by the
    variant multiplier. The deep variant then also scales lightness by
    DEEP_LIGHTNESS_FACTOR. Shading replaces lightness per tone, so only the
    chroma adjustment reaches the final swatch.

    Raises:
        UnparseableColor: If the input cannot be parsed.
    """
    variant = SwatchVariant(variant)
    parsed = parse_color(color)
    working = replace(
        parsed,
        l=REFERENCE_LIGHTNESS,
        c=parsed.c * VARIANT_CHROMA_MULTIPLIERS[variant],
    )
    if variant == SwatchVariant.DEEP:
        working = replace(working, l=working.l * DEEP_LIGHTNESS_FACTOR)

    logger.debug(f"Base color for {color!r} ({variant.value}): {working}")
    return working


def infer_format(color: str) -> str:
    """Pick the output format matching the input's notation.

    Hex literals and named colors map to hex; functional notations keep
    their own family (rgb, hsl, oklab, oklch).

    Raises:
        UnparseableColor: If the notation family is not recognized.
    """
    if is_hex(color) or is_named_color(color):
        return ColorFormat.HEX.value
    return classify_notation(color).model


# =============================================================================
# Tone tables
# =============================================================================


def tone_label(index: int, steps: int) -> int:
    """Return the tone label for a step index.

    11 steps: 50, 100, 200, ..., 900, 950.
    21 steps: 0, 50, 100, 150, ..., 950, 1000.
    """
    if steps == 11:
        if index == 0:
            return 50
        if index == 10:
            return 950
        return index * 100

    if index == 0:
        return 0
    if index == 1:
        return 50
    if index == 20:
        return 1000
    return (index - 1) * 50 + 50


def dynamic_tone_table(
    steps: int = 11,
    max_lightness: float = 0.97,
    min_lightness: float = 0.2,
    lightness_factor: float = 1.5,
) -> ToneTable:
    """Distribute lightness along a decreasing power curve.

    Index 0 gets max_lightness and the last index gets min_lightness. A
    lightness_factor above 1 keeps the light end closer together; below 1
    does the opposite.
    """
    span = max_lightness - min_lightness
    table: ToneTable = {}
    for index in range(steps):
        position = index / (steps - 1)
        table[tone_label(index, steps)] = max_lightness - span * position**lightness_factor
    return table


def fixed_tone_table(steps: int = 11) -> ToneTable:
    """Return a copy of the curated lightness table for 11 or 21 steps."""
    return dict(FIXED_TONES_11 if steps == 11 else FIXED_TONES_21)


def build_tone_table(options: SwatchOptions) -> ToneTable:
    """Build the tone -> lightness table selected by options.scale."""
    if options.scale == SwatchScale.FIXED:
        return fixed_tone_table(options.swatch_steps)
    return dynamic_tone_table(
        options.swatch_steps,
        options.max_lightness,
        options.min_lightness,
        options.lightness_factor,
    )


# =============================================================================
# Shading
# =============================================================================


def shade_color(color: PerceptualColor, lightness: float) -> PerceptualColor:
    """Produce the shade of color at the given lightness.

    Chroma is scaled by 4L(1-L), which peaks at L=0.5 and vanishes at
    black and white, then clamped to MAX_CHROMA. Achromatic colors skip the
    scaling and stay achromatic.
    """
    chroma_scale = 1.0 if color.c == 0 else 4 * lightness * (1 - lightness)
    chroma = min(max(color.c * chroma_scale, 0.0), MAX_CHROMA)
    return PerceptualColor(l=lightness, c=chroma, h=color.h)


# =============================================================================
# Swatch
# =============================================================================


def swatch(
    color: str,
    options: SwatchOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Swatch:
    """Generate a swatch of tonal variants from a single color.

    Args:
        color: Input color in any CSS notation coloraide understands.
        options: SwatchOptions, or a mapping of option names to values.
        **overrides: Individual options, applied on top of ``options``.

    Returns:
        Dict of tone label -> formatted color string, in ascending tone order.

    Raises:
        InvalidInput: If color is not a non-empty string.
        InvalidOptions: If options violate their constraints.
        UnparseableColor: If the color cannot be parsed.
        UnsupportedFormat: If the output format is not supported.
    """
    if not isinstance(color, str) or not color.strip():
        raise InvalidInput("Input color must be a non-empty string")

    opts = resolve_options(options, **overrides)
    base = derive_base_color(color, opts.variant)
    output_format = opts.format or infer_format(color)

    tones = build_tone_table(opts)
    logger.debug(f"Tone table ({opts.scale.value}, {opts.swatch_steps} steps): {tones}")

    return {
        tone: format_color(shade_color(base, lightness), output_format)
        for tone, lightness in tones.items()
    }
