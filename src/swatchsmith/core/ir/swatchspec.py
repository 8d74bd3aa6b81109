"""
Swatch option and swatchspec YAML IR types.

SwatchOptions configures a single swatch() call. SwatchSpecYAML describes a
set of named palettes (one swatch each) that share default options, and is
the structure of swatchspec.yaml.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# =============================================================================
# Enums
# =============================================================================


class SwatchScale(StrEnum):
    """How tone lightness values are distributed."""

    DYNAMIC = "dynamic"
    FIXED = "fixed"


class SwatchVariant(StrEnum):
    """Chroma presets applied before shading."""

    BASE = "base"
    DEEP = "deep"
    NEUTRAL = "neutral"
    PASTEL = "pastel"
    SUBTLE = "subtle"
    VIBRANT = "vibrant"


class ColorFormat(StrEnum):
    """Output representations understood by the color formatter."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    OKLAB = "oklab"
    OKLCH = "oklch"


# Chroma multiplier per variant
VARIANT_CHROMA_MULTIPLIERS: dict[str, float] = {
    SwatchVariant.BASE: 1.0,
    SwatchVariant.DEEP: 0.8,
    SwatchVariant.NEUTRAL: 0.5,
    SwatchVariant.PASTEL: 0.3,
    SwatchVariant.SUBTLE: 0.2,
    SwatchVariant.VIBRANT: 1.25,
}


# =============================================================================
# Swatch options
# =============================================================================


class SwatchOptions(BaseModel):
    """Options for a single swatch() call."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: str | None = Field(
        default=None,
        description="Output format (hex, rgb, hsl, oklab, oklch). Inferred from the input if unset",
    )
    lightness_factor: float = Field(
        default=1.5,
        gt=0.0,
        description="Exponent of the dynamic lightness curve (>1 emphasizes lighter tones)",
    )
    max_lightness: float = Field(
        default=0.97,
        ge=0.0,
        le=1.0,
        description="Lightness of the lightest dynamic tone",
    )
    min_lightness: float = Field(
        default=0.2,
        ge=0.0,
        le=1.0,
        description="Lightness of the darkest dynamic tone",
    )
    scale: SwatchScale = Field(default=SwatchScale.DYNAMIC, description="Dynamic or fixed scale")
    swatch_steps: Literal[11, 21] = Field(
        default=11,
        description="11 (50-950) or 21 (0-1000) tones",
    )
    variant: SwatchVariant = Field(default=SwatchVariant.BASE, description="Chroma preset")

    @field_validator("format")
    @classmethod
    def _normalize_format(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip().lower()
        if not value:
            raise ValueError("format must be a non-empty color format name")
        return value

    @model_validator(mode="after")
    def _check_lightness_range(self) -> SwatchOptions:
        if self.max_lightness <= self.min_lightness:
            raise ValueError(
                "max_lightness must be greater than min_lightness and within the range [0, 1]"
            )
        return self


# =============================================================================
# SwatchSpec YAML
# =============================================================================


class PaletteEntry(BaseModel):
    """A named palette: a seed color plus optional per-palette option overrides."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    color: str = Field(..., min_length=1, description="Seed color in any CSS notation")
    format: str | None = None
    lightness_factor: float | None = None
    max_lightness: float | None = None
    min_lightness: float | None = None
    scale: SwatchScale | None = None
    swatch_steps: Literal[11, 21] | None = None
    variant: SwatchVariant | None = None

    def overrides(self) -> dict[str, Any]:
        """Return the option fields explicitly set on this entry."""
        return self.model_dump(exclude={"color"}, exclude_none=True)

    def resolve(self, defaults: SwatchOptions) -> SwatchOptions:
        """Merge this entry's overrides on top of shared default options."""
        data = defaults.model_dump()
        data.update(self.overrides())
        return SwatchOptions(**data)


class SwatchSpecYAML(BaseModel):
    """Root model for swatchspec.yaml."""

    model_config = ConfigDict(frozen=True)

    options: SwatchOptions = Field(
        default_factory=SwatchOptions,
        description="Options shared by every palette",
    )
    palettes: dict[str, PaletteEntry] = Field(
        default_factory=dict,
        description="Palette name -> seed color and overrides",
    )
    css_prefix: str = Field(default="color", description="Prefix for CSS custom properties")
