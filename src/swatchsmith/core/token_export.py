"""
Design token export for generated palettes.

Supports W3C Design Token Community Group (DTCG) tokens.json and CSS custom
properties. See: https://design-tokens.github.io/community-group/format/
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

Palettes = Mapping[str, Mapping[int, str]]


def generate_dtcg_tokens(palettes: Palettes) -> dict[str, Any]:
    """Generate DTCG format color tokens.

    Args:
        palettes: Palette name -> swatch (tone -> color string).

    Returns:
        DTCG-formatted dict, nested as color.<palette>.<tone>.
    """
    color_group: dict[str, Any] = {}
    for name, tones in palettes.items():
        color_group[name] = {
            str(tone): {"$type": "color", "$value": value} for tone, value in tones.items()
        }
    return {"color": color_group}


def export_dtcg_file(palettes: Palettes, output_path: Path) -> Path:
    """Generate DTCG tokens and write to a JSON file.

    Returns:
        Path to the written file.
    """
    tokens = generate_dtcg_tokens(palettes)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(tokens, indent=2),
        encoding="utf-8",
    )

    logger.info(f"Wrote DTCG tokens to {output_path}")
    return output_path


def generate_css_variables(
    palettes: Palettes, prefix: str = "color", selector: str = ":root"
) -> str:
    """Render palettes as CSS custom properties.

    Each tone becomes ``--{prefix}-{palette}-{tone}: value;``. An empty
    prefix drops the leading segment.
    """
    lines = [f"{selector} {{"]
    for name, tones in palettes.items():
        stem = f"{prefix}-{name}" if prefix else name
        for tone, value in tones.items():
            lines.append(f"  --{stem}-{tone}: {value};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def export_css_file(
    palettes: Palettes, output_path: Path, prefix: str = "color", selector: str = ":root"
) -> Path:
    """Write palettes as a CSS custom property block.

    Returns:
        Path to the written file.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(generate_css_variables(palettes, prefix, selector), encoding="utf-8")

    logger.info(f"Wrote CSS variables to {output_path}")
    return output_path
