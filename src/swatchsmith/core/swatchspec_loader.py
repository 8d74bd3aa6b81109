"""
Swatchspec persistence layer.

Handles reading and writing swatchspec.yaml, the project-level description
of named palettes and their shared swatch options, and generating a swatch
for each palette.

Default location: {project_root}/swatchspec.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import SwatchSpecError
from .ir.swatchspec import PaletteEntry, SwatchOptions, SwatchSpecYAML
from .swatch import Swatch, swatch

logger = logging.getLogger(__name__)

SWATCHSPEC_FILE = "swatchspec.yaml"

DEFAULT_SEED_COLOR = "#3b82f6"


# =============================================================================
# Path helpers
# =============================================================================


def get_swatchspec_path(project_root: Path) -> Path:
    """Get the swatchspec.yaml file path."""
    return project_root / SWATCHSPEC_FILE


def swatchspec_exists(project_root: Path) -> bool:
    """Check if a swatchspec.yaml exists in the project."""
    return get_swatchspec_path(project_root).exists()


# =============================================================================
# Loading
# =============================================================================


def create_default_swatchspec(color: str = DEFAULT_SEED_COLOR, **options: Any) -> SwatchSpecYAML:
    """Create a SwatchSpecYAML with a single 'primary' palette.

    Args:
        color: Seed color of the primary palette.
        **options: SwatchOptions fields shared by all palettes.

    Returns:
        SwatchSpecYAML instance.
    """
    return SwatchSpecYAML(
        options=SwatchOptions(**options),
        palettes={"primary": PaletteEntry(color=color)},
    )


def _parse_swatchspec_data(data: dict[str, Any]) -> SwatchSpecYAML:
    """Parse SwatchSpecYAML from raw YAML data.

    Palette entries may be a bare color string or a mapping with overrides.
    """
    if not isinstance(data, dict):
        raise SwatchSpecError(f"swatchspec must be a mapping, got {type(data).__name__}")

    options_data = data.get("options") or {}
    options = SwatchOptions(**options_data)

    palettes_data = data.get("palettes") or {}
    if not isinstance(palettes_data, dict):
        raise SwatchSpecError(
            f"palettes must be a mapping of name -> color, got {type(palettes_data).__name__}"
        )

    palettes: dict[str, PaletteEntry] = {}
    for name, entry in palettes_data.items():
        if isinstance(entry, str):
            entry = {"color": entry}
        palette = PaletteEntry(**entry)
        # Fail at load time on overrides that are only invalid once merged
        palette.resolve(options)
        palettes[str(name)] = palette

    extra = {k: v for k, v in data.items() if k not in ("options", "palettes")}
    return SwatchSpecYAML(options=options, palettes=palettes, **extra)


def load_swatchspec(project_root: Path, *, use_defaults: bool = True) -> SwatchSpecYAML:
    """Load a SwatchSpec from swatchspec.yaml.

    Args:
        project_root: Directory containing swatchspec.yaml.
        use_defaults: If True, return the default spec when the file doesn't exist.

    Returns:
        SwatchSpecYAML instance.

    Raises:
        SwatchSpecError: If the file doesn't exist (when use_defaults=False) or is invalid.
    """
    swatchspec_path = get_swatchspec_path(project_root)

    if not swatchspec_path.exists():
        if use_defaults:
            logger.debug("No swatchspec.yaml found, using defaults")
            return create_default_swatchspec()
        raise SwatchSpecError(f"SwatchSpec not found: {swatchspec_path}")

    try:
        content = swatchspec_path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)

        if not data:
            if use_defaults:
                logger.warning(f"Empty swatchspec.yaml at {swatchspec_path}, using defaults")
                return create_default_swatchspec()
            raise SwatchSpecError(f"Empty or invalid YAML in {swatchspec_path}")

        return _parse_swatchspec_data(data)

    except yaml.YAMLError as e:
        raise SwatchSpecError(f"Invalid YAML in {swatchspec_path}: {e}") from e
    except (ValidationError, TypeError) as e:
        raise SwatchSpecError(f"Invalid SwatchSpec schema in {swatchspec_path}: {e}") from e


def save_swatchspec(project_root: Path, swatchspec: SwatchSpecYAML) -> Path:
    """Save a SwatchSpec to swatchspec.yaml.

    Palette entries are written without unset overrides.

    Returns:
        Path to the saved swatchspec.yaml file.
    """
    swatchspec_path = get_swatchspec_path(project_root)

    data = {
        "options": swatchspec.options.model_dump(mode="json", exclude_none=True),
        "css_prefix": swatchspec.css_prefix,
        "palettes": {
            name: entry.model_dump(mode="json", exclude_none=True)
            for name, entry in swatchspec.palettes.items()
        },
    }

    swatchspec_path.parent.mkdir(parents=True, exist_ok=True)
    swatchspec_path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved SwatchSpec to {swatchspec_path}")
    return swatchspec_path


def scaffold_swatchspec(
    project_root: Path, color: str = DEFAULT_SEED_COLOR, **options: Any
) -> Path | None:
    """Write a default swatchspec.yaml unless one already exists.

    Returns:
        Path to the new file, or None if a swatchspec.yaml was already present.
    """
    if swatchspec_exists(project_root):
        logger.debug(f"swatchspec.yaml already exists in {project_root}, not overwriting")
        return None
    return save_swatchspec(project_root, create_default_swatchspec(color, **options))


# =============================================================================
# Generation
# =============================================================================


def generate_palettes(swatchspec: SwatchSpecYAML) -> dict[str, Swatch]:
    """Generate one swatch per palette in a swatchspec.

    Returns:
        Dict of palette name -> swatch, in spec order.
    """
    palettes: dict[str, Swatch] = {}
    for name, entry in swatchspec.palettes.items():
        palettes[name] = swatch(entry.color, swatchspec.options, **entry.overrides())
    logger.debug(f"Generated {len(palettes)} palettes")
    return palettes
