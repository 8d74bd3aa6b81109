"""
swatchsmith CLI package.

- app.py: Typer application and commands (generate, build, init)
- utils.py: Version and logging helpers
"""

from swatchsmith.cli.app import app, main
from swatchsmith.cli.utils import version_callback

__all__ = [
    "app",
    "main",
    "version_callback",
]
