"""Tests for DTCG and CSS custom property export."""

from __future__ import annotations

import json
from pathlib import Path

PALETTES = {
    "primary": {50: "#eff6ff", 500: "#3b82f6", 950: "#172554"},
    "gray": {50: "#f8fafc", 500: "#64748b"},
}


class TestDTCGExport:
    """Test DTCG tokens.json export."""

    def test_generate_tokens(self):
        from swatchsmith.core.token_export import generate_dtcg_tokens

        tokens = generate_dtcg_tokens(PALETTES)
        assert list(tokens) == ["color"]
        assert list(tokens["color"]) == ["primary", "gray"]

    def test_color_tokens_nested(self):
        from swatchsmith.core.token_export import generate_dtcg_tokens

        tokens = generate_dtcg_tokens(PALETTES)
        assert tokens["color"]["primary"]["500"] == {"$type": "color", "$value": "#3b82f6"}
        assert list(tokens["color"]["primary"]) == ["50", "500", "950"]

    def test_export_file(self, tmp_path: Path):
        from swatchsmith.core.token_export import export_dtcg_file

        output = tmp_path / "dist" / "tokens.json"
        result = export_dtcg_file(PALETTES, output)
        assert result == output
        data = json.loads(result.read_text())
        assert data["color"]["gray"]["50"]["$value"] == "#f8fafc"

    def test_generated_swatch_tokens(self):
        from swatchsmith.core.swatch import swatch
        from swatchsmith.core.token_export import generate_dtcg_tokens

        tokens = generate_dtcg_tokens({"brand": swatch("#3b82f6", swatch_steps=21)})
        assert len(tokens["color"]["brand"]) == 21
        assert "1000" in tokens["color"]["brand"]


class TestCSSExport:
    """Test CSS custom property output."""

    def test_css_variables(self):
        from swatchsmith.core.token_export import generate_css_variables

        css = generate_css_variables(PALETTES)
        lines = css.splitlines()
        assert lines[0] == ":root {"
        assert lines[-1] == "}"
        assert "  --color-primary-500: #3b82f6;" in lines
        assert "  --color-gray-50: #f8fafc;" in lines
        assert len(lines) == 2 + 5

    def test_custom_prefix_and_selector(self):
        from swatchsmith.core.token_export import generate_css_variables

        css = generate_css_variables({"primary": {500: "#3b82f6"}}, prefix="", selector=".theme")
        assert css == ".theme {\n  --primary-500: #3b82f6;\n}\n"

    def test_export_css_file(self, tmp_path: Path):
        from swatchsmith.core.token_export import export_css_file

        path = export_css_file(PALETTES, tmp_path / "palette.css", prefix="brand")
        assert "--brand-primary-950: #172554;" in path.read_text()
