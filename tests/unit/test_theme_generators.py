"""Tests for palette serializers, contrast helpers and DTCG export."""

from __future__ import annotations

import json

import pytest

from tintwind.core.dtcg_export import generate_dtcg_tokens, write_dtcg_tokens
from tintwind.core.theme_generators import (
    ColorRole,
    generate_css_variables,
    generate_tailwind_theme,
    preview_roles,
    relative_luminance,
    text_color_for,
)


class TestTailwindTheme:
    def test_block(self, two_swatches):
        assert generate_tailwind_theme("brand", two_swatches) == (
            "@theme {\n"
            "  --color-brand-100: #ffffff;\n"
            "  --color-brand-200: #000000;\n"
            "}"
        )

    @pytest.mark.parametrize("name", ["", None])
    def test_default_name(self, name, two_swatches):
        assert "--color-theme-100: #ffffff;" in generate_tailwind_theme(name, two_swatches)

    def test_empty_palette(self):
        assert generate_tailwind_theme("brand", []) == "@theme {\n}"

    def test_full_palette_has_one_line_per_swatch(self, blue_palette):
        lines = generate_tailwind_theme("blue", blue_palette).splitlines()
        assert len(lines) == len(blue_palette) + 2
        assert lines[4] == "  --color-blue-400: #3b82f6;"


class TestCssVariables:
    def test_lines(self, two_swatches):
        assert generate_css_variables("brand", two_swatches) == (
            "  --brand-100: #ffffff;\n  --brand-200: #000000;\n"
        )

    def test_default_name(self, two_swatches):
        assert generate_css_variables("", two_swatches).startswith("  --theme-100:")

    def test_empty_palette(self):
        assert generate_css_variables("brand", []) == ""


class TestContrast:
    def test_luminance_extremes(self):
        assert relative_luminance("#ffffff") == pytest.approx(1.0)
        assert relative_luminance("#000000") == pytest.approx(0.0)

    def test_unparseable_luminance(self):
        assert relative_luminance("bogus") == 0.5

    @pytest.mark.parametrize(
        "background,expected",
        [
            ("#ffffff", "#000000"),
            ("#ffff00", "#000000"),
            ("#000000", "#ffffff"),
            ("#3b82f6", "#ffffff"),
            ("bogus", "#ffffff"),
        ],
    )
    def test_text_color_for(self, background, expected):
        assert text_color_for(background) == expected


class TestPreviewRoles:
    def test_relative_to_base_position(self, blue_palette):
        roles = preview_roles(blue_palette, base_position=3)
        assert roles.primary == ColorRole(background="#3b82f6", text="#ffffff")
        assert roles.primary_light.background == blue_palette[1].hex
        # 3 - 4 is out of range, so the fixed lightest slot is used
        assert roles.primary_lighter.background == blue_palette[0].hex
        assert roles.primary_dark.background == blue_palette[5].hex

    def test_without_base_position(self, blue_palette):
        roles = preview_roles(blue_palette)
        assert roles.primary.background == blue_palette[4].hex
        assert roles.primary_light.background == blue_palette[2].hex
        assert roles.primary_lighter.background == blue_palette[0].hex
        assert roles.primary_dark.background == blue_palette[6].hex

    def test_empty_palette_uses_defaults(self):
        roles = preview_roles([])
        assert roles.primary.background == "#3b82f6"
        assert roles.primary_light.background == "#93c5fd"
        assert roles.primary_lighter.background == "#dbeafe"
        assert roles.primary_dark.background == "#1e40af"

    def test_short_palette(self, two_swatches):
        roles = preview_roles(two_swatches)
        assert roles.primary == ColorRole(background="#ffffff", text="#000000")
        assert roles.primary_light.background == "#93c5fd"
        assert roles.primary_lighter.background == "#ffffff"
        assert roles.primary_dark.background == "#1e40af"

    def test_text_colours_are_black_or_white(self, blue_palette):
        roles = preview_roles(blue_palette, base_position=3)
        for role in (roles.primary, roles.primary_light, roles.primary_lighter, roles.primary_dark):
            assert role.text in ("#000000", "#ffffff")


class TestDtcgExport:
    def test_token_tree(self, two_swatches):
        assert generate_dtcg_tokens("brand", two_swatches) == {
            "color": {
                "brand": {
                    "100": {
                        "$type": "color",
                        "$value": "#ffffff",
                        "$extensions": {"oklch": "oklch(1.000 0.000 0.000)"},
                    },
                    "200": {
                        "$type": "color",
                        "$value": "#000000",
                        "$extensions": {"oklch": "oklch(0.000 0.000 0.000)"},
                    },
                }
            }
        }

    def test_default_group_name(self, two_swatches):
        assert list(generate_dtcg_tokens(None, two_swatches)["color"]) == ["theme"]

    def test_write(self, tmp_path, blue_palette):
        output = tmp_path / "tokens" / "tokens.json"
        written = write_dtcg_tokens("blue", blue_palette, output)
        assert written == output
        text = output.read_text(encoding="utf-8")
        assert text.endswith("\n")
        assert json.loads(text) == generate_dtcg_tokens("blue", blue_palette)
