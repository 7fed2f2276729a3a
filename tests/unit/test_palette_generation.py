"""Tests for palette generation, adjustment and editing."""

from __future__ import annotations

import re

import pytest
from pydantic import ValidationError

from tintwind.core.ir import ColorAdjustment, ColorEntry
from tintwind.core.oklch import (
    adjust_color,
    determine_palette_position,
    format_oklch,
    generate_palette,
    generate_palette_from_two_colors,
    interpolate_hue,
    oklch_to_hex,
    parse_oklch,
    replace_swatch,
    sort_palette,
    string_to_oklch,
)

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


class TestPalettePosition:
    @pytest.mark.parametrize(
        "color,expected",
        [
            ("#ffffff", 0),
            ("#f0f0f0", 0),
            ("#3b82f6", 3),
            ("#ff0000", 4),
            ("#808080", 4),
            ("#333333", 7),
            ("#000000", 8),
        ],
    )
    def test_positions(self, color, expected):
        assert determine_palette_position(color) == expected

    def test_unparseable_uses_fallback_lightness(self):
        assert determine_palette_position("not a colour") == 4

    def test_always_in_range(self):
        for lightness in (0.0, 0.1, 0.16, 0.29, 0.31, 0.49, 0.51, 0.69, 0.71, 0.94, 0.96, 1.0):
            position = determine_palette_position(f"oklch({lightness} 0.1 0)")
            assert 0 <= position <= 8


class TestGeneratePalette:
    def test_default_shape(self, blue_palette):
        assert len(blue_palette) == 9
        assert [entry.index for entry in blue_palette] == [100 * i for i in range(1, 10)]

    def test_seed_kept_at_base_slot(self, blue_palette, blue_seed):
        base = blue_palette[3]
        assert base.index == 400
        assert base.hex == blue_seed
        assert base.oklch == format_oklch(string_to_oklch(blue_seed))

    def test_other_slots_follow_lightness_ramp(self, blue_palette):
        seed = string_to_oklch("#3b82f6")
        lightness = []
        for position, entry in enumerate(blue_palette):
            if position == 3:
                continue
            parsed = parse_oklch(entry.oklch)
            assert parsed is not None
            assert parsed.c == pytest.approx(seed.c, abs=1e-3)
            assert parsed.h == pytest.approx(seed.h, abs=1e-3)
            lightness.append(parsed.l)
        assert lightness[0] == pytest.approx(0.98)
        assert lightness[-1] == pytest.approx(0.15)
        assert lightness == sorted(lightness, reverse=True)

    def test_hex_values_are_valid(self, blue_palette):
        assert all(HEX_RE.match(entry.hex) for entry in blue_palette)

    def test_seed_hex_is_normalized(self):
        palette = generate_palette("#FFF")
        assert palette[0].hex == "#ffffff"

    def test_oklch_seed_gets_rendered_hex(self):
        palette = generate_palette("oklch(0.5 0.2 200)")
        assert all(HEX_RE.match(entry.hex) for entry in palette)
        assert palette[4].oklch == "oklch(0.500 0.200 200.000)"

    def test_unparseable_seed_still_produces_palette(self):
        palette = generate_palette("definitely not a colour")
        assert len(palette) == 9
        assert all(HEX_RE.match(entry.hex) for entry in palette)

    @pytest.mark.parametrize(
        "seed",
        [
            "rgb(1e999, 0, 0)",
            "rgb(-1e999 0 0)",
            "rgba(0, 1e400%, 0, 1)",
            "oklch(" + "9" * 400 + " 0.1 0)",
            "oklch(" + "9" * 300 + " 0.1 0)",
            "oklch(0.5 " + "9" * 300 + " " + "9" * 300 + ")",
        ],
    )
    def test_oversized_numbers_still_produce_palette(self, seed):
        palette = generate_palette(seed)
        assert len(palette) == 9
        assert all(HEX_RE.match(entry.hex) for entry in palette)

    def test_custom_count(self):
        palette = generate_palette("#3b82f6", count=11)
        assert len(palette) == 11
        assert palette[-1].index == 1100

    def test_single_swatch(self):
        palette = generate_palette("#3b82f6", count=1)
        assert len(palette) == 1
        assert palette[0].index == 100
        assert palette[0].oklch.startswith("oklch(0.980 ")

    def test_empty(self):
        assert generate_palette("#3b82f6", count=0) == []

    def test_deterministic(self):
        assert generate_palette("#10b981") == generate_palette("#10b981")


class TestTwoColorPalette:
    def test_endpoints_and_midpoint(self):
        palette = generate_palette_from_two_colors("#ff0000", "#0000ff")
        assert palette[0].hex == "#ff0000"
        assert palette[4].hex == "#ff00ff"
        assert palette[-1].hex == "#0000ff"

    def test_hue_takes_shorter_arc(self):
        palette = generate_palette_from_two_colors("oklch(0.5 0.4 350)", "oklch(0.5 0.4 10)")
        assert palette[0].oklch == "oklch(0.500 0.400 350.000)"
        assert palette[4].oklch == "oklch(0.500 0.400 0.000)"
        assert palette[-1].oklch == "oklch(0.500 0.400 10.000)"

    def test_lightness_interpolates(self):
        palette = generate_palette_from_two_colors("#ffffff", "#000000", count=3)
        assert [entry.hex for entry in palette] == ["#ffffff", "#808080", "#000000"]

    def test_same_seed_twice_is_flat(self):
        palette = generate_palette_from_two_colors("#3b82f6", "#3b82f6")
        seed = string_to_oklch("#3b82f6")
        assert len(palette) == 9
        assert {entry.hex for entry in palette} == {oklch_to_hex(seed.l, seed.c, seed.h)}

    def test_single_swatch_uses_first_seed(self):
        palette = generate_palette_from_two_colors("#ff0000", "#0000ff", count=1)
        assert [entry.hex for entry in palette] == ["#ff0000"]

    def test_empty(self):
        assert generate_palette_from_two_colors("#ff0000", "#0000ff", count=0) == []


class TestInterpolateHue:
    def test_direct(self):
        assert interpolate_hue(0, 90, 0.5) == pytest.approx(45)

    def test_wraps_forward(self):
        assert interpolate_hue(350, 10, 0.5) == pytest.approx(0)

    def test_wraps_backward(self):
        assert interpolate_hue(10, 350, 0.25) == pytest.approx(5)

    def test_result_in_range(self):
        for ratio in (0, 0.1, 0.5, 0.9, 1):
            assert 0 <= interpolate_hue(300, 20, ratio) < 360


class TestAdjustColor:
    def test_lightness_override(self):
        entry = adjust_color("#ff0000", ColorAdjustment(lightness=0.25))
        assert entry == ColorEntry(index=500, hex="#800000", oklch="oklch(0.250 0.400 0.000)")

    def test_hue_override_and_index(self):
        entry = adjust_color("#ff0000", ColorAdjustment(hue=120, index=700))
        assert entry.index == 700
        assert entry.hex == "#00ff00"

    def test_full_turn_hue_wraps(self):
        entry = adjust_color("#ff0000", ColorAdjustment(hue=360))
        assert entry.oklch == "oklch(0.500 0.400 0.000)"

    def test_no_overrides_keeps_colour(self):
        assert adjust_color("#ff0000", ColorAdjustment()).hex == "#ff0000"

    def test_zero_index_falls_back_to_default(self):
        assert adjust_color("#ff0000", ColorAdjustment(index=0)).index == 500

    def test_chroma_zero_is_grey(self):
        entry = adjust_color("#ff0000", ColorAdjustment(chroma=0))
        assert entry.hex == "#808080"

    @pytest.mark.parametrize(
        "kwargs",
        [{"lightness": 1.5}, {"chroma": 0.5}, {"hue": -1}, {"hue": 361}, {"index": -100}],
    )
    def test_out_of_range_rejected(self, kwargs):
        with pytest.raises(ValidationError):
            ColorAdjustment(**kwargs)


class TestPaletteEditing:
    def test_replace_swatch(self, blue_palette):
        edited = replace_swatch(blue_palette, 500, "red")
        assert edited[4] == ColorEntry(index=500, hex="#ff0000", oklch="oklch(0.500 0.400 0.000)")
        assert edited[:4] == blue_palette[:4]
        assert edited[5:] == blue_palette[5:]

    def test_replace_leaves_original_untouched(self, blue_palette):
        before = list(blue_palette)
        replace_swatch(blue_palette, 500, "red")
        assert blue_palette == before

    def test_replace_missing_index_is_noop(self, blue_palette):
        assert replace_swatch(blue_palette, 1000, "red") == blue_palette

    def test_sort_palette(self, blue_palette):
        shuffled = list(reversed(blue_palette))
        assert sort_palette(shuffled) == blue_palette
