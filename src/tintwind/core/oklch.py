"""
Pure-Python palette generation from one or two seed colours.

The "OKLCH" values used here are HSL re-labelled: lightness is HSL
lightness, chroma is HSL saturation scaled into 0-0.4 and hue is the HSL
hue. Swatch hex values depend on this exact mapping.

Nothing in this module raises on bad colour input. Unparseable strings
resolve to ``FALLBACK_OKLCH``.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence

from .color_parse import parse_css_color
from .color_space import hsl_to_rgb, rgb_to_hsl, round_half_up
from .ir import FALLBACK_OKLCH, RGB, ColorAdjustment, ColorEntry, OklchTriple

logger = logging.getLogger(__name__)

# Chroma is saturation scaled into this range.
CHROMA_SCALE = 0.4

DEFAULT_COUNT = 9
DEFAULT_INDEX = 500

# Lightness range covered by a single-seed palette, lightest first.
MIN_LIGHTNESS = 0.15
MAX_LIGHTNESS = 0.98

_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)
_OKLCH_RE = re.compile(r"oklch\(\s*([0-9.]+)\s+([0-9.]+)\s+([0-9.]+)\s*\)", re.IGNORECASE)


# =============================================================================
# RGB / hex
# =============================================================================


def hex_to_rgb(hex_value: str) -> RGB | None:
    """Parse ``#rrggbb`` (leading ``#`` optional, any case).

    Short forms, alpha and named colours are not accepted here; use
    :func:`tintwind.core.color_parse.parse_css_color` for those.
    """
    match = _HEX_RE.match(hex_value)
    if not match:
        return None
    return RGB(int(match.group(1), 16), int(match.group(2), 16), int(match.group(3), 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Pack three channels into lowercase ``#rrggbb``."""
    r, g, b = (max(0, min(255, int(ch))) for ch in (r, g, b))
    # The leading 1 bit guarantees six digits after it is dropped
    return "#" + format((1 << 24) | (r << 16) | (g << 8) | b, "x")[1:]


# =============================================================================
# Approximated OKLCH
# =============================================================================


def rgb_to_oklch(r: int, g: int, b: int) -> OklchTriple:
    hsl = rgb_to_hsl(r, g, b)
    return OklchTriple(l=hsl.l, c=hsl.s * CHROMA_SCALE, h=hsl.h)


def oklch_to_rgb(lightness: float, chroma: float, hue: float) -> RGB:
    return hsl_to_rgb(hue, chroma / CHROMA_SCALE, lightness)


def oklch_to_hex(lightness: float, chroma: float, hue: float) -> str:
    rgb = oklch_to_rgb(lightness, chroma, hue)
    return rgb_to_hex(rgb.r, rgb.g, rgb.b)


def format_oklch(oklch: OklchTriple) -> str:
    """Format a triple as ``oklch(L C H)`` with three decimals each.

    Args:
        oklch: Triple to serialize.

    Returns:
        CSS oklch() string.
    """
    return f"oklch({oklch.l:.3f} {oklch.c:.3f} {oklch.h:.3f})"


def parse_oklch(value: str) -> OklchTriple | None:
    """Parse an ``oklch(L C H)`` string.

    Exactly three space-separated unsigned numbers are required; percent
    units and alpha are not supported. Numbers too large to represent are
    rejected. The hue is reduced into [0, 360).

    Returns:
        The triple, or None when the string is not in that form.
    """
    match = _OKLCH_RE.search(value)
    if not match:
        return None
    try:
        lightness, chroma, hue = (float(match.group(i)) for i in (1, 2, 3))
    except ValueError:
        # e.g. "1.2.3" passes the character class but is not a number
        return None
    if not all(math.isfinite(v) for v in (lightness, chroma, hue)):
        return None
    return OklchTriple(l=lightness, c=chroma, h=hue % 360)


def string_to_oklch(color: str) -> OklchTriple:
    """Resolve any colour string to a triple.

    ``oklch()`` strings are used as-is; everything else goes through the CSS
    colour parser and :func:`rgb_to_oklch`. Unparseable input returns
    ``FALLBACK_OKLCH``.
    """
    parsed = parse_oklch(color)
    if parsed is not None:
        return parsed

    hex_value = parse_css_color(color)
    rgb = hex_to_rgb(hex_value) if hex_value else None
    if rgb is None:
        logger.debug("Falling back to default OKLCH for %r", color)
        return FALLBACK_OKLCH

    return rgb_to_oklch(rgb.r, rgb.g, rgb.b)


def normalize_hex(color: str) -> str:
    """Return the ``#rrggbb`` form of any colour string.

    Strings the CSS parser rejects (including ``oklch()``) are rendered from
    their resolved triple, so the result is always a valid hex colour.
    """
    hex_value = parse_css_color(color)
    if hex_value is not None:
        return hex_value
    oklch = string_to_oklch(color)
    return oklch_to_hex(oklch.l, oklch.c, oklch.h)


# =============================================================================
# Palette generation
# =============================================================================


def determine_palette_position(color: str) -> int:
    """Pick the palette slot (0 = lightest, 8 = darkest) for a seed colour.

    Mid-tones are weighted toward the centre of the scale.
    """
    lightness = string_to_oklch(color).l

    if lightness >= 0.95:
        return 0
    if lightness <= 0.15:
        return 8

    if lightness < 0.3:
        position = 8 - (lightness - 0.15) / 0.15 * 2
    elif lightness < 0.5:
        position = 6 - (lightness - 0.3) / 0.2 * 2
    elif lightness < 0.7:
        position = 4 - (lightness - 0.5) / 0.2 * 2
    else:
        position = 2 - (lightness - 0.7) / 0.25 * 2

    return max(0, min(8, round_half_up(position)))


def _step(count: int) -> int:
    # A one-swatch palette has no interval to divide
    return max(count - 1, 1)


def generate_palette(seed: str, count: int = DEFAULT_COUNT) -> list[ColorEntry]:
    """Generate a lightness ramp around a single seed colour.

    Chroma and hue are held at the seed's values. The slot chosen by
    :func:`determine_palette_position` receives the seed itself, unchanged.

    Args:
        seed: Any colour string.
        count: Number of swatches (indices 100, 200, ...).

    Returns:
        Palette entries, lightest first.
    """
    color = string_to_oklch(seed)
    base_position = determine_palette_position(seed)
    seed_hex = normalize_hex(seed)
    lightness_step = (MAX_LIGHTNESS - MIN_LIGHTNESS) / _step(count)

    palette: list[ColorEntry] = []
    for i in range(max(count, 0)):
        if i == base_position:
            hex_value = seed_hex
            oklch_value = format_oklch(color)
        else:
            lightness = MAX_LIGHTNESS - i * lightness_step
            hex_value = oklch_to_hex(lightness, color.c, color.h)
            oklch_value = format_oklch(OklchTriple(l=lightness, c=color.c, h=color.h))
        palette.append(ColorEntry(index=(i + 1) * 100, hex=hex_value, oklch=oklch_value))

    logger.debug("Generated %d-step palette from %r (base position %d)", count, seed, base_position)
    return palette


def interpolate_hue(h1: float, h2: float, ratio: float) -> float:
    """Interpolate along the shorter arc of the hue circle."""
    if abs(h2 - h1) > 180:
        if h1 < h2:
            h1 += 360
        else:
            h2 += 360
    return (h1 + (h2 - h1) * ratio) % 360


def generate_palette_from_two_colors(
    seed1: str, seed2: str, count: int = DEFAULT_COUNT
) -> list[ColorEntry]:
    """Generate a palette by interpolating from ``seed1`` to ``seed2``.

    Every swatch is computed; neither seed is copied in verbatim.
    """
    c1 = string_to_oklch(seed1)
    c2 = string_to_oklch(seed2)

    palette: list[ColorEntry] = []
    for i in range(max(count, 0)):
        ratio = i / _step(count)
        triple = OklchTriple(
            l=c1.l + (c2.l - c1.l) * ratio,
            c=c1.c + (c2.c - c1.c) * ratio,
            h=interpolate_hue(c1.h, c2.h, ratio),
        )
        palette.append(
            ColorEntry(
                index=(i + 1) * 100,
                hex=oklch_to_hex(triple.l, triple.c, triple.h),
                oklch=format_oklch(triple),
            )
        )
    return palette


def adjust_color(color: str, adjustment: ColorAdjustment) -> ColorEntry:
    """Override any of lightness/chroma/hue on a colour and re-render it."""
    base = string_to_oklch(color)
    triple = OklchTriple(
        l=adjustment.lightness if adjustment.lightness is not None else base.l,
        c=adjustment.chroma if adjustment.chroma is not None else base.c,
        h=adjustment.hue % 360 if adjustment.hue is not None else base.h,
    )
    return ColorEntry(
        index=adjustment.index or DEFAULT_INDEX,
        hex=oklch_to_hex(triple.l, triple.c, triple.h),
        oklch=format_oklch(triple),
    )


def replace_swatch(palette: Sequence[ColorEntry], index: int, color: str) -> list[ColorEntry]:
    """Return a copy of ``palette`` with the swatch at ``index`` set to ``color``.

    The new swatch keeps the user's colour as its hex and gets a freshly
    computed oklch string. An index not present in the palette leaves it
    unchanged.
    """
    replacement = ColorEntry(
        index=index,
        hex=normalize_hex(color),
        oklch=format_oklch(string_to_oklch(color)),
    )
    return [replacement if entry.index == index else entry for entry in palette]


def sort_palette(palette: Sequence[ColorEntry]) -> list[ColorEntry]:
    return sorted(palette, key=lambda entry: entry.index)
