"""
sRGB <-> HSL conversions shared by the colour parser and the palette engine.

Channel values are 8-bit integers; hue is in degrees, saturation and
lightness in 0-1.
"""

from __future__ import annotations

import math

from .ir import HSL, RGB


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives, like the browser's Math.round."""
    return math.floor(value + 0.5)


def _unit(value: float) -> float:
    return max(0.0, min(1.0, value))


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert 8-bit RGB to HSL (hue in degrees, s/l in 0-1)."""
    rf, gf, bf = r / 255, g / 255, b / 255
    high = max(rf, gf, bf)
    low = min(rf, gf, bf)
    h = s = 0.0
    lightness = (high + low) / 2

    if high != low:
        d = high - low
        s = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
        if high == rf:
            h = (gf - bf) / d + (6 if gf < bf else 0)
        elif high == gf:
            h = (bf - rf) / d + 2
        else:
            h = (rf - gf) / d + 4
        h /= 6

    return HSL(h * 360, s, lightness)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, lightness: float) -> RGB:
    """Convert HSL (hue in degrees) back to 8-bit RGB.

    Saturation and lightness are clamped to 0-1 first, so every channel
    lands in 0-255.
    """
    s = _unit(s)
    lightness = _unit(lightness)
    h /= 360
    if s == 0:
        # Achromatic
        r = g = b = lightness
    else:
        q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
        p = 2 * lightness - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return RGB(round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))
