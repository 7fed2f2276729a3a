"""
CSS colour string parsing.

Resolves the colour notations a user is likely to paste (hex, ``rgb()``,
``hsl()``, named colours) to a normalized lowercase ``#rrggbb`` string.
Alpha channels are accepted and discarded. Unparseable input yields
``None``; nothing in here raises.
"""

from __future__ import annotations

import logging
import math
import re

from .color_space import hsl_to_rgb, round_half_up

logger = logging.getLogger(__name__)

# CSS Color Module Level 4 named colours.
CSS_NAMED_COLORS: dict[str, str] = {
    "aliceblue": "#f0f8ff",
    "antiquewhite": "#faebd7",
    "aqua": "#00ffff",
    "aquamarine": "#7fffd4",
    "azure": "#f0ffff",
    "beige": "#f5f5dc",
    "bisque": "#ffe4c4",
    "black": "#000000",
    "blanchedalmond": "#ffebcd",
    "blue": "#0000ff",
    "blueviolet": "#8a2be2",
    "brown": "#a52a2a",
    "burlywood": "#deb887",
    "cadetblue": "#5f9ea0",
    "chartreuse": "#7fff00",
    "chocolate": "#d2691e",
    "coral": "#ff7f50",
    "cornflowerblue": "#6495ed",
    "cornsilk": "#fff8dc",
    "crimson": "#dc143c",
    "cyan": "#00ffff",
    "darkblue": "#00008b",
    "darkcyan": "#008b8b",
    "darkgoldenrod": "#b8860b",
    "darkgray": "#a9a9a9",
    "darkgreen": "#006400",
    "darkgrey": "#a9a9a9",
    "darkkhaki": "#bdb76b",
    "darkmagenta": "#8b008b",
    "darkolivegreen": "#556b2f",
    "darkorange": "#ff8c00",
    "darkorchid": "#9932cc",
    "darkred": "#8b0000",
    "darksalmon": "#e9967a",
    "darkseagreen": "#8fbc8f",
    "darkslateblue": "#483d8b",
    "darkslategray": "#2f4f4f",
    "darkslategrey": "#2f4f4f",
    "darkturquoise": "#00ced1",
    "darkviolet": "#9400d3",
    "deeppink": "#ff1493",
    "deepskyblue": "#00bfff",
    "dimgray": "#696969",
    "dimgrey": "#696969",
    "dodgerblue": "#1e90ff",
    "firebrick": "#b22222",
    "floralwhite": "#fffaf0",
    "forestgreen": "#228b22",
    "fuchsia": "#ff00ff",
    "gainsboro": "#dcdcdc",
    "ghostwhite": "#f8f8ff",
    "gold": "#ffd700",
    "goldenrod": "#daa520",
    "gray": "#808080",
    "green": "#008000",
    "greenyellow": "#adff2f",
    "grey": "#808080",
    "honeydew": "#f0fff0",
    "hotpink": "#ff69b4",
    "indianred": "#cd5c5c",
    "indigo": "#4b0082",
    "ivory": "#fffff0",
    "khaki": "#f0e68c",
    "lavender": "#e6e6fa",
    "lavenderblush": "#fff0f5",
    "lawngreen": "#7cfc00",
    "lemonchiffon": "#fffacd",
    "lightblue": "#add8e6",
    "lightcoral": "#f08080",
    "lightcyan": "#e0ffff",
    "lightgoldenrodyellow": "#fafad2",
    "lightgray": "#d3d3d3",
    "lightgreen": "#90ee90",
    "lightgrey": "#d3d3d3",
    "lightpink": "#ffb6c1",
    "lightsalmon": "#ffa07a",
    "lightseagreen": "#20b2aa",
    "lightskyblue": "#87cefa",
    "lightslategray": "#778899",
    "lightslategrey": "#778899",
    "lightsteelblue": "#b0c4de",
    "lightyellow": "#ffffe0",
    "lime": "#00ff00",
    "limegreen": "#32cd32",
    "linen": "#faf0e6",
    "magenta": "#ff00ff",
    "maroon": "#800000",
    "mediumaquamarine": "#66cdaa",
    "mediumblue": "#0000cd",
    "mediumorchid": "#ba55d3",
    "mediumpurple": "#9370db",
    "mediumseagreen": "#3cb371",
    "mediumslateblue": "#7b68ee",
    "mediumspringgreen": "#00fa9a",
    "mediumturquoise": "#48d1cc",
    "mediumvioletred": "#c71585",
    "midnightblue": "#191970",
    "mintcream": "#f5fffa",
    "mistyrose": "#ffe4e1",
    "moccasin": "#ffe4b5",
    "navajowhite": "#ffdead",
    "navy": "#000080",
    "oldlace": "#fdf5e6",
    "olive": "#808000",
    "olivedrab": "#6b8e23",
    "orange": "#ffa500",
    "orangered": "#ff4500",
    "orchid": "#da70d6",
    "palegoldenrod": "#eee8aa",
    "palegreen": "#98fb98",
    "paleturquoise": "#afeeee",
    "palevioletred": "#db7093",
    "papayawhip": "#ffefd5",
    "peachpuff": "#ffdab9",
    "peru": "#cd853f",
    "pink": "#ffc0cb",
    "plum": "#dda0dd",
    "powderblue": "#b0e0e6",
    "purple": "#800080",
    "rebeccapurple": "#663399",
    "red": "#ff0000",
    "rosybrown": "#bc8f8f",
    "royalblue": "#4169e1",
    "saddlebrown": "#8b4513",
    "salmon": "#fa8072",
    "sandybrown": "#f4a460",
    "seagreen": "#2e8b57",
    "seashell": "#fff5ee",
    "sienna": "#a0522d",
    "silver": "#c0c0c0",
    "skyblue": "#87ceeb",
    "slateblue": "#6a5acd",
    "slategray": "#708090",
    "slategrey": "#708090",
    "snow": "#fffafa",
    "springgreen": "#00ff7f",
    "steelblue": "#4682b4",
    "tan": "#d2b48c",
    "teal": "#008080",
    "thistle": "#d8bfd8",
    "tomato": "#ff6347",
    "turquoise": "#40e0d0",
    "violet": "#ee82ee",
    "wheat": "#f5deb3",
    "white": "#ffffff",
    "whitesmoke": "#f5f5f5",
    "yellow": "#ffff00",
    "yellowgreen": "#9acd32",
    # Fully transparent black; the alpha channel is dropped.
    "transparent": "#000000",
}

_HEX_RE = re.compile(r"^#?([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_FUNC_RE = re.compile(r"^(rgba?|hsla?)\(\s*(.*?)\s*\)$", re.IGNORECASE)
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)(e[+-]?\d+)?(%|deg|rad|grad|turn)?$", re.IGNORECASE)


def _clamp_channel(value: float) -> int:
    return round_half_up(max(0.0, min(255.0, value)))


def _to_hex(r: float, g: float, b: float) -> str:
    return "#{:02x}{:02x}{:02x}".format(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))


def _split_args(body: str) -> list[str] | None:
    """Split function arguments in either comma or space/slash syntax."""
    if "," in body:
        parts = [p.strip() for p in body.split(",")]
    else:
        parts = body.replace("/", " / ").split()
        if "/" in parts:
            slash = parts.index("/")
            # Only "c1 c2 c3 / alpha" is valid
            if slash != 3 or len(parts) != 5:
                return None
            parts = parts[:3] + parts[4:]
    if len(parts) not in (3, 4) or any(not p for p in parts):
        return None
    if not all(_NUMBER_RE.match(p) for p in parts):
        return None
    return parts


def _parse_number(token: str) -> tuple[float, str]:
    match = _NUMBER_RE.match(token)
    unit = (match.group(3) or "").lower() if match else ""
    number = float(token[: len(token) - len(unit)] if unit else token)
    return number, unit


def _parse_hex(value: str) -> str | None:
    match = _HEX_RE.match(value)
    if not match:
        return None
    digits = match.group(1).lower()
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits[:3])
    return f"#{digits[:6]}"


def _parse_rgb(body: str) -> str | None:
    parts = _split_args(body)
    if parts is None:
        return None
    channels: list[float] = []
    for token in parts[:3]:
        number, unit = _parse_number(token)
        if not math.isfinite(number):
            return None
        if unit == "%":
            channels.append(number * 255 / 100)
        elif unit:
            return None
        else:
            channels.append(number)
    return _to_hex(*channels)


def _parse_hsl(body: str) -> str | None:
    parts = _split_args(body)
    if parts is None:
        return None
    hue, hue_unit = _parse_number(parts[0])
    if hue_unit == "rad":
        hue = math.degrees(hue)
    elif hue_unit == "grad":
        hue = hue * 0.9
    elif hue_unit == "turn":
        hue = hue * 360
    elif hue_unit not in ("", "deg"):
        return None
    if not math.isfinite(hue):
        return None

    sat, sat_unit = _parse_number(parts[1])
    light, light_unit = _parse_number(parts[2])
    if sat_unit not in ("", "%") or light_unit not in ("", "%"):
        return None
    if not (math.isfinite(sat) and math.isfinite(light)):
        return None

    sat = max(0.0, min(100.0, sat)) / 100
    light = max(0.0, min(100.0, light)) / 100
    rgb = hsl_to_rgb(hue % 360, sat, light)
    return _to_hex(rgb.r, rgb.g, rgb.b)


def parse_css_color(value: str) -> str | None:
    """Resolve a CSS colour string to lowercase ``#rrggbb``.

    Args:
        value: Hex (3, 4, 6 or 8 digits), ``rgb()``/``rgba()``,
            ``hsl()``/``hsla()`` or a named colour.

    Returns:
        Normalized hex string, or None when the input is not a colour.
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None

    lowered = text.lower()
    if lowered in CSS_NAMED_COLORS:
        return CSS_NAMED_COLORS[lowered]

    if lowered.startswith("#"):
        result = _parse_hex(lowered)
    elif match := _FUNC_RE.match(lowered):
        func, body = match.group(1), match.group(2)
        result = _parse_rgb(body) if func.startswith("rgb") else _parse_hsl(body)
    else:
        result = None

    if result is None:
        logger.debug("Unrecognised colour string: %r", value)
    return result
