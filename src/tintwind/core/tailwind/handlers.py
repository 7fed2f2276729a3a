"""
CSS property -> Tailwind class handlers.

Each handler is a total ``value -> class string`` function: values it does
not recognise degrade to an arbitrary-value class, never to an error.
``TAILWIND_MAPPING`` is the registry the converter dispatches through;
properties missing from it are emitted as ``[property:value]``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable

from ..color_space import round_half_up
from .spacing import (
    arbitrary_property,
    bracket,
    map_spacing_value,
    nearest,
    parse_float,
    parse_int,
    scale_token,
)

Handler = Callable[[str], str]

TAILWIND_MAPPING: dict[str, Handler] = {}


def handles(*properties: str) -> Callable[[Handler], Handler]:
    """Register a handler for one or more CSS properties."""

    def decorator(func: Handler) -> Handler:
        for prop in properties:
            TAILWIND_MAPPING[prop] = func
        return func

    return decorator


def _keyword_table(
    prop: str, table: dict[str, str], fallback: Callable[[str], str] | None = None
) -> Handler:
    """Register a direct keyword lookup with an arbitrary-value fallback."""

    def handler(value: str) -> str:
        if value in table:
            return table[value]
        if fallback is not None:
            return fallback(value)
        return arbitrary_property(prop, value)

    handler.__name__ = f"map_{prop.replace('-', '_')}"
    TAILWIND_MAPPING[prop] = handler
    return handler


# =============================================================================
# Colours
# =============================================================================

COMMON_COLORS: dict[str, str] = {
    "white": "white",
    "black": "black",
    "#000": "black",
    "#000000": "black",
    "#fff": "white",
    "#ffffff": "white",
    "transparent": "transparent",
    "currentcolor": "current",
    "inherit": "inherit",
}

_RGBA_RE = re.compile(r"rgba?\((\d+),\s*(\d+),\s*(\d+)(?:,\s*([\d.]+))?\)")


def parse_rgba(value: str) -> str:
    """Normalize ``rgb(r,g,b)``/``rgba(r,g,b,a)`` to ``rgba(r,g,b,a)``.

    Values in any other notation are returned untouched.
    """
    match = _RGBA_RE.search(value)
    if not match:
        return value
    r, g, b, a = match.groups()
    return f"rgba({r},{g},{b},{a if a is not None else 1})"


def _color_class(prefix: str, value: str) -> str:
    common = COMMON_COLORS.get(value.lower())
    if common:
        return f"{prefix}-{common}"
    if value.startswith("rgb"):
        return bracket(prefix, parse_rgba(value))
    return bracket(prefix, value)


@handles("color")
def map_color(value: str) -> str:
    return _color_class("text", value)


@handles("background-color")
def map_background_color(value: str) -> str:
    return _color_class("bg", value)


# =============================================================================
# Backgrounds and gradients
# =============================================================================

_GRADIENT_RE = re.compile(r"linear-gradient\((.+?)\)")
_ANGLE_RE = re.compile(r"(\d+)deg")
_KEYWORD_DIRECTION_RE = re.compile(r"to\s+([a-z]+)(?:\s+([a-z]+))?")

# Lower bound of each 45 degree sector, clockwise from "to top"
_ANGLE_DIRECTIONS: tuple[tuple[int, str], ...] = (
    (315, "to-tl"),
    (270, "to-l"),
    (225, "to-bl"),
    (180, "to-b"),
    (135, "to-br"),
    (90, "to-r"),
    (45, "to-tr"),
    (0, "to-t"),
)

_KEYWORD_DIRECTIONS: dict[tuple[str, str | None], str] = {
    ("top", None): "to-t",
    ("top", "right"): "to-tr",
    ("right", None): "to-r",
    ("bottom", "right"): "to-br",
    ("bottom", None): "to-b",
    ("bottom", "left"): "to-bl",
    ("left", None): "to-l",
    ("top", "left"): "to-tl",
}


def gradient_direction(gradient_args: str) -> str:
    """Map a gradient's angle or ``to <side>`` keyword to a direction suffix."""
    if "deg" in gradient_args:
        match = _ANGLE_RE.search(gradient_args)
        if match:
            angle = float(match.group(1))
            for lower, direction in _ANGLE_DIRECTIONS:
                if angle >= lower:
                    return direction
    elif "to " in gradient_args:
        match = _KEYWORD_DIRECTION_RE.search(gradient_args)
        if match:
            return _KEYWORD_DIRECTIONS.get((match.group(1), match.group(2)), "to-b")
    return "to-b"


def _map_gradient(value: str) -> str:
    match = _GRADIENT_RE.search(value)
    if not match:
        return bracket("bg", value)

    args = match.group(1)
    direction = gradient_direction(args)
    stops = [
        stop.strip()
        for stop in args.split(",")
        if "deg" not in stop.strip() and "to " not in stop.strip()
    ]

    if len(stops) == 2:
        start, end = stops
        return f"bg-gradient-{direction} {bracket('from', start)} {bracket('to', end)}"
    if len(stops) == 3:
        start, via, end = stops
        return (
            f"bg-gradient-{direction} {bracket('from', start)} "
            f"{bracket('via', via)} {bracket('to', end)}"
        )
    return bracket("bg", value)


@handles("background")
def map_background(value: str) -> str:
    if "linear-gradient" in value:
        return _map_gradient(value)
    return _color_class("bg", value)


# =============================================================================
# Borders and shadows
# =============================================================================

_BORDER_RE = re.compile(r"(\d+)px\s+solid\s+(rgba?\([^)]+\)|#[a-fA-F0-9]{3,8}|[a-zA-Z]+)")

# Upper px bound -> class, checked in order
_RADIUS_STEPS: tuple[tuple[float, str], ...] = (
    (2, "rounded-sm"),
    (4, "rounded"),
    (6, "rounded-md"),
    (8, "rounded-lg"),
    (12, "rounded-xl"),
    (16, "rounded-2xl"),
    (24, "rounded-3xl"),
)


@handles("border-radius")
def map_border_radius(value: str) -> str:
    if value.endswith("%"):
        return bracket("rounded", value)

    px = parse_float(value)
    if math.isnan(px):
        return bracket("rounded", value)
    if px == 0:
        return "rounded-none"
    for limit, cls in _RADIUS_STEPS:
        if px <= limit:
            return cls
    if px in (9999, 100000):
        return "rounded-full"
    return bracket("rounded", value)


@handles("border")
def map_border(value: str) -> str:
    match = _BORDER_RE.search(value)
    if not match:
        return bracket("border", value)

    width, color = match.groups()
    size = "border" if width == "1" else f"border-[{width}px]"
    return f"{size} {_color_class('border', color)}"


SHADOW_PRESETS: dict[str, str] = {
    "0 1px 2px 0 rgba(0, 0, 0, 0.05)": "shadow-sm",
    "0 1px 3px 0 rgba(0, 0, 0, 0.1), 0 1px 2px 0 rgba(0, 0, 0, 0.06)": "shadow",
    "0 4px 6px -1px rgba(0, 0, 0, 0.1), 0 2px 4px -1px rgba(0, 0, 0, 0.06)": "shadow-md",
    "0 10px 15px -3px rgba(0, 0, 0, 0.1), 0 4px 6px -2px rgba(0, 0, 0, 0.05)": "shadow-lg",
    "0 20px 25px -5px rgba(0, 0, 0, 0.1), 0 10px 10px -5px rgba(0, 0, 0, 0.04)": "shadow-xl",
    "0 25px 50px -12px rgba(0, 0, 0, 0.25)": "shadow-2xl",
    "inset 0 2px 4px 0 rgba(0, 0, 0, 0.06)": "shadow-inner",
}

# (max |x|, max |y|, max blur) -> class, checked in order after the
# zero-offset small-blur case
_SHADOW_STEPS: tuple[tuple[float, float, float, str], ...] = (
    (1, 3, 6, "shadow"),
    (4, 6, 10, "shadow-md"),
    (10, 15, 20, "shadow-lg"),
    (20, 25, 30, "shadow-xl"),
    (25, 50, 50, "shadow-2xl"),
)


def _guess_shadow(value: str) -> str | None:
    """Bucket a single ``x y blur ...`` shadow by its offsets and blur."""
    if "px" not in value or "," in value:
        return None
    parts = value.split()
    if len(parts) < 3:
        return None

    x = parse_float(parts[0])
    y = parse_float(parts[1])
    blur = parse_float(parts[2])
    if x == 0 and y == 0 and blur <= 4:
        return "shadow-sm"
    for max_x, max_y, max_blur, cls in _SHADOW_STEPS:
        if abs(x) <= max_x and abs(y) <= max_y and blur <= max_blur:
            return cls
    return None


@handles("box-shadow")
def map_box_shadow(value: str) -> str:
    if value == "none":
        return "shadow-none"
    if value in SHADOW_PRESETS:
        return SHADOW_PRESETS[value]
    return _guess_shadow(value) or bracket("shadow", value)


# =============================================================================
# Spacing
# =============================================================================


def _shorthand(value: str, all_sides: str, y: str, x: str, sides: tuple[str, str, str, str]) -> str:
    """Expand a 1-4 value margin/padding shorthand."""
    parts = value.split()
    top, right, bottom, left = sides
    if len(parts) == 2:
        return f"{map_spacing_value(y, parts[0])} {map_spacing_value(x, parts[1])}"
    if len(parts) == 3:
        return " ".join(
            (
                map_spacing_value(top, parts[0]),
                map_spacing_value(x, parts[1]),
                map_spacing_value(bottom, parts[2]),
            )
        )
    if len(parts) == 4:
        return " ".join(
            map_spacing_value(prefix, part) for prefix, part in zip(sides, parts, strict=True)
        )
    return map_spacing_value(all_sides, value)


@handles("margin")
def map_margin(value: str) -> str:
    if value == "auto":
        return "m-auto"
    return _shorthand(value, "m", "my", "mx", ("mt", "mr", "mb", "ml"))


@handles("padding")
def map_padding(value: str) -> str:
    return _shorthand(value, "p", "py", "px", ("pt", "pr", "pb", "pl"))


def _spacing(prop: str, prefix: str) -> None:
    def handler(value: str) -> str:
        return map_spacing_value(prefix, value)

    handler.__name__ = f"map_{prop.replace('-', '_')}"
    TAILWIND_MAPPING[prop] = handler


for _prop, _prefix in (
    ("margin-top", "mt"),
    ("margin-right", "mr"),
    ("margin-bottom", "mb"),
    ("margin-left", "ml"),
    ("padding-top", "pt"),
    ("padding-right", "pr"),
    ("padding-bottom", "pb"),
    ("padding-left", "pl"),
    ("gap", "gap"),
    ("row-gap", "gap-y"),
    ("column-gap", "gap-x"),
):
    _spacing(_prop, _prefix)


def _inset(side: str) -> None:
    table = {
        "0": f"{side}-0",
        "0px": f"{side}-0",
        "50%": f"{side}-1/2",
        "100%": f"{side}-full",
        "auto": f"{side}-auto",
    }

    def handler(value: str) -> str:
        return table.get(value) or map_spacing_value(side, value)

    handler.__name__ = f"map_{side}"
    TAILWIND_MAPPING[side] = handler


for _side in ("top", "right", "bottom", "left"):
    _inset(_side)


# =============================================================================
# Sizing
# =============================================================================

WIDTH_KEYWORDS: dict[str, str] = {
    "100%": "w-full",
    "50%": "w-1/2",
    "33.333%": "w-1/3",
    "33.33%": "w-1/3",
    "66.666%": "w-2/3",
    "66.67%": "w-2/3",
    "25%": "w-1/4",
    "75%": "w-3/4",
    "20%": "w-1/5",
    "40%": "w-2/5",
    "60%": "w-3/5",
    "80%": "w-4/5",
    "0": "w-0",
    "0px": "w-0",
    "auto": "w-auto",
    "min-content": "w-min",
    "max-content": "w-max",
    "fit-content": "w-fit",
}

HEIGHT_KEYWORDS: dict[str, str] = {
    "100%": "h-full",
    "50%": "h-1/2",
    "25%": "h-1/4",
    "75%": "h-3/4",
    "0": "h-0",
    "0px": "h-0",
    "auto": "h-auto",
    "min-content": "h-min",
    "max-content": "h-max",
    "fit-content": "h-fit",
    "100vh": "h-screen",
}


def _size(prefix: str, keywords: dict[str, str], value: str) -> str:
    if value in keywords:
        return keywords[value]
    if value.endswith("px"):
        token = scale_token(parse_float(value))
        if token is not None:
            return f"{prefix}-{token}"
    return bracket(prefix, value)


@handles("width")
def map_width(value: str) -> str:
    return _size("w", WIDTH_KEYWORDS, value)


@handles("height")
def map_height(value: str) -> str:
    return _size("h", HEIGHT_KEYWORDS, value)


# =============================================================================
# Typography
# =============================================================================

FONT_SIZES: dict[str, str] = {
    "0.75rem": "text-xs",
    "0.875rem": "text-sm",
    "1rem": "text-base",
    "1.125rem": "text-lg",
    "1.25rem": "text-xl",
    "1.5rem": "text-2xl",
    "1.875rem": "text-3xl",
    "2.25rem": "text-4xl",
    "3rem": "text-5xl",
    "3.75rem": "text-6xl",
    "4.5rem": "text-7xl",
    "6rem": "text-8xl",
    "8rem": "text-9xl",
    "12px": "text-xs",
    "14px": "text-sm",
    "16px": "text-base",
    "18px": "text-lg",
    "20px": "text-xl",
    "24px": "text-2xl",
    "30px": "text-3xl",
    "36px": "text-4xl",
    "48px": "text-5xl",
    "60px": "text-6xl",
    "72px": "text-7xl",
    "96px": "text-8xl",
    "128px": "text-9xl",
}

FONT_WEIGHTS: dict[str, str] = {
    "100": "font-thin",
    "200": "font-extralight",
    "300": "font-light",
    "400": "font-normal",
    "500": "font-medium",
    "600": "font-semibold",
    "700": "font-bold",
    "800": "font-extrabold",
    "900": "font-black",
    "normal": "font-normal",
    "bold": "font-bold",
}

_keyword_table("font-size", FONT_SIZES, lambda v: bracket("text", v))
_keyword_table("font-weight", FONT_WEIGHTS, lambda v: bracket("font", v))
_keyword_table(
    "text-align",
    {"left": "text-left", "center": "text-center", "right": "text-right", "justify": "text-justify"},
)
_keyword_table(
    "text-transform",
    {
        "uppercase": "uppercase",
        "lowercase": "lowercase",
        "capitalize": "capitalize",
        "none": "normal-case",
    },
)
_keyword_table(
    "white-space",
    {
        "nowrap": "whitespace-nowrap",
        "pre": "whitespace-pre",
        "pre-line": "whitespace-pre-line",
        "pre-wrap": "whitespace-pre-wrap",
        "normal": "whitespace-normal",
    },
)


@handles("text-decoration")
def map_text_decoration(value: str) -> str:
    if "underline" in value:
        return "underline"
    if "line-through" in value:
        return "line-through"
    if "none" in value:
        return "no-underline"
    return arbitrary_property("text-decoration", value)


@handles("text-overflow")
def map_text_overflow(value: str) -> str:
    # truncate also sets overflow: hidden and white-space: nowrap
    if value == "ellipsis":
        return "truncate"
    return arbitrary_property("text-overflow", value)


# =============================================================================
# Layout
# =============================================================================

_keyword_table(
    "display",
    {
        "block": "block",
        "inline-block": "inline-block",
        "inline": "inline",
        "flex": "flex",
        "inline-flex": "inline-flex",
        "grid": "grid",
        "inline-grid": "inline-grid",
        "none": "hidden",
        "table": "table",
        "table-cell": "table-cell",
        "table-row": "table-row",
        "flow-root": "flow-root",
        "contents": "contents",
    },
)
_keyword_table(
    "position",
    {
        "static": "static",
        "relative": "relative",
        "absolute": "absolute",
        "fixed": "fixed",
        "sticky": "sticky",
    },
)
_keyword_table(
    "z-index",
    {
        "0": "z-0",
        "10": "z-10",
        "20": "z-20",
        "30": "z-30",
        "40": "z-40",
        "50": "z-50",
        "auto": "z-auto",
    },
    lambda v: bracket("z", v),
)
_keyword_table(
    "flex",
    {"1": "flex-1", "auto": "flex-auto", "initial": "flex-initial", "none": "flex-none"},
    lambda v: bracket("flex", v),
)
_keyword_table(
    "flex-direction",
    {
        "row": "flex-row",
        "row-reverse": "flex-row-reverse",
        "column": "flex-col",
        "column-reverse": "flex-col-reverse",
    },
)
_keyword_table(
    "flex-wrap",
    {"wrap": "flex-wrap", "nowrap": "flex-nowrap", "wrap-reverse": "flex-wrap-reverse"},
)
_keyword_table(
    "justify-content",
    {
        "flex-start": "justify-start",
        "flex-end": "justify-end",
        "center": "justify-center",
        "space-between": "justify-between",
        "space-around": "justify-around",
        "space-evenly": "justify-evenly",
        "start": "justify-start",
        "end": "justify-end",
    },
)
_keyword_table(
    "align-items",
    {
        "flex-start": "items-start",
        "flex-end": "items-end",
        "center": "items-center",
        "baseline": "items-baseline",
        "stretch": "items-stretch",
        "start": "items-start",
        "end": "items-end",
    },
)
_keyword_table(
    "align-self",
    {
        "auto": "self-auto",
        "flex-start": "self-start",
        "flex-end": "self-end",
        "center": "self-center",
        "baseline": "self-baseline",
        "stretch": "self-stretch",
        "start": "self-start",
        "end": "self-end",
    },
)

_OVERFLOW_VALUES = ("auto", "hidden", "visible", "scroll")

for _axis in ("overflow", "overflow-x", "overflow-y"):
    _keyword_table(_axis, {value: f"{_axis}-{value}" for value in _OVERFLOW_VALUES})


# =============================================================================
# Interaction and effects
# =============================================================================

CURSORS: tuple[str, ...] = (
    "auto",
    "default",
    "pointer",
    "wait",
    "text",
    "move",
    "help",
    "not-allowed",
    "none",
    "context-menu",
    "progress",
    "cell",
    "crosshair",
    "vertical-text",
    "alias",
    "copy",
    "no-drop",
    "grab",
    "grabbing",
    "all-scroll",
    "col-resize",
    "row-resize",
    "n-resize",
    "e-resize",
    "s-resize",
    "w-resize",
    "ne-resize",
    "nw-resize",
    "se-resize",
    "sw-resize",
    "ew-resize",
    "ns-resize",
    "nesw-resize",
    "nwse-resize",
    "zoom-in",
    "zoom-out",
)

_keyword_table(
    "cursor", {cursor: f"cursor-{cursor}" for cursor in CURSORS}, lambda v: bracket("cursor", v)
)


@handles("transition")
def map_transition(value: str) -> str:
    if value == "none":
        return "transition-none"
    if "all" in value:
        return "transition-all"
    if "color" in value:
        return "transition-colors"
    if "opacity" in value:
        return "transition-opacity"
    if "shadow" in value:
        return "transition-shadow"
    if "transform" in value:
        return "transition-transform"
    return bracket("transition", value)


@handles("transform")
def map_transform(value: str) -> str:
    return "transform-none" if value == "none" else "transform"


DURATIONS_MS: list[int] = [75, 100, 150, 200, 300, 500, 700, 1000]


@handles("transition-duration")
def map_transition_duration(value: str) -> str:
    ms = parse_int(value)
    if math.isnan(ms):
        return bracket("duration", value)
    return f"duration-{nearest(DURATIONS_MS, ms)}"


OPACITY_STEPS: list[int] = [0, 5, 10, 20, 25, 30, 40, 50, 60, 70, 75, 80, 90, 95, 100]


@handles("opacity")
def map_opacity(value: str) -> str:
    percent = parse_float(value) * 100
    if not math.isfinite(percent):
        return bracket("opacity", value)
    percent = round_half_up(percent)
    return f"opacity-{nearest(OPACITY_STEPS, percent)}"

