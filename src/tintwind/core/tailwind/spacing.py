"""
Spacing scale and value helpers shared by every CSS property handler.

``SPACING_SCALE`` is the one px -> Tailwind scale table; margin, padding,
gap, inset and width/height handlers all resolve through it.
"""

from __future__ import annotations

import math
import re

# px value -> Tailwind spacing token
SPACING_SCALE: dict[int, str] = {
    0: "0",
    1: "px",
    2: "0.5",
    4: "1",
    6: "1.5",
    8: "2",
    10: "2.5",
    12: "3",
    14: "3.5",
    16: "4",
    20: "5",
    24: "6",
    28: "7",
    32: "8",
    36: "9",
    40: "10",
    44: "11",
    48: "12",
    56: "14",
    64: "16",
    80: "20",
    96: "24",
    112: "28",
    128: "32",
    144: "36",
    160: "40",
    176: "44",
    192: "48",
    208: "52",
    224: "56",
    240: "60",
    256: "64",
    288: "72",
    320: "80",
    384: "96",
}

REM_TO_PX = 16

_FLOAT_PREFIX_RE = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_INT_PREFIX_RE = re.compile(r"^\s*[+-]?\d+")
_WHITESPACE_RE = re.compile(r"\s+")


def parse_float(value: str) -> float:
    """Read the leading number of a CSS value (``"16px"`` -> 16.0).

    Returns NaN when the value does not start with a number, so comparisons
    against the result are simply false.
    """
    match = _FLOAT_PREFIX_RE.match(value)
    return float(match.group(0)) if match else math.nan


def parse_int(value: str) -> float:
    """Read the leading integer of a CSS value (``"0.3s"`` -> 0). NaN if none."""
    match = _INT_PREFIX_RE.match(value)
    return float(match.group(0)) if match else math.nan


def nearest(candidates: list[int], target: float) -> int:
    """Candidate closest to ``target``; the first one wins a tie."""
    return min(candidates, key=lambda candidate: abs(candidate - target))


def arbitrary(value: str) -> str:
    """Make a literal CSS value safe inside ``[...]`` in a class attribute.

    Whitespace becomes ``_`` (Tailwind reads it back as a space) and double
    quotes become single quotes.
    """
    return _WHITESPACE_RE.sub("_", value.strip()).replace('"', "'")


def bracket(prefix: str, value: str) -> str:
    """``prefix-[value]`` arbitrary-value class."""
    return f"{prefix}-[{arbitrary(value)}]"


def arbitrary_property(prop: str, value: str) -> str:
    """``[property:value]`` arbitrary-property class."""
    return f"[{arbitrary(prop)}:{arbitrary(value)}]"


def scale_token(px: float) -> str | None:
    """Spacing token for an exact px value, if the scale has one."""
    if not math.isfinite(px) or px != int(px):
        return None
    return SPACING_SCALE.get(int(px))


def map_spacing_value(prefix: str, value: str) -> str:
    """Map a length to a spacing utility such as ``mt-4`` or ``-mx-2``.

    Handles a leading ``-``, ``0``/``0px``, ``auto``, px values on the scale
    and rem values (1rem = 16px) that land on the scale. Anything else
    becomes ``prefix-[value]``.
    """
    negative = value.startswith("-")
    clean = value[1:] if negative else value
    sign = "-" if negative else ""

    if clean in ("0", "0px"):
        return f"{prefix}-0"
    if clean == "auto":
        return f"{prefix}-auto"

    token = None
    if clean.endswith("px"):
        token = scale_token(parse_float(clean))
    elif clean.endswith("rem"):
        token = scale_token(parse_float(clean) * REM_TO_PX)
    if token is not None:
        return f"{sign}{prefix}-{token}"

    return f"{sign}{bracket(prefix, clean)}"
