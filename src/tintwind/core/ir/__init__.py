"""
Value types for tintwind.

All models are frozen pydantic models; channel tuples are NamedTuples.
"""

from .color import FALLBACK_OKLCH, HSL, RGB, ColorAdjustment, ColorEntry, OklchTriple
from .css import CssDeclaration

__all__ = [
    "FALLBACK_OKLCH",
    "HSL",
    "RGB",
    "ColorAdjustment",
    "ColorEntry",
    "CssDeclaration",
    "OklchTriple",
]
