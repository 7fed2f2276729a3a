"""
tintwind - colour palettes and CSS-to-Tailwind translation.

Two independent, pure engines: a palette generator that derives a 9-step
shade ramp from one or two seed colours, and a translator that maps CSS
declarations onto Tailwind utility classes.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import ManifestError, TintwindError
from .core.ir import ColorAdjustment, ColorEntry, CssDeclaration, OklchTriple
from .core.oklch import (
    adjust_color,
    determine_palette_position,
    format_oklch,
    generate_palette,
    generate_palette_from_two_colors,
    hex_to_rgb,
    hsl_to_rgb,
    oklch_to_hex,
    parse_oklch,
    rgb_to_hex,
    rgb_to_hsl,
    string_to_oklch,
)
from .core.tailwind import convert_css_to_tailwind, preprocess_css_input
from .core.theme_generators import generate_css_variables, generate_tailwind_theme

__version__ = get_version()

__all__ = [
    "__version__",
    "ColorAdjustment",
    "ColorEntry",
    "CssDeclaration",
    "ManifestError",
    "OklchTriple",
    "TintwindError",
    "adjust_color",
    "convert_css_to_tailwind",
    "determine_palette_position",
    "format_oklch",
    "generate_css_variables",
    "generate_palette",
    "generate_palette_from_two_colors",
    "generate_tailwind_theme",
    "hex_to_rgb",
    "hsl_to_rgb",
    "oklch_to_hex",
    "parse_oklch",
    "preprocess_css_input",
    "rgb_to_hex",
    "rgb_to_hsl",
    "string_to_oklch",
]
