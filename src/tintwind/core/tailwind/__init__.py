"""
CSS-to-Tailwind translation.

- spacing.py: shared spacing scale and value helpers
- handlers.py: per-property handler registry
- converter.py: input preprocessing and declaration conversion
"""

from .converter import (
    EXAMPLE_SNIPPETS,
    convert_css_to_tailwind,
    declaration_to_class,
    parse_declarations,
    preprocess_css_input,
)
from .handlers import TAILWIND_MAPPING
from .spacing import SPACING_SCALE, map_spacing_value

__all__ = [
    "EXAMPLE_SNIPPETS",
    "SPACING_SCALE",
    "TAILWIND_MAPPING",
    "convert_css_to_tailwind",
    "declaration_to_class",
    "map_spacing_value",
    "parse_declarations",
    "preprocess_css_input",
]
