"""
Palette serializers and preview helpers.

Turns a generated palette into Tailwind v4 ``@theme`` blocks or plain CSS
custom properties, and derives the colour roles a live preview needs
(primary shades plus a readable text colour for each).
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from .ir import ColorEntry
from .oklch import hex_to_rgb

DEFAULT_THEME_NAME = "theme"


def _theme_name(name: str | None) -> str:
    return name or DEFAULT_THEME_NAME


# =============================================================================
# Serialization
# =============================================================================


def generate_tailwind_theme(name: str | None, palette: Sequence[ColorEntry]) -> str:
    """Render a Tailwind v4 ``@theme`` block.

    Args:
        name: Colour name used in the variable names (default "theme").
        palette: Entries in the order they should appear.

    Returns:
        ``@theme { --color-<name>-<index>: <hex>; ... }`` one entry per line.
    """
    color_name = _theme_name(name)
    lines = ["@theme {"]
    for entry in palette:
        lines.append(f"  --color-{color_name}-{entry.index}: {entry.hex};")
    lines.append("}")
    return "\n".join(lines)


def generate_css_variables(name: str | None, palette: Sequence[ColorEntry]) -> str:
    """Render bare CSS custom properties, one per line.

    No enclosing rule is emitted; wrap the result in ``:root { }`` as needed.
    """
    color_name = _theme_name(name)
    return "".join(f"  --{color_name}-{entry.index}: {entry.hex};\n" for entry in palette)


# =============================================================================
# Contrast
# =============================================================================

# Used when a swatch hex cannot be parsed.
DEFAULT_LUMINANCE = 0.5


def relative_luminance(hex_value: str) -> float:
    """WCAG 2.0 relative luminance of a ``#rrggbb`` colour."""
    rgb = hex_to_rgb(hex_value)
    if rgb is None:
        return DEFAULT_LUMINANCE

    def linear(channel: int) -> float:
        value = channel / 255
        return value / 12.92 if value <= 0.03928 else ((value + 0.055) / 1.055) ** 2.4

    return 0.2126 * linear(rgb.r) + 0.7152 * linear(rgb.g) + 0.0722 * linear(rgb.b)


def text_color_for(background_hex: str) -> str:
    """Black text on light backgrounds, white on dark ones."""
    return "#000000" if relative_luminance(background_hex) > 0.5 else "#ffffff"


# =============================================================================
# Preview roles
# =============================================================================


class ColorRole(BaseModel):
    """A background swatch and the text colour that reads on it."""

    model_config = ConfigDict(frozen=True)

    background: str
    text: str


class PreviewRoles(BaseModel):
    """Primary colour family used to render a palette preview."""

    model_config = ConfigDict(frozen=True)

    primary: ColorRole
    primary_light: ColorRole
    primary_lighter: ColorRole
    primary_dark: ColorRole


_DEFAULT_PRIMARY = "#3b82f6"

# (role, offset from the base slot, fallback slot, fallback hex)
_RELATIVE_ROLES: tuple[tuple[str, int, int, str], ...] = (
    ("primary_light", -2, 2, "#93c5fd"),
    ("primary_lighter", -4, 0, "#dbeafe"),
    ("primary_dark", 2, 6, "#1e40af"),
)


def _role(background: str) -> ColorRole:
    return ColorRole(background=background, text=text_color_for(background))


def _primary_hex(palette: Sequence[ColorEntry], base_position: int | None) -> str:
    if base_position is not None and 0 <= base_position < len(palette):
        return palette[base_position].hex
    for entry in palette:
        if entry.index == 500:
            return entry.hex
    if len(palette) > 4:
        return palette[4].hex
    if palette:
        return palette[0].hex
    return _DEFAULT_PRIMARY


def preview_roles(palette: Sequence[ColorEntry], base_position: int | None = None) -> PreviewRoles:
    """Pick the primary colour family for a preview.

    ``primary`` is the seed slot when known; the lighter and darker roles are
    taken relative to it, falling back to fixed palette slots and then to
    default blues when the palette is too short.
    """
    roles: dict[str, ColorRole] = {"primary": _role(_primary_hex(palette, base_position))}
    for role, offset, fallback_slot, fallback_hex in _RELATIVE_ROLES:
        background = None
        if base_position is not None and 0 <= base_position + offset < len(palette):
            background = palette[base_position + offset].hex
        elif fallback_slot < len(palette):
            background = palette[fallback_slot].hex
        roles[role] = _role(background or fallback_hex)
    return PreviewRoles(**roles)
