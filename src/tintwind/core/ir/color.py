"""
Colour value types shared by the palette engine and its serializers.

``OklchTriple`` is the engine's working representation. ``ColorEntry`` is
one swatch of a generated palette; a palette is an ordered list of entries
with strictly increasing ``index`` (100, 200, ... 900 by default).
"""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class RGB(NamedTuple):
    """8-bit sRGB channels."""

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees, saturation and lightness in 0-1."""

    h: float
    s: float
    l: float  # noqa: E741


class OklchTriple(BaseModel):
    """Lightness/chroma/hue triple.

    The values are HSL re-scaled (chroma = saturation * 0.4), not a true
    OKLab projection; see ``tintwind.core.oklch``.
    """

    model_config = ConfigDict(frozen=True)

    l: float = Field(description="Lightness (0-1)")  # noqa: E741
    c: float = Field(description="Chroma (0-0.4)")
    h: float = Field(description="Hue in degrees (0-360)")


# Returned by string_to_oklch whenever a colour string cannot be parsed.
FALLBACK_OKLCH = OklchTriple(l=0.5, c=0.1, h=0.0)


class ColorEntry(BaseModel):
    """One palette swatch."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(description="Shade index (100-900)")
    hex: str = Field(description="Lowercase #rrggbb")
    oklch: str = Field(description="oklch(L C H) string, 3 decimals")


class ColorAdjustment(BaseModel):
    """Partial override applied to a base colour.

    Unset channels keep the base colour's value; ``index`` defaults to 500.
    """

    model_config = ConfigDict(frozen=True)

    index: int | None = Field(default=None, ge=0, description="Shade index of the result")
    lightness: float | None = Field(default=None, ge=0.0, le=1.0)
    chroma: float | None = Field(default=None, ge=0.0, le=0.4)
    hue: float | None = Field(default=None, ge=0.0, le=360.0)
