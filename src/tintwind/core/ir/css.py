"""Declaration type produced by the CSS-to-Tailwind converter."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CssDeclaration(BaseModel):
    """A single ``property: value`` pair.

    ``property`` is trimmed and matched case-sensitively against the handler
    table; ``value`` keeps every colon after the first one.
    """

    model_config = ConfigDict(frozen=True)

    property: str
    value: str
