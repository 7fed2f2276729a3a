"""
W3C Design Token Community Group (DTCG) tokens.json export.

Generates a DTCG-compliant token tree from a generated palette.
See: https://design-tokens.github.io/community-group/format/
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from .ir import ColorEntry
from .theme_generators import DEFAULT_THEME_NAME


def generate_dtcg_tokens(name: str | None, palette: Sequence[ColorEntry]) -> dict[str, Any]:
    """Generate DTCG colour tokens for a palette.

    Each swatch becomes ``color.<name>.<index>`` with its hex as ``$value``
    and the oklch string under ``$extensions``.

    Args:
        name: Colour group name (default "theme").
        palette: Generated palette.

    Returns:
        DTCG-formatted dict suitable for writing as tokens.json.
    """
    group: dict[str, Any] = {}
    for entry in palette:
        group[str(entry.index)] = {
            "$type": "color",
            "$value": entry.hex,
            "$extensions": {"oklch": entry.oklch},
        }
    return {"color": {name or DEFAULT_THEME_NAME: group}}


def write_dtcg_tokens(name: str | None, palette: Sequence[ColorEntry], output_path: Path) -> Path:
    """Write DTCG tokens.json to disk.

    Args:
        name: Colour group name.
        palette: Generated palette.
        output_path: File path to write.

    Returns:
        The path written.
    """
    tokens = generate_dtcg_tokens(name, palette)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(tokens, indent=2) + "\n", encoding="utf-8")
    return output_path
