"""Shared pytest fixtures for tintwind tests."""

from __future__ import annotations

import pytest

from tintwind.core.ir import ColorEntry
from tintwind.core.manifest import LOG_LEVEL_ENV
from tintwind.core.oklch import generate_palette


@pytest.fixture(autouse=True)
def _clean_log_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's TINTWIND_LOG_LEVEL from leaking into tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


@pytest.fixture
def blue_seed() -> str:
    return "#3b82f6"


@pytest.fixture
def blue_palette(blue_seed: str) -> list[ColorEntry]:
    """Palette generated from Tailwind's blue-500."""
    return generate_palette(blue_seed)


@pytest.fixture
def two_swatches() -> list[ColorEntry]:
    return [
        ColorEntry(index=100, hex="#ffffff", oklch="oklch(1.000 0.000 0.000)"),
        ColorEntry(index=200, hex="#000000", oklch="oklch(0.000 0.000 0.000)"),
    ]
