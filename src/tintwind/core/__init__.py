"""Core engines: colour palettes and CSS-to-Tailwind translation."""
