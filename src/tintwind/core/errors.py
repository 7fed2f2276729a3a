"""
Error types for tintwind.

The colour engine and the CSS translator never raise: they degrade to a
fallback value instead. Only configuration loading and the CLI surface use
these exceptions.
"""


class TintwindError(Exception):
    """Base exception for all tintwind errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ManifestError(TintwindError):
    """
    Raised when tintwind.toml cannot be loaded.

    Examples:
    - Malformed TOML
    - Unknown output format
    - Non-positive palette size
    """

    pass
