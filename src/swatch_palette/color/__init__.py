"""
color.
=====

Does: Color-space conversions shared by palette enrichment.
Used By: PaletteIndex construction.
Returns: Pure functions; no side effects beyond lru caching.
"""

from .conversion import (
    HSLA,
    RGBA,
    hex_to_rgba,
    relative_luminance,
    rgba_to_hsla,
)

__all__ = [
    "RGBA",
    "HSLA",
    "hex_to_rgba",
    "rgba_to_hsla",
    "relative_luminance",
]

__docformat__ = "google"
