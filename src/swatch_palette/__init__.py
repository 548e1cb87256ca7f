"""
swatch_palette
==============

Does: Root package initializer for the swatch palette library.
Returns: Re-exports PaletteIndex, the ERROR_SWATCH sentinel and palette file loading.
Used by: All higher-level imports starting from `swatch_palette.*`.
"""

from .general.utils.load_config import load_palette
from .palette import ERROR_SWATCH, PaletteIndex, SeededRandom, create_palette, is_invalid

__all__: list[str] = [
    "PaletteIndex",
    "create_palette",
    "ERROR_SWATCH",
    "is_invalid",
    "SeededRandom",
    "load_palette",
]
__docformat__ = "google"
