"""
palette.
=======

Does: Expose PaletteIndex and the helpers it is built from (range predicates,
      pool shaping, randomness collaborator).
Used By: Library callers, the CLI demo, tests.
"""

from .index import PaletteIndex, create_palette, enrich
from .pool import ERROR_SWATCH, exclude_ids, invalidate, is_invalid, output, trim
from .ranges import between, mod, polar_between
from .rng import RandomSource, SeededRandom
from .types import ExcludeEntry, ExcludeList, Swatch, SwatchLike

__all__ = [
    # index
    "PaletteIndex",
    "create_palette",
    "enrich",
    # pool
    "ERROR_SWATCH",
    "exclude_ids",
    "trim",
    "invalidate",
    "output",
    "is_invalid",
    # ranges
    "mod",
    "between",
    "polar_between",
    # rng
    "RandomSource",
    "SeededRandom",
    # types
    "Swatch",
    "SwatchLike",
    "ExcludeEntry",
    "ExcludeList",
]

__docformat__ = "google"
