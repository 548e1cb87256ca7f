# swatch_palette/palette/types.py
from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, Union

"""
types.py.

Does: Define the structural types shared by pool shaping and PaletteIndex.
"""


class SwatchLike(Protocol):
    id: str


Swatch = Mapping[str, Any]
ExcludeEntry = Union[str, Mapping[str, Any], SwatchLike]
ExcludeList = Sequence[ExcludeEntry]

__all__ = ["SwatchLike", "Swatch", "ExcludeEntry", "ExcludeList"]

__docformat__ = "google"
