"""
conversion.py
=============

Does: Convert hex color strings to RGBA, RGBA to HSLA, and compute WCAG
      relative luminance from a hex string.
Used By: PaletteIndex enrichment (rgba / hsla / luminance fields).
Returns: RGBA (tuple[int,int,int,float]), HSLA (tuple[float,float,float,float]),
         luminance (float in [0, 1]).
"""

from __future__ import annotations
import colorsys
import logging
from functools import lru_cache
from typing import Tuple

from webcolors import hex_to_rgb

# Public surface
__all__ = [
    "RGBA",
    "HSLA",
    "hex_to_rgba",
    "rgba_to_hsla",
    "relative_luminance",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
RGBA = Tuple[int, int, int, float]
HSLA = Tuple[float, float, float, float]


# =============================================================================
# 1) HEX PARSING
# =============================================================================

def _split_alpha(hex_str: str) -> Tuple[str, float]:
    """Does: Separate an optional alpha channel from #rgba / #rrggbbaa strings."""
    body = hex_str.strip()
    if body.startswith("#"):
        body = body[1:]
    if len(body) == 4:
        return "#" + body[:3], int(body[3] * 2, 16) / 255
    if len(body) == 8:
        return "#" + body[:6], int(body[6:], 16) / 255
    return "#" + body, 1.0


@lru_cache(maxsize=4096)
def hex_to_rgba(hex_str: str) -> RGBA:
    """Does: Parse #rgb, #rgba, #rrggbb or #rrggbbaa (leading '#' optional).

    Raises:
        ValueError: when the string is not a hex color (raised by webcolors).
    """
    rgb_hex, alpha = _split_alpha(hex_str)
    rgb = hex_to_rgb(rgb_hex)
    return rgb.red, rgb.green, rgb.blue, alpha


# =============================================================================
# 2) HSL
# =============================================================================

def rgba_to_hsla(rgba: RGBA) -> HSLA:
    """Does: Map RGBA to (hue°, saturation%, lightness%, alpha).

    Hue lies in [0, 360); saturation and lightness in [0, 100]. Achromatic
    colors get hue 0 and saturation 0.
    """
    r, g, b, a = rgba
    h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    return h * 360.0, s * 100.0, l * 100.0, a


# =============================================================================
# 3) LUMINANCE
# =============================================================================

def _srgb_to_linear(v: float) -> float:
    v = v / 255.0
    return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4


@lru_cache(maxsize=4096)
def relative_luminance(hex_str: str) -> float:
    """Does: Compute WCAG 2.x relative luminance of a hex color (alpha ignored)."""
    r, g, b, _ = hex_to_rgba(hex_str)
    return (
        0.2126 * _srgb_to_linear(r)
        + 0.7152 * _srgb_to_linear(g)
        + 0.0722 * _srgb_to_linear(b)
    )
