# tests/test_color_conversion.py

from __future__ import annotations

import importlib

import pytest

"""
conversion tests
================

Does: Validate hex → RGBA parsing (short/long/alpha forms), RGBA → HSLA mapping
      including hue wraparound, and WCAG relative luminance.
"""

conv = importlib.import_module("swatch_palette.color.conversion")


# ──────────────────────────────────────────────────────────────────────────────
# Hex parsing
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("text", ["#ff0000", "#f00", "ff0000", "#FF0000", " #ff0000 "])
def test_hex_to_rgba_opaque_forms(text):
    assert conv.hex_to_rgba(text) == (255, 0, 0, 1.0)


def test_hex_to_rgba_alpha_forms():
    r, g, b, a = conv.hex_to_rgba("#00ff0080")
    assert (r, g, b) == (0, 255, 0)
    assert a == pytest.approx(128 / 255)

    r, g, b, a = conv.hex_to_rgba("#00f8")
    assert (r, g, b) == (0, 0, 255)
    assert a == pytest.approx(0x88 / 255)


@pytest.mark.parametrize("text", ["#zzzzzz", "#12345", "#zzzz", "not-a-color"])
def test_hex_to_rgba_malformed_raises_value_error(text):
    with pytest.raises(ValueError):
        conv.hex_to_rgba(text)


# ──────────────────────────────────────────────────────────────────────────────
# HSL
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "rgba,expect",
    [
        ((255, 0, 0, 1.0), (0.0, 100.0, 50.0, 1.0)),
        ((0, 255, 0, 1.0), (120.0, 100.0, 50.0, 1.0)),
        ((0, 0, 255, 0.5), (240.0, 100.0, 50.0, 0.5)),
        ((255, 255, 255, 1.0), (0.0, 0.0, 100.0, 1.0)),
        ((0, 0, 0, 1.0), (0.0, 0.0, 0.0, 1.0)),
    ],
)
def test_rgba_to_hsla_primaries_and_greys(rgba, expect):
    assert conv.rgba_to_hsla(rgba) == pytest.approx(expect, abs=1e-9)


def test_rgba_to_hsla_hue_stays_below_360():
    h, s, l, _ = conv.rgba_to_hsla(conv.hex_to_rgba("#ff0015"))
    assert 354.0 < h < 356.0
    assert 0.0 <= s <= 100.0 and 0.0 <= l <= 100.0


# ──────────────────────────────────────────────────────────────────────────────
# Luminance
# ──────────────────────────────────────────────────────────────────────────────
def test_relative_luminance_bounds_and_primaries():
    assert conv.relative_luminance("#ffffff") == pytest.approx(1.0)
    assert conv.relative_luminance("#000000") == 0.0
    assert conv.relative_luminance("#ff0000") == pytest.approx(0.2126)
    assert conv.relative_luminance("#00ff00") == pytest.approx(0.7152)
    assert conv.relative_luminance("#0000ff") == pytest.approx(0.0722)


def test_relative_luminance_ignores_alpha():
    assert conv.relative_luminance("#80808000") == conv.relative_luminance("#808080")
