"""
pool.py
=======

Does: Shape candidate pools for palette queries: drop excluded swatches, pad
      unsatisfiable requests with the ERROR_SWATCH sentinel, and draw the
      random result.
Used By: PaletteIndex query methods.
Returns: Lists of swatches, a single swatch, or the sentinel. Never raises
         for an empty or short pool.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from .rng import RandomSource
from .types import ExcludeEntry, Swatch

__all__ = [
    "ERROR_SWATCH",
    "exclude_ids",
    "trim",
    "invalidate",
    "output",
    "is_invalid",
]
__docformat__ = "google"

ERROR_SWATCH: Mapping[str, Any] = MappingProxyType(
    {
        "id": "invalid",
        "title": "Invalid Swatch",
        "hex": "#ff0000",
        "contrast": True,
    }
)


# ── Exclusions ───────────────────────────────────────────────────────────────
def _entry_id(entry: ExcludeEntry) -> Any:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, Mapping):
        return entry.get("id")
    return getattr(entry, "id", None)


def exclude_ids(exclude: Iterable[ExcludeEntry] | None) -> frozenset:
    """Does: Normalize id strings / swatch mappings / objects with `.id` to a set of ids."""
    if not exclude:
        return frozenset()
    return frozenset(i for i in map(_entry_id, exclude) if i is not None)


def trim(pool: Iterable[Swatch], exclude: Iterable[ExcludeEntry] | None = ()) -> list[Swatch]:
    """Does: Copy `pool` without the excluded swatches, keeping order."""
    skip = exclude_ids(exclude)
    return [s for s in pool if s["id"] not in skip]


# ── Fallback & output ────────────────────────────────────────────────────────
def invalidate(n: int | None = None, pool: Sequence[Swatch] = ()) -> Any:
    """Does: Fallback for an unsatisfiable request.

    Returns ERROR_SWATCH for n <= 1 (or no n at all). For n > 1, returns
    exactly n items: the partial pool in its order, then sentinel filler.
    """
    if n is not None and n > 1:
        return (list(pool) + [ERROR_SWATCH] * n)[:n]
    return ERROR_SWATCH


def output(pool: Sequence[Swatch], n: int, rng: RandomSource) -> Any:
    """Does: n > 1 -> up to n distinct swatches in random order; else one random swatch."""
    if n > 1:
        return rng.shuffle(pool)[:n]
    return rng.pick(pool)


def is_invalid(result: Any) -> bool:
    """Does: Tell whether a query result is, or contains, the ERROR_SWATCH sentinel."""
    if isinstance(result, Mapping):
        return result.get("id") == ERROR_SWATCH["id"]
    if isinstance(result, (list, tuple)):
        return any(is_invalid(r) for r in result)
    return result is None
