"""
index.py
========

Does: Build a queryable palette from raw swatch records. Each record is enriched
      once with `rgba`, `hsla` and `luminance`, then the index answers random,
      by-id and HSL/luminance range queries against that read-only set.
Used By: Library callers, the CLI demo.
Returns: Enriched swatches (read-only mappings), lists of them, or the
         ERROR_SWATCH sentinel when a query cannot be satisfied.

Query failures never raise: the caller gets a value of the expected shape and,
when logging is on, a diagnostic is sent to the message sink.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Sequence, Tuple

from swatch_palette.color.conversion import hex_to_rgba, relative_luminance, rgba_to_hsla
from swatch_palette.general.utils.log import debug

from .pool import invalidate, output, trim
from .ranges import between, polar_between
from .rng import RandomSource, SeededRandom
from .types import ExcludeList, Swatch

__all__ = ["PaletteIndex", "create_palette", "enrich"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

Sink = Callable[[str], Any]


def enrich(swatch: Mapping[str, Any]) -> Mapping[str, Any]:
    """Does: Return a read-only copy of `swatch` plus derived rgba/hsla/luminance."""
    rgba = hex_to_rgba(swatch["hex"])
    return MappingProxyType(
        {
            **swatch,
            "rgba": rgba,
            "hsla": rgba_to_hsla(rgba),
            "luminance": relative_luminance(swatch["hex"]),
        }
    )


class PaletteIndex:
    """Queryable, immutable palette of enriched swatches.

    Args:
        swatches: Raw records, each with at least `id` and `hex`. Extra keys are kept.
        log: Send a diagnostic to `sink` whenever a query falls back to ERROR_SWATCH.
        rng: Randomness collaborator; defaults to an unseeded SeededRandom.
        sink: Single-argument message sink; defaults to this module's logger.error.
    """

    def __init__(
        self,
        swatches: Iterable[Mapping[str, Any]],
        log: bool = True,
        *,
        rng: Optional[RandomSource] = None,
        sink: Optional[Sink] = None,
    ) -> None:
        self._swatches: Tuple[Mapping[str, Any], ...] = tuple(enrich(s) for s in swatches)
        self.log = log
        self.rng: RandomSource = rng if rng is not None else SeededRandom()
        self._sink: Sink = sink if sink is not None else logger.error
        debug(f"Enriched {len(self._swatches)} swatches", topic="palette")

    # ── Accessors ────────────────────────────────────────────────────────────
    @property
    def swatches(self) -> Tuple[Mapping[str, Any], ...]:
        return self._swatches

    def __len__(self) -> int:
        return len(self._swatches)

    def __iter__(self) -> Iterator[Mapping[str, Any]]:
        return iter(self._swatches)

    def __repr__(self) -> str:
        return f"PaletteIndex({len(self._swatches)} swatches, log={self.log})"

    # ── Internals ────────────────────────────────────────────────────────────
    def _report(self, msg: str) -> None:
        if self.log:
            self._sink(msg)

    def _select(self, pool: Sequence[Swatch], n: int, criteria: str) -> Any:
        """Does: Shape a result from `pool`, or fall back when it holds fewer than n."""
        if len(pool) < max(n, 1):
            what = f"{n} swatches" if n > 1 else "swatch"
            self._report(f"Could not find {what} {criteria}.")
            return invalidate(n, pool)
        return output(pool, n, self.rng)

    def _filtered(
        self, exclude: Optional[ExcludeList], keep: Callable[[Mapping[str, Any]], bool]
    ) -> list:
        return [s for s in trim(self._swatches, exclude) if keep(s)]

    # ── Lookups ──────────────────────────────────────────────────────────────
    def get(self, swatch_id: str) -> Optional[Mapping[str, Any]]:
        """Does: Return the enriched swatch with this id, or None."""
        return next((s for s in self._swatches if s["id"] == swatch_id), None)

    def by_id(self, swatch_id: str) -> Mapping[str, Any]:
        """Does: Return the enriched swatch with this id, or ERROR_SWATCH."""
        swatch = self.get(swatch_id)
        if swatch is None:
            self._report(f'Could not find swatch with id "{swatch_id}"')
            return invalidate()
        return swatch

    # ── Random & range queries ───────────────────────────────────────────────
    def random(self, n: int = 1, exclude: Optional[ExcludeList] = ()) -> Any:
        """Does: Pick n random swatches (distinct when n > 1) outside `exclude`."""
        pool = trim(self._swatches, exclude)
        excluded = len(self._swatches) - len(pool)
        noun = "swatch" if excluded == 1 else "swatches"
        return self._select(pool, n, f"excluding {excluded} {noun}")

    def by_luminance(
        self,
        min: float = 0,
        max: float = 1,
        n: int = 1,
        exclude: Optional[ExcludeList] = (),
    ) -> Any:
        """Does: Random swatch(es) with relative luminance in [min, max]."""
        pool = self._filtered(exclude, lambda s: between(s["luminance"], min, max))
        return self._select(pool, n, f"with luminance between {min} and {max}")

    def by_hue(
        self,
        theta: float = 0,
        range: float = 45,
        n: int = 1,
        exclude: Optional[ExcludeList] = (),
    ) -> Any:
        """Does: Random swatch(es) whose hue lies within theta ± range degrees.

        theta is measured around the hue wheel (0 = red, 120 = green, 240 = blue).
        """
        pool = self._filtered(exclude, lambda s: polar_between(s["hsla"][0], theta, range))
        return self._select(pool, n, f"within hue range {theta}±{range}")

    def by_saturation(
        self,
        min: float = 0,
        max: float = 1,
        n: int = 1,
        exclude: Optional[ExcludeList] = (),
    ) -> Any:
        """Does: Random swatch(es) with HSL saturation (as a 0..1 fraction) in [min, max]."""
        pool = self._filtered(exclude, lambda s: between(s["hsla"][1] / 100, min, max))
        return self._select(pool, n, f"with saturation between {min} and {max}")

    def by_lightness(
        self,
        min: float = 0,
        max: float = 1,
        n: int = 1,
        exclude: Optional[ExcludeList] = (),
    ) -> Any:
        """Does: Random swatch(es) with HSL lightness (as a 0..1 fraction) in [min, max]."""
        pool = self._filtered(exclude, lambda s: between(s["hsla"][2] / 100, min, max))
        return self._select(pool, n, f"with lightness between {min} and {max}")

    def by_hsl(
        self,
        hue: Sequence[float] = (0, 180),
        saturation: Sequence[float] = (0, 1),
        lightness: Sequence[float] = (0, 1),
        n: int = 1,
        exclude: Optional[ExcludeList] = (),
    ) -> Any:
        """Does: Random swatch(es) matching all three HSL ranges.

        Args:
            hue: (theta, range) in degrees; the default admits the whole wheel.
            saturation: (min, max) as 0..1 fractions.
            lightness: (min, max) as 0..1 fractions.
        """
        theta, spread = hue
        s_min, s_max = saturation
        l_min, l_max = lightness

        def keep(s: Mapping[str, Any]) -> bool:
            h, sat, light, _ = s["hsla"]
            return (
                polar_between(h, theta, spread)
                and between(sat / 100, s_min, s_max)
                and between(light / 100, l_min, l_max)
            )

        pool = self._filtered(exclude, keep)
        return self._select(
            pool,
            n,
            f"within HSL ranges ({theta}±{spread}, {s_min}-{s_max}, {l_min}-{l_max})",
        )


def create_palette(
    swatches: Iterable[Mapping[str, Any]], log: bool = True, **kwargs: Any
) -> PaletteIndex:
    """Does: Build a PaletteIndex; keyword args (rng, sink) pass through."""
    return PaletteIndex(swatches, log, **kwargs)
