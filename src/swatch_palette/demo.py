# src/swatch_palette/demo.py
import argparse
import json
import sys
from pathlib import Path


def _plain(result):
    if isinstance(result, list):
        return [_plain(r) for r in result]
    return dict(result)


def main(argv=None):
    """CLI demo: load a palette file from the data dir and run one query against it."""
    from .general.utils.load_config import (
        ConfigFileNotFound,
        ConfigParseError,
        ConfigTypeError,
        DataDirNotFound,
        load_palette,
    )
    from .palette import PaletteIndex, SeededRandom

    parser = argparse.ArgumentParser(
        prog="swatch-palette-demo",
        description="Query a palette: random pick, lookup by id, or filter by HSL/luminance.",
    )
    parser.add_argument("palette", help="Palette file name under the data dir (e.g. basic)")
    query = parser.add_mutually_exclusive_group()
    query.add_argument("--id", dest="swatch_id", help="Look up one swatch by id")
    query.add_argument("--hue", nargs=2, type=float, metavar=("THETA", "RANGE"))
    query.add_argument("--luminance", nargs=2, type=float, metavar=("MIN", "MAX"))
    query.add_argument("--saturation", nargs=2, type=float, metavar=("MIN", "MAX"))
    query.add_argument("--lightness", nargs=2, type=float, metavar=("MIN", "MAX"))
    query.add_argument(
        "--hsl",
        nargs=6,
        type=float,
        metavar=("THETA", "RANGE", "SMIN", "SMAX", "LMIN", "LMAX"),
    )
    parser.add_argument("-n", type=int, default=1, help="Number of swatches to return")
    parser.add_argument(
        "--exclude", action="append", default=[], help="Swatch id to exclude (repeatable)"
    )
    parser.add_argument("--seed", help="Seed for reproducible picks")
    parser.add_argument("--data-dir", type=Path, default=None, dest="data_dir")
    parser.add_argument("--quiet", action="store_true", help="Silence failure diagnostics")

    args = parser.parse_args(argv)

    try:
        records = load_palette(args.palette, base_dir=args.data_dir)
        index = PaletteIndex(records, log=not args.quiet, rng=SeededRandom(args.seed))
    except (
        DataDirNotFound,
        ConfigFileNotFound,
        ConfigParseError,
        ConfigTypeError,
        ValueError,
    ) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    if args.swatch_id is not None:
        result = index.by_id(args.swatch_id)
    elif args.hue:
        result = index.by_hue(*args.hue, n=args.n, exclude=args.exclude)
    elif args.luminance:
        result = index.by_luminance(*args.luminance, n=args.n, exclude=args.exclude)
    elif args.saturation:
        result = index.by_saturation(*args.saturation, n=args.n, exclude=args.exclude)
    elif args.lightness:
        result = index.by_lightness(*args.lightness, n=args.n, exclude=args.exclude)
    elif args.hsl:
        theta, spread, s_min, s_max, l_min, l_max = args.hsl
        result = index.by_hsl(
            (theta, spread), (s_min, s_max), (l_min, l_max), n=args.n, exclude=args.exclude
        )
    else:
        result = index.random(args.n, args.exclude)

    print(json.dumps(_plain(result), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
