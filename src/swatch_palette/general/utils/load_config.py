# src/swatch_palette/general/utils/load_config.py

"""Load palette JSON files from a <data/> directory with caching and typed coercions.

Modes:
- "raw"       -> return parsed JSON as-is
- "swatches"  -> return tuple of read-only swatch records (each with str `id` and `hex`)

A "swatches" file is either a bare JSON list of swatch objects or an object
holding that list under the "swatches" key. Used by `load_palette`, the CLI demo,
and tests needing hot reload.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType, TracebackType
from typing import Any, Literal, overload

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "swatches"]
__all__ = [
    "Mode",
    "load_config",
    "load_palette",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested palette file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing fails for a palette file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key includes: path, mtime, mode, encoding
_CONFIG_CACHE: dict[tuple[Path, float, str, str], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Compute candidate 'data'/'Data' directories walking up from start."""
    start = (start or Path(__file__)).resolve()
    cands: list[Path] = []
    for p in [start, *start.parents]:
        for name in ("data", "Data"):
            cands.append((p / name).resolve())
    return cands


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def _env_data_dir() -> Path | None:
    """Resolve data dir from env if set."""
    for var in ("DATA_DIR", "SWATCH_PALETTE_DATA_DIR"):
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return None


def _coerce_swatches(data: Any, name: str) -> tuple[Mapping[str, Any], ...]:
    """Check the swatch list shape and copy each record into a read-only mapping."""
    if isinstance(data, Mapping):
        if "swatches" not in data:
            raise ConfigTypeError(f"{name}: object palette must carry a 'swatches' list")
        data = data["swatches"]
    if not isinstance(data, list):
        raise ConfigTypeError(
            f"{name}: expected list of swatches, got {type(data).__name__}"
        )

    out: list[Mapping[str, Any]] = []
    for i, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise ConfigTypeError(
                f"{name}: swatch #{i} must be an object, got {type(item).__name__}"
            )
        for key in ("id", "hex"):
            if not isinstance(item.get(key), str):
                raise ConfigTypeError(f"{name}: swatch #{i} is missing a string '{key}'")
        out.append(MappingProxyType(dict(item)))
    return tuple(out)


@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["raw"] = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> Any: ...
@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["swatches"] = "swatches",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> tuple[Mapping[str, Any], ...]: ...


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> Any:
    """Load <data>/<file>.json, parse, coerce by mode, and cache results."""
    # Resolve base directory: explicit > env override > discovery
    if base_dir is None:
        base_dir = _env_data_dir() or _default_data_dir()

    data_dir = Path(base_dir).resolve()

    # Normalize file path and enforce staying under data_dir
    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    # mtime-based cache key for auto-invalidation when file changes
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, encoding)

    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
            return _CONFIG_CACHE[cache_key]

    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if mode == "raw":
        result: Any = data
    elif mode == "swatches":
        result = _coerce_swatches(data, path.name)
    else:
        raise ValueError(f"Unknown mode '{mode}'")

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = result
        log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)

    return result


def load_palette(
    name: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
) -> tuple[Mapping[str, Any], ...]:
    """Load the swatch records of <data>/<name>.json, ready for PaletteIndex."""
    return load_config(name, mode="swatches", base_dir=base_dir)


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Temporarily set the data directory via env for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get("DATA_DIR")
        os.environ["DATA_DIR"] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop("DATA_DIR", None)
        else:
            os.environ["DATA_DIR"] = self._old
        clear_config_cache()
