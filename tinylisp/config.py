from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


DEFAULT_MAX_DEPTH = 10000

_TRUTHY = {"1", "true", "yes", "on"}


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_search_roots() -> List[Path]:
    """Directories searched by `import`, from TINYLISP_PATH."""
    return paths_from_env('TINYLISP_PATH', [Path.cwd()])


def get_max_depth() -> int:
    raw = os.environ.get('TINYLISP_MAX_DEPTH')
    if not raw:
        return DEFAULT_MAX_DEPTH
    try:
        depth = int(raw)
    except ValueError:
        raise ValueError(f"TINYLISP_MAX_DEPTH must be an integer, got {raw!r}") from None
    if depth < 1:
        raise ValueError(f"TINYLISP_MAX_DEPTH must be positive, got {depth}")
    return depth


def get_shared_frames() -> bool:
    # Legacy closure behaviour: one frame per function instead of one per call
    return os.environ.get('TINYLISP_SHARED_FRAMES', '').strip().lower() in _TRUTHY
