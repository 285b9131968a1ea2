from __future__ import annotations
import os
from enum import Enum
from pathlib import Path
from typing import Iterable, List


class Scoping(Enum):
    """Where a called lambda's frame is linked into the scope chain."""

    # Parent is the environment active at the call site.
    DYNAMIC = "dynamic"
    # Parent is the environment active where the lambda was created.
    LEXICAL = "lexical"


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (mlisp package directory)
_MLISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_FILE = _MLISP_DIR / 'prelude' / 'prelude.mlisp'
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_files() -> List[Path]:
    """Prelude sources, in load order. Directories contribute their *.mlisp files."""
    files: List[Path] = []
    for p in paths_from_env('MLISP_PRELUDE_PATH', [_DEFAULT_PRELUDE_FILE]):
        if p.is_dir():
            files.extend(sorted(p.glob('*.mlisp')))
        else:
            files.append(p)
    return files


def get_scoping() -> Scoping:
    raw = os.environ.get('MLISP_SCOPING', '').strip().lower()
    if not raw:
        return Scoping.DYNAMIC
    try:
        return Scoping(raw)
    except ValueError:
        raise ValueError(f"MLISP_SCOPING must be 'dynamic' or 'lexical', got {raw!r}")


def get_recursion_limit() -> int:
    raw = os.environ.get('MLISP_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    return int(raw)


def get_log_level() -> str:
    return os.environ.get('MLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
