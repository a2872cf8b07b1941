from __future__ import annotations
import os
from pathlib import Path


# Resolve installation dir (peano package directory)
_PEANO_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _PEANO_DIR / 'prelude'
_DEFAULT_RECURSION_LIMIT = 10_000

_TRUTHY = {'1', 'true', 'yes', 'on'}


def get_prelude_root() -> Path:
    raw = os.environ.get('PEANO_PRELUDE_PATH', '').strip()
    p = Path(raw) if raw else _DEFAULT_PRELUDE_DIR
    # a file path selects the directory that holds it
    return p if p.is_dir() else p.parent


def get_strict_mode() -> bool:
    return os.environ.get('PEANO_STRICT', '').strip().lower() in _TRUTHY


def get_recursion_limit() -> int:
    raw = os.environ.get('PEANO_RECURSION_LIMIT', '').strip()
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT
    return limit if limit > 0 else _DEFAULT_RECURSION_LIMIT
