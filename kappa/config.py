from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


DEFAULT_LOG_LEVEL = 'WARNING'
DEFAULT_REPL_HOST = '127.0.0.1'
DEFAULT_REPL_PORT = 8765


def paths_from_env(var: str, defaults: Iterable[Path] = ()) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def int_from_env(var: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(var, '').strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_prelude_paths() -> List[Path]:
    return paths_from_env('KAPPA_PRELUDE_PATH')


def parse_log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"not a logging level: {name!r}")
    return level


def get_log_level() -> int:
    name = os.environ.get('KAPPA_LOG_LEVEL', '').strip() or DEFAULT_LOG_LEVEL
    try:
        return parse_log_level(name)
    except ValueError:
        raise ValueError(f"KAPPA_LOG_LEVEL is not a logging level: {name!r}") from None


def get_recursion_limit() -> Optional[int]:
    # None leaves Python's own limit in place
    return int_from_env('KAPPA_RECURSION_LIMIT', None)


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get('KAPPA_REPL_HOST', '').strip() or DEFAULT_REPL_HOST
    port = int_from_env('KAPPA_REPL_PORT', DEFAULT_REPL_PORT)
    return host, port
