from __future__ import annotations

import os
from typing import Optional

_TRUTHY = ('1', 'true', 'yes', 'on')


def debug_enabled() -> bool:
    """Set THREES_DEBUG=1 to print diagnostic traces."""
    return os.getenv('THREES_DEBUG', '0').lower() in _TRUTHY


def trace(tag: str, message: str) -> None:
    if debug_enabled():
        print(f"[{tag}] {message}")


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'{name} must be an integer, got {raw!r}') from None


def default_size() -> int:
    return _int_env('THREES_SIZE', 4)  # type: ignore[return-value]


def default_seed() -> Optional[int]:
    return _int_env('THREES_SEED', None)


def max_games() -> int:
    return _int_env('THREES_MAX_GAMES', 1000)  # type: ignore[return-value]


def max_size() -> int:
    """Largest grid the HTTP API will create (THREES_MAX_SIZE, default 16)."""
    return _int_env('THREES_MAX_SIZE', 16)  # type: ignore[return-value]
