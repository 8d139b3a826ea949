from __future__ import annotations

import random
from typing import Iterable, List, Optional, Protocol


class IntSource(Protocol):
    """Anything that can draw a uniform integer in [0, n). random.Random qualifies."""

    def randrange(self, n: int) -> int:
        ...


def make_source(seed: Optional[int] = None) -> random.Random:
    """Creates the default random source, seeded when a seed is given."""
    return random.Random(seed)


class ScriptedSource:
    """
    Replays a fixed sequence of integers, one per randrange() call.
    Used to make tile placement fully deterministic in tests.
    """

    def __init__(self, values: Iterable[int]):
        self._values: List[int] = [int(v) for v in values]
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._pos

    def randrange(self, n: int) -> int:
        if self._pos >= len(self._values):
            raise ValueError('ScriptedSource exhausted')
        v = self._values[self._pos]
        if not 0 <= v < n:
            raise ValueError(f'Scripted value {v} outside [0, {n})')
        self._pos += 1
        return v
