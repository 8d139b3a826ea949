from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .grid import Direction, Grid


class ShiftPhase(Enum):
    IDLE = 'idle'                    # no shift yet, or the last shift changed nothing
    SHIFT_PENDING = 'shift_pending'  # shifted; waiting for undo or a new tile
    RESOLVED = 'resolved'            # last shift was undone or followed by a new tile

    @property
    def is_pending(self) -> bool:
        return self is ShiftPhase.SHIFT_PENDING


@dataclass(frozen=True)
class GameState:
    """Read-only snapshot of a board, for display and serialisation."""
    grid: Grid
    score: int
    next_tile_value: int
    last_direction: Optional[Direction]
    phase: ShiftPhase

    @property
    def size(self) -> int:
        return self.grid.size

    @property
    def can_undo(self) -> bool:
        return self.phase.is_pending
