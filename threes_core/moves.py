from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from .grid import Coord, Direction


@dataclass(frozen=True)
class Move:
    """
    One cell that moved (or merged) during a shift.
    Indices are positions within the oriented line; row_or_column, direction and the
    absolute origin/target coordinates are filled in once the line is placed on the grid.
    """
    old_index: int
    new_index: int
    value: int
    operands: Optional[Tuple[int, int]] = None  # (moved value, value it merged into)
    row_or_column: Optional[int] = None
    direction: Optional[Direction] = None
    origin: Optional[Coord] = None
    target: Optional[Coord] = None

    @property
    def is_merge(self) -> bool:
        return self.operands is not None

    def placed(self, row_or_column: int, direction: Direction, origin: Coord, target: Coord) -> 'Move':
        return replace(self, row_or_column=row_or_column, direction=direction, origin=origin, target=target)


@dataclass(frozen=True)
class TilePosition:
    """A newly spawned tile."""
    row: int
    col: int
    value: int

    def with_value(self, value: int) -> 'TilePosition':
        return replace(self, value=value)


def merge_values(a: int, b: int) -> int:
    """Result of merging two tiles, or 0 when they can't merge. 1 merges only with 2; 3 and up merge with an equal value."""
    if a > 0 and b > 0 and (a + b == 3 or (a >= 3 and a == b)):
        return a + b
    return 0


def shift_line(line: Sequence[int]) -> Tuple[Tuple[int, ...], List[Move]]:
    """
    Shifts one oriented line toward index 0 in a single left-to-right pass.

    At each i an empty cell pulls in its right neighbour; a non-empty cell absorbs its
    right neighbour when the two can merge. Returns the new line and the moves made
    (empty when nothing changed). The input is not modified.
    """
    arr = list(line)
    moves: List[Move] = []
    for i in range(len(arr) - 1):
        if arr[i] == 0:
            arr[i] = arr[i + 1]
            arr[i + 1] = 0
            # Pulling an empty cell left is not a move.
            if arr[i] != 0:
                moves.append(Move(old_index=i + 1, new_index=i, value=arr[i]))
        else:
            merged = merge_values(arr[i], arr[i + 1])
            if merged != 0:
                operands = (arr[i + 1], arr[i])
                arr[i] = merged
                arr[i + 1] = 0
                moves.append(Move(old_index=i + 1, new_index=i, value=merged, operands=operands))
    return tuple(arr), moves
