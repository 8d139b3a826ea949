from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .config import trace
from .grid import Direction, Grid
from .moves import Move, TilePosition, shift_line
from .projection import extract_line, line_coords, write_line
from .rng import IntSource, make_source
from .rules import initialize_grid, random_tile_position, random_tile_value, total_score
from .state import GameState, ShiftPhase


def shift_grid_lines(grid: Grid, direction: Direction) -> Tuple[Grid, List[Move]]:
    """Shifts every row/column of the grid once in the given direction. Pure."""
    n = grid.size
    # One working copy for all lines; the result grid is built once at the end.
    cells = list(grid.cells)
    moves: List[Move] = []
    for i in range(n):
        coords = line_coords(i, direction, n)
        shifted, line_moves = shift_line([cells[r * n + c] for (r, c) in coords])
        if not line_moves:
            continue
        for m in line_moves:
            moves.append(m.placed(i, direction, coords[m.old_index], coords[m.new_index]))
        for (r, c), v in zip(coords, shifted):
            cells[r * n + c] = v
    if not moves:
        return grid, moves
    return Grid(size=n, cells=tuple(cells)), moves


class Board:
    """
    A game of Threes: an n x n grid of tiles plus the bookkeeping for one move at a time.

    A move is played in two steps. shift_grid() slides every row or column one step and
    leaves the shift pending; the caller then either undo()es it or calls
    commit_new_tile(), which drops the previewed next tile on the edge opposite the
    shift and updates the score.
    """

    def __init__(self, size: int, rng: Optional[IntSource] = None):
        self._rng: IntSource = rng if rng is not None else make_source()
        self._grid: Grid = initialize_grid(size, self._rng)
        self._previous: Grid = self._grid
        self._score = 0
        self._next_tile_value = random_tile_value(self._rng)
        self._last_direction: Optional[Direction] = None
        self._phase = ShiftPhase.IDLE

    # ---------- Accessors ----------

    @property
    def size(self) -> int:
        return self._grid.size

    @property
    def score(self) -> int:
        return self._score

    @property
    def next_tile_value(self) -> int:
        """Value of the tile the next commit_new_tile() will place."""
        return self._next_tile_value

    @property
    def last_direction(self) -> Optional[Direction]:
        return self._last_direction

    @property
    def phase(self) -> ShiftPhase:
        return self._phase

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def can_undo(self) -> bool:
        return self._phase.is_pending

    def get_cell(self, row: int, col: int) -> int:
        return self._grid.at(row, col)

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Overwrites one cell. Test setup only: no score update, no phase change."""
        self._grid = self._grid.with_cell(row, col, value)

    def snapshot(self) -> GameState:
        return GameState(
            grid=self._grid,
            score=self._score,
            next_tile_value=self._next_tile_value,
            last_direction=self._last_direction,
            phase=self._phase,
        )

    def pretty(self) -> str:
        return self._grid.pretty()

    # ---------- Line projection ----------

    def extract_line(self, index: int, direction: Direction) -> Tuple[int, ...]:
        return extract_line(self._grid, index, direction)

    def write_line(self, line: Sequence[int], index: int, direction: Direction) -> None:
        self._grid = write_line(self._grid, line, index, direction)

    # ---------- Playing ----------

    def can_shift(self, direction: Direction) -> bool:
        """True if shifting in this direction would change the grid. Does not modify the board."""
        shifted, _ = shift_grid_lines(self._grid, direction)
        return shifted != self._grid

    def is_game_over(self) -> bool:
        return not any(self.can_shift(d) for d in Direction)

    def shift_grid(self, direction: Direction) -> Optional[List[Move]]:
        """
        Shifts the grid one step. Returns the moved/merged cells, or None when nothing
        moved (in which case there is no pending shift to undo or commit).
        """
        self._previous = self._grid
        shifted, moves = shift_grid_lines(self._grid, direction)
        if shifted == self._previous:
            self._last_direction = None
            self._phase = ShiftPhase.IDLE
            trace('board', f"shift {direction.name}: no change")
            return None
        self._grid = shifted
        self._last_direction = direction
        self._phase = ShiftPhase.SHIFT_PENDING
        trace('board', f"shift {direction.name}: {len(moves)} moves")
        return moves

    def undo(self) -> bool:
        """Reverts the pending shift. False if there is none."""
        if not self._phase.is_pending:
            return False
        self._grid = self._previous
        self._phase = ShiftPhase.RESOLVED
        trace('board', 'undo')
        return True

    def commit_new_tile(self) -> Optional[TilePosition]:
        """
        Completes the pending shift by placing the next tile on the edge opposite the
        shift, then refreshes the score and draws the following tile value.
        Returns None if there is no pending shift. Raises NoSpawnCellError (and leaves
        the shift pending) if that edge is full.
        """
        if not self._phase.is_pending:
            return None
        pos = random_tile_position(self._grid, self._rng, self._last_direction)
        if pos is None:
            return None
        tile = pos.with_value(self._next_tile_value)
        grid = self._grid.with_cell(tile.row, tile.col, tile.value)
        score = total_score(grid)
        self._grid = grid
        self._score = score
        self._next_tile_value = random_tile_value(self._rng)
        self._phase = ShiftPhase.RESOLVED
        trace('board', f"new tile {tile.value} at ({tile.row}, {tile.col}); score {self._score}")
        return tile
