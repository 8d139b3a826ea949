from __future__ import annotations

from typing import List, Optional

from .grid import Coord, Direction, Grid
from .moves import TilePosition
from .rng import IntSource


class TileValueError(ValueError):
    """Raised for a tile value that is not 3 doubled some number of times."""


class NoSpawnCellError(RuntimeError):
    """Raised when the spawn edge has no empty cell for a new tile."""


def score_for_value(value: int) -> int:
    """
    Score of a single tile. Values below 3 score nothing; a value reached by doubling
    3 N times scores 3 ** (N + 1), e.g. 48 = 3 * 2**4 scores 3**5 = 243.
    """
    if value < 3:
        return 0
    q, rem = divmod(value, 3)
    # Power of two check: exactly one bit set.
    if rem != 0 or q & (q - 1) != 0:
        raise TileValueError(f'Tile value {value} is not on the canonical doubling sequence')
    n = q.bit_length() - 1
    return 3 ** (n + 1)


def total_score(grid: Grid) -> int:
    """Sum of tile scores over the whole grid."""
    return sum(score_for_value(v) for v in grid.cells)


def initialize_grid(size: int, rng: IntSource) -> Grid:
    """Creates a size x size grid holding a 1 and a 2 in two distinct random cells."""
    if size < 2:
        raise ValueError('Grid size must be at least 2 to hold the starting tiles')
    num_cells = size * size
    # Cells numbered row-major; drawing the second from one fewer cell and skipping
    # over the first keeps every distinct pair equally likely.
    first = rng.randrange(num_cells)
    second = rng.randrange(num_cells - 1)
    if second >= first:
        second += 1
    grid = Grid.empty(size)
    return grid.with_cells([
        (divmod(first, size), 1),
        (divmod(second, size), 2),
    ])


def random_tile_value(rng: IntSource) -> int:
    """Next tile value: 1 or 2 with 40% each, 3 or 6 with 10% each."""
    num = rng.randrange(10)
    if num < 4:
        return 1
    if num < 8:
        return 2
    if num < 9:
        return 3
    return 6


def spawn_edge(size: int, last_direction: Direction) -> List[Coord]:
    """Cells of the edge opposite the shift direction, in row/column order."""
    last = size - 1
    if last_direction is Direction.LEFT:
        return [(r, last) for r in range(size)]
    if last_direction is Direction.RIGHT:
        return [(r, 0) for r in range(size)]
    if last_direction is Direction.UP:
        return [(last, c) for c in range(size)]
    if last_direction is Direction.DOWN:
        return [(0, c) for c in range(size)]
    raise ValueError(f'Unknown direction: {last_direction!r}')


def random_tile_position(grid: Grid, rng: IntSource, last_direction: Optional[Direction]) -> Optional[TilePosition]:
    """
    Picks where the next tile appears: a uniformly chosen empty cell on the edge opposite
    the last shift. The returned position has value 0; the caller assigns the value.
    Returns None when there was no shift.
    """
    if last_direction is None:
        return None
    empty = [(r, c) for (r, c) in spawn_edge(grid.size, last_direction) if grid.at(r, c) == 0]
    if not empty:
        raise NoSpawnCellError(f'No empty cell on the edge opposite {last_direction.name}')
    r, c = empty[rng.randrange(len(empty))]
    return TilePosition(row=r, col=c, value=0)
