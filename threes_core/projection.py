from __future__ import annotations

from typing import List, Sequence, Tuple

from .grid import Coord, Direction, Grid


def line_coords(index: int, direction: Direction, size: int) -> List[Coord]:
    """
    Grid coordinates of row/column `index`, ordered so that position 0 is the edge
    the direction shifts toward:
    LEFT reads the row left to right, RIGHT right to left,
    UP reads the column top to bottom, DOWN bottom to top.
    """
    if not 0 <= index < size:
        raise IndexError(f'Line index {index} outside grid of size {size}')
    forward = range(size)
    backward = range(size - 1, -1, -1)
    if direction is Direction.LEFT:
        return [(index, c) for c in forward]
    if direction is Direction.RIGHT:
        return [(index, c) for c in backward]
    if direction is Direction.UP:
        return [(r, index) for r in forward]
    if direction is Direction.DOWN:
        return [(r, index) for r in backward]
    raise ValueError(f'Unknown direction: {direction!r}')


def line_coord(index: int, position: int, direction: Direction, size: int) -> Coord:
    """Maps a position within an oriented line back to its grid coordinate."""
    return line_coords(index, direction, size)[position]


def extract_line(grid: Grid, index: int, direction: Direction) -> Tuple[int, ...]:
    return tuple(grid.at(r, c) for (r, c) in line_coords(index, direction, grid.size))


def write_line(grid: Grid, line: Sequence[int], index: int, direction: Direction) -> Grid:
    """Returns a new grid with the oriented line written back into row/column `index`."""
    if len(line) != grid.size:
        raise ValueError(f'Line length {len(line)} does not match grid size {grid.size}')
    return grid.with_cells(zip(line_coords(index, direction, grid.size), line))
