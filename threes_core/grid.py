from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

Coord = Tuple[int, int]


class Direction(Enum):
    """Shift directions. The value is the single-letter code used by the CLI and API."""
    LEFT = 'L'
    RIGHT = 'R'
    UP = 'U'
    DOWN = 'D'

    @classmethod
    def parse(cls, text: str) -> 'Direction':
        """Parses 'left', 'LEFT' or 'L' (any case) into a Direction."""
        key = str(text).strip().upper()
        for d in cls:
            if key == d.name or key == d.value:
                return d
        raise ValueError(f'Unknown direction: {text!r}')


@dataclass(frozen=True)
class Grid:
    """Square grid of tile values; 0 is an empty cell."""
    size: int
    cells: Tuple[int, ...]  # row-major, length == size * size

    @classmethod
    def empty(cls, size: int) -> 'Grid':
        if size <= 0:
            raise ValueError('Grid size must be positive')
        return cls(size=size, cells=(0,) * (size * size))

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> 'Grid':
        """Builds a grid from nested rows; rows must form a square."""
        flat: List[int] = []
        rows = [list(r) for r in rows]
        size = len(rows)
        for r in rows:
            if len(r) != size:
                raise ValueError('Grid rows must form a square')
            flat.extend(int(v) for v in r)
        if size == 0:
            raise ValueError('Grid size must be positive')
        return cls(size=size, cells=tuple(flat))

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        if not (0 <= r < self.size and 0 <= c < self.size):
            raise IndexError(f'Cell ({r}, {c}) outside {self.size}x{self.size} grid')
        return r * self.size + c

    def at(self, r: int, c: int) -> int:
        return self.cells[self.index(r, c)]

    def with_cell(self, r: int, c: int, value: int) -> 'Grid':
        """Returns a copy of the grid with one cell replaced."""
        return self.with_cells([((r, c), value)])

    def with_cells(self, updates: Iterable[Tuple[Coord, int]]) -> 'Grid':
        cells = list(self.cells)
        for (r, c), value in updates:
            cells[self.index(r, c)] = int(value)
        return Grid(size=self.size, cells=tuple(cells))

    def rows(self) -> List[List[int]]:
        n = self.size
        return [list(self.cells[r * n:(r + 1) * n]) for r in range(n)]

    def pretty(self) -> str:
        """Human-readable grid; empty cells as '.'."""
        width = max(len(str(v)) for v in self.cells)
        lines: List[str] = []
        for r in range(self.size):
            row = [(str(v) if v else '.').rjust(width) for v in self.cells[r * self.size:(r + 1) * self.size]]
            lines.append(' '.join(row))
        return '\n'.join(lines)
