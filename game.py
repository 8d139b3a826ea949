from __future__ import annotations

# Facade module that re-exports Threes core functionality.
# Used by the Flask app and tests; single-responsibility modules live under threes_core/*.

from threes_core.grid import Coord, Direction, Grid  # noqa: F401
from threes_core.moves import Move, TilePosition, merge_values, shift_line  # noqa: F401
from threes_core.projection import extract_line, line_coord, line_coords, write_line  # noqa: F401
from threes_core.rules import (  # noqa: F401
    NoSpawnCellError,
    TileValueError,
    initialize_grid,
    random_tile_position,
    random_tile_value,
    score_for_value,
    spawn_edge,
    total_score,
)
from threes_core.rng import IntSource, ScriptedSource, make_source  # noqa: F401
from threes_core.state import GameState, ShiftPhase  # noqa: F401
from threes_core.board import Board, shift_grid_lines  # noqa: F401


def main() -> None:
    # CLI driver delegated to threes_core.cli
    from threes_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
