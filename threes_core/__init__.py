"""
Threes core Python package.

Rules and state for a "Threes"-style sliding tile puzzle, split into small
pure-logic modules so each can be tested on its own.
Modules:
- grid.py: Grid, Direction, Coord
- moves.py: Move, TilePosition, merge_values, shift_line
- projection.py: reading/writing oriented rows and columns
- rules.py: scoring, starting grid, random tile value and position
- state.py: ShiftPhase, GameState
- board.py: Board (shift / undo / new tile)
- cli.py: command-line replay driver
"""
