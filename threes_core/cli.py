from __future__ import annotations

import argparse
from typing import List, Optional

from .board import Board
from .config import default_seed, default_size
from .grid import Direction
from .rng import make_source
from .rules import NoSpawnCellError

UNDO = 'Z'


def parse_commands(text: str) -> List[str]:
    """Splits a command string such as 'LLU Z,d' into upper-case letters L/R/U/D/Z."""
    out: List[str] = []
    for ch in text.upper():
        if ch in ' ,;':
            continue
        if ch != UNDO and ch not in {d.value for d in Direction}:
            raise ValueError(f'Unknown command {ch!r}; use L, R, U, D or Z')
        out.append(ch)
    return out


def _print_board(board: Board) -> None:
    print(board.pretty())
    print(f"score={board.score} next={board.next_tile_value}")


def replay(board: Board, commands: List[str]) -> int:
    """
    Plays the commands on the board. A shift is committed with a new tile unless the
    following command is an undo. Returns the number of shifts that changed the grid.
    """
    played = 0
    for i, cmd in enumerate(commands):
        if cmd == UNDO:
            print('undo:', 'ok' if board.undo() else 'nothing to undo')
            _print_board(board)
            continue
        direction = Direction.parse(cmd)
        moves = board.shift_grid(direction)
        if moves is None:
            print(f"{direction.name}: no tiles moved")
            continue
        played += 1
        merges = sum(1 for m in moves if m.is_merge)
        print(f"{direction.name}: {len(moves)} moved, {merges} merged")
        undo_next = i + 1 < len(commands) and commands[i + 1] == UNDO
        if not undo_next:
            tile = board.commit_new_tile()
            if tile is not None:
                print(f"new tile {tile.value} at ({tile.row}, {tile.col})")
        _print_board(board)
    return played


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Threes rules engine: replay a sequence of moves')
    parser.add_argument('--size', type=int, default=None, help='Grid size (NxN), default THREES_SIZE or 4')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed, default THREES_SEED')
    parser.add_argument('--moves', default='', help='Commands: L, R, U, D to shift, Z to undo')
    args = parser.parse_args(argv)

    size = args.size if args.size is not None else default_size()
    seed = args.seed if args.seed is not None else default_seed()
    try:
        commands = parse_commands(args.moves)
        board = Board(size, make_source(seed))
    except ValueError as e:
        parser.error(str(e))

    print('Initial board:')
    _print_board(board)
    try:
        played = replay(board, commands)
    except NoSpawnCellError as e:
        print(f"error: {e}")
        return
    print(f"\nPlayed {played} shifts. Final score: {board.score}")
    if board.is_game_over():
        print('Game over: no tile can move.')


if __name__ == '__main__':
    main()
