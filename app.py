from __future__ import annotations

import threading
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

from game import Board, Direction, Move, NoSpawnCellError, TilePosition, make_source
from threes_core.config import default_seed, default_size, max_games, max_size, trace

app = Flask(__name__)

# Read once at import so a bad value fails at startup, not per request
MAX_GAMES = max(1, max_games())
MAX_SIZE = max_size()


@dataclass
class GameSession:
    """A board plus the lock that serialises every operation on it."""
    board: Board
    lock: threading.Lock = field(default_factory=threading.Lock)


_games: "OrderedDict[str, GameSession]" = OrderedDict()
_games_lock = threading.Lock()


def _register(board: Board) -> str:
    game_id = uuid.uuid4().hex
    with _games_lock:
        _games[game_id] = GameSession(board=board)
        # Evict oldest games beyond the cap
        while len(_games) > MAX_GAMES:
            old_id, _ = _games.popitem(last=False)
            trace('api', f"evicted game {old_id}")
    return game_id


def _lookup(game_id: Any) -> Optional[GameSession]:
    if not isinstance(game_id, str):
        return None
    with _games_lock:
        return _games.get(game_id)


def reset_games() -> None:
    """Drops every stored game."""
    with _games_lock:
        _games.clear()


# ---------- JSON helpers ----------

def state_to_json(board: Board) -> Dict[str, Any]:
    s = board.snapshot()
    return {
        "size": int(s.size),
        "grid": s.grid.rows(),
        "score": int(s.score),
        "nextTileValue": int(s.next_tile_value),
        "lastDirection": s.last_direction.name if s.last_direction is not None else None,
        "phase": s.phase.value,
        "canUndo": s.can_undo,
        "gameOver": board.is_game_over(),
    }


def move_to_json(m: Move) -> Dict[str, Any]:
    return {
        "from": list(m.origin) if m.origin is not None else None,
        "to": list(m.target) if m.target is not None else None,
        "value": int(m.value),
        "rowOrColumn": m.row_or_column,
        "direction": m.direction.name if m.direction is not None else None,
        "merge": m.is_merge,
        "operands": list(m.operands) if m.operands is not None else None,
    }


def tile_to_json(t: TilePosition) -> Dict[str, Any]:
    return {"row": int(t.row), "col": int(t.col), "value": int(t.value)}


def _error(message: str, status: int) -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": message}), status


def _json_body() -> Optional[Dict[str, Any]]:
    """Request body as a dict; missing or unparseable bodies count as {}. None for non-object JSON."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _parse_size(value: Any) -> int:
    """Grid size from JSON: an integer (or integral number/string) in [2, MAX_SIZE]."""
    if isinstance(value, bool):
        raise ValueError(f"size must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"size must be an integer, got {value!r}")
        value = int(value)
    size = int(value)
    if size > MAX_SIZE:
        raise ValueError(f"size {size} exceeds maximum {MAX_SIZE}")
    return size


def _session_from_body(body: Dict[str, Any]) -> Tuple[Optional[GameSession], Any]:
    """Returns (session, None) or (None, error response)."""
    if "id" not in body:
        return None, _error("id required", 400)
    sess = _lookup(body.get("id"))
    if sess is None:
        return None, _error("unknown game id", 404)
    return sess, None


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    if body is None:
        return _error("JSON object required", 400)
    try:
        size = _parse_size(body.get("size", default_size()))
        seed_in = body.get("seed", default_seed())
        seed = int(seed_in) if seed_in is not None else None
        board = Board(size, make_source(seed))
    except (TypeError, ValueError) as e:
        return _error(f"bad request: {e}", 400)
    game_id = _register(board)
    trace('api', f"new game {game_id} size={size} seed={seed}")
    return jsonify({"ok": True, "id": game_id, "state": state_to_json(board)})


@app.get("/api/state/<game_id>")
def api_state(game_id: str) -> Any:
    sess = _lookup(game_id)
    if sess is None:
        return _error("unknown game id", 404)
    with sess.lock:
        return jsonify({"ok": True, "state": state_to_json(sess.board)})


@app.post("/api/shift")
def api_shift() -> Any:
    body = _json_body()
    if body is None:
        return _error("JSON object required", 400)
    sess, err = _session_from_body(body)
    if sess is None:
        return err
    try:
        direction = Direction.parse(body.get("direction", ""))
    except ValueError as e:
        return _error(str(e), 400)
    with sess.lock:
        moves: Optional[List[Move]] = sess.board.shift_grid(direction)
        return jsonify({
            "ok": True,
            "moved": moves is not None,
            "moves": [move_to_json(m) for m in (moves or [])],
            "state": state_to_json(sess.board),
        })


@app.post("/api/undo")
def api_undo() -> Any:
    body = _json_body()
    if body is None:
        return _error("JSON object required", 400)
    sess, err = _session_from_body(body)
    if sess is None:
        return err
    with sess.lock:
        undone = sess.board.undo()
        return jsonify({"ok": True, "undone": undone, "state": state_to_json(sess.board)})


@app.post("/api/tile")
def api_tile() -> Any:
    body = _json_body()
    if body is None:
        return _error("JSON object required", 400)
    sess, err = _session_from_body(body)
    if sess is None:
        return err
    with sess.lock:
        try:
            tile = sess.board.commit_new_tile()
        except NoSpawnCellError as e:
            return jsonify({"ok": False, "error": str(e), "state": state_to_json(sess.board)}), 409
        return jsonify({
            "ok": True,
            "tile": tile_to_json(tile) if tile is not None else None,
            "state": state_to_json(sess.board),
        })


if __name__ == "__main__":
    app.run(debug=False)
