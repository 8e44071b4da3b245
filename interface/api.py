"""FastAPI REST interface for the engine."""

import threading

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import List, Optional, assert_never

from tictactoe.config import CONFIG
from tictactoe.core.board import Game
from tictactoe.core.evaluator import UNDECIDED, Draw, Undecided, Win
from tictactoe.core.moves import apply_move, undo_move
from tictactoe.core.search import SearchEngine
from tictactoe.core.types import Cell, Move, Player

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

engine = SearchEngine()
game = Game(Player(CONFIG.search.first_player), CONFIG.search.board_size)
history: List[Move] = []
_game_lock = threading.Lock()


class PositionRequest(BaseModel):
    rows: List[List[str]]
    turn: str = "X"


class MoveRequest(BaseModel):
    row: int
    col: int


class ResetRequest(BaseModel):
    size: Optional[int] = Field(default=None, ge=1)
    first: Optional[str] = None


def _player(mark: str) -> Player:
    try:
        return Player(mark)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown player: {mark!r}")


def _check_size(size: int):
    if size > CONFIG.search.max_size:
        raise HTTPException(status_code=400, detail=f"Board size {size} exceeds limit {CONFIG.search.max_size}")


def _outcome_json():
    outcome = engine.evaluator.evaluate(game)
    match outcome:
        case Win(winner=winner, line=line):
            return {"result": "win", "winner": winner.value, "line": [list(c) for c in line]}
        case Draw():
            return {"result": "draw", "winner": None, "line": None}
        case Undecided():
            return {"result": "undecided", "winner": None, "line": None}
        case _:
            assert_never(outcome)


def _board_json():
    return {
        "size": game.size,
        "rows": game.to_rows(),
        "turn": game.turn.value,
        "outcome": _outcome_json(),
    }


@app.get("/board")
def get_board():
    with _game_lock:
        return _board_json()


@app.get("/outcome")
def get_outcome():
    with _game_lock:
        return _outcome_json()


@app.post("/position")
def set_position(req: PositionRequest):
    global game
    turn = _player(req.turn)
    _check_size(len(req.rows))
    try:
        new_game = Game.from_rows(req.rows, turn)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid position: {e}")
    with _game_lock:
        game = new_game
        history.clear()
        return _board_json()


@app.post("/move")
def make_move(req: MoveRequest):
    move = Move(req.row, req.col)
    with _game_lock:
        if engine.evaluator.evaluate(game) != UNDECIDED:
            raise HTTPException(status_code=400, detail="Game is already over")
        try:
            occupied = game.get_piece(move.row, move.col) is not Cell.EMPTY
        except IndexError as e:
            raise HTTPException(status_code=400, detail=str(e))
        if occupied:
            raise HTTPException(status_code=400, detail=f"Cell {move} is occupied")
        apply_move(game, move)
        history.append(move)
        return _board_json()


@app.post("/undo")
def take_back():
    with _game_lock:
        if not history:
            raise HTTPException(status_code=400, detail="No move to undo")
        undo_move(game, history.pop())
        return _board_json()


@app.post("/search")
def search_move():
    with _game_lock:
        if engine.evaluator.evaluate(game) != UNDECIDED:
            raise HTTPException(status_code=400, detail="Game is already over")
        if game.empty_cells() > CONFIG.search.max_empty_cells:
            raise HTTPException(status_code=400, detail=f"Too many empty cells to search: {game.empty_cells()} > {CONFIG.search.max_empty_cells}")
        search_game = game.copy()

    result = engine.search_best_move(search_game)
    return {
        "best_move": [result.move.row, result.move.col],
        "value": result.value,
        "nodes": result.nodes,
        "turn": search_game.turn.value,
    }


@app.post("/reset")
def reset_board(req: ResetRequest = ResetRequest()):
    global game
    size = req.size or CONFIG.search.board_size
    first = _player(req.first or CONFIG.search.first_player)
    _check_size(size)
    with _game_lock:
        game = Game(first, size)
        history.clear()
        return _board_json()
