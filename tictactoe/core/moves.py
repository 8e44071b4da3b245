"""Move generation and turn-aware move application."""

from contextlib import contextmanager
from typing import Iterator, List

from tictactoe.core.board import Game
from tictactoe.core.types import Cell, Move


def generate_moves(game: Game) -> List[Move]:
    """Empty cells in row-major order. Empty list iff the board is full."""
    return [
        Move(row, col)
        for row in range(game.size)
        for col in range(game.size)
        if game.get_piece(row, col) is Cell.EMPTY
    ]


def apply_move(game: Game, move: Move) -> Game:
    """Place the side-to-move's mark and pass the turn."""
    game.apply_move(move, game.turn.mark)
    game.turn = game.turn.other
    return game


def undo_move(game: Game, move: Move) -> Game:
    """Clear the cell and hand the turn back."""
    game.undo_move(move)
    game.turn = game.turn.other
    return game


@contextmanager
def played(game: Game, move: Move) -> Iterator[Game]:
    """Apply ``move`` for the duration of the block; always undone on exit."""
    apply_move(game, move)
    try:
        yield game
    finally:
        undo_move(game, move)
