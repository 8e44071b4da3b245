from typing import Optional

from tictactoe.config import CONFIG
from tictactoe.core import moves
from tictactoe.core.board import Game
from tictactoe.core.evaluator import Outcome
from tictactoe.core.search import SearchEngine
from tictactoe.core.types import Move, Player


class Model:
    """The operations a driving UI needs: start, move, undo, best move, outcome."""

    cross = Player.CROSS
    nought = Player.NOUGHT

    def __init__(self, engine: Optional[SearchEngine] = None):
        self.search = engine or SearchEngine()

    def __str__(self):
        return CONFIG.ui.engine_name

    def game_start(self, first: Player, size: int) -> Game:
        return Game(first, size)

    def create_move(self, row: int, col: int) -> Move:
        return Move(row, col)

    def apply_move(self, game: Game, move: Move) -> Game:
        return moves.apply_move(game, move)

    def undo_move(self, game: Game, move: Move) -> Game:
        return moves.undo_move(game, move)

    def find_best_move(self, game: Game) -> Optional[Move]:
        """Optimal move for the side to move; None if the game is already over."""
        return self.search.find_best_move(game)

    def game_outcome(self, game: Game) -> Outcome:
        return self.search.evaluator.evaluate(game)
