# tictactoe/analyzer.py
from typing import Any, Dict, List, Optional, Sequence, Tuple

from tictactoe.core.board import Game
from tictactoe.core.evaluator import UNDECIDED
from tictactoe.core.moves import apply_move, generate_moves, played
from tictactoe.core.search import SearchEngine
from tictactoe.core.types import Move, Player

# value drop (best - played) in the -1/0/+1 domain
TH_BEST = 0
TH_MISTAKE = 1
# > TH_MISTAKE => "Blunder" (a won game thrown into a lost one)


class Analyzer:
    def __init__(self, search_engine: Optional[SearchEngine] = None):
        self.search_engine = search_engine or SearchEngine()

    def move_values(self, game: Game) -> Dict[Move, int]:
        """
        Exact value of every legal move, from the point of view of the side
        to move. The game is left as it was found.
        """
        values = {}
        for move in generate_moves(game):
            with played(game, move):
                result = self.search_engine.search_best_move(game)
            # the reply search scores from the opponent's side
            values[move] = -result.value
        return values

    def classify_move(self, game: Game, move: Move) -> Dict[str, Any]:
        """
        Label ``move`` against the best available alternative.
        - game: position BEFORE the move (unchanged by this function).
        - move: the player's chosen move.
        Returns a dict with label, values and the engine's preferred move.
        """
        if self.search_engine.evaluator.evaluate(game) != UNDECIDED:
            raise ValueError("Game is already over")
        values = self.move_values(game)
        if move not in values:
            raise ValueError(f"Move {move} is not legal in this position")

        best = self.search_engine.search_best_move(game)
        value = values[move]
        delta = best.value - value

        if delta <= TH_BEST:
            label = "Best move"
        elif delta <= TH_MISTAKE:
            label = "Mistake"
        else:
            label = "Blunder"

        return {
            "move": (move.row, move.col),
            "value": value,
            "best_move": (best.move.row, best.move.col),
            "best_value": best.value,
            "delta": delta,
            "label": label,
            "player": game.turn.value,
        }

    def analyze_game(self, first: Player, size: int, moves: Sequence[Tuple[int, int]]) -> List[Dict[str, Any]]:
        """
        Replay ``moves`` from an empty board, classifying each one.
        Stops early if the game is decided before the list runs out.
        """
        game = Game(first, size)
        report = []
        for row, col in moves:
            if self.search_engine.evaluator.evaluate(game) != UNDECIDED:
                break
            move = Move(row, col)
            report.append(self.classify_move(game, move))
            apply_move(game, move)
        return report
