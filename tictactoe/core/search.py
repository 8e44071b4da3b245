import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, assert_never

from tictactoe.config import CONFIG
from tictactoe.core.board import Game
from tictactoe.core.evaluator import Draw, Evaluator, Undecided, Win
from tictactoe.core.moves import generate_moves, played
from tictactoe.core.types import Move, Player
from tictactoe.core.utils import print_info

WIN_SCORE = 1
DRAW_SCORE = 0
LOSS_SCORE = -1


@dataclass
class NodeCounter:
    visits: int = 0


@dataclass
class SearchResult:
    move: Optional[Move]
    value: int
    nodes: int
    elapsed: float = 0.0


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None, alpha_beta: Optional[bool] = None,
                 verbose: Optional[bool] = None):
        self.evaluator = evaluator or Evaluator()
        self.alpha_beta = CONFIG.search.alpha_beta if alpha_beta is None else alpha_beta
        self.verbose = CONFIG.search.verbose if verbose is None else verbose

        self._thread: Optional[threading.Thread] = None

    def find_best_move(self, game: Game) -> Optional[Move]:
        return self.search_best_move(game).move

    def search_best_move(self, game: Game) -> SearchResult:
        """Full-depth search from the side to move.

        The game is mutated during the search and handed back exactly as it
        was received. On a decided position the move is None.
        """
        counter = NodeCounter()
        start_time = time.time()

        move, value = self._search(game, LOSS_SCORE, WIN_SCORE, game.turn, counter)

        elapsed = time.time() - start_time
        if self.verbose:
            print_info(game.size, value, counter.visits, elapsed, move)
        return SearchResult(move, value, counter.visits, elapsed)

    def start_search(self, game: Game, callback: Optional[Callable[[SearchResult], None]] = None):
        """Search a copy of ``game`` on a background thread."""
        if self._thread and self._thread.is_alive(): return
        search_game = game.copy()

        def worker():
            result = self.search_best_move(search_game)
            if callback: callback(result)

        self._thread = threading.Thread(target=worker, daemon=True)
        self._thread.start()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Join the background search. Returns True once it has finished."""
        if self._thread:
            self._thread.join(timeout=timeout)
            return not self._thread.is_alive()
        return True

    def _terminal_value(self, outcome, perspective: Player) -> Optional[int]:
        match outcome:
            case Win(winner=winner):
                return WIN_SCORE if winner == perspective else LOSS_SCORE
            case Draw():
                return DRAW_SCORE
            case Undecided():
                return None
            case _:
                assert_never(outcome)

    def _search(self, game: Game, alpha: int, beta: int, perspective: Player,
                counter: NodeCounter) -> Tuple[Optional[Move], int]:
        counter.visits += 1

        value = self._terminal_value(self.evaluator.evaluate(game), perspective)
        if value is not None:
            return None, value

        moves = generate_moves(game)
        if not moves:
            raise RuntimeError("Undecided position has no empty cell")

        best_move = None
        maximizing = game.turn == perspective

        if maximizing:
            best_value = LOSS_SCORE - 1
            for move in moves:
                with played(game, move):
                    _, value = self._search(game, alpha, beta, perspective, counter)

                if value > best_value:
                    best_value = value
                    best_move = move
                alpha = max(alpha, value)
                if self.alpha_beta and alpha >= beta: break
        else:
            best_value = WIN_SCORE + 1
            for move in moves:
                with played(game, move):
                    _, value = self._search(game, alpha, beta, perspective, counter)

                if value < best_value:
                    best_value = value
                    best_move = move
                beta = min(beta, value)
                if self.alpha_beta and alpha >= beta: break

        return best_move, best_value
