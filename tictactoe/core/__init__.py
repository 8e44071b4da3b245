"""Core engine components: board, move generation, outcome evaluation and search."""

from .types import Cell, Move, Player
from .board import Board, Game
from .evaluator import Draw, Evaluator, Outcome, Undecided, Win, game_outcome, lines
from .moves import apply_move, generate_moves, played, undo_move
from .search import SearchEngine, SearchResult
