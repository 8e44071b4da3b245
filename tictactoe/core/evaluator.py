"""Terminal-position classification for N×N boards.

A position is a Win as soon as one line is filled by a single mark, a Draw
when no line can still be completed, and Undecided otherwise.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple, Union

from tictactoe.core.board import Game
from tictactoe.core.types import Cell, Player

Coord = Tuple[int, int]
Line = Tuple[Coord, ...]


@dataclass(frozen=True)
class Win:
    winner: Player
    line: Line


@dataclass(frozen=True)
class Draw:
    pass


@dataclass(frozen=True)
class Undecided:
    pass


Outcome = Union[Win, Draw, Undecided]

DRAW = Draw()
UNDECIDED = Undecided()


@lru_cache(maxsize=None)
def lines(size: int) -> Tuple[Line, ...]:
    """All 2*size + 2 lines: row i and column i per index, then both diagonals."""
    found = []
    for i in range(size):
        found.append(tuple((i, j) for j in range(size)))
        found.append(tuple((j, i) for j in range(size)))
    found.append(tuple((i, i) for i in range(size)))
    found.append(tuple((i, size - 1 - i) for i in range(size)))
    return tuple(found)


class Evaluator:
    def evaluate(self, game: Game) -> Outcome:
        cells = game.board.cells
        undecided = False

        for line in lines(game.size):
            has_nought = has_cross = has_empty = False
            for row, col in line:
                cell = cells[row][col]
                if cell is Cell.NOUGHT:
                    has_nought = True
                elif cell is Cell.CROSS:
                    has_cross = True
                else:
                    has_empty = True

            if has_nought and has_cross:
                continue  # dead line
            if has_empty:
                undecided = True
            elif has_nought:
                return Win(Player.NOUGHT, line)
            else:
                return Win(Player.CROSS, line)

        return UNDECIDED if undecided else DRAW


_EVALUATOR = Evaluator()


def game_outcome(game: Game) -> Outcome:
    return _EVALUATOR.evaluate(game)
