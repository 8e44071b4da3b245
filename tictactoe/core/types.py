"""Value types shared by the board, evaluator and search."""

from dataclasses import dataclass
from enum import Enum


class Cell(Enum):
    EMPTY = ""
    CROSS = "X"
    NOUGHT = "O"


class Player(Enum):
    CROSS = "X"
    NOUGHT = "O"

    @property
    def other(self) -> "Player":
        return Player.NOUGHT if self is Player.CROSS else Player.CROSS

    @property
    def mark(self) -> Cell:
        return Cell.CROSS if self is Player.CROSS else Cell.NOUGHT


@dataclass(frozen=True)
class Move:
    row: int
    col: int

    def __iter__(self):
        return iter((self.row, self.col))

    def __str__(self):
        return f"({self.row},{self.col})"
