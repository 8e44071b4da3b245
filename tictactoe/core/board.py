"""Mutable N×N board and the game container that owns it."""

from typing import List, Sequence

from tictactoe.core.types import Cell, Move, Player


class Board:
    def __init__(self, size: int):
        """Create an all-empty size×size grid."""
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")
        self.size = size
        self.cells = [[Cell.EMPTY] * size for _ in range(size)]

    def _check(self, row: int, col: int):
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Cell ({row},{col}) is off a {self.size}x{self.size} board")

    def get(self, row: int, col: int) -> Cell:
        self._check(row, col)
        return self.cells[row][col]

    def set(self, row: int, col: int, cell: Cell):
        self._check(row, col)
        self.cells[row][col] = cell

    def clear(self, row: int, col: int):
        self.set(row, col, Cell.EMPTY)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __str__(self):
        return "\n".join(" ".join(c.value or "." for c in row) for row in self.cells)


class Game:
    """A board plus whose turn it is.

    Game never flips the turn itself; that is done by the move layer in
    ``tictactoe.core.moves`` so that every apply is paired with one undo.
    """

    def __init__(self, first: Player, size: int):
        self.board = Board(size)
        self.turn = first

    @property
    def size(self) -> int:
        return self.board.size

    def get_piece(self, row: int, col: int) -> Cell:
        return self.board.get(row, col)

    def apply_move(self, move: Move, mark: Cell):
        self.board.set(move.row, move.col, mark)

    def undo_move(self, move: Move):
        self.board.clear(move.row, move.col)

    def empty_cells(self) -> int:
        return sum(row.count(Cell.EMPTY) for row in self.board.cells)

    def copy(self) -> "Game":
        twin = Game(self.turn, self.size)
        twin.board.cells = [list(row) for row in self.board.cells]
        return twin

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]], turn: Player) -> "Game":
        """Build a game from rows of "", "X" and "O" strings."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Board rows must form a square")
        game = cls(turn, size)
        for r, row in enumerate(rows):
            for c, mark in enumerate(row):
                try:
                    game.board.set(r, c, Cell(mark))
                except ValueError:
                    raise ValueError(f"Unknown mark {mark!r} at ({r},{c})") from None
        return game

    def to_rows(self) -> List[List[str]]:
        return [[cell.value for cell in row] for row in self.board.cells]

    def __eq__(self, other):
        if not isinstance(other, Game):
            return NotImplemented
        return self.turn == other.turn and self.board == other.board

    def __repr__(self):
        return f"Game(turn={self.turn.value}, rows={self.to_rows()})"
