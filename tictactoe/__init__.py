"""Optimal-move engine for N×N tic-tac-toe."""

from .core import Cell, Draw, Game, Move, Player, Undecided, Win
from .main import Model

__version__ = "1.0.0"
