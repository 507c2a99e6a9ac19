"""Core module for bingo game simulation."""

from .board import Board, Cell
from .draws import DrawSequence
from .game import Game, Win

__all__ = ["Board", "Cell", "DrawSequence", "Game", "Win"]
