"""Tic-Tac-Toe board model and game driver."""

from __future__ import annotations

from .board import VACANT, Board, Cell, ParsePlayerError, PlaceError, Player, Pos
from .game import Game, GameOverError, GameResult, Outcome, play_moves

__all__ = [
    "Board",
    "Cell",
    "Game",
    "GameOverError",
    "GameResult",
    "Outcome",
    "ParsePlayerError",
    "PlaceError",
    "Player",
    "Pos",
    "VACANT",
    "play_moves",
]
