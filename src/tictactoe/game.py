"""Turn-taking driver on top of :class:`~tictactoe.board.Board`."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from .board import Board, Player, Pos


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


class GameOverError(RuntimeError):
    """Raised when a move is attempted after the game has finished."""


@dataclass
class GameResult:
    board: Board
    outcome: Outcome
    winner: Optional[Player]
    moves: List[int] = field(default_factory=list)

    def summary(self) -> str:
        if self.outcome is Outcome.WIN:
            return f"{self.winner} wins"
        if self.outcome is Outcome.DRAW:
            return "Draw"
        return "In progress"


class Game:
    def __init__(self, first: Player = Player.CROSS) -> None:
        self.board = Board()
        self.to_move = first
        self.outcome = Outcome.IN_PROGRESS
        self.winner: Optional[Player] = None
        self.moves: List[int] = []

    def play(self, pos: Pos) -> Outcome:
        """Place for the player to move; the turn passes only on success."""

        if self.outcome is not Outcome.IN_PROGRESS:
            raise GameOverError(f"game already finished: {self.result().summary()}")

        player = self.to_move
        self.board.place(pos, player)
        self.moves.append(pos.get())

        if self.board.wins(player):
            self.outcome = Outcome.WIN
            self.winner = player
        elif self.board.is_draw():
            self.outcome = Outcome.DRAW
        self.to_move = player.toggle()
        return self.outcome

    def result(self) -> GameResult:
        return GameResult(
            board=self.board,
            outcome=self.outcome,
            winner=self.winner,
            moves=list(self.moves),
        )


def play_moves(moves: Iterable[Pos], first: Player = Player.CROSS) -> GameResult:
    """Replay ``moves`` and stop at the first win or draw.

    Moves after a terminal outcome are ignored. :class:`PlaceError` from the
    board propagates unchanged.
    """

    game = Game(first)
    for pos in moves:
        if game.play(pos) is not Outcome.IN_PROGRESS:
            break
    return game.result()


__all__ = ["Game", "GameOverError", "GameResult", "Outcome", "play_moves"]
