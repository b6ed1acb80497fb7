from __future__ import annotations

import pytest

from tictactoe import Game, GameOverError, Outcome, PlaceError, Player, Pos, play_moves


def _moves(*positions: int) -> list[Pos]:
    return [Pos(p) for p in positions]


def test_turns_alternate_from_first_player():
    game = Game(Player.NOUGHT)
    assert game.to_move is Player.NOUGHT
    game.play(Pos(5))
    assert game.to_move is Player.CROSS
    assert str(game.board.cells[4]) == "O"


def test_failed_move_keeps_the_turn():
    game = Game()
    game.play(Pos(1))
    with pytest.raises(PlaceError):
        game.play(Pos(1))
    assert game.to_move is Player.NOUGHT
    assert game.moves == [1]


def test_row_win_stops_replay():
    result = play_moves(_moves(1, 4, 2, 5, 3, 6))
    assert result.outcome is Outcome.WIN
    assert result.winner is Player.CROSS
    assert result.moves == [1, 4, 2, 5, 3]
    assert result.summary() == "X wins"


def test_draw():
    result = play_moves(_moves(1, 2, 3, 5, 4, 6, 8, 7, 9))
    assert result.outcome is Outcome.DRAW
    assert result.winner is None
    assert result.board.is_draw()
    assert result.summary() == "Draw"


def test_in_progress():
    result = play_moves(_moves(1, 5), first=Player.NOUGHT)
    assert result.outcome is Outcome.IN_PROGRESS
    assert result.summary() == "In progress"


def test_no_moves_after_game_over():
    game = Game()
    for pos in _moves(1, 4, 2, 5, 3):
        game.play(pos)
    assert game.outcome is Outcome.WIN
    with pytest.raises(GameOverError):
        game.play(Pos(9))
