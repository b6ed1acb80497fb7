"""Command line entry point for the Sudoku solver and the Tic-Tac-Toe game."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional

from contracts import GridFormatError, check_event
from events import EventLog
from project_config import get_section
from sudoku import (
    EMBEDDED_PUZZLE,
    SolveStats,
    check_consistent,
    format_boxed,
    format_rows,
    parse_grid,
    puzzle_digest,
    solve,
)
from tictactoe import Board, Game, Outcome, PlaceError, Player, Pos

_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNSOLVED = 1
EXIT_BAD_INPUT = 2


def _event_log(args: argparse.Namespace) -> Optional[EventLog]:
    if args.log_dir:
        return EventLog.from_config(args.log_dir)
    if bool(get_section("events.enabled", False)):
        return EventLog.from_config()
    return None


def _record(args: argparse.Namespace, event: dict) -> None:
    log = _event_log(args)
    if log is None:
        return
    issues = check_event(event)
    if issues:
        for issue in issues:
            print(f"event not recorded: {issue}", file=sys.stderr)
        return
    path = log.append(event)
    _LOGGER.info("event %s appended to %s", event["type"], path)


def cmd_sudoku(args: argparse.Namespace) -> int:
    text = args.grid if args.grid is not None else get_section("sudoku.puzzle", EMBEDDED_PUZZLE)
    try:
        grid = parse_grid(text)
        check_consistent(grid)
    except GridFormatError as exc:
        for issue in exc.issues:
            print(issue, file=sys.stderr)
        return EXIT_BAD_INPUT

    digest = puzzle_digest(grid)
    stats = SolveStats()
    started = time.monotonic()
    solved = solve(grid, stats)
    elapsed_ms = int((time.monotonic() - started) * 1000)
    _LOGGER.info(
        "puzzle %s solved=%s placements=%d backtracks=%d in %d ms",
        digest[:12],
        solved,
        stats.placements,
        stats.backtracks,
        elapsed_ms,
    )

    if solved:
        print(get_section("sudoku.done_marker", "Done"))
        print(format_boxed(grid) if args.pretty else format_rows(grid))

    _record(
        args,
        {
            "type": "sudoku.solve.v1",
            "puzzle_digest": digest,
            "solved": solved,
            "placements": stats.placements,
            "backtracks": stats.backtracks,
            "max_depth": stats.max_depth,
            "time_ms": elapsed_ms,
        },
    )
    return EXIT_OK if solved else EXIT_UNSOLVED


def _parse_moves(raw: str) -> List[Pos]:
    moves: List[Pos] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        pos = Pos.new(int(token)) if token.isdecimal() else None
        if pos is None:
            raise ValueError(f"invalid position {token!r}; expected 1..{Board.SIZE}")
        moves.append(pos)
    return moves


def _replay(game: Game, moves: List[Pos]) -> int:
    for pos in moves:
        try:
            outcome = game.play(pos)
        except PlaceError as exc:
            print(exc, file=sys.stderr)
            return EXIT_BAD_INPUT
        print(game.board)
        if outcome is not Outcome.IN_PROGRESS:
            break
    return EXIT_OK


def _interactive(game: Game, prompt: Callable[[str], str]) -> int:
    print(game.board)
    while game.outcome is Outcome.IN_PROGRESS:
        try:
            answer = prompt(f"{game.to_move} to move (1-9): ")
        except EOFError:
            print()
            break
        answer = answer.strip()
        pos = Pos.new(int(answer)) if answer.isdecimal() else None
        if pos is None:
            print(f"Not a position: {answer!r}")
            continue
        try:
            game.play(pos)
        except PlaceError as exc:
            print(exc)
            continue
        print(game.board)
    return EXIT_OK


def cmd_tictactoe(args: argparse.Namespace, prompt: Callable[[str], str] = input) -> int:
    first_raw = args.first if args.first is not None else get_section("tictactoe.first_player", "X")
    try:
        first = Player.parse(first_raw)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return EXIT_BAD_INPUT

    game = Game(first)
    if args.moves is not None:
        try:
            moves = _parse_moves(args.moves)
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return EXIT_BAD_INPUT
        code = _replay(game, moves)
    else:
        code = _interactive(game, prompt)

    result = game.result()
    print(result.summary())
    _record(
        args,
        {
            "type": "tictactoe.game.v1",
            "moves": result.moves,
            "outcome": result.outcome.value,
            "winner": None if result.winner is None else str(result.winner),
        },
    )
    return code


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="puzzles", description="Console Sudoku solver and Tic-Tac-Toe")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sudoku = sub.add_parser("sudoku", help="Solve a Sudoku by backtracking")
    sudoku.add_argument(
        "--grid",
        default=None,
        help="81 cells in row-major order, 0 or '.' for empty (default: built-in puzzle)",
    )
    sudoku.add_argument("--pretty", action="store_true", help="Print the grid with box borders")
    sudoku.add_argument("--log-dir", default=None, help="Append a JSONL event under this directory")
    sudoku.set_defaults(func=cmd_sudoku)

    ttt = sub.add_parser("tictactoe", help="Play or replay a Tic-Tac-Toe game")
    ttt.add_argument(
        "--moves",
        default=None,
        help="Comma-separated positions 1-9 to replay; prompts on stdin when omitted",
    )
    ttt.add_argument("--first", default=None, choices=["X", "O"], help="Player who moves first")
    ttt.add_argument("--log-dir", default=None, help="Append a JSONL event under this directory")
    ttt.set_defaults(func=cmd_tictactoe)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
