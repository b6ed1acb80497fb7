"""Tic-Tac-Toe board model with win and draw detection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple


class ParsePlayerError(ValueError):
    """Raised when a string is not exactly ``"O"`` or ``"X"``."""


class Player(Enum):
    NOUGHT = "O"
    CROSS = "X"

    def toggle(self) -> "Player":
        return Player.CROSS if self is Player.NOUGHT else Player.NOUGHT

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Player":
        for player in cls:
            if player.value == text:
                return player
        raise ParsePlayerError(f"not a player symbol: {text!r}")


@dataclass(frozen=True)
class Cell:
    """A board square, either vacant or occupied by one player."""

    occupant: Optional[Player] = None

    @classmethod
    def occupied(cls, player: Player) -> "Cell":
        return cls(player)

    def is_vacant(self) -> bool:
        return self.occupant is None

    def is_occupied(self) -> bool:
        return not self.is_vacant()

    def __str__(self) -> str:
        return " " if self.occupant is None else str(self.occupant)


VACANT = Cell()


@dataclass(frozen=True)
class Pos:
    """A board position, numbered row-major::

        1 2 3
        4 5 6
        7 8 9
    """

    pos: int

    def __post_init__(self) -> None:
        if isinstance(self.pos, bool) or not isinstance(self.pos, int) or not 1 <= self.pos <= Board.SIZE:
            raise ValueError(f"position must be in 1..{Board.SIZE}, got {self.pos!r}")

    @classmethod
    def new(cls, pos: int) -> Optional["Pos"]:
        """Return a :class:`Pos`, or ``None`` when ``pos`` is out of range."""

        try:
            return cls(pos)
        except ValueError:
            return None

    def get(self) -> int:
        return self.pos

    def __str__(self) -> str:
        return str(self.pos)


class PlaceError(ValueError):
    """Raised when placing on a cell that is already occupied."""

    def __init__(self, pos: Pos, occupied_by: Player) -> None:
        self.pos = pos
        self.occupied_by = occupied_by
        super().__init__(f"position {pos} is already occupied by {occupied_by}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlaceError):
            return NotImplemented
        return (self.pos, self.occupied_by) == (other.pos, other.occupied_by)

    def __hash__(self) -> int:
        return hash((self.pos, self.occupied_by))


class Board:
    WIDTH = 3
    SIZE = WIDTH * WIDTH

    def __init__(self, cells: Sequence[Cell] | None = None) -> None:
        if cells is None:
            cells = [VACANT] * self.SIZE
        if len(cells) != self.SIZE:
            raise ValueError(f"board needs exactly {self.SIZE} cells")
        # row-major
        self.cells: List[Cell] = list(cells)

    def place(self, pos: Pos, player: Player) -> None:
        """Occupy ``pos`` for ``player``; raise :class:`PlaceError` if taken."""

        index = pos.get() - 1
        cell = self.cells[index]
        if cell.occupant is not None:
            raise PlaceError(pos, cell.occupant)
        self.cells[index] = Cell.occupied(player)

    def wins(self, player: Player) -> bool:
        lines = (*self.rows(), *self.columns(), *self.diagonals())
        return any(_occupied_by(line, player) for line in lines)

    def is_draw(self) -> bool:
        return self.is_complete() and not self.wins(Player.NOUGHT) and not self.wins(Player.CROSS)

    def is_complete(self) -> bool:
        return all(cell.is_occupied() for cell in self.cells)

    def rows(self) -> Iterator[Tuple[Cell, ...]]:
        w = self.WIDTH
        for start in range(0, self.SIZE, w):
            yield tuple(self.cells[start:start + w])

    def columns(self) -> Iterator[Tuple[Cell, ...]]:
        for n in range(self.WIDTH):
            yield tuple(self.cells[n::self.WIDTH])

    def diagonals(self) -> Iterator[Tuple[Cell, ...]]:
        w = self.WIDTH
        yield tuple(self.cells[0::w + 1][:w])
        # minor diagonal: a step of w - 1 also reaches the last cell, so cap at w
        yield tuple(self.cells[w - 1::w - 1][:w])

    def __str__(self) -> str:
        border = "+" + "+".join(["---"] * self.WIDTH) + "+\n"
        out = [border]
        for row in self.rows():
            out.append("| " + " | ".join(str(cell) for cell in row) + " |\n")
            out.append(border)
        return "".join(out)


def _occupied_by(cells: Sequence[Cell], player: Player) -> bool:
    return all(cell.occupant is player for cell in cells)


__all__ = [
    "Board",
    "Cell",
    "ParsePlayerError",
    "PlaceError",
    "Player",
    "Pos",
    "VACANT",
]
