"""Board, cells and hands shared by both game modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

EMPTY = " "
PLAYERS = 2
ATTACK_RANKS = 5
PIECE_RANKS = {"p": 0, "n": 1, "b": 2, "r": 3, "q": 4, "k": 5}

_BACKGROUNDS = ("", "\033[41m", "\033[42m")
_RESET = "\033[0m"


def piece_rank(piece: str) -> int:
    """Return the rank of a piece in the attack hierarchy."""
    try:
        return PIECE_RANKS[piece]
    except KeyError:
        raise ValueError(f"unknown piece {piece!r}") from None


def _no_attackers() -> list[list[int]]:
    return [[0] * ATTACK_RANKS for _ in range(PLAYERS)]


@dataclass
class Cell:
    """One square: the piece shown on it, its owner and who attacks it."""

    display: str = EMPTY
    lord: int = 0
    attackers: list[list[int]] = field(default_factory=_no_attackers)

    @property
    def is_empty(self) -> bool:
        return self.display == EMPTY


@dataclass
class Hand:
    """The pieces a player still has to place."""

    pieces: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.pieces)

    def __iter__(self) -> Iterator[str]:
        return iter(self.pieces)

    def __getitem__(self, index: int) -> str:
        return self.pieces[index]

    def take(self, index: int) -> str:
        """Remove and return the piece at index; the last piece takes its place."""
        if not 0 <= index < len(self.pieces):
            raise IndexError(f"no piece at index {index}")
        pieces = self.pieces
        pieces[index], pieces[-1] = pieces[-1], pieces[index]
        return pieces.pop()

    def has_king(self) -> bool:
        return "k" in self.pieces


def default_hand() -> Hand:
    """The full set of pieces each player starts with."""
    return Hand(list("p" * 8 + "rr" + "nn" + "bb" + "qk"))


class Board:
    """A square board indexed by (column, row), both counted from zero."""

    def __init__(self, size: int, cells: list[list[Cell]] | None = None) -> None:
        if size < 1:
            raise ValueError("board size must be positive")
        if cells is None:
            cells = [[Cell() for _ in range(size)] for _ in range(size)]
        elif len(cells) != size or any(len(column) != size for column in cells):
            raise ValueError(f"cells do not form a {size}x{size} board")
        self.size = size
        self.cells = cells

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        x, y = pos
        if not self.in_bounds(x, y):
            raise IndexError(f"position {pos} is off the board")
        return self.cells[x][y]

    def __iter__(self) -> Iterator[Cell]:
        for column in self.cells:
            yield from column

    def render(self, colored: bool = True) -> str:
        """Draw the board with the highest row first; player 1's pieces in capitals."""
        size = self.size
        rule = "+---" * size + "+\n"
        parts = ["\n", rule]
        for row in reversed(range(size)):
            parts.append("|")
            for x in range(size):
                cell = self.cells[x][row]
                shown = cell.display.upper() if cell.lord == 1 else cell.display
                if colored:
                    parts.append(f"{_BACKGROUNDS[cell.lord]} {shown} {_RESET}|")
                else:
                    parts.append(f" {shown} |")
            parts.append(f" {row + 1}\n")
            parts.append(rule)
        parts.extend(f"  {column} " for column in range(1, size + 1))
        return "".join(parts)


def make_board(size: int) -> Board:
    """An empty, neutral board of size x size squares."""
    return Board(size)