"""Saving and loading games as semicolon separated text."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .board import ATTACK_RANKS, PLAYERS, Board, Cell, Hand
from .modes import Mode

DEFAULT_SAVE_PATH = Path("gamesave.csv")

_ATTACK_FIELDS = PLAYERS * ATTACK_RANKS


class SaveError(ValueError):
    """A save file could not be understood."""


@dataclass
class SavedGame:
    """Everything needed to resume a game."""

    mode: Mode
    board: Board
    player: int
    hands: tuple[Hand, Hand]

    @property
    def size(self) -> int:
        return self.board.size


def save_game(
    path: str | os.PathLike,
    mode: Mode | int,
    last_player: int,
    board: Board,
    hands: Sequence[Hand],
) -> None:
    """Write the game; last_player is the player who resumes it."""
    mode = Mode(mode)
    lines = [f"{int(mode)};{board.size};{last_player};"]

    cells = []
    for column in board.cells:
        for cell in column:
            cells.append(f"{cell.display};{cell.lord};")
            if mode is Mode.CONNECT:
                cells.extend(f"{flag};" for ranks in cell.attackers for flag in ranks)
    lines.append("".join(cells))

    lines.append("".join(f"{len(hand)};" for hand in hands))
    lines.extend("".join(f"{piece};" for piece in hand) for hand in hands)

    with open(path, "w", encoding="utf-8") as out:
        out.write("\n".join(lines) + "\n")


def _fields(line: str, what: str) -> list[str]:
    if line == "":
        return []
    if not line.endswith(";"):
        raise SaveError(f"{what} line is not terminated by ';'")
    return line[:-1].split(";")


def _int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise SaveError(f"{what} is not a number: {token!r}") from None


def _char(token: str, what: str) -> str:
    if len(token) != 1:
        raise SaveError(f"{what} is not a single character: {token!r}")
    return token


def _read_board(tokens: list[str], size: int, mode: Mode) -> Board:
    per_cell = 2 + (_ATTACK_FIELDS if mode is Mode.CONNECT else 0)
    if len(tokens) != size * size * per_cell:
        raise SaveError("board line does not match the board size")
    values = iter(tokens)
    columns = []
    for _ in range(size):
        column = []
        for _ in range(size):
            display = _char(next(values), "square")
            lord = _int(next(values), "owner")
            if lord not in range(PLAYERS + 1):
                raise SaveError(f"invalid owner {lord}")
            cell = Cell(display=display, lord=lord)
            if mode is Mode.CONNECT:
                for player in range(PLAYERS):
                    cell.attackers[player] = [
                        _int(next(values), "attack flag") for _ in range(ATTACK_RANKS)
                    ]
            column.append(cell)
        columns.append(column)
    return Board(size, columns)


def load_game(path: str | os.PathLike) -> SavedGame:
    """Read a game written by save_game."""
    with open(path, encoding="utf-8") as source:
        lines = source.read().splitlines()
    if len(lines) < 3 + PLAYERS:
        raise SaveError("save file is truncated")

    header = _fields(lines[0], "header")
    if len(header) != 3:
        raise SaveError("header must hold mode, size and player")
    mode_value, size, player = (_int(token, "header field") for token in header)
    try:
        mode = Mode(mode_value)
    except ValueError:
        raise SaveError(f"unknown mode {mode_value}") from None
    if size < 1:
        raise SaveError(f"invalid board size {size}")
    if player not in range(PLAYERS):
        raise SaveError(f"invalid player {player}")

    board = _read_board(_fields(lines[1], "board"), size, mode)

    counts = [_int(token, "hand size") for token in _fields(lines[2], "hand sizes")]
    if len(counts) != PLAYERS:
        raise SaveError("hand sizes line must hold two numbers")

    hands = []
    for count, line in zip(counts, lines[3 : 3 + PLAYERS]):
        pieces = [_char(token, "piece") for token in _fields(line, "hand")]
        if len(pieces) != count:
            raise SaveError("hand does not match its recorded size")
        hands.append(Hand(pieces))

    return SavedGame(mode=mode, board=board, player=player, hands=(hands[0], hands[1]))