"""Square conquest by a freshly placed piece."""

from __future__ import annotations

from typing import Callable

from .board import Board, PLAYERS

Position = tuple[int, int]
AttackMarker = Callable[[Board, int, Position, int], None]

_SIGNS = (-1, 1)


def mark_attack(board: Board, player: int, pos: Position, rank: int) -> None:
    """Record that a piece of the given rank of player attacks pos."""
    board[pos].attackers[player][rank] = 1


def ignore_attack(board: Board, player: int, pos: Position, rank: int) -> None:
    """Keep no record of attacks; used where attacks do not matter."""


def _claim(board: Board, lord: int, target: Position, mark: AttackMarker, rank: int) -> None:
    board[target].lord = lord
    mark(board, lord - 1, target, rank)


def _claim_if_free(
    board: Board, lord: int, x: int, y: int, mark: AttackMarker, rank: int
) -> None:
    if board.in_bounds(x, y) and board.cells[x][y].is_empty:
        _claim(board, lord, (x, y), mark, rank)


def _ray(
    board: Board, x: int, y: int, dx: int, dy: int, mark: AttackMarker, rank: int
) -> None:
    lord = board.cells[x][y].lord
    tx, ty = x + dx, y + dy
    while board.in_bounds(tx, ty) and board.cells[tx][ty].is_empty:
        _claim(board, lord, (tx, ty), mark, rank)
        tx += dx
        ty += dy


def _pawn(board: Board, x: int, y: int, mark: AttackMarker) -> None:
    lord = board.cells[x][y].lord
    if lord == 1:
        forward = 1
    elif lord == 2:
        forward = -1
    else:
        raise ValueError("a pawn must belong to a player")
    for side in _SIGNS:
        _claim_if_free(board, lord, x + side, y + forward, mark, 0)


def _rook(board: Board, x: int, y: int, mark: AttackMarker, rank: int = 3) -> None:
    for sign in _SIGNS:
        _ray(board, x, y, sign, 0, mark, rank)
        _ray(board, x, y, 0, sign, mark, rank)


def _bishop(board: Board, x: int, y: int, mark: AttackMarker, rank: int = 2) -> None:
    for dx in _SIGNS:
        for dy in _SIGNS:
            _ray(board, x, y, dx, dy, mark, rank)


def _knight(board: Board, x: int, y: int, mark: AttackMarker) -> None:
    lord = board.cells[x][y].lord
    for sx in _SIGNS:
        for leap in (1, 2):
            for sy in _SIGNS:
                _claim_if_free(board, lord, x + leap * sx, y + (3 - leap) * sy, mark, 1)


def _queen(board: Board, x: int, y: int, mark: AttackMarker) -> None:
    _rook(board, x, y, mark, 4)
    _bishop(board, x, y, mark, 4)


def _king(board: Board, x: int, y: int, mark: AttackMarker) -> None:
    lord = board.cells[x][y].lord
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            tx, ty = x + dx, y + dy
            if board.in_bounds(tx, ty) and board.cells[tx][ty].is_empty:
                board.cells[tx][ty].lord = lord


_MOVES = {
    "p": _pawn,
    "r": _rook,
    "n": _knight,
    "b": _bishop,
    "q": _queen,
    "k": _king,
}


def takeover(board: Board, pos: Position, mark_attack: AttackMarker) -> None:
    """Give the owner of the piece at pos every free square it attacks."""
    x, y = pos
    move = _MOVES.get(board[pos].display)
    if move is not None:
        move(board, x, y, mark_attack)


def lords_view(board: Board) -> str:
    """Owners of every square as digits, highest row first."""
    size = board.size
    return "".join(
        "\n" + "".join(str(board.cells[x][row].lord) for x in range(size))
        for row in reversed(range(size))
    )


def attackers_view(board: Board) -> str:
    """Attack records of every square, one block per player, highest row first."""
    size = board.size
    parts = ["\n"]
    for player in range(PLAYERS):
        for row in reversed(range(size)):
            for x in range(size):
                ranks = board.cells[x][row].attackers[player]
                parts.append("[" + "".join(f"{flag}," for flag in ranks) + "],")
            parts.append("\n")
        parts.append("\n")
    return "".join(parts)