"""Rules that differ between the conquest and connect game modes."""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence

from .board import Board, Hand, piece_rank
from .moves import ignore_attack, mark_attack

Position = tuple[int, int]


class Mode(IntEnum):
    """Game modes, numbered as they are stored in save files."""

    CONQUEST = 0
    CONNECT = 1


class ConquestRules:
    """Any piece in hand may go on any empty square; attacks are not tracked."""

    mode = Mode.CONQUEST
    mark = staticmethod(ignore_attack)

    def piece_index(
        self, hand: Hand, board: Board, player: int, piece: str
    ) -> int | None:
        """Index of piece in hand, or None when the player does not hold it."""
        try:
            return hand.pieces.index(piece)
        except ValueError:
            return None

    def position_ok(self, board: Board, pos: Position, piece: str, player: int) -> bool:
        """A piece may be placed on any empty square."""
        return board[pos].is_empty

    def is_over(self, hands: Sequence[Hand]) -> bool:
        """The game ends once both players have placed every piece."""
        return all(len(hand) == 0 for hand in hands)


class ConnectRules:
    """Each piece except the pawn must land on a square the player owns and
    that the piece just below it in the hierarchy attacks."""

    mode = Mode.CONNECT
    mark = staticmethod(mark_attack)

    @staticmethod
    def _supported(cell, piece: str, player: int) -> bool:
        rank = piece_rank(piece)
        return bool(cell.attackers[player][rank - 1]) and cell.lord == player + 1

    def piece_index(
        self, hand: Hand, board: Board, player: int, piece: str
    ) -> int | None:
        """Index of piece in hand if at least one square can receive it, else None."""
        if piece not in hand.pieces:
            return None
        index = hand.pieces.index(piece)
        if piece == "p":
            return index
        if any(cell.is_empty and self._supported(cell, piece, player) for cell in board):
            return index
        return None

    def position_ok(self, board: Board, pos: Position, piece: str, player: int) -> bool:
        """The square must be empty and, for anything but a pawn, supported."""
        cell = board[pos]
        if not cell.is_empty:
            return False
        return piece == "p" or self._supported(cell, piece, player)

    def is_over(self, hands: Sequence[Hand]) -> bool:
        """The game ends as soon as one player has placed their king."""
        return not all(hand.has_king() for hand in hands)


Rules = ConquestRules | ConnectRules


def rules_for(mode: Mode | int) -> Rules:
    """The rules object for a game mode."""
    mode = Mode(mode)
    if mode is Mode.CONQUEST:
        return ConquestRules()
    return ConnectRules()