"""Turn loop, console input and scoring shared by both game modes."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Callable, Sequence, TextIO

from .board import Board, Hand, default_hand, make_board
from .modes import Mode, rules_for
from .moves import takeover
from .savefile import DEFAULT_SAVE_PATH, load_game, save_game

MIN_SIZE = 6
MAX_SIZE = 12
PASS_TURN = "e"

Position = tuple[int, int]

_WIN_SOUND = Path("win.mp3")


def _celebrate() -> None:
    """Play the victory sound where the platform can open it."""
    if os.name == "nt" and _WIN_SOUND.exists():
        subprocess.run(["cmd", "/c", "start", "/MIN", str(_WIN_SOUND)], check=False)


class Console:
    """Line based text input and output for the players."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout

    def ask(self, prompt: str) -> str:
        """Show prompt and return the next line of input, stripped.

        Raises EOFError when the input is exhausted.
        """
        self.say(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line.strip()

    def say(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()


def ask_int(console: Console, prompt: str) -> int:
    """Ask until the answer is an integer."""
    while True:
        answer = console.ask(prompt)
        try:
            return int(answer)
        except ValueError:
            continue


def ask_position(console: Console, size: int) -> Position:
    """Ask for a column and a row counted from 1; return them counted from 0."""
    while True:
        console.say("entrez coordonnees (colonne - ligne)")
        column = ask_int(console, "\ncolonne : ")
        row = ask_int(console, "ligne : ")
        if 1 <= column <= size and 1 <= row <= size:
            return column - 1, row - 1


def scores(board: Board) -> tuple[int, int]:
    """Number of squares owned by player 1 and by player 2."""
    counts = [0, 0, 0]
    for cell in board:
        counts[cell.lord] += 1
    return counts[1], counts[2]


def winner(board: Board) -> int:
    """The player owning the most squares, or 0 for a tie."""
    first, second = scores(board)
    if first > second:
        return 1
    if second > first:
        return 2
    return 0


class Game:
    """A game in progress: the board, both hands and the rules of its mode."""

    def __init__(
        self,
        board: Board,
        hands: Sequence[Hand],
        mode: Mode | int,
        console: Console,
        first_player: int = 0,
        save_path: str | os.PathLike = DEFAULT_SAVE_PATH,
        celebrate: Callable[[], None] | None = _celebrate,
    ) -> None:
        if len(hands) != 2:
            raise ValueError("a game needs exactly two hands")
        if first_player not in (0, 1):
            raise ValueError(f"invalid first player {first_player}")
        self.board = board
        self.hands = tuple(hands)
        self.rules = rules_for(mode)
        self.mode = self.rules.mode
        self.console = console
        self.first_player = first_player
        self.save_path = save_path
        self.celebrate = celebrate

    def play(self) -> int | None:
        """Run turns until the game ends.

        Returns the winning player, 0 for a tie, or None when a player
        abandoned or saved the game.
        """
        skip_first = self.first_player == 1
        over = False
        while not over:
            for player in (0, 1):
                if skip_first:
                    skip_first = False
                    continue
                self.console.say(self.board.render())
                if not self.turn_action(player):
                    return None
                self.turn(player)
                over = self.rules.is_over(self.hands)
                if over:
                    break
        self.console.say(self.board.render())
        return self._announce()

    def _announce(self) -> int:
        result = winner(self.board)
        if result == 0:
            self.console.say("\nEgalite ! ")
            return result
        if self.celebrate is not None:
            self.celebrate()
        conquered = scores(self.board)[result - 1]
        self.console.say(
            f"\n\n\033[32mLe joueur {result} remporte la partie avec "
            f"{conquered} cases conquises\033[0m\n\n\n"
        )
        return result

    def turn_action(self, player: int) -> bool:
        """Ask the player what to do; False when the game must stop."""
        while True:
            action = ask_int(
                self.console,
                f"\nAu joueur {player + 1} de jouer\n1. Poser une piece\t"
                "2.Abandonner\t3.Sauvegarder et quitter\n\t\t\t",
            )
            if 1 <= action <= 3:
                break
        if action == 1:
            return True
        if action == 2:
            self.console.say(f"\n\033[31mLe joueur {player + 1} abandonne.\033[0m\n")
            return False
        save_game(self.save_path, self.mode, player, self.board, self.hands)
        self.console.say("\nPartie Sauvegardee\n")
        return False

    def turn(self, player: int) -> Position | None:
        """Let player place one piece; return where it went, or None on a pass."""
        hand = self.hands[player]
        self.console.say(
            "Vos pieces disponibles \033[90m(passer son tour e)\033[0m : "
            + "".join(f"{piece} " for piece in hand)
            + "\n"
        )
        index = self._choose_piece(player)
        if index is None:
            self.console.say(f"\nle joueur {player + 1} passe son tour\n")
            return None
        piece = hand.take(index)

        while True:
            pos = ask_position(self.console, self.board.size)
            if self.rules.position_ok(self.board, pos, piece, player):
                break

        cell = self.board[pos]
        cell.display = piece
        cell.lord = player + 1
        takeover(self.board, pos, self.rules.mark)
        return pos

    def _choose_piece(self, player: int) -> int | None:
        hand = self.hands[player]
        while True:
            answer = self.console.ask("choississez une piece : ")
            if not answer:
                continue
            piece = answer[0]
            if piece == PASS_TURN:
                return None
            index = self.rules.piece_index(hand, self.board, player, piece)
            if index is not None:
                return index


def new_game(mode: Mode | int, console: Console) -> Game:
    """Ask for a board size and set up a fresh game."""
    while True:
        size = ask_int(
            console,
            f"dimension de l'echiquier entre {MIN_SIZE} & {MAX_SIZE} "
            "(donnez le cote uniquement) : ",
        )
        if MIN_SIZE <= size <= MAX_SIZE:
            break
    return Game(make_board(size), (default_hand(), default_hand()), mode, console)


def resume_game(path: str | os.PathLike, console: Console) -> Game:
    """Load a saved game; the player who saved it plays first."""
    saved = load_game(path)
    return Game(
        saved.board,
        saved.hands,
        saved.mode,
        console,
        first_player=saved.player,
        save_path=path,
    )