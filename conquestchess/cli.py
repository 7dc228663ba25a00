"""Main menu and command entry point."""

from __future__ import annotations

import argparse
from pathlib import Path

from .game import Console, Game, ask_int, new_game, resume_game
from .modes import Mode
from .savefile import DEFAULT_SAVE_PATH, SaveError

_CLEAR_SCREEN = "\033[2J\033[H"


def _choose(console: Console, prompt: str, options: int) -> int:
    while True:
        choice = ask_int(console, prompt)
        if 1 <= choice <= options:
            return choice


def main_menu(console: Console) -> str:
    """Show the menu; return "conquest", "connect", "resume" or "quit"."""
    console.say(
        "\n\n\t\t\tJEU D'ECHECS \n\n\n1. Nouvelle Partie\t"
        "2. Reprendre une partie\t\t3. Quitter\n"
    )
    choice = _choose(console, "\noption choisie (1, 2 ou 3) : ", 3)
    if choice == 3:
        return "quit"
    if choice == 2:
        return "resume"
    console.say("\n\t\tNouvelle Partie\n\n\t1. Mode Conquete\t2. Mode Connecte\n")
    mode = _choose(console, "\n\t\tMode de jeu (1 ou 2) : ", 2)
    return "conquest" if mode == 1 else "connect"


def _start(choice: str, console: Console, save_path: Path) -> Game | None:
    if choice == "resume":
        console.say("\nReprendre une Partie >\n")
        try:
            return resume_game(save_path, console)
        except FileNotFoundError:
            console.say(f"\nAucune partie sauvegardee dans {save_path}\n")
        except SaveError as error:
            console.say(f"\nSauvegarde illisible : {error}\n")
        return None

    if choice == "conquest":
        console.say("\nNouvelle Partie > Mode Conquete\n")
        game = new_game(Mode.CONQUEST, console)
    else:
        console.say("\nNouvelle Partie > Mode Connecte\n")
        game = new_game(Mode.CONNECT, console)
    game.save_path = save_path
    return game


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="conquestchess", description="Two player chess conquest game."
    )
    parser.add_argument(
        "--save-file",
        type=Path,
        default=DEFAULT_SAVE_PATH,
        help="where games are saved and resumed from",
    )
    args = parser.parse_args(argv)
    console = Console()

    try:
        first = True
        while True:
            if not first:
                console.say("\n\033[34mAppuyez sur ENTREE\033[0m\n")
                console.ask("")
                console.say(_CLEAR_SCREEN)
            first = False

            choice = main_menu(console)
            if choice == "quit":
                console.say("\nAu revoir !\n")
                return 0
            game = _start(choice, console, args.save_file)
            if game is not None:
                game.play()
    except (EOFError, KeyboardInterrupt):
        console.say("\nAu revoir !\n")
        return 0


if __name__ == "__main__":
    raise SystemExit(main())