import io

import pytest

from conquestchess.board import Hand, default_hand, make_board
from conquestchess.game import (
    Console,
    Game,
    ask_int,
    ask_position,
    new_game,
    resume_game,
    scores,
    winner,
)
from conquestchess.modes import Mode
from conquestchess.savefile import load_game, save_game


def scripted(*lines):
    text = "".join(f"{line}\n" for line in lines)
    return Console(io.StringIO(text), io.StringIO())


def output(console):
    return console.stdout.getvalue()


def make_game(hands, mode, console, **kwargs):
    kwargs.setdefault("celebrate", None)
    return Game(make_board(6), hands, mode, console, **kwargs)


def test_console_ask_strips_and_shows_prompt():
    console = Console(io.StringIO("  hi \n"), io.StringIO())
    assert console.ask("q? ") == "hi"
    assert output(console) == "q? "


def test_console_ask_raises_at_end_of_input():
    console = Console(io.StringIO(""), io.StringIO())
    with pytest.raises(EOFError):
        console.ask("> ")


def test_ask_int_retries_until_number():
    console = scripted("abc", "", "7")
    assert ask_int(console, "n: ") == 7
    assert output(console).count("n: ") == 3


def test_ask_position_rejects_off_board_and_counts_from_zero():
    console = scripted("0", "3", "7", "1", "2", "5")
    assert ask_position(console, 6) == (1, 4)
    assert output(console).count("colonne : ") == 3


def test_scores_and_winner():
    board = make_board(6)
    board[(0, 0)].lord = 1
    board[(1, 0)].lord = 1
    board[(2, 2)].lord = 2
    assert scores(board) == (2, 1)
    assert winner(board) == 1
    board[(3, 3)].lord = 2
    board[(4, 4)].lord = 2
    assert winner(board) == 2


def test_winner_tie_is_zero():
    assert winner(make_board(6)) == 0
    assert scores(make_board(6)) == (0, 0)


def test_new_game_asks_until_size_in_range():
    console = scripted("5", "13", "8")
    game = new_game(Mode.CONNECT, console)
    assert game.board.size == 8
    assert game.mode is Mode.CONNECT
    assert [len(hand) for hand in game.hands] == [len(default_hand())] * 2


def test_turn_places_king_and_conquers_neighbours():
    console = scripted("x", "k", "3", "3")
    game = make_game((default_hand(), default_hand()), Mode.CONQUEST, console)
    assert game.turn(0) == (2, 2)
    assert game.board[(2, 2)].display == "k"
    assert all(game.board[(x, y)].lord == 1 for x in (1, 2, 3) for y in (1, 2, 3))
    assert not game.hands[0].has_king()
    assert len(game.hands[0]) == len(default_hand()) - 1


def test_turn_pass_keeps_hand():
    console = scripted("e")
    game = make_game((default_hand(), default_hand()), Mode.CONQUEST, console)
    assert game.turn(1) is None
    assert len(game.hands[1]) == len(default_hand())
    assert "passe son tour" in output(console)


def test_turn_rejects_occupied_square():
    console = scripted("p", "1", "1", "2", "2")
    game = make_game((Hand(["p"]), Hand(["p"])), Mode.CONQUEST, console)
    game.board[(0, 0)].display = "r"
    assert game.turn(0) == (1, 1)
    assert game.board[(0, 0)].display == "r"
    assert game.board[(1, 1)].display == "p"


def test_connect_turn_refuses_unsupported_piece_and_marks_attacks():
    console = scripted("r", "p", "1", "1")
    game = make_game((Hand(["r", "p"]), Hand(["p"])), Mode.CONNECT, console)
    assert game.turn(0) == (0, 0)
    assert game.hands[0].pieces == ["r"]
    attacked = game.board[(1, 1)]
    assert attacked.lord == 1
    assert attacked.attackers[0][0] == 1


def test_turn_action_repeats_until_valid_then_continues():
    console = scripted("9", "1")
    game = make_game((default_hand(), default_hand()), Mode.CONQUEST, console)
    assert game.turn_action(0) is True


def test_turn_action_abandon_stops():
    console = scripted("2")
    game = make_game((default_hand(), default_hand()), Mode.CONQUEST, console)
    assert game.turn_action(1) is False
    assert "Le joueur 2 abandonne" in output(console)


def test_turn_action_save_writes_game(tmp_path):
    path = tmp_path / "save.csv"
    console = scripted("3")
    game = make_game(
        (default_hand(), default_hand()), Mode.CONNECT, console, save_path=path
    )
    game.board[(2, 3)].lord = 2
    assert game.turn_action(1) is False
    saved = load_game(path)
    assert saved.player == 1
    assert saved.mode is Mode.CONNECT
    assert saved.board[(2, 3)].lord == 2
    assert saved.hands[0].pieces == default_hand().pieces


def test_play_conquest_to_the_end():
    calls = []
    console = scripted("1", "k", "1", "1", "1", "p", "6", "6")
    game = make_game(
        (Hand(["k"]), Hand(["p"])),
        Mode.CONQUEST,
        console,
        celebrate=lambda: calls.append(True),
    )
    assert game.play() == 1
    assert winner(game.board) == 1
    assert scores(game.board) == (4, 2)
    assert calls == [True]
    assert "Le joueur 1 remporte" in output(console)


def test_play_tie_does_not_celebrate():
    calls = []
    console = scripted("1", "e")
    game = make_game(
        (Hand([]), Hand([])),
        Mode.CONQUEST,
        console,
        celebrate=lambda: calls.append(True),
    )
    assert game.play() == 0
    assert calls == []
    assert "Egalite" in output(console)


def test_play_stops_when_saved(tmp_path):
    path = tmp_path / "save.csv"
    console = scripted("3")
    game = make_game(
        (default_hand(), default_hand()), Mode.CONNECT, console, save_path=path
    )
    assert game.play() is None
    assert load_game(path).size == 6


def test_resume_game_starts_with_saved_player(tmp_path):
    path = tmp_path / "save.csv"
    save_game(path, Mode.CONQUEST, 1, make_board(6), (Hand([]), Hand(["p"])))
    console = scripted("1", "p", "1", "6")
    game = resume_game(path, console)
    game.celebrate = None
    assert game.first_player == 1
    assert game.play() == 2
    assert game.board[(0, 5)].lord == 2
    assert game.board[(1, 4)].lord == 2
    assert "Au joueur 2" in output(console)
    assert "Au joueur 1" not in output(console)


def test_game_rejects_bad_first_player():
    with pytest.raises(ValueError):
        Game(make_board(6), (Hand([]), Hand([])), Mode.CONQUEST, scripted(), first_player=2)