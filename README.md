# conquestchess

A chess variant for two players sharing one terminal. No piece ever moves.
On each turn a player takes a piece from their hand and puts it on an empty
square. Every empty square that piece attacks under the usual chess movement
rules then belongs to that player. Occupied squares block the line, whoever
owns them. At the end, the player who owns more squares wins. Equal counts
make a tie.

The prompts and messages in the game are in French.

## Installation

```
pip install .
```

## Playing

```
conquestchess
```

The same menu also starts with `python -m conquestchess.cli`.

The main menu has three choices: start a new game, resume a saved game, or
quit. A new game asks for a mode and then a board size. The board is square,
and each side is 6 to 12 squares long. Each player starts with 8 pawns, 2
rooks, 2 knights, 2 bishops, a queen and a king.

Option:

- `--save-file PATH`: the file that games are saved to and resumed from.
  The default is `gamesave.csv` in the current directory.

When input runs out, or on Ctrl-C, the program says goodbye and exits with
status 0.

### Modes

- **Conquest**: any piece in your hand can go on any empty square. The game
  ends when both hands are empty.
- **Connect**: a pawn can go on any empty square. Any other piece must go on
  an empty square that you own and that one of your pieces of the rank just
  below already attacks. The ranks, from lowest to highest, are pawn, knight,
  bishop, rook, queen and king, so the king needs a square attacked by your
  queen. You cannot pick a piece that has no such square on the board. The
  game ends as soon as either player has placed their king.

### A turn

At the start of each turn the player chooses one of these:

1. place a piece,
2. resign, which ends the game with no winner announced,
3. save the game and quit.

To place a piece, type its letter: `p`, `n`, `b`, `r`, `q` or `k`. Type `e`
to pass. Then give the column and the row, both counted from 1. If the square
is not allowed, the game asks for coordinates again. When a piece is taken
from the hand, the last piece in the hand moves into its place, so the order
of the hand changes during play.

On the board, player 1's pieces are shown in upper case and their squares
have a red background. Player 2's pieces are in lower case on green squares.
On Windows, when a game has a winner, `win.mp3` is played if that file is in
the current directory.

### Saving

"Save and quit" writes the save file. The file is plain text, with fields
separated by semicolons. It holds the mode, the board size, the player whose
turn it was, every square (and in connect mode its attack records), and both
hands. "Resume a saved game" reads the file back and gives the turn to the
player who saved. If the file is missing or cannot be read, the game shows a
message and returns to the menu.

## Using it as a library

```python
from conquestchess.board import make_board
from conquestchess.moves import takeover, ignore_attack
from conquestchess.game import scores, winner

board = make_board(8)
cell = board[3, 3]
cell.display, cell.lord = "q", 1
takeover(board, (3, 3), ignore_attack)
print(board.render(colored=False))
print(scores(board), winner(board))
```

The modules:

- `conquestchess.board`: `Cell`, `Hand` (with `take` and `has_king`),
  `Board` (with `in_bounds`, `render` and indexing by `(column, row)`),
  `make_board`, `default_hand` and `piece_rank`.
- `conquestchess.moves`: `takeover` gives the owner of a placed piece every
  free square that piece attacks. `mark_attack` records attacks and
  `ignore_attack` does not. `lords_view` and `attackers_view` print the board
  state as text for debugging.
- `conquestchess.modes`: `Mode`, `ConquestRules`, `ConnectRules` and
  `rules_for`.
- `conquestchess.savefile`: `save_game`, `load_game`, `SavedGame` and
  `SaveError`.
- `conquestchess.game`: `Console`, `ask_int`, `ask_position`, `Game`,
  `new_game`, `resume_game`, `scores` and `winner`.
- `conquestchess.cli`: `main_menu` and `main`.

`Console` reads from and writes to any text streams, so you can script a game
by passing `io.StringIO` objects.

## Limitations

Both players share the same terminal. There is no computer opponent and no
network play. Only one saved game is kept per save file.

## Tests

```
pip install .[test]
pytest
```