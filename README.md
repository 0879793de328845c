# connectfour

Connect Four in your terminal, played against a computer opponent.

Each player's pieces are stored in a bitboard. The computer picks its moves
with a negamax search. The search uses alpha-beta pruning, a transposition
table keyed by Zobrist hashes, and a small static evaluation. The evaluation
rewards pieces spread over many columns and penalises pieces split into
separate groups. The search goes 6 plies deep while fewer than 7 pieces are
on the board, and 10 plies deep after that.

## Installation

```
pip install .
```

The package needs no third-party libraries.

## Playing

```
connectfour
```

1. Pick your colour. Yellow (🟡) moves first and Red (🔴) moves second.
   At every prompt the choices are listed with numbers. Type a number, or
   type the choice itself (case does not matter). An invalid answer is
   rejected and the prompt is shown again.
2. On each of your turns the board is drawn with rows `1`–`6` and columns
   `A`–`G`. You then choose one of the columns that still has room.
3. After the computer moves, the cell it played, such as `D1`, is shown.

The game ends when one side connects four pieces in a row, a column or a
diagonal. It also ends as a draw when the board is full. If input ends (EOF)
or you press Ctrl-C, the command exits with status 1. Otherwise it exits
with status 0.

Your terminal must be able to show ANSI colours and emoji.

## Library use

```python
from connectfour.position import Position, GameResult
from connectfour.search import get_best_move
from connectfour.cli import render_position

pos = Position()
pos.play_move(get_best_move(pos))
print(render_position(pos))
print(pos.result() is GameResult.ONGOING)
```

The modules:

- `connectfour.position`
  - `Position` provides `play_move`, `undo_move`, `legal_moves`, `result`,
    `active_player`, `occupancy_of`, `full_occupancy` and `zobrist_key`.
  - `GameResult` has the values `LOSS`, `DRAW` and `ONGOING`. A result is
    given from the point of view of the side to move.
  - A move is a cell index, `row * 7 + col`, with row 0 at the bottom.
- `connectfour.search`
  - `get_best_move(pos)` returns the best cell for the side to move.
  - It raises `ValueError` if the game is already over.
- `connectfour.evaluation`
  - `static_eval(pos)` gives the static evaluation of a position.
- `connectfour.cli`
  - `play_game(read_line, write)` runs one game through the two callables
    you pass in, so a game can be scripted.
  - It returns the winning `Player`, or `None` for a draw.

## Limitations

- The game is always one human against the computer. There is no
  two-player mode.
- You cannot set the search depth or a difficulty level.
- Games cannot be saved or loaded.

## Development

```
pip install -e ".[test]"
pytest
```