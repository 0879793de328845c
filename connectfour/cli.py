"""Interactive terminal game against the computer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from connectfour.bitboard import is_bit_set
from connectfour.board import (
    EMPTY_SYMBOL,
    NB_COLS,
    NB_ROWS,
    Player,
    cell_of,
    col_name_of,
    col_of,
    row_name_of,
    row_of,
)
from connectfour.position import GameResult, Position
from connectfour.search import get_best_move

CLR_RESET = "\x1b[0m"
CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"

ReadLine = Callable[[str], str]
Write = Callable[[str], object]


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def render_position(pos: Position) -> str:
    """Draw the board, top row first, with row and column names."""
    yellow = pos.occupancy_of(Player.YELLOW)
    red = pos.occupancy_of(Player.RED)
    lines = []
    for row in reversed(range(NB_ROWS)):
        symbols = []
        for col in range(NB_COLS):
            cell = cell_of(row, col)
            if is_bit_set(yellow, cell):
                symbols.append(Player.YELLOW.symbol())
            elif is_bit_set(red, cell):
                symbols.append(Player.RED.symbol())
            else:
                symbols.append(EMPTY_SYMBOL)
        lines.append(f"{row_name_of(row)} {''.join(symbols)}")
    footer = "   " + "".join(f"{col_name_of(col)} " for col in range(NB_COLS))
    return "\n".join(lines) + "\n" + footer + "\n\n"


def prompt_choice(
    prompt: str, items: Sequence[str], read_line: ReadLine, write: Write
) -> int:
    """Ask until the user picks one of ``items`` by number or name; return its index."""
    if not items:
        raise ValueError("nothing to choose from")
    while True:
        write(f"{prompt}\n")
        for number, item in enumerate(items, start=1):
            write(f"  {number}) {item}\n")
        answer = read_line("> ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(items):
            return int(answer) - 1
        for index, item in enumerate(items):
            if answer and answer.casefold() == item.casefold():
                return index
        write(f"Invalid choice: {answer!r}\n")


def _describe_move(mv: int, color: str) -> str:
    name = f"{col_name_of(col_of(mv))}{row_name_of(row_of(mv))}"
    return f"The computer played to {color}{name}{CLR_RESET}.\n"


def play_game(
    read_line: ReadLine | None = None, write: Write | None = None
) -> Player | None:
    """Play one game; return the winner, or None for a draw."""
    read_line = read_line if read_line is not None else input
    write = write if write is not None else _stdout_write

    sides = [Player.YELLOW, Player.RED]
    human = sides[
        prompt_choice("Choose your color", [p.symbol() for p in sides], read_line, write)
    ]
    computer = human.opponent()

    pos = Position()
    computer_move: int | None = None

    while True:
        active = pos.active_player()
        write(CLEAR_SCREEN)
        write(render_position(pos))

        if active is human and computer_move is not None:
            write(_describe_move(computer_move, computer.color()))

        result = pos.result()
        if result is GameResult.LOSS:
            winner = active.opponent()
            write(f"{winner.symbol()} wins!\n")
            return winner
        if result is GameResult.DRAW:
            write("The game is a draw.\n")
            return None

        if active is human:
            moves = pos.legal_moves()
            names = [col_name_of(col_of(mv)) for mv in moves]
            prompt = f"{human.color()}Choose your move{CLR_RESET}"
            pos.play_move(moves[prompt_choice(prompt, names, read_line, write)])
        else:
            write(f"{computer.color()}Thinking...{CLR_RESET}\n")
            computer_move = get_best_move(pos)
            pos.play_move(computer_move)
        write("\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="connectfour", description="Play Connect Four against the computer."
    )
    parser.parse_args(argv)
    try:
        play_game()
    except (EOFError, KeyboardInterrupt):
        _stdout_write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())