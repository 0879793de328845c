import pytest

from connectfour.board import EMPTY_SYMBOL, Player, cell_of
from connectfour.cli import main, play_game, prompt_choice, render_position
from connectfour.position import Position


def _reader(answers):
    queue = list(answers)

    def read_line(prompt):
        if not queue:
            raise EOFError
        return queue.pop(0)

    return read_line


def test_render_empty_board():
    lines = render_position(Position()).split("\n")
    assert lines[0] == "6 " + EMPTY_SYMBOL * 7
    assert lines[5] == "1 " + EMPTY_SYMBOL * 7
    assert lines[6] == "   A B C D E F G "


def test_render_shows_pieces():
    pos = Position()
    pos.play_move(cell_of(0, 0))
    pos.play_move(cell_of(0, 6))
    bottom = render_position(pos).split("\n")[5]
    assert bottom == "1 " + Player.YELLOW.symbol() + EMPTY_SYMBOL * 5 + Player.RED.symbol()


def test_prompt_choice_by_number():
    out = []
    assert prompt_choice("Pick", ["A", "B", "C"], _reader(["2"]), out.append) == 1
    assert out[0] == "Pick\n"


def test_prompt_choice_by_name_after_invalid_input():
    out = []
    index = prompt_choice("Pick", ["A", "B"], _reader(["9", "x", "b"]), out.append)
    assert index == 1
    assert sum(line.startswith("Invalid choice") for line in out) == 2


def test_prompt_choice_needs_items():
    with pytest.raises(ValueError):
        prompt_choice("Pick", [], _reader(["1"]), lambda text: None)


def test_main_returns_error_on_end_of_input(monkeypatch, capsys):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main([]) == 1
    assert "Choose your color" in capsys.readouterr().out