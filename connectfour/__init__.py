"""Connect Four on bitboards, with a negamax engine and a terminal game."""

__version__ = "0.1.0"