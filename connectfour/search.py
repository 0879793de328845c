"""Negamax search with alpha-beta pruning and a transposition table."""

from __future__ import annotations

from connectfour.board import NB_COLS
from connectfour.evaluation import static_eval
from connectfour.position import GameResult, Position
from connectfour.transposition import LOSS_SCORE, Entry, Flag, bound_flag

PSEUDO_INF = 2**31 - 2

_Table = dict[int, Entry]


def max_depth(pos: Position) -> int:
    """Return the search depth: shallow in the opening, deeper later."""
    if pos.full_occupancy().bit_count() < NB_COLS:
        return 6
    return 10


def get_best_move(pos: Position) -> int:
    """Return the best move for the side to move in ``pos``."""
    if pos.result() is not GameResult.ONGOING:
        raise ValueError("the game is over; there is no move to search")
    table: _Table = {}
    _, move = _negamax(pos, table, max_depth(pos), 0, -PSEUDO_INF, PSEUDO_INF)
    if move is None:
        raise RuntimeError("best move not found")
    return move


def _negamax(
    pos: Position, table: _Table, depth: int, ply: int, alpha: int, beta: int
) -> tuple[int, int | None]:
    entry = table.get(pos.zobrist_key())
    if entry is not None and entry.depth >= depth:
        score = entry.get_score(ply)
        if entry.flag is Flag.EXACT:
            return score, None
        if entry.flag is Flag.LOWER_BOUND:
            alpha = max(alpha, score)
        else:
            beta = min(beta, score)
        if alpha >= beta:
            return score, None

    result = pos.result()
    if result is GameResult.LOSS:
        score = LOSS_SCORE + ply
        table[pos.zobrist_key()] = Entry(Flag.EXACT, score, depth)
        return score, None
    if result is GameResult.DRAW:
        table[pos.zobrist_key()] = Entry(Flag.EXACT, 0, depth)
        return 0, None
    if depth == 0:
        return static_eval(pos), None
    return _search_moves(pos, table, depth, ply, alpha, beta)


def _search_moves(
    pos: Position, table: _Table, depth: int, ply: int, alpha: int, beta: int
) -> tuple[int, int | None]:
    start_alpha = alpha
    best_score = -PSEUDO_INF
    best_move: int | None = None

    for mv in pos.legal_moves():
        pos.play_move(mv)
        child_score, _ = _negamax(pos, table, depth - 1, ply + 1, -beta, -alpha)
        pos.undo_move(mv)
        score = -child_score

        if score <= best_score:
            continue
        best_score = score
        best_move = mv
        if best_score > alpha:
            alpha = best_score
            if alpha >= beta:
                break

    flag = bound_flag(best_score, start_alpha, beta)
    table[pos.zobrist_key()] = Entry(flag, best_score, depth)
    return best_score, best_move