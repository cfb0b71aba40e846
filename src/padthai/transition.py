"""Board transitions: applying moves and capture sequences."""

import logging
from typing import Iterable

from .types import Cell, Move, is_valid_move
from .board import Board, BoardLike, as_board

logger = logging.getLogger(__name__)


def apply_move(board: BoardLike, move: Move) -> Board:
    """
    Apply a single move and return the resulting board.

    The piece on ``from_pos`` lands on ``to_pos``, the captured square (if any)
    is cleared, and a man reaching the far row is crowned in the same step.
    The input board is never modified.

    An invalid move is logged and leaves the position unchanged: the result is
    a copy of the input, so callers that need the move to have happened must
    check ``is_valid_move`` themselves.
    """
    board = as_board(board)
    if not is_valid_move(move):
        logger.error("Invalid move passed to apply_move: %r", move)
        return board.clone()

    piece = board.get(move.from_pos)
    if piece.owner is not None and not piece.is_king \
            and move.to_pos[0] == Board.promotion_row(piece.owner):
        piece = piece.promote()

    changes = {move.from_pos: Cell.EMPTY}
    if move.captured is not None:
        changes[move.captured] = Cell.EMPTY
    changes[move.to_pos] = piece

    return board.replace(changes)


def apply_sequence(board: BoardLike, sequence: Iterable[Move]) -> Board:
    """
    Apply every move of a capture sequence (or a wrapped plain move) in order.

    If any move in the sequence is invalid the whole sequence is abandoned and
    the board from before the sequence is returned.
    """
    board = as_board(board)
    simulated = board

    for move in sequence:
        if not is_valid_move(move):
            logger.error("Invalid move in sequence, keeping board unchanged: %r", move)
            return board
        simulated = apply_move(simulated, move)

    return simulated
