"""Forced capture resolution for Pad Thai checkers.

When a player can capture, they must play one of the capture sequences that
takes the most pieces. A sequence is a chain of jumps by the same piece: after
each jump the piece keeps capturing from its landing square for as long as it
can. A man crowned by a jump continues the chain as a king.
"""

import logging
from typing import List, Tuple

from .types import CaptureSequence, Player, is_valid_move
from .board import Board, BoardLike, as_board, is_player_piece
from .movegen import get_all_possible_moves_for_player, get_possible_moves
from .transition import apply_move

logger = logging.getLogger(__name__)

# (longest length seen so far, every sequence of that length)
Accumulator = Tuple[int, List[CaptureSequence]]


def _record(sequence: CaptureSequence, acc: Accumulator) -> Accumulator:
    """Fold a finished sequence into the accumulator."""
    best_len, best = acc
    if len(sequence) > best_len:
        return len(sequence), [sequence]
    if len(sequence) == best_len:
        return best_len, best + [sequence]
    return acc


def _extend_sequence(board: Board, player: Player, sequence: CaptureSequence,
                     acc: Accumulator) -> Accumulator:
    """
    Depth-first extension of a capture sequence.

    Args:
        board: Board before the last move of ``sequence`` is played.
        player: Player making the captures.
        sequence: Jumps so far; the last one has not been applied to ``board``.
        acc: Longest sequences found so far.

    Returns:
        The updated accumulator.
    """
    last = sequence[-1]
    next_board = apply_move(board, last)
    landed = next_board.get(last.to_pos)

    if not is_player_piece(landed, player):
        return _record(sequence, acc)

    _, continuations = get_possible_moves(next_board, last.to_pos[0], last.to_pos[1], forced_only=True)

    extended = False
    for capture in continuations:
        if not is_valid_move(capture):
            logger.warning("Skipping malformed continuation capture: %r", capture)
            continue
        if capture.from_pos != last.to_pos:
            continue
        extended = True
        acc = _extend_sequence(next_board, player, sequence + (capture,), acc)

    if not extended:
        return _record(sequence, acc)
    return acc


def _is_well_formed(sequence) -> bool:
    if not isinstance(sequence, tuple) or len(sequence) == 0:
        return False
    return all(is_valid_move(move) for move in sequence)


def find_forced_captures(board: BoardLike, player: Player) -> List[CaptureSequence]:
    """
    Find the longest capture sequences available to a player.

    Returns:
        Every capture sequence of maximal length, in discovery order. Empty if
        the player has no capture at all, in which case plain moves are legal.
    """
    board = as_board(board)
    player = Player(player)

    _, captures = get_all_possible_moves_for_player(board, player)
    if not captures:
        return []

    acc: Accumulator = (0, [])
    for capture in captures:
        if not is_valid_move(capture):
            logger.warning("Skipping malformed initial capture: %r", capture)
            continue
        acc = _extend_sequence(board, player, (capture,), acc)

    result = []
    for sequence in acc[1]:
        if _is_well_formed(sequence):
            result.append(sequence)
        else:
            logger.warning("Dropping malformed capture sequence: %r", sequence)
    return result
