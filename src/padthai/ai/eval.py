"""Board evaluation for the search."""

from typing import Dict, Mapping, Optional

from ..types import Cell
from ..board import Board, BoardLike, as_board
from ..rules import BOARD_SIZE


# Default evaluation weights
DEFAULT_WEIGHTS: Dict[str, float] = {
    'man': 1.0,
    'king': 5.0,
    'advancement': 0.1,
}


def resolve_weights(weights: Optional[Mapping[str, float]] = None) -> Dict[str, float]:
    """Merge custom weights over the defaults; unknown keys are ignored."""
    resolved = dict(DEFAULT_WEIGHTS)
    if weights:
        for key in DEFAULT_WEIGHTS:
            if key in weights:
                resolved[key] = float(weights[key])
    return resolved


def evaluate_board(board: BoardLike, weights: Optional[Mapping[str, float]] = None) -> float:
    """
    Static evaluation of a board.

    Positive scores favor White, negative scores favor Black. Men are worth
    ``man`` plus ``advancement`` per row travelled toward promotion, kings a
    flat ``king``. There is no lookahead.
    """
    return material_score(as_board(board), resolve_weights(weights) if weights else DEFAULT_WEIGHTS)


def material_score(board: Board, weights: Mapping[str, float]) -> float:
    """Score of ``board`` under complete weights, as from ``resolve_weights``."""
    score = 0.0
    for (row, _), cell in board.get_pieces():
        if cell == Cell.WHITE_MAN:
            score += weights['man'] + (BOARD_SIZE - 1 - row) * weights['advancement']
        elif cell == Cell.WHITE_KING:
            score += weights['king']
        elif cell == Cell.BLACK_MAN:
            score -= weights['man'] + row * weights['advancement']
        elif cell == Cell.BLACK_KING:
            score -= weights['king']

    return score
