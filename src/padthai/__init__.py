"""Pad Thai checkers engine.

Stateless move generation, forced-capture resolution and alpha-beta move
selection for 8x8 checkers with flying kings.
"""

from .types import Cell, Player, Move, Position, CaptureSequence, is_valid_move
from .board import Board, as_board, is_player_piece, is_king
from .movegen import (
    PossibleMoves,
    get_possible_moves,
    get_all_possible_moves_for_player,
    has_legal_moves,
)
from .transition import apply_move, apply_sequence
from .captures import find_forced_captures
from .ai.eval import evaluate_board, DEFAULT_WEIGHTS
from .ai.search import (
    AlphaBetaSearch,
    SearchResult,
    generate_plies,
    minimax,
    find_best_move,
    search_best_move,
    get_best_move,
)

__version__ = "1.0.0"

__all__ = [
    'Cell',
    'Player',
    'Move',
    'Position',
    'CaptureSequence',
    'is_valid_move',
    'Board',
    'as_board',
    'is_player_piece',
    'is_king',
    'PossibleMoves',
    'get_possible_moves',
    'get_all_possible_moves_for_player',
    'has_legal_moves',
    'apply_move',
    'apply_sequence',
    'find_forced_captures',
    'evaluate_board',
    'DEFAULT_WEIGHTS',
    'AlphaBetaSearch',
    'SearchResult',
    'generate_plies',
    'minimax',
    'find_best_move',
    'search_best_move',
    'get_best_move',
]
