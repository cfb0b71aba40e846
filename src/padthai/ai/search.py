"""Minimax search with alpha-beta pruning."""

import logging
import random
from typing import Optional, List, Dict, Any, Mapping, Tuple
from dataclasses import dataclass

from ..types import Move, Player, CaptureSequence, is_valid_move
from ..board import Board, BoardLike, as_board
from ..movegen import get_all_possible_moves_for_player
from ..captures import find_forced_captures
from ..transition import apply_sequence
from ..rules import MAX_SEARCH_DEPTH
from ..config import Config, get_config
from .eval import material_score, resolve_weights

logger = logging.getLogger(__name__)

INF = float('inf')

# Search depth for difficulty levels
DIFFICULTY_DEPTHS = {
    'easy': 2,
    'medium': 4,
    'hard': 6,
}


@dataclass
class SearchResult:
    """Result of a search."""
    move: Optional[Move]
    sequence: Optional[CaptureSequence]
    score: float
    depth: int
    nodes: int


def generate_plies(board: BoardLike, player: Player) -> List[CaptureSequence]:
    """
    Every legal ply for a player.

    When any capture exists only the longest capture sequences are legal;
    otherwise each plain move is returned as a one-move sequence.
    """
    board = as_board(board)
    forced = find_forced_captures(board, player)
    if forced:
        return forced
    moves, _ = get_all_possible_moves_for_player(board, player)
    return [(move,) for move in moves]


def _loss_score(player: Player) -> float:
    """Score of a position in which ``player`` has lost."""
    return -INF if player == Player.WHITE else INF


class AlphaBetaSearch:
    """
    Fixed-depth minimax with alpha-beta pruning.

    White maximizes and Black minimizes. A side with no legal ply has lost,
    whatever depth is left. The searcher keeps nothing between calls except
    the node counter, so one instance per call (or per thread) is enough.
    """

    def __init__(self, weights: Optional[Mapping[str, float]] = None,
                 max_depth: int = MAX_SEARCH_DEPTH,
                 rng: Optional[random.Random] = None, shuffle: bool = True):
        self.weights = resolve_weights(weights)
        self.max_depth = max(1, max_depth)
        self.rng = rng
        self.shuffle = shuffle
        self.nodes_searched = 0

    def minimax(self, board: BoardLike, depth: int, alpha: float, beta: float,
                maximizing: bool) -> float:
        """
        Score a position with ``depth`` plies of lookahead.

        Args:
            board: Position to score.
            depth: Remaining plies; 0 or less evaluates statically.
            alpha: Best score White is already assured of.
            beta: Best score Black is already assured of.
            maximizing: True if White is to move.

        Returns:
            Positive favors White. -inf/+inf when White/Black has no legal ply.
        """
        board = as_board(board)
        if depth > self.max_depth:
            logger.warning("Search depth %d capped at %d", depth, self.max_depth)
            depth = self.max_depth
        return self._alphabeta(board, depth, alpha, beta, maximizing)

    def _alphabeta(self, board: Board, depth: int, alpha: float, beta: float,
                   maximizing: bool) -> float:
        self.nodes_searched += 1

        if depth <= 0:
            return material_score(board, self.weights)

        mover = Player.WHITE if maximizing else Player.BLACK
        plies = generate_plies(board, mover)
        if not plies:
            # No legal moves means this player loses
            return _loss_score(mover)

        if maximizing:
            best_score = -INF
            for ply in plies:
                score = self._alphabeta(apply_sequence(board, ply), depth - 1, alpha, beta, False)
                best_score = max(best_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Beta cutoff
            return best_score

        best_score = INF
        for ply in plies:
            score = self._alphabeta(apply_sequence(board, ply), depth - 1, alpha, beta, True)
            best_score = min(best_score, score)
            beta = min(beta, score)
            if beta <= alpha:
                break  # Alpha cutoff
        return best_score

    def search(self, board: BoardLike, player: Player, depth: int) -> SearchResult:
        """
        Pick a ply for ``player``.

        Candidates are shuffled first so that equally scored plies are chosen
        at random; the first candidate seen keeps a tie. Only strictly better
        scores replace the current best, starting from the loss score, so a
        player whose every ply loses gets no move.
        """
        board = as_board(board)
        player = Player(player)
        self.nodes_searched = 0

        if depth < 1:
            logger.warning("Search depth %d raised to 1", depth)
            depth = 1
        elif depth > self.max_depth:
            logger.warning("Search depth %d capped at %d", depth, self.max_depth)
            depth = self.max_depth

        plies = generate_plies(board, player)
        if not plies:
            return SearchResult(None, None, _loss_score(player), depth, 0)

        plies = list(plies)
        if self.shuffle:
            (self.rng or random).shuffle(plies)

        reply_maximizing = player == Player.BLACK
        best_ply: Optional[CaptureSequence] = None
        best_score = _loss_score(player)

        for ply in plies:
            if not ply or not is_valid_move(ply[0]):
                logger.error("Skipping invalid candidate ply: %r", ply)
                continue

            simulated = apply_sequence(board, ply)
            score = self._alphabeta(simulated, depth - 1, -INF, INF, reply_maximizing)

            if _is_better(score, best_score, player):
                best_score = score
                best_ply = ply

        if best_ply is None:
            logger.debug("Every ply loses for %s at depth %d", player.name, depth)
            return SearchResult(None, None, best_score, depth, self.nodes_searched)
        return SearchResult(best_ply[0], best_ply, best_score, depth, self.nodes_searched)


def _is_better(score: float, best_score: float, player: Player) -> bool:
    if player == Player.WHITE:
        return score > best_score
    return score < best_score


def minimax(board: BoardLike, depth: int, alpha: float, beta: float, maximizing: bool) -> float:
    """Alpha-beta minimax score of a position (positive favors White)."""
    return AlphaBetaSearch().minimax(board, depth, alpha, beta, maximizing)


def search_best_move(board: BoardLike, player: Player, depth: int,
                     rng: Optional[random.Random] = None,
                     weights: Optional[Mapping[str, float]] = None) -> SearchResult:
    """Search for the best ply and return the full result."""
    return AlphaBetaSearch(weights=weights, rng=rng).search(board, player, depth)


def find_best_move(board: BoardLike, player: Player, depth: int,
                   rng: Optional[random.Random] = None) -> Optional[Move]:
    """
    Get the best move for ``player``.

    Only the first move of the chosen ply is returned. After playing it, a
    capture chain may still be in progress; call again to get the next jump.

    Returns:
        The move to play, or None if the player has no legal move or loses
        whatever it plays.
    """
    return search_best_move(board, player, depth, rng=rng).move


def difficulty_settings(difficulty: str, custom_params: Optional[Dict[str, Any]] = None,
                        config: Optional[Config] = None) -> Tuple[int, Optional[Dict[str, float]]]:
    """
    Search depth and evaluation weights for a difficulty level.

    'custom' reads ``depth`` and ``weight_*`` from ``custom_params``, falling
    back to the configuration. Named levels use the default weights (None).
    """
    config = config or get_config()

    if difficulty == 'custom':
        params = custom_params or {}
        depth = params.get('depth', config.search.depth)
        weights = {
            'man': params.get('weight_man', config.evaluation.weight_man),
            'king': params.get('weight_king', config.evaluation.weight_king),
            'advancement': params.get('weight_advancement', config.evaluation.weight_advancement),
        }
        return depth, weights

    if difficulty not in DIFFICULTY_DEPTHS:
        logger.warning("Unknown difficulty %r, using medium", difficulty)
    return DIFFICULTY_DEPTHS.get(difficulty, DIFFICULTY_DEPTHS['medium']), None


def searcher_from_config(config: Optional[Config] = None,
                         weights: Optional[Mapping[str, float]] = None,
                         seed: Optional[int] = None) -> AlphaBetaSearch:
    """
    Build a searcher from the search settings.

    ``seed`` overrides ``search.seed`` for this searcher only.
    """
    search_config = (config or get_config()).search
    if seed is None:
        seed = search_config.seed
    rng = random.Random(seed) if seed is not None else None
    return AlphaBetaSearch(weights=weights, max_depth=search_config.max_depth,
                           rng=rng, shuffle=search_config.shuffle)


def get_best_move(board: BoardLike, player: Player, difficulty: str = 'medium',
                  custom_params: Optional[Dict[str, Any]] = None) -> Optional[Move]:
    """
    Get the best move at a difficulty level.

    Args:
        board: Current board
        player: Side to move
        difficulty: 'easy', 'medium', 'hard', or 'custom'
        custom_params: Custom parameters dict when difficulty is 'custom'
            (``depth``, ``weight_man``, ``weight_king``, ``weight_advancement``)

    Returns:
        The best move, or None if no legal move exists or every move loses.
    """
    config = get_config()
    depth, weights = difficulty_settings(difficulty, custom_params, config)
    return searcher_from_config(config, weights).search(board, player, depth).move
