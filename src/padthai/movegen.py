"""Move generation for Pad Thai checkers."""

from typing import List, NamedTuple, Tuple

from .types import Move, Player, Position, Cell
from .board import Board, BoardLike, as_board, is_player_piece
from .rules import FORWARD_DIRECTIONS_WHITE, FORWARD_DIRECTIONS_BLACK, ALL_DIRECTIONS


class PossibleMoves(NamedTuple):
    """Plain moves and single-jump captures, kept apart."""
    moves: List[Move]
    captures: List[Move]


def get_move_directions(cell: Cell) -> List[Tuple[int, int]]:
    """Get all valid move directions for a piece."""
    if cell.is_king:
        return ALL_DIRECTIONS
    return FORWARD_DIRECTIONS_WHITE if cell.owner == Player.WHITE else FORWARD_DIRECTIONS_BLACK


def _man_moves(board: Board, pos: Position, player: Player, forced_only: bool) -> PossibleMoves:
    """Generate one-step moves and jumps for a man."""
    moves = []
    captures = []
    row, col = pos
    opponent = player.opponent()

    for dr, dc in get_move_directions(board.get(pos)):
        step_row, step_col = row + dr, col + dc
        if not Board.in_bounds(step_row, step_col):
            continue
        step_pos = (step_row, step_col)

        if not forced_only and board.is_empty(step_pos):
            moves.append(Move(pos, step_pos))

        land_row, land_col = row + 2 * dr, col + 2 * dc
        if not Board.in_bounds(land_row, land_col):
            continue
        land_pos = (land_row, land_col)

        if is_player_piece(board.get(step_pos), opponent) and board.is_empty(land_pos):
            captures.append(Move(pos, land_pos, captured=step_pos))

    return PossibleMoves(moves, captures)


def _king_moves(board: Board, pos: Position, player: Player, forced_only: bool) -> PossibleMoves:
    """
    Generate sliding moves and captures for a king.

    Along each diagonal the king may stop on any empty square before the first
    piece. If that piece is an opponent's, every empty square after it is a
    capture landing, until the next piece of either colour ends the scan.
    """
    moves = []
    captures = []
    row, col = pos

    for dr, dc in ALL_DIRECTIONS:
        target = None
        scan_row, scan_col = row + dr, col + dc

        while Board.in_bounds(scan_row, scan_col):
            scan_pos = (scan_row, scan_col)
            cell = board.get(scan_pos)

            if cell == Cell.EMPTY:
                if target is None:
                    if not forced_only:
                        moves.append(Move(pos, scan_pos))
                else:
                    captures.append(Move(pos, scan_pos, captured=target))
            elif is_player_piece(cell, player):
                # Blocked by own piece
                break
            else:
                if target is not None:
                    # Two pieces in a row cannot be jumped
                    break
                target = scan_pos

            scan_row += dr
            scan_col += dc

    return PossibleMoves(moves, captures)


def get_possible_moves(board: BoardLike, row: int, col: int, forced_only: bool = False) -> PossibleMoves:
    """
    Generate plain moves and single-jump captures for the piece at (row, col).

    Args:
        board: The current board state.
        row, col: Square of the piece to move.
        forced_only: Skip plain moves and only look for captures.

    Returns:
        PossibleMoves; both lists are empty for an empty or off-board square.
    """
    board = as_board(board)
    if not Board.in_bounds(row, col):
        return PossibleMoves([], [])

    cell = board.get((row, col))
    if cell == Cell.EMPTY:
        return PossibleMoves([], [])

    if cell.is_king:
        return _king_moves(board, (row, col), cell.owner, forced_only)
    return _man_moves(board, (row, col), cell.owner, forced_only)


def get_all_possible_moves_for_player(board: BoardLike, player: Player) -> PossibleMoves:
    """
    Collect every plain move and single-jump capture for a player.

    Pieces are visited in row-major order and each piece's moves keep the
    order they were generated in. Capture chaining and the mandatory capture
    rule are handled in ``captures.find_forced_captures``.
    """
    board = as_board(board)
    player = Player(player)
    all_moves = []
    all_captures = []

    for (row, col), _ in board.get_pieces(player):
        moves, captures = get_possible_moves(board, row, col)
        all_moves.extend(moves)
        all_captures.extend(captures)

    return PossibleMoves(all_moves, all_captures)


def has_legal_moves(board: BoardLike, player: Player) -> bool:
    """Check if a player has any legal moves."""
    board = as_board(board)
    player = Player(player)

    for (row, col), _ in board.get_pieces(player):
        moves, captures = get_possible_moves(board, row, col)
        if moves or captures:
            return True

    return False
