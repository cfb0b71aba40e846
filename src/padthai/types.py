"""Type definitions for Pad Thai checkers."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from .rules import BOARD_SIZE


class Player(IntEnum):
    """Player identifiers."""
    WHITE = 1  # Starts on rows 5-7, moves upward (decreasing row)
    BLACK = 2  # Starts on rows 0-2, moves downward (increasing row)

    def opponent(self) -> "Player":
        """Return the opposing player."""
        return Player.BLACK if self == Player.WHITE else Player.WHITE


class Cell(IntEnum):
    """Contents of a single board square."""
    EMPTY = 0
    WHITE_MAN = 1
    BLACK_MAN = 2
    WHITE_KING = 3
    BLACK_KING = 4

    @property
    def owner(self) -> Optional[Player]:
        """Player owning the piece on this square, or None if empty."""
        if self in (Cell.WHITE_MAN, Cell.WHITE_KING):
            return Player.WHITE
        if self in (Cell.BLACK_MAN, Cell.BLACK_KING):
            return Player.BLACK
        return None

    @property
    def is_king(self) -> bool:
        return self in (Cell.WHITE_KING, Cell.BLACK_KING)

    def promote(self) -> "Cell":
        """Return the king version of a man; kings and empty squares are unchanged."""
        if self == Cell.WHITE_MAN:
            return Cell.WHITE_KING
        if self == Cell.BLACK_MAN:
            return Cell.BLACK_KING
        return self


# Type alias for board positions
Position = Tuple[int, int]


@dataclass(frozen=True)
class Move:
    """
    A single step of play: one plain move or one jump.

    Attributes:
        from_pos: Square the piece leaves.
        to_pos: Square the piece lands on.
        captured: Square of the jumped opponent piece, or None for a plain move.
    """
    from_pos: Position
    to_pos: Position
    captured: Optional[Position] = None

    @property
    def is_capture(self) -> bool:
        """Check if this move removes an opponent piece."""
        return self.captured is not None

    def to_dict(self) -> dict:
        """Convert move to a JSON-serializable dict."""
        data = {
            "from": {"row": self.from_pos[0], "col": self.from_pos[1]},
            "to": {"row": self.to_pos[0], "col": self.to_pos[1]},
        }
        if self.captured is not None:
            data["captured"] = {"row": self.captured[0], "col": self.captured[1]}
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Move":
        """Create a Move from a dict representation."""
        captured = data.get("captured")
        return cls(
            from_pos=(data["from"]["row"], data["from"]["col"]),
            to_pos=(data["to"]["row"], data["to"]["col"]),
            captured=(captured["row"], captured["col"]) if captured else None,
        )

    def __repr__(self) -> str:
        (fr, fc), (tr, tc) = self.from_pos, self.to_pos
        if self.captured is not None:
            cr, cc = self.captured
            return f"Move(({fr},{fc})x({tr},{tc}), captured=({cr},{cc}))"
        return f"Move(({fr},{fc})->({tr},{tc}))"


# A chain of jumps by one piece, or a plain move wrapped as a single step.
# Always non-empty; this is the unit of play the search works with.
CaptureSequence = Tuple[Move, ...]


def _is_square(pos) -> bool:
    if not isinstance(pos, tuple) or len(pos) != 2:
        return False
    row, col = pos
    if isinstance(row, bool) or isinstance(col, bool):
        return False
    if not isinstance(row, int) or not isinstance(col, int):
        return False
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_valid_move(move) -> bool:
    """
    Structural check for a move object.

    True when ``move`` is a Move whose endpoints are distinct on-board squares
    and whose ``captured`` square, if any, is on the board and differs from
    both endpoints. Says nothing about legality on a particular board.
    """
    if not isinstance(move, Move):
        return False
    if not _is_square(move.from_pos) or not _is_square(move.to_pos):
        return False
    if move.from_pos == move.to_pos:
        return False
    if move.captured is None:
        return True
    return _is_square(move.captured) and move.captured not in (move.from_pos, move.to_pos)
