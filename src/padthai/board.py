"""Board state representation for Pad Thai checkers."""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .types import Cell, Player, Position
from .rules import BOARD_SIZE, BLACK_ROWS, WHITE_ROWS, PROMOTION_ROW_WHITE, PROMOTION_ROW_BLACK


def is_player_piece(cell: int, player: int) -> bool:
    """Check if a cell value holds one of ``player``'s pieces."""
    if player == Player.WHITE:
        return cell == Cell.WHITE_MAN or cell == Cell.WHITE_KING
    if player == Player.BLACK:
        return cell == Cell.BLACK_MAN or cell == Cell.BLACK_KING
    return False


def is_king(cell: int) -> bool:
    """Check if a cell value holds a king of either colour."""
    return cell == Cell.WHITE_KING or cell == Cell.BLACK_KING


class Board:
    """
    Immutable 8x8 checkers board.

    Row 0 is the top. Black starts on rows 0-2 and moves down, White starts
    on rows 5-7 and moves up. Only dark squares, where (row + col) % 2 == 1,
    are populated by ``initial()``, but any square may hold a piece.

    Boards never change after construction; ``replace`` returns a new board.
    """

    SIZE = BOARD_SIZE

    __slots__ = ("_cells",)

    def __init__(self, rows: Optional[Iterable[Iterable[int]]] = None):
        """
        Create a board from an 8x8 grid of cell values, or an empty board.

        Raises:
            ValueError: If the grid is not 8x8 or holds an unknown cell value.
        """
        if rows is None:
            self._cells = tuple(
                tuple(Cell.EMPTY for _ in range(self.SIZE)) for _ in range(self.SIZE)
            )
            return

        cells = tuple(tuple(Cell(value) for value in row) for row in rows)
        if len(cells) != self.SIZE or any(len(row) != self.SIZE for row in cells):
            raise ValueError(f"Board must be {self.SIZE}x{self.SIZE}")
        self._cells = cells

    @classmethod
    def _from_cells(cls, cells: Tuple[Tuple[Cell, ...], ...]) -> "Board":
        board = cls.__new__(cls)
        board._cells = cells
        return board

    @classmethod
    def empty(cls) -> "Board":
        """Create a board with no pieces."""
        return cls()

    @classmethod
    def initial(cls) -> "Board":
        """Create a board with the standard initial setup."""
        rows = []
        for row in range(cls.SIZE):
            cells = []
            for col in range(cls.SIZE):
                if not cls.is_playable(row, col):
                    cells.append(Cell.EMPTY)
                elif row in BLACK_ROWS:
                    cells.append(Cell.BLACK_MAN)
                elif row in WHITE_ROWS:
                    cells.append(Cell.WHITE_MAN)
                else:
                    cells.append(Cell.EMPTY)
            rows.append(cells)
        return cls(rows)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> "Board":
        """Create a board from a grid of cell values (lists of ints are fine)."""
        return cls(rows)

    @classmethod
    def from_pieces(cls, pieces: Dict[Position, Cell]) -> "Board":
        """Create a board holding only the given pieces."""
        return cls().replace(pieces)

    @staticmethod
    def is_playable(row: int, col: int) -> bool:
        """Check if a square is a playable (dark) square."""
        return (row + col) % 2 == 1

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        """Check if a position is within the board."""
        return 0 <= row < Board.SIZE and 0 <= col < Board.SIZE

    @staticmethod
    def promotion_row(player: Player) -> int:
        """Get the promotion row for a player."""
        return PROMOTION_ROW_WHITE if player == Player.WHITE else PROMOTION_ROW_BLACK

    def get(self, pos: Position) -> Cell:
        """Get the cell value at a position."""
        row, col = pos
        return self._cells[row][col]

    def __getitem__(self, pos: Position) -> Cell:
        return self.get(pos)

    def is_empty(self, pos: Position) -> bool:
        """Check if a position is empty."""
        return self.get(pos) == Cell.EMPTY

    def replace(self, changes: Dict[Position, Cell]) -> "Board":
        """Return a new board with the given squares overwritten."""
        rows = [list(row) for row in self._cells]
        for (row, col), value in changes.items():
            rows[row][col] = Cell(value)
        return Board._from_cells(tuple(tuple(row) for row in rows))

    def clone(self) -> "Board":
        """Return a distinct board with the same contents."""
        return Board._from_cells(self._cells)

    def get_pieces(self, player: Optional[Player] = None) -> Iterator[Tuple[Position, Cell]]:
        """Iterate over occupied squares in row-major order, optionally filtered by player."""
        for row in range(self.SIZE):
            for col in range(self.SIZE):
                cell = self._cells[row][col]
                if cell == Cell.EMPTY:
                    continue
                if player is None or is_player_piece(cell, player):
                    yield (row, col), cell

    def count_pieces(self, player: Player) -> Tuple[int, int]:
        """Count (men, kings) for a player."""
        men = 0
        kings = 0
        for _, cell in self.get_pieces(player):
            if cell.is_king:
                kings += 1
            else:
                men += 1
        return men, kings

    def to_rows(self) -> List[List[int]]:
        """Convert board to a plain grid of ints."""
        return [[int(cell) for cell in row] for row in self._cells]

    def to_compact(self) -> dict:
        """Convert board to compact JSON-serializable format."""
        data: Dict[str, List[List[int]]] = {
            "white_men": [],
            "white_kings": [],
            "black_men": [],
            "black_kings": [],
        }
        keys = {
            Cell.WHITE_MAN: "white_men",
            Cell.WHITE_KING: "white_kings",
            Cell.BLACK_MAN: "black_men",
            Cell.BLACK_KING: "black_kings",
        }
        for (row, col), cell in self.get_pieces():
            data[keys[cell]].append([row, col])
        return data

    @classmethod
    def from_compact(cls, data: dict) -> "Board":
        """Create a board from compact format."""
        pieces: Dict[Position, Cell] = {}
        for pos in data.get("white_men", []):
            pieces[tuple(pos)] = Cell.WHITE_MAN
        for pos in data.get("white_kings", []):
            pieces[tuple(pos)] = Cell.WHITE_KING
        for pos in data.get("black_men", []):
            pieces[tuple(pos)] = Cell.BLACK_MAN
        for pos in data.get("black_kings", []):
            pieces[tuple(pos)] = Cell.BLACK_KING
        return cls.from_pieces(pieces)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Board):
            return self._cells == other._cells
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._cells)

    def __str__(self) -> str:
        """String representation of the board."""
        symbols = {
            Cell.WHITE_MAN: "w",
            Cell.WHITE_KING: "W",
            Cell.BLACK_MAN: "b",
            Cell.BLACK_KING: "B",
        }
        lines = ["  0 1 2 3 4 5 6 7"]
        for row in range(self.SIZE):
            row_str = f"{row} "
            for col in range(self.SIZE):
                cell = self._cells[row][col]
                if cell == Cell.EMPTY:
                    row_str += ". " if self.is_playable(row, col) else "  "
                else:
                    row_str += symbols[cell] + " "
            lines.append(row_str)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board({sum(1 for _ in self.get_pieces())} pieces)"


BoardLike = Union[Board, Iterable[Iterable[int]]]


def as_board(board: BoardLike) -> Board:
    """Return ``board`` itself if it is a Board, otherwise build one from a grid."""
    if isinstance(board, Board):
        return board
    return Board(board)
