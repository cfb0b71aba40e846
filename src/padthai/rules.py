"""Game rules constants for Pad Thai checkers."""

# Board dimensions
BOARD_SIZE = 8

# Starting rows for each player
BLACK_ROWS = range(0, 3)  # Rows 0, 1, 2
WHITE_ROWS = range(5, 8)  # Rows 5, 6, 7

# Diagonal directions for moves
# (row_delta, col_delta)
# White moves upward (decreasing row), Black moves downward (increasing row)
FORWARD_DIRECTIONS_WHITE = [(-1, -1), (-1, 1)]  # Up-left, Up-right
FORWARD_DIRECTIONS_BLACK = [(1, -1), (1, 1)]    # Down-left, Down-right
ALL_DIRECTIONS = [(-1, -1), (-1, 1), (1, -1), (1, 1)]  # For kings

# Promotion
# White promotes on row 0
# Black promotes on row 7
PROMOTION_ROW_WHITE = 0
PROMOTION_ROW_BLACK = BOARD_SIZE - 1

# Hard ceiling on search depth
MAX_SEARCH_DEPTH = 12
