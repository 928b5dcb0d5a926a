# bitboard_queens/render.py
# Board <-> text and Board <-> numpy grid conversions.
# Square (row, col) lives in bit 63 - (8*row + col); row 0 is the top row.

from typing import List, Tuple
import numpy as np

from .lines import BOARD_SIZE, EMPTY_BOARD, FULL_BOARD

OCCUPIED_GLYPH = "X"
EMPTY_GLYPH = "."


def square_bit(row: int, col: int) -> int:
    """Returns the single-bit mask for (row, col)."""
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ValueError(f"Square out of range: ({row}, {col})")
    return 1 << (63 - (BOARD_SIZE * row + col))


def is_set(board: int, row: int, col: int) -> bool:
    return bool((board >> (63 - (BOARD_SIZE * row + col))) & 1)


def format_board(board: int, occupied: str = OCCUPIED_GLYPH, empty: str = EMPTY_GLYPH) -> str:
    """
    Renders a board as 8 lines of 8 characters, top row first and
    columns left to right. No trailing newline.
    """
    rows = []
    for y in range(BOARD_SIZE):
        rows.append("".join(occupied if is_set(board, y, x) else empty for x in range(BOARD_SIZE)))
    return "\n".join(rows)


def board_rows(board: int) -> List[str]:
    """Same rendering as format_board, split per row."""
    return format_board(board).split("\n")


def board_to_grid(board: int) -> np.ndarray:
    """Returns an 8x8 bool array, grid[row, col] True where the bit is set."""
    grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=bool)
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            grid[r, c] = is_set(board, r, c)
    return grid


def grid_to_board(grid: np.ndarray) -> int:
    """Inverse of board_to_grid. Accepts any array-like of truthy values."""
    arr = np.asarray(grid)
    if arr.shape != (BOARD_SIZE, BOARD_SIZE):
        raise ValueError(f"Expected an 8x8 grid, got shape {arr.shape}")
    board = EMPTY_BOARD
    for r, c in zip(*np.nonzero(arr)):
        board |= square_bit(int(r), int(c))
    return board & FULL_BOARD


def queen_squares(board: int) -> List[Tuple[int, int]]:
    """(row, col) of every set square, top row first."""
    return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE) if is_set(board, r, c)]
