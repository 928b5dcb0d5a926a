# bitboard_queens/lines.py
# Purpose: Build the 42 "attack lines" of the 8x8 board (8 rows, 8 columns,
# 26 diagonals) as 64-bit masks, plus the per-square union of the lines
# through each square. Both tables are built once and only read afterwards.

from functools import lru_cache
from typing import Tuple

# -----------------------
# Configuration
# -----------------------

BOARD_SIZE = 8
NUM_SQUARES = BOARD_SIZE * BOARD_SIZE
NUM_LINES = 42

FULL_BOARD = 0xFFFFFFFFFFFFFFFF
EMPTY_BOARD = 0

ROW_0 = 0x00000000000000FF
COLUMN_0 = 0x0101010101010101
MAIN_DIAGONAL = 0x8040201008040201
ANTI_DIAGONAL = 0x0102040810204080

# Index ranges inside the table returned by build_attack_lines()
ROWS = range(0, 8)
COLUMNS = range(8, 16)
DIAGONALS = range(16, 42)


def build_attack_lines() -> Tuple[int, ...]:
    """
    Returns the 42 attack-line masks in a fixed order:

      0..7   rows        (0xFF << 8k)
      8..15  columns     (0x0101010101010101 << k)
      16     full main diagonal
      17     full anti diagonal
      18..23 main diagonal shifted up 1..6 rows
      24..29 main diagonal shifted down 1..6 rows
      30..35 anti diagonal shifted up 1..6 rows
      36..41 anti diagonal shifted down 1..6 rows

    Shifting a full diagonal by whole rows drops the squares pushed off the
    board, which leaves exactly the shorter parallel diagonal.
    """
    lines = [EMPTY_BOARD] * NUM_LINES

    for k in range(BOARD_SIZE):
        lines[k] = (ROW_0 << (k * BOARD_SIZE)) & FULL_BOARD
        lines[8 + k] = (COLUMN_0 << k) & FULL_BOARD

    lines[16] = MAIN_DIAGONAL
    lines[17] = ANTI_DIAGONAL

    for k in range(6):
        shift = BOARD_SIZE * (k + 1)
        lines[18 + k] = (MAIN_DIAGONAL << shift) & FULL_BOARD
        lines[24 + k] = MAIN_DIAGONAL >> shift
        lines[30 + k] = (ANTI_DIAGONAL << shift) & FULL_BOARD
        lines[36 + k] = ANTI_DIAGONAL >> shift

    return tuple(lines)


def build_square_attacks(lines: Tuple[int, ...]) -> Tuple[int, ...]:
    """Union of every line through each bit index 0..63 (the square itself included)."""
    attacks = []
    for index in range(NUM_SQUARES):
        bit = 1 << index
        mask = EMPTY_BOARD
        for line in lines:
            if line & bit:
                mask |= line
        attacks.append(mask)
    return tuple(attacks)


def line_kind(index: int) -> str:
    """Returns "row", "column" or "diagonal" for a line index."""
    if index in ROWS:
        return "row"
    if index in COLUMNS:
        return "column"
    if index in DIAGONALS:
        return "diagonal"
    raise ValueError(f"Line index out of range: {index}")


@lru_cache(maxsize=None)
def attack_lines() -> Tuple[int, ...]:
    """Process-wide line table, built on first use."""
    return build_attack_lines()


@lru_cache(maxsize=None)
def square_attacks() -> Tuple[int, ...]:
    return build_square_attacks(attack_lines())
