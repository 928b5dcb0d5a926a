from typing import List

from .lines import BOARD_SIZE
from .render import is_set

QUEEN_FEN = "Q"


def algebraic_square(row: int, col: int) -> str:
    """Converts grid indices to algebraic notation. row 0 = rank 8, col 0 = file 'a'."""
    files = "abcdefgh"
    file_ch = files[col]
    rank_ch = str(BOARD_SIZE - row)
    return f"{file_ch}{rank_ch}"


def algebraic_squares(board: int) -> List[str]:
    """Algebraic names of all set squares, top row first."""
    return [
        algebraic_square(r, c)
        for r in range(BOARD_SIZE)
        for c in range(BOARD_SIZE)
        if is_set(board, r, c)
    ]


def placement_fen(board: int) -> str:
    """
    Builds the FEN piece-placement field for a board of queens.
    Row 0 (rank 8) comes first, set squares become 'Q', runs of empty squares digits.
    """
    rows = []
    for r in range(BOARD_SIZE):
        empty = 0
        out = ""
        for c in range(BOARD_SIZE):
            if not is_set(board, r, c):
                empty += 1
            else:
                if empty > 0:
                    out += str(empty)
                    empty = 0
                out += QUEEN_FEN
        if empty > 0:
            out += str(empty)
        rows.append(out)
    return "/".join(rows)
