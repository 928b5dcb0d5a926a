# bitboard_queens/variants.py
# The three starting boards. A set bit marks a square where the first queens
# may still be placed; cleared bits are squares removed by symmetry reduction.
# Any solution lost by clearing a square is a rotation and/or reflection of a
# solution that is still found.

from typing import NamedTuple, Tuple


class Variant(NamedTuple):
    index: int
    name: str
    board: int
    description: str
    expected_calls: int
    expected_solutions: int


VARIANTS: Tuple[Variant, ...] = (
    Variant(
        index=0,
        name="full_board",
        board=0xFFFFFFFFFFFFFFFF,
        description=(
            "Brute force: every square allowed. Finds all solutions, "
            "rotations and reflections included."
        ),
        expected_calls=118969,
        expected_solutions=92,
    ),
    Variant(
        index=1,
        name="three_corners_removed",
        board=0xFEFFFFFFFFFFFF7E,
        description=(
            "A queen on a corner attacks the other three corners, so a solution "
            "holds at most one corner. Rotating brings it to the kept corner, "
            "so three corners are removed."
        ),
        expected_calls=94258,
        expected_solutions=80,
    ),
    Variant(
        index=2,
        name="eight_squares_removed",
        board=0xF07FFFFFFFFFFE7E,
        description=(
            "Among the queens touching an edge, take the one nearest a corner. "
            "Rotating and/or reflecting puts it on the left half of the top row, "
            "after which no queen sits on any of the eight removed squares."
        ),
        expected_calls=58956,
        expected_solutions=35,
    ),
)


def get_variant(index: int) -> Variant:
    if not 0 <= index < len(VARIANTS):
        raise ValueError(f"Variant must be one of 0..{len(VARIANTS) - 1}, got {index}")
    return VARIANTS[index]
