# bitboard_queens/__init__.py
# Package initialization for the eight-queens bitboard search.
# Exposes the line table, the search entry points, the starting variants
# and the board helpers used by the pipeline script and the HTTP service.

from .lines import (
    BOARD_SIZE,
    FULL_BOARD,
    EMPTY_BOARD,
    NUM_LINES,
    attack_lines,
    build_attack_lines,
    build_square_attacks,
    line_kind,
)
from .search import SearchRun, search, solve, is_valid_solution
from .variants import VARIANTS, Variant, get_variant
from .render import format_board, board_rows, board_to_grid, grid_to_board, queen_squares
from .notation import algebraic_squares, placement_fen
from .symmetry import symmetries, canonical_form, symmetry_classes

__all__ = [
    # Lines
    "BOARD_SIZE",
    "FULL_BOARD",
    "EMPTY_BOARD",
    "NUM_LINES",
    "attack_lines",
    "build_attack_lines",
    "build_square_attacks",
    "line_kind",

    # Search
    "SearchRun",
    "search",
    "solve",
    "is_valid_solution",

    # Variants
    "VARIANTS",
    "Variant",
    "get_variant",

    # Rendering and notation
    "format_board",
    "board_rows",
    "board_to_grid",
    "grid_to_board",
    "queen_squares",
    "algebraic_squares",
    "placement_fen",

    # Symmetry
    "symmetries",
    "canonical_form",
    "symmetry_classes",
]
