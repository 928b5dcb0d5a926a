from typing import Dict, Iterable, List
import numpy as np

from .render import board_to_grid, grid_to_board


def rotate_board_90_cw(board: int) -> int:
    """Returns a new board rotated by 90 degrees clockwise."""
    return grid_to_board(np.rot90(board_to_grid(board), -1))


def rotate_board_90_ccw(board: int) -> int:
    """Returns a new board rotated by 90 degrees counter-clockwise."""
    return grid_to_board(np.rot90(board_to_grid(board), 1))


def rotate_board_180(board: int) -> int:
    """Returns a new board rotated by 180 degrees."""
    return grid_to_board(np.rot90(board_to_grid(board), 2))


def reflect_board(board: int) -> int:
    """Mirror image across the vertical axis (column c <-> column 7 - c)."""
    return grid_to_board(np.fliplr(board_to_grid(board)))


def symmetries(board: int) -> List[int]:
    """
    The 8 images of a board under the symmetry group of the square:
    rotations by 0/90/180/270 degrees, then the mirror of each.
    """
    grid = board_to_grid(board)
    rotations = [np.rot90(grid, k) for k in range(4)]
    images = rotations + [np.fliplr(g) for g in rotations]
    return [grid_to_board(g) for g in images]


def canonical_form(board: int) -> int:
    """Smallest of the 8 symmetric images; equal for boards in the same class."""
    return min(symmetries(board))


def symmetry_classes(boards: Iterable[int]) -> Dict[int, List[int]]:
    """Groups boards by canonical form, in order of first appearance."""
    classes: Dict[int, List[int]] = {}
    for b in boards:
        classes.setdefault(canonical_form(b), []).append(b)
    return classes
