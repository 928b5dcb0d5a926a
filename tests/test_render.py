import unittest

import numpy as np

from bitboard_queens import FULL_BOARD, VARIANTS, solve
from bitboard_queens.notation import algebraic_square, algebraic_squares, placement_fen
from bitboard_queens.render import (
    board_rows,
    board_to_grid,
    format_board,
    grid_to_board,
    queen_squares,
    square_bit,
)

KNOWN_COLUMNS = [0, 4, 7, 5, 2, 6, 1, 3]


def known_solution() -> int:
    board = 0
    for row, col in enumerate(KNOWN_COLUMNS):
        board |= square_bit(row, col)
    return board


class RenderTests(unittest.TestCase):
    def test_format_is_eight_by_eight(self) -> None:
        for board in (0, FULL_BOARD, known_solution()):
            rows = format_board(board).split("\n")
            self.assertEqual(len(rows), 8)
            self.assertTrue(all(len(r) == 8 for r in rows))

    def test_top_left_is_high_bit(self) -> None:
        self.assertEqual(format_board(1 << 63).split("\n")[0], "X.......")
        self.assertEqual(format_board(1).split("\n")[7], ".......X")

    def test_custom_glyphs(self) -> None:
        rendered = format_board(square_bit(0, 0), occupied="Q", empty="-")
        self.assertEqual(rendered.split("\n")[0], "Q-------")

    def test_variant_renderings(self) -> None:
        rows = board_rows(VARIANTS[1].board)
        self.assertEqual(rows[0], "XXXXXXX.")
        self.assertEqual(rows[7], ".XXXXXX.")
        rows = board_rows(VARIANTS[2].board)
        self.assertEqual(rows[0], "XXXX....")
        self.assertEqual(rows[1], ".XXXXXXX")
        self.assertEqual(rows[6], "XXXXXXX.")
        self.assertEqual(rows[7], ".XXXXXX.")

    def test_grid_round_trip(self) -> None:
        board = known_solution()
        grid = board_to_grid(board)
        self.assertEqual(grid.shape, (8, 8))
        self.assertEqual(int(grid.sum()), 8)
        self.assertEqual(grid_to_board(grid), board)

    def test_grid_shape_is_checked(self) -> None:
        with self.assertRaises(ValueError):
            grid_to_board(np.zeros((7, 8), dtype=bool))

    def test_square_bit_range(self) -> None:
        self.assertEqual(square_bit(7, 7), 1)
        with self.assertRaises(ValueError):
            square_bit(8, 0)

    def test_queen_squares(self) -> None:
        self.assertEqual(queen_squares(known_solution()), list(enumerate(KNOWN_COLUMNS)))


class NotationTests(unittest.TestCase):
    def test_algebraic_square(self) -> None:
        self.assertEqual(algebraic_square(0, 0), "a8")
        self.assertEqual(algebraic_square(7, 7), "h1")

    def test_algebraic_squares(self) -> None:
        self.assertEqual(
            algebraic_squares(known_solution()),
            ["a8", "e7", "h6", "f5", "c4", "g3", "b2", "d1"],
        )

    def test_placement_fen(self) -> None:
        self.assertEqual(
            placement_fen(known_solution()),
            "Q7/4Q3/7Q/5Q2/2Q5/6Q1/1Q6/3Q4",
        )
        self.assertEqual(placement_fen(0), "8/8/8/8/8/8/8/8")

    def test_every_solution_has_one_queen_per_fen_rank(self) -> None:
        for board in solve(FULL_BOARD).solutions:
            ranks = placement_fen(board).split("/")
            self.assertEqual([r.count("Q") for r in ranks], [1] * 8)


if __name__ == "__main__":
    unittest.main()
