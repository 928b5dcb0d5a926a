import contextlib
import io
import unittest

import pipeline


class PipelineOutputTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            cls.status = pipeline.main()
        cls.output = buf.getvalue()
        cls.lines = cls.output.split("\n")

    def test_exit_status(self) -> None:
        self.assertEqual(self.status, 0)

    def test_attack_line_section(self) -> None:
        self.assertEqual(self.lines[:3], ["=================", "ATTACK LINE CHECK", "================="])
        self.assertEqual(self.lines[3], "Line 0:")
        self.assertIn("Line 41:", self.lines)
        self.assertNotIn("Line 42:", self.lines)

    def test_variant_sections_in_order(self) -> None:
        positions = [self.lines.index(f"VARIANT {k}") for k in range(3)]
        self.assertEqual(positions, sorted(positions))
        start = positions[0]
        self.assertEqual(self.lines[start + 2], "Initial board:")
        self.assertEqual(self.lines[start + 3 : start + 11], ["XXXXXXXX"] * 8)

    def test_totals(self) -> None:
        for calls, solutions in ((118969, 92), (94258, 80), (58956, 35)):
            self.assertIn(f"Total = {calls} calls.", self.lines)
            self.assertIn(f"Total = {solutions} solutions.", self.lines)

    def test_solution_numbering_restarts_per_variant(self) -> None:
        numbered = [line for line in self.lines if line.startswith("Solution ")]
        self.assertEqual(len(numbered), 92 + 80 + 35)
        self.assertEqual(numbered.count("Solution 1:"), 3)
        self.assertEqual(numbered.count("Solution 92:"), 1)

    def test_solution_boards_have_eight_queens(self) -> None:
        for i, line in enumerate(self.lines):
            if line.startswith("Solution "):
                board = self.lines[i + 1 : i + 9]
                self.assertEqual(sum(row.count("X") for row in board), 8)
                self.assertTrue(all(len(row) == 8 for row in board))


if __name__ == "__main__":
    unittest.main()
