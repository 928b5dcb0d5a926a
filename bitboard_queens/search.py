# bitboard_queens/search.py
# Purpose: Exhaustive backtracking search for eight mutually non-attacking
# queens. Every frame works on its own `placed`/`available` ints, so there is
# nothing to undo when a branch returns. Counters live on a SearchRun owned
# by the caller.

from __future__ import annotations
from typing import Callable, List, Optional, Sequence

from .lines import EMPTY_BOARD, NUM_SQUARES, build_square_attacks, square_attacks

NUM_QUEENS = 8

SolutionCallback = Callable[[int, int], None]   # (solution number, placed board)


class SearchRun:
    """
    Accumulator for one full search: invocation count, solution count and the
    solutions in the order they were found. `on_solution` is called inline
    with (number, board), numbering from 1.
    """
    def __init__(self, on_solution: Optional[SolutionCallback] = None):
        self.calls = 0
        self.solutions: List[int] = []
        self.on_solution = on_solution

    @property
    def solution_count(self) -> int:
        return len(self.solutions)

    def record(self, placed: int) -> None:
        self.solutions.append(placed)
        if self.on_solution is not None:
            self.on_solution(len(self.solutions), placed)


def search(
    remaining: int,
    next_index: int,
    placed: int,
    available: int,
    run: SearchRun,
    attacks: Sequence[int],
) -> None:
    """
    One frame of the search. `attacks[i]` is the union of the attack lines
    through bit i. Candidates are tried in ascending bit order from
    `next_index`; the scan always runs to the end.
    """
    run.calls += 1

    if remaining <= 0:
        run.record(placed)
        return

    # Drop candidates below next_index, then walk set bits lowest first.
    candidates = (available >> next_index) << next_index
    while candidates:
        bit = candidates & -candidates
        candidates ^= bit
        index = bit.bit_length() - 1
        search(
            remaining - 1,
            index + 1,
            placed | bit,
            available & ~attacks[index],
            run,
            attacks,
        )


def solve(
    initial: int,
    lines: Optional[Sequence[int]] = None,
    on_solution: Optional[SolutionCallback] = None,
) -> SearchRun:
    """
    Runs a full search from `initial` (the board of allowed squares) and
    returns the finished SearchRun. Uses the shared line table unless
    `lines` is given.
    """
    attacks = square_attacks() if lines is None else build_square_attacks(tuple(lines))
    run = SearchRun(on_solution=on_solution)
    search(NUM_QUEENS, 0, EMPTY_BOARD, initial, run, attacks)
    return run


def is_valid_solution(board: int, lines: Optional[Sequence[int]] = None) -> bool:
    """True if `board` holds exactly 8 queens and no queen sits on another queen's lines."""
    if bin(board).count("1") != NUM_QUEENS:
        return False
    attacks = square_attacks() if lines is None else build_square_attacks(tuple(lines))
    queens = [i for i in range(NUM_SQUARES) if (board >> i) & 1]
    for i in queens:
        others = board & ~(1 << i)
        if attacks[i] & others:
            return False
    return True
