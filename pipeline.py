# pipeline.py
# Startup program: builds the attack-line table, prints it for checking,
# then runs the search once per starting variant and prints every solution
# followed by the call and solution totals.

import sys

from bitboard_queens import VARIANTS, attack_lines, format_board, solve


def print_board(board: int) -> None:
    print(format_board(board))


def print_banner(title: str) -> None:
    rule = "=" * len(title)
    print(rule)
    print(title)
    print(rule)


def print_attack_lines(lines) -> None:
    print_banner("ATTACK LINE CHECK")
    for k, line in enumerate(lines):
        print(f"Line {k}:")
        print_board(line)
    print()


def print_solution(number: int, board: int) -> None:
    print(f"Solution {number}:")
    print_board(board)


def run_variant(variant, lines):
    print_banner(f"VARIANT {variant.index}")
    print("Initial board:")
    print_board(variant.board)

    run = solve(variant.board, lines=lines, on_solution=print_solution)

    print(f"Results for variant {variant.index}:")
    print(f"Total = {run.calls} calls.")
    print(f"Total = {run.solution_count} solutions.")
    print()
    return run


def main() -> int:
    lines = attack_lines()
    print_attack_lines(lines)

    for variant in VARIANTS:
        run_variant(variant, lines)

    return 0


if __name__ == "__main__":
    sys.exit(main())
