# Operand ranges keyed by (year level, difficulty).
# Every table is non-decreasing in both axes.

from __future__ import annotations

from typing import Dict, NamedTuple

from topics import Difficulty, clamp_year_level


class Range(NamedTuple):
    min: int
    max: int


def _row(easy, medium, hard, challenge) -> Dict[Difficulty, Range]:
    return {
        Difficulty.easy: Range(*easy),
        Difficulty.medium: Range(*medium),
        Difficulty.hard: Range(*hard),
        Difficulty.challenge: Range(*challenge),
    }


# Addition / subtraction operands.
SHARED_RANGES: Dict[int, Dict[Difficulty, Range]] = {
    1: _row((1, 5), (1, 10), (5, 15), (10, 20)),
    2: _row((1, 10), (5, 20), (10, 30), (15, 50)),
    3: _row((1, 20), (10, 50), (20, 100), (50, 200)),
    4: _row((10, 50), (20, 100), (50, 200), (100, 500)),
    5: _row((10, 100), (50, 200), (100, 500), (200, 1000)),
    6: _row((50, 200), (100, 500), (200, 1000), (500, 2000)),
}

# Factors stay small: grouping pictures stop working past ~12-15.
MULTIPLICATION_RANGES: Dict[int, Dict[Difficulty, Range]] = {
    1: _row((1, 2), (1, 3), (2, 3), (2, 5)),
    2: _row((1, 3), (2, 5), (2, 5), (3, 6)),
    3: _row((2, 5), (2, 6), (3, 8), (4, 10)),
    4: _row((2, 6), (3, 9), (4, 10), (5, 12)),
    5: _row((3, 9), (4, 10), (6, 12), (7, 12)),
    6: _row((4, 10), (5, 12), (6, 12), (7, 15)),
}

# Divisor and quotient are both drawn from here.
DIVISION_RANGES: Dict[int, Dict[Difficulty, Range]] = {
    1: _row((1, 2), (1, 3), (2, 3), (2, 4)),
    2: _row((1, 3), (2, 4), (2, 5), (2, 5)),
    3: _row((2, 4), (2, 5), (2, 6), (3, 8)),
    4: _row((2, 5), (2, 8), (3, 10), (4, 12)),
    5: _row((2, 8), (3, 10), (4, 12), (5, 12)),
    6: _row((2, 10), (3, 12), (4, 12), (5, 15)),
}

# Counting ignores year level.
COUNTING_RANGES: Dict[Difficulty, Range] = {
    Difficulty.easy: Range(1, 10),
    Difficulty.medium: Range(5, 20),
    Difficulty.hard: Range(10, 50),
    Difficulty.challenge: Range(20, 100),
}


def get_range(year_level: int, difficulty: Difficulty) -> Range:
    return SHARED_RANGES[clamp_year_level(year_level)][difficulty]


def get_multiplication_range(year_level: int, difficulty: Difficulty) -> Range:
    return MULTIPLICATION_RANGES[clamp_year_level(year_level)][difficulty]


def get_division_range(year_level: int, difficulty: Difficulty) -> Range:
    return DIVISION_RANGES[clamp_year_level(year_level)][difficulty]


def get_counting_range(difficulty: Difficulty) -> Range:
    return COUNTING_RANGES[difficulty]
