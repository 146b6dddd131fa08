import pytest

from ranges import (
    DIVISION_RANGES,
    MULTIPLICATION_RANGES,
    SHARED_RANGES,
    get_counting_range,
    get_range,
)
from topics import (
    TOPIC_NAMES,
    YEAR_TOPICS,
    Difficulty,
    MathTopic,
    clamp_year_level,
    coerce_difficulty,
    coerce_topic,
)

ORDER = [Difficulty.easy, Difficulty.medium, Difficulty.hard, Difficulty.challenge]


@pytest.mark.parametrize("table", [SHARED_RANGES, MULTIPLICATION_RANGES, DIVISION_RANGES])
def test_ranges_grow_with_year_level(table):
    for difficulty in Difficulty:
        for lower, upper in zip(range(1, 6), range(2, 7)):
            a, b = table[lower][difficulty], table[upper][difficulty]
            assert b.min >= a.min and b.max >= a.max
        assert table[6][difficulty].max > table[1][difficulty].max


@pytest.mark.parametrize("table", [SHARED_RANGES, MULTIPLICATION_RANGES, DIVISION_RANGES])
def test_ranges_grow_with_difficulty(table):
    for level in range(1, 7):
        rows = [table[level][d] for d in ORDER]
        for a, b in zip(rows, rows[1:]):
            assert b.max >= a.max


def test_known_ranges():
    assert get_range(1, Difficulty.easy) == (1, 5)
    assert get_range(6, Difficulty.challenge) == (500, 2000)
    assert MULTIPLICATION_RANGES[6][Difficulty.challenge].max == 15
    assert get_counting_range(Difficulty.hard) == (10, 50)


def test_get_range_clamps_level():
    assert get_range(42, Difficulty.easy) == get_range(6, Difficulty.easy)


def test_clamp_year_level():
    assert clamp_year_level(0) == 1
    assert clamp_year_level(7) == 6
    assert clamp_year_level(10) == 6
    assert clamp_year_level("4") == 4
    assert clamp_year_level("abc") == 1


def test_coercion():
    assert coerce_topic("Fractions") is MathTopic.fractions
    assert coerce_topic("geometry") is MathTopic.addition
    assert coerce_topic(None) is MathTopic.addition
    assert coerce_difficulty("HARD") is Difficulty.hard
    assert coerce_difficulty("nope") is Difficulty.easy


def test_topic_catalogue_is_complete():
    assert set(TOPIC_NAMES) == set(MathTopic)
    offered = {t for topics in YEAR_TOPICS.values() for t in topics}
    assert offered == set(MathTopic)
    assert sorted(YEAR_TOPICS) == [1, 2, 3, 4, 5, 6]
