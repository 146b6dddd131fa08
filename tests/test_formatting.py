import math

from formatting import (
    format_number,
    fraction_display,
    fraction_value,
    parse_float,
    reduced_fraction_forms,
    round_half_up,
    to_fixed,
)


def test_format_number_reads_like_the_client():
    assert format_number(7) == "7"
    assert format_number(5.0) == "5"
    assert format_number(4.2) == "4.2"
    assert format_number(1 / 3) == "0.3333333333333333"


def test_to_fixed():
    assert to_fixed(4.2, 2) == "4.20"
    assert to_fixed(5.0, 1) == "5.0"


def test_parse_float_leading_number():
    assert parse_float("  7 ") == 7.0
    assert parse_float("7.0") == 7.0
    assert parse_float("1 1/4") == 1.0
    assert parse_float("5/4") == 5.0
    assert parse_float(".5") == 0.5
    assert parse_float("-3e2x") == -300.0
    assert parse_float(12) == 12.0


def test_parse_float_nan():
    assert math.isnan(parse_float(""))
    assert math.isnan(parse_float("$15"))
    assert math.isnan(parse_float("half past 3"))


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0


def test_fraction_display():
    assert fraction_display(3, 4) == "3/4"
    assert fraction_display(4, 4) == "1"
    assert fraction_display(5, 4) == "1 1/4"
    assert fraction_display(6, 4) == "1 2/4"
    assert fraction_display(6, 3) == "2"


def test_reduced_fraction_forms():
    assert reduced_fraction_forms(2, 4) == ["1/2"]
    assert reduced_fraction_forms(6, 4) == ["3/2", "1 1/2"]
    assert reduced_fraction_forms(4, 2) == ["2"]


def test_fraction_value():
    assert fraction_value(5, 4) == 1.25
