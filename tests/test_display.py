from display import MAX_BLOCKS, number_blocks, scale_for_display


def test_small_addition_is_drawn_as_is():
    d = scale_for_display(30, 40, "+")
    assert (d.num1, d.num2, d.scaled) == (30, 40, False)


def test_large_addition_keeps_exact_ratio():
    d = scale_for_display(600, 400, "+")
    assert (d.num1, d.num2) == (60, 40)
    assert d.scaled and d.scale_factor == 0.1


def test_large_coprime_addition_is_proportional():
    d = scale_for_display(997, 991, "+")
    assert (d.num1, d.num2) == (50, 50)
    assert d.scaled


def test_uneven_coprime_addition_keeps_its_shape():
    d = scale_for_display(101, 103, "+")
    assert (d.num1, d.num2) == (50, 50)
    d = scale_for_display(1499, 31, "+")
    assert d.num1 + d.num2 <= MAX_BLOCKS
    assert d.num1 > 90 and d.num2 >= 1


def test_large_subtraction_keeps_exact_ratio():
    d = scale_for_display(200, 50, "-")
    assert (d.num1, d.num2) == (100, 25)


def test_large_coprime_subtraction_is_proportional():
    d = scale_for_display(983, 5, "-")
    assert d.num1 == 100
    assert d.num2 == 1
    assert d.scaled


def test_large_division_shows_whole_groups():
    d = scale_for_display(144, 12, "÷")
    assert d.num2 == 12
    assert d.num1 == 96
    assert d.num1 % d.num2 == 0


def test_small_division_is_drawn_as_is():
    d = scale_for_display(42, 6, "÷")
    assert (d.num1, d.num2, d.scaled) == (42, 6, False)


def test_multiplication_caps_items_per_group():
    assert scale_for_display(3, 25, "×").num2 == 20
    assert scale_for_display(3, 7, "×").scaled is False


def test_number_blocks_are_capped():
    items = number_blocks(40, 2, "+")
    assert len(items) == 15 + 1 + 2
    assert items[15].type == "operator" and items[15].value == "+"
