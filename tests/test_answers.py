from answers import MAX_ATTEMPTS, check_answer, mark, normalize_answer
from schemas.problems import Problem


def _numeric(answer=7, **kw):
    return Problem(
        topic="addition",
        year_level=1,
        difficulty="easy",
        question="3 + 4 = ?",
        answer=answer,
        answer_value=float(answer),
        **kw,
    )


def test_normalize_answer():
    assert normalize_answer("  Half Past 3 ") == "half past 3"
    assert normalize_answer(5.0) == "5"
    assert normalize_answer(0.75) == "0.75"
    assert normalize_answer(None) == ""


def test_exact_and_normalised_match():
    p = _numeric()
    assert check_answer(p, "7")
    assert check_answer(p, "   7  ")


def test_numeric_fallback():
    p = _numeric()
    assert check_answer(p, "7.0")
    assert check_answer(p, "07")
    # leading number is what counts, like parseFloat
    assert check_answer(p, "7 apples")


def test_numeric_fallback_ignores_answer_value():
    p = Problem(
        topic="time",
        year_level=2,
        difficulty="easy",
        question="What hour does the clock show?",
        answer=7,
    )
    assert p.answer_value is None
    assert check_answer(p, "7.0")
    assert not check_answer(p, "8")


def test_mixed_number_reads_its_whole_part():
    p = Problem(
        topic="fractions",
        year_level=4,
        difficulty="hard",
        question="3/4 + 2/4 = ?",
        answer="1 1/4",
        answer_value=1.25,
    )
    assert check_answer(p, "1")
    assert not check_answer(p, "1.25")


def test_wrong_answers_rejected():
    p = _numeric()
    assert not check_answer(p, "8")
    assert not check_answer(p, "")
    assert not check_answer(p, "seven")
    assert not check_answer(p, None)


def test_acceptable_answers_case_insensitive():
    p = Problem(
        topic="time",
        year_level=3,
        difficulty="medium",
        question="What time does this clock show?",
        answer="6:30",
        acceptable_answers=("6:30", "half past 6"),
    )
    assert check_answer(p, "HALF PAST 6")
    assert check_answer(p, "6:30")
    # the leading hour is all the numeric fallback sees
    assert check_answer(p, "6:45")
    assert check_answer(p, "6")
    assert not check_answer(p, "7:30")


def test_non_numeric_mismatch_never_equal():
    # both sides would parse to NaN; NaN is never equal to NaN
    p = Problem(
        topic="time",
        year_level=3,
        difficulty="medium",
        question="?",
        answer="half past six",
    )
    assert not check_answer(p, "quarter past six")


def test_check_is_repeatable():
    p = _numeric()
    assert [check_answer(p, "7") for _ in range(3)] == [True, True, True]
    assert [check_answer(p, "9") for _ in range(3)] == [False, False, False]


def test_mark_correct():
    res = mark(_numeric(), "7")
    assert res["ok"] and res["correct"]
    assert res["expected"] == "7"
    assert res["reveal"] is False


def test_mark_empty_answer():
    res = mark(_numeric(), "   ")
    assert res["ok"] is False and res["correct"] is False
    assert res["feedback"] == "Answer required."


def test_mark_wrong_keeps_answer_hidden():
    res = mark(_numeric(hint="Count up!"), "3", attempt=1)
    assert res["ok"] and not res["correct"]
    assert res["expected"] is None
    assert res["feedback"]


def test_mark_reveals_after_last_attempt():
    res = mark(_numeric(), "3", attempt=MAX_ATTEMPTS)
    assert not res["correct"]
    assert res["reveal"] is True
    assert res["expected"] == "7"
    assert res["feedback"] == "Great effort! The answer is 7."
