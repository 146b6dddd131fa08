# Answer checking. This is the only place correctness is decided.
#
# An answer is correct when, after trimming and lower-casing, it reads the same
# as the canonical answer or as any accepted alternative, or when its leading
# number equals the leading number of the canonical answer. Non-numeric text
# parses to NaN and NaN never equals anything, so that last clause only ever
# helps numbers.

from __future__ import annotations

import logging
import random
from typing import Any, Dict, Optional

from formatting import format_number, parse_float
from messages import encouragement, reveal_message
from schemas.problems import AnswerValue, Problem

logger = logging.getLogger("mathbuddy.answers")

MAX_ATTEMPTS = 3

_ANSWER_REQUIRED_MSG = "Answer required."


def normalize_answer(value: Optional[AnswerValue]) -> str:
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = format_number(value)
    return str(value).strip().lower()


def check_answer(problem: Problem, raw_answer: Optional[str]) -> bool:
    """
    True when raw_answer is an accepted way of writing the problem's answer.
    Pure: same input, same result, no side effects.
    """
    given = normalize_answer(raw_answer)

    if given == normalize_answer(problem.answer):
        return True

    if any(given == normalize_answer(alt) for alt in problem.acceptable_answers):
        return True

    # Numeric fallback: "7", "7.0" and "7 " all read as 7.
    # Only leading numbers are compared, so "3:45" reads as 3 just like "3:30".
    return parse_float(given) == parse_float(normalize_answer(problem.answer))


def _validate_answer_text(s: Optional[str]) -> Optional[str]:
    if s is None or not isinstance(s, str) or not s.strip():
        return _ANSWER_REQUIRED_MSG
    return None


def mark(
    problem: Problem,
    answer: Optional[str],
    attempt: int = 1,
    rng: Optional[random.Random] = None,
) -> Dict[str, Any]:
    """
    Check one answer and describe the outcome for the learner.

    `attempt` counts wrong tries so far including this one; on the last allowed
    attempt a wrong answer reveals the canonical answer.
    """
    expected = problem.answer_text

    msg = _validate_answer_text(answer)
    if msg:
        return {
            "ok": False,
            "correct": False,
            "expected": None,
            "feedback": msg,
            "reveal": False,
        }

    correct = check_answer(problem, answer)
    logger.debug("problem %s answer %r -> %s", problem.id, answer, correct)

    if correct:
        return {
            "ok": True,
            "correct": True,
            "expected": expected,
            "feedback": "",
            "reveal": False,
        }

    if attempt >= MAX_ATTEMPTS:
        return {
            "ok": True,
            "correct": False,
            "expected": expected,
            "feedback": reveal_message(problem),
            "reveal": True,
        }

    # keep the answer hidden until it is revealed
    return {
        "ok": True,
        "correct": False,
        "expected": None,
        "feedback": encouragement(problem, answer or "", rng),
        "reveal": False,
    }
