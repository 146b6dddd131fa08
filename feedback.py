# Multiple-choice options: the canonical answer plus distractors that the
# answer checker rejects.

from __future__ import annotations

import math
import random
import re
from typing import List, Optional, Set

from answers import check_answer
from formatting import round_half_up, to_fixed
from messages import strict_number
from schemas.problems import Problem
from topics import MathTopic

_default_rng = random.Random()

MAX_OPTIONS = 4

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})$")
_CLOCK_OFFSETS = [(0, 15), (0, -15), (0, 30), (0, -30), (1, 0), (-1, 0), (1, 30), (-1, 30)]
_DECIMAL_OFFSETS = [-0.5, -0.3, -0.2, -0.1, 0.1, 0.2, 0.3, 0.5, 1, -1]
_WHOLE_OFFSETS = [-3, -2, -1, 1, 2, 3, 4, 5]


def _clock_distractors(hours: int, minutes: int, rng: random.Random) -> List[str]:
    offsets = list(_CLOCK_OFFSETS)
    rng.shuffle(offsets)
    out = []
    for dh, dm in offsets:
        h, m = hours + dh, minutes + dm
        if m >= 60:
            m -= 60
            h += 1
        if m < 0:
            m += 60
            h -= 1
        # 12-hour face
        if h > 12:
            h -= 12
        if h <= 0:
            h += 12
        out.append(f"{h}:{m:02d}")
    return out


def _numeric_distractors(problem: Problem, value: float, rng: random.Random) -> List[str]:
    text = problem.answer_text
    is_decimal = "." in text or problem.topic is MathTopic.decimals
    places = len(text.split(".", 1)[1]) if "." in text else 1

    offsets = list(_DECIMAL_OFFSETS if is_decimal else _WHOLE_OFFSETS)
    rng.shuffle(offsets)
    out = []
    for off in offsets:
        wrong = value + off
        if wrong < 0:
            continue
        out.append(to_fixed(wrong, places) if is_decimal else str(round_half_up(wrong)))
    return out


def multiple_choice_options(problem: Problem, rng: Optional[random.Random] = None) -> List[str]:
    """
    Up to four shuffled options, exactly one of which is correct.
    Answers that are neither clock readings nor plain numbers get no distractors.
    """
    rng = rng or _default_rng
    answer = problem.answer_text

    m = _CLOCK_RE.match(answer)
    if m:
        candidates = _clock_distractors(int(m.group(1)), int(m.group(2)), rng)
    else:
        value = strict_number(answer)
        candidates = [] if math.isnan(value) else _numeric_distractors(problem, value, rng)

    options = [answer]
    seen: Set[str] = {answer}
    for c in candidates:
        if len(options) >= MAX_OPTIONS:
            break
        if c in seen or check_answer(problem, c):
            continue
        seen.add(c)
        options.append(c)

    rng.shuffle(options)
    return options
