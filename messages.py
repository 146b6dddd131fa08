# Learner-facing messages: encouragement after a wrong answer, the reveal line,
# and operation-specific hints. Nothing here decides correctness.

from __future__ import annotations

import math
import random
from typing import Optional

from formatting import format_number
from schemas.problems import Problem
from topics import MathTopic

_default_rng = random.Random()

ENCOURAGEMENTS = [
    "You're doing great! Keep trying! 🌟",
    "I believe in you! Let's try again! 💪",
    "You're learning so well! One more try! ⭐",
    "Great effort! You're so close! 🎯",
    "Keep going, superstar! 🚀",
]


def strict_number(text: str) -> float:
    """Whole-string number parse; NaN for anything that is not one finite number."""
    try:
        x = float(text.strip())
    except ValueError:
        return math.nan
    return x if math.isfinite(x) else math.nan


def encouragement(problem: Problem, answer: str, rng: Optional[random.Random] = None) -> str:
    rng = rng or _default_rng
    prefix = rng.choice(ENCOURAGEMENTS)
    given = strict_number(answer)
    target = strict_number(problem.answer_text)

    if math.isnan(given):
        return f"{prefix}\n\nTip: Type a number as your answer!"

    if math.isnan(target):
        # clock readings: distance in "numbers" means nothing
        return f"{prefix}\n\nHint: {problem.hint}" if problem.hint else prefix

    shown = format_number(given)
    diff = abs(target - given)
    if diff <= 2:
        return (
            "WOW! You're SO close! Just a tiny bit off! 🌟\n\n"
            f"You got {shown}, and the answer is really close to that!"
        )
    if diff <= 5:
        return f"{prefix}\n\nYou're getting warmer! Your answer {shown} is in the right area!"
    if given < target:
        return f"{prefix}\n\nHint: Try a bigger number than {shown}!"
    return f"{prefix}\n\nHint: Try a smaller number than {shown}!"


def reveal_message(problem: Problem) -> str:
    return f"Great effort! The answer is {problem.answer_text}."


def helpful_hint(problem: Problem) -> str:
    """A worked counting hint for the four operations; the stored hint otherwise."""
    nums = problem.numbers
    if nums is None:
        return problem.hint or "Look at the problem carefully and try counting!"

    num1, num2 = nums.num1, nums.num2
    more = "..." if num2 > 5 else ""

    if problem.topic is MathTopic.addition:
        counts = "... ".join(str(num1 + i + 1) for i in range(min(num2, 5)))
        return (
            f"Let's add {num1} and {num2} together!\n\n"
            f"Start with {num1}, then count up {num2} more:\n"
            f"{num1}... {counts}{more}\n\n"
            "Or use your fingers to help count!"
        )
    if problem.topic is MathTopic.subtraction:
        counts = "... ".join(str(num1 - i - 1) for i in range(min(num2, 5)))
        return (
            f"Let's take {num2} away from {num1}!\n\n"
            f"Start with {num1}, then count back {num2}:\n"
            f"{num1}... {counts}{more}\n\n"
            f"Imagine you have {num1} sweets and eat {num2}. How many left?"
        )
    if problem.topic is MathTopic.multiplication:
        skips = ", ".join(str(num2 * (i + 1)) for i in range(num1))
        return (
            f"{num1} × {num2} means {num1} groups of {num2}!\n\n"
            f"Count by {num2}s, {num1} times:\n"
            f"{skips}\n\n"
            "Or count all the squares in the picture!"
        )
    if problem.topic is MathTopic.division:
        return (
            f"{num1} ÷ {num2} means sharing {num1} into {num2} equal groups!\n\n"
            f"If you have {num1} sweets and {num2} friends, "
            "how many does each friend get?\n\n"
            f"Try counting: {num2}, {num2 * 2}, {num2 * 3}... until you reach {num1}!"
        )
    return problem.hint or "Take your time and think about what the question is asking!"

