# Topic catalogue for levels 1-6.
# Topics are grouped the way the curriculum introduces them:
# Lv.1-2 foundation, Lv.3-4 operations and fractions, Lv.5-6 everything else.

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Union

logger = logging.getLogger("mathbuddy.topics")

MIN_YEAR_LEVEL = 1
MAX_YEAR_LEVEL = 6


class MathTopic(str, Enum):
    counting = "counting"
    addition = "addition"
    subtraction = "subtraction"
    multiplication = "multiplication"
    division = "division"
    fractions = "fractions"
    decimals = "decimals"
    percentages = "percentages"
    time = "time"
    money = "money"
    patterns = "patterns"
    area_perimeter = "area_perimeter"


class Difficulty(str, Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"
    challenge = "challenge"


YEAR_TOPICS: Dict[int, List[MathTopic]] = {
    1: [MathTopic.counting, MathTopic.addition, MathTopic.subtraction],
    2: [MathTopic.addition, MathTopic.subtraction, MathTopic.counting, MathTopic.patterns],
    3: [MathTopic.addition, MathTopic.subtraction, MathTopic.multiplication, MathTopic.time],
    4: [MathTopic.multiplication, MathTopic.division, MathTopic.fractions, MathTopic.money],
    5: [
        MathTopic.fractions,
        MathTopic.decimals,
        MathTopic.multiplication,
        MathTopic.division,
        MathTopic.area_perimeter,
    ],
    6: [
        MathTopic.decimals,
        MathTopic.percentages,
        MathTopic.fractions,
        MathTopic.area_perimeter,
        MathTopic.patterns,
    ],
}

TOPIC_NAMES: Dict[MathTopic, str] = {
    MathTopic.counting: "Counting",
    MathTopic.addition: "Addition",
    MathTopic.subtraction: "Subtraction",
    MathTopic.multiplication: "Multiplication",
    MathTopic.division: "Division",
    MathTopic.fractions: "Fractions",
    MathTopic.decimals: "Decimals",
    MathTopic.percentages: "Percentages",
    MathTopic.area_perimeter: "Area & Perimeter",
    MathTopic.time: "Telling Time",
    MathTopic.money: "Money",
    MathTopic.patterns: "Patterns",
}


def clamp_year_level(year_level: Union[int, float, str, None]) -> int:
    """
    Clamp anything year-level shaped into 1..6.
    Non-numeric input lands on level 1 (the app's starting level).
    """
    try:
        level = int(year_level)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        logger.warning("year level %r is not a number; using %d", year_level, MIN_YEAR_LEVEL)
        return MIN_YEAR_LEVEL
    if level < MIN_YEAR_LEVEL or level > MAX_YEAR_LEVEL:
        clamped = max(MIN_YEAR_LEVEL, min(MAX_YEAR_LEVEL, level))
        logger.warning("year level %d out of range; clamped to %d", level, clamped)
        return clamped
    return level


def coerce_topic(topic: Union[MathTopic, str, None]) -> MathTopic:
    # Unknown topics fall back to addition instead of raising.
    if isinstance(topic, MathTopic):
        return topic
    try:
        return MathTopic(str(topic).strip().lower())
    except ValueError:
        logger.warning("unknown topic %r; falling back to addition", topic)
        return MathTopic.addition


def coerce_difficulty(difficulty: Union[Difficulty, str, None]) -> Difficulty:
    if isinstance(difficulty, Difficulty):
        return difficulty
    try:
        return Difficulty(str(difficulty).strip().lower())
    except ValueError:
        logger.warning("unknown difficulty %r; using easy", difficulty)
        return Difficulty.easy
