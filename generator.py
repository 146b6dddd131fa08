# Problem generation: one generator per topic, dispatched by generate_problem().
#
# Every generator follows the same recipe: look up an operand range for the
# (year level, difficulty) pair, draw operands under the topic's constraints,
# compute the canonical answer, list the other spellings of that answer we accept,
# then write hint/explanation/steps from the same operands.

from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List, Optional, Union

from sympy import Rational

from display import number_blocks, scale_for_display
from formatting import (
    format_number,
    fraction_display,
    fraction_value,
    reduced_fraction_forms,
    to_fixed,
)
from ranges import (
    get_counting_range,
    get_division_range,
    get_multiplication_range,
    get_range,
)
from schemas.problems import (
    AnswerValue,
    ClockTime,
    Dimensions,
    Numbers,
    Problem,
    ProblemStep,
)
from topics import (
    YEAR_TOPICS,
    Difficulty,
    MathTopic,
    clamp_year_level,
    coerce_difficulty,
    coerce_topic,
)

logger = logging.getLogger("mathbuddy.generator")

_default_rng = random.Random()

MAX_COUNT_ICONS = 15

COUNT_EMOJIS = ["🍎", "⭐", "🌟", "🎈", "🐱", "🐶", "🦋", "🌸"]
MONEY_ITEMS = [
    "🍎 apple",
    "🍌 banana",
    "🍕 pizza slice",
    "🧁 cupcake",
    "📚 book",
    "✏️ pencil",
    "🎈 balloon",
]

FRACTION_DENOMINATORS = {
    Difficulty.easy: [2, 4],
    Difficulty.medium: [2, 3, 4],
    Difficulty.hard: [2, 3, 4, 5, 6],
    Difficulty.challenge: [2, 3, 4, 5, 6],
}
PERCENTAGES = {
    Difficulty.easy: [5, 10, 50],
    Difficulty.medium: [5, 10, 25, 50],
    Difficulty.hard: [5, 10, 20, 25, 50, 75],
    Difficulty.challenge: [5, 10, 20, 25, 50, 75],
}
PRICES = {
    Difficulty.easy: [1, 2, 3, 5, 10],
    Difficulty.medium: [5, 10, 15, 20, 25],
    Difficulty.hard: [10, 15, 20, 25, 30, 50],
    Difficulty.challenge: [10, 15, 20, 25, 30, 50],
}
PATTERN_STEPS = {
    Difficulty.easy: (1, 3),
    Difficulty.medium: (2, 5),
    Difficulty.hard: (3, 10),
    Difficulty.challenge: (3, 10),
}
SIDE_LENGTHS = {
    Difficulty.easy: (2, 5),
    Difficulty.medium: (3, 8),
    Difficulty.hard: (5, 12),
    Difficulty.challenge: (5, 12),
}


# --- Helpers ----------------------------------------------------------------------


def _step(description: str, formula: Optional[str] = None, result: Optional[str] = None):
    return ProblemStep(description=description, formula=formula, result=result)


def _unique(*values: AnswerValue) -> tuple:
    """Ordered set of answer spellings; 4.2 and "4.2" are kept as distinct forms."""
    seen = set()
    out = []
    for v in values:
        key = (isinstance(v, str), v.strip().lower() if isinstance(v, str) else format_number(v))
        if key in seen:
            continue
        seen.add(key)
        out.append(v)
    return tuple(out)


def _build(
    topic: MathTopic, year_level: int, difficulty: Difficulty, answer: AnswerValue, **fields
) -> Problem:
    # Plain numeric answers carry their own value; formatted ones say so explicitly.
    if "answer_value" not in fields and not isinstance(answer, str):
        fields["answer_value"] = float(answer)
    return Problem(
        topic=topic, year_level=year_level, difficulty=difficulty, answer=answer, **fields
    )


# --- Counting ---------------------------------------------------------------------

_COUNTING_VARIANTS = ("count_objects", "what_comes_next", "count_by_twos")


def _counting(year_level: int, difficulty: Difficulty, rng: random.Random) -> Problem:
    r = get_counting_range(difficulty)
    count = rng.randint(r.min, r.max)
    start_num = rng.randint(1, 5)
    # Counting by twos starts at level 2.
    variant = _COUNTING_VARIANTS[rng.randint(0, 2 if year_level >= 2 else 1)]

    if variant == "count_objects":
        emoji = rng.choice(COUNT_EMOJIS)
        shown = min(count, MAX_COUNT_ICONS)
        overflow = f" (+{count - MAX_COUNT_ICONS} more)" if count > MAX_COUNT_ICONS else ""
        return _build(
            MathTopic.counting,
            year_level,
            difficulty,
            count,
            question="Count the objects:",
            visual_content=emoji * shown + overflow,
            hint="Count each object one by one!",
            explanation=f"There are {count} objects in total.",
            visual_type="blocks",
            interactive_type="drag_drop",
            numbers=Numbers(num1=count, num2=0, operator=""),
            steps=(_step("Count each object", result=f"1, 2, 3... {count}"),),
        )

    if variant == "what_comes_next":
        answer = count + 1
        return _build(
            MathTopic.counting,
            year_level,
            difficulty,
            answer,
            question=f"What number comes after {count}?",
            hint="Count one more!",
            explanation=f"After {count} comes {answer}",
            visual_type="number_line",
            interactive_type="drag_drop",
            numbers=Numbers(num1=count, num2=1, operator="+"),
            steps=(
                _step(f"Start at {count}", result=str(count)),
                _step("Count one more", result=str(answer)),
            ),
        )

    sequence = [start_num + 2 * i for i in range(4)]
    return _build(
        MathTopic.counting,
        year_level,
        difficulty,
        sequence[3],
        question=f"Count by 2s: {', '.join(map(str, sequence[:3]))}, ?",
        hint="Add 2 each time!",
        explanation=f"When counting by 2s: {', '.join(map(str, sequence))}",
        visual_type="number_line",
        interactive_type="drag_drop",
        steps=(
            _step("Pattern: add 2 each time"),
            _step(f"{sequence[2]} + 2 = {sequence[3]}", result=str(sequence[3])),
        ),
    )


# --- The four operations ----------------------------------------------------------


def _addition(year_level: int, difficulty: Difficulty, rng: random.Random) -> Problem:
    r = get_range(year_level, difficulty)
    num1 = rng.randint(r.min, r.max)
    # keep the second number from running away from the first
    num2 = rng.randint(r.min, min(r.max, num1 + 20))
    answer = num1 + num2

    return _build(
        MathTopic.addition,
        year_level,
        difficulty,
        answer,
        question=f"{num1} + {num2} = ?",
        hint=(
            "Use your fingers or count objects!"
            if year_level <= 2
            else "Try breaking the numbers into smaller parts!"
        ),
        explanation=(
            f"When we add {num1} and {num2}, we combine them together to get {answer}."
        ),
        visual_type="blocks",
        interactive_type="drag_drop",
        numbers=Numbers(num1=num1, num2=num2, operator="+"),
        display=scale_for_display(num1, num2, "+"),
        drag_items=tuple(number_blocks(num1, num2, "+")),
        steps=(
            _step(f"Start with {num1}", result=str(num1)),
            _step(f"Add {num2} more", formula=f"{num1} + {num2}", result=str(answer)),
        ),
    )


def _subtraction(year_level: int, difficulty: Difficulty, rng: random.Random) -> Problem:
    r = get_range(year_level, difficulty)
    num1 = rng.randint(r.min, r.max)
    num2 = rng.randint(1, min(num1, r.max))  # never below zero
    answer = num1 - num2

    return _build(
        MathTopic.subtraction,
        year_level,
        difficulty,
        answer,
        question=f"{num1} - {num2} = ?",
        hint=(
            "Take away objects and count what's left!"
            if year_level <= 2
            else "Think about counting backwards!"
        ),
        explanation=(
            f"When we subtract {num2} from {num1}, we take away {num2} to get {answer}."
        ),
        visual_type="blocks",
        interactive_type="drag_drop",
        numbers=Numbers(num1=num1, num2=num2, operator="-"),
        display=scale_for_display(num1, num2, "-"),
        drag_items=tuple(number_blocks(num1, num2, "-")),
        steps=(
            _step(f"Start with {num1}", result=str(num1)),
            _step(f"Take away {num2}", formula=f"{num1} - {num2}", result=str(answer)),
        ),
    )


def _multiplication(year_level: int, difficulty: Difficulty, rng: random.Random) -> Problem:
    r = get_multiplication_range(year_level, difficulty)
    num1 = rng.randint(r.min, r.max)
    num2 = rng.randint(r.min, r.max)
    answer = num1 * num2

    return _build(
        MathTopic.multiplication,
        year_level,
        difficulty,
        answer,
        question=f"{num1} × {num2} = ?",
        hint=f"Think of it as {num1} groups of {num2}!",
        explanation=f"{num1} × {num2} means {num1} groups of {num2}, which equals {answer}.",
        visual_type="grid",
        interactive_type="drag_drop",
        numbers=Numbers(num1=num1, num2=num2, operator="×"),
        display=scale_for_display(num1, num2, "×"),
        steps=(
            _step(f"We have {num1} groups", result=str(num1)),
            _step(f"Each group has {num2}", result=str(num2)),
            _step("Count all together", formula=f"{num1} × {num2}", result=str(answer)),
        ),
    )


def _division(year_level: int, difficulty: Difficulty, rng: random.Random) -> Problem:
    r = get_division_range(year_level, difficulty)
    divisor = rng.randint(r.min, r.max)
    answer = rng.randint(r.min, r.max)
    dividend = divisor * answer  # exact, no remainder

    return _build(
        MathTopic.division,
        year_level,
        difficulty,
        answer,
        question=f"{dividend} ÷ {divisor} = ?",
        hint=f"How many groups of {divisor} can you make from {dividend}?",
        explanation=(
            f"{dividend} ÷ {divisor} means splitting {dividend} into groups of {divisor}, "
            f"giving us {answer} groups."
        ),
        visual_type="blocks",
        interactive_type="drag_drop",
        numbers=Numbers(num1=dividend, num2=divisor, operator="÷"),
        display=scale_for_display(dividend, divisor, "÷"),
        steps=(
            _step(f"Start with {dividend} objects", result=str(dividend)),
            _step(f"Make groups of {divisor}", formula=f"{dividend} ÷ {divisor}"),
            _step("Count the groups", result=str(answer)),
        ),
    )


# --- Fractions, decimals, percentages ---------------------------------------------


def _fractions(year_level: int, difficulty: Difficulty, rng: random.Random) -> Problem:
    denom = rng.choice(FRACTION_DENOMINATORS[difficulty])
    num1 = rng.randint(1, denom - 1)
    num2 = rng.randint(1, denom - 1)
    total = num1 + num2  # may pass the whole: 3/4 + 2/4 = 1 1/4

    shown = fraction_display(total, denom)
    return _build(
        MathTopic.fractions,
        year_level,
        difficulty,
        shown,
        answer_value=fraction_value(total, denom),
        acceptable_answers=_unique(
            f"{total}/{denom}",
            shown,
            format_number(total / denom),
            *reduced_fraction_forms(total, denom),
        ),
        question=f"{num1}/{denom} + {num2}/{denom} = ?",
        hint="When the bottom numbers are the same, just add the top numbers!",
        explanation=(
            f"With the same denominator, add the numerators: {num1} + {num2} = {total}"
        ),
        visual_type="fraction_bar",
        interactive_type="input",
        steps=(
            _step("Keep the bottom number (denominator) the same", result=f"?/{denom}"),
            _step("Add the top numbers (numerators)", formula=f"{num1} + {num2}", result=str(total)),
            _step("Write the answer", result=shown),
        ),
    )


def _decimals(year_level: int, difficulty: Difficulty, rng: random.Random) -> Problem:
    hi = 50 if difficulty is Difficulty.easy else 100
    # work in whole tenths so the sum is exact
    tenths1 = rng.randint(10, hi)
    tenths2 = rng.randint(10, hi)
    num1, num2 = tenths1 / 10, tenths2 / 10
    answer = (tenths1 + tenths2) / 10
    a1, a2, shown = to_fixed(num1, 1), to_fixed(num2, 1), format_number(answer)

    return _build(
        MathTopic.decimals,
        year_level,
        difficulty,
        answer,
        acceptable_answers=_unique(answer, to_fixed(answer, 1), to_fixed(answer, 2)),
        question=f"{a1} + {a2} = ?",
        hint="Line up the decimal points like a tower!",
        explanation=f"Line up the decimals and add like normal numbers: {a1} + {a2} = {shown}",
        visual_type="number_line",
        interactive_type="input",
        steps=(
            _step("Line up the decimal points"),
            _step("Add each column from right to left"),
            _step("Put the decimal point in the answer", result=shown),
        ),
    )


def _percentages(year_level: int, difficulty: Difficulty, rng: random.Random) -> Problem:
    percentage = rng.choice(PERCENTAGES[difficulty])
    # multiples of 20 keep every candidate percentage a whole number
    base = rng.randint(2, 10) * 20
    value = Rational(percentage, 100) * base
    answer: Union[int, float] = int(value) if value.q == 1 else float(value)

    return _build(
        MathTopic.percentages,
        year_level,
        difficulty,
        answer,
        question=f"What is {percentage}% of {base}?",
        hint=(
            f"{percentage}% means {percentage} out of 100. "
            "Try finding half or a quarter first!"
        ),
        explanation=f"{percentage}% of {base} = {format_number(answer)}",
        visual_type="pie_chart",
        interactive_type="input",
        steps=(
            _step(f"{percentage}% means {percentage} parts out of 100"),
            _step(
                "Calculate the answer",
                formula=f"{percentage}/100 × {base}",
                result=format_number(answer),
            ),
        ),
    )


# --- Time, money, patterns, shapes ------------------------------------------------


def _time(year_level: int, difficulty: Difficulty, rng: random.Random) -> Problem:
    hours = rng.randint(1, 12)

    if difficulty is Difficulty.easy:
        return _build(
            MathTopic.time,
            year_level,
            difficulty,
            hours,
            answer_value=None,
            acceptable_answers=_unique(hours, f"{hours}:00", f"{hours} o'clock"),
            question="What time does this clock show?",
            hint="Look at where the short hand (hour hand) is pointing!",
            explanation=f"When the short hand points to {hours}, it's {hours} o'clock!",
            visual_type="clock",
            clock_time=ClockTime(hours=hours, minutes=0),
            interactive_type="input",
            steps=(
                _step("Find the hour hand (short hand)"),
                _step("See what number it points to", result=f"{hours} o'clock"),
            ),
        )

    if difficulty is Difficulty.medium:
        minutes = rng.randint(0, 1) * 30
        reading = f"{hours}:{minutes:02d}"
        alternatives: List[AnswerValue] = [reading]
        if minutes == 30:
            alternatives.append(f"half past {hours}")
        return _build(
            MathTopic.time,
            year_level,
            difficulty,
            reading,
            answer_value=None,
            acceptable_answers=_unique(*alternatives),
            question="What time does this clock show?",
            hint=(
                "30 minutes is half past the hour!"
                if minutes == 30
                else "Count by 5s from 12 to where the long hand points!"
            ),
            explanation=(
                f"The hour hand is on {hours} and the minute hand shows {minutes} minutes."
            ),
            visual_type="clock",
            clock_time=ClockTime(hours=hours, minutes=minutes),
            interactive_type="input",
            steps=(
                _step("Find the hour hand (short hand)", result=str(hours)),
                _step("Count the minutes (long hand)", result=f"{minutes} minutes"),
            ),
        )

    reading = f"{hours}:30"
    return _build(
        MathTopic.time,
        year_level,
        difficulty,
        reading,
        answer_value=None,
        acceptable_answers=_unique(reading, f"half past {hours}"),
        question=f"What time is 30 minutes after {hours}:00?",
        hint="30 minutes is half an hour!",
        explanation=f"30 minutes after {hours}:00 is {reading} (half past {hours})",
        visual_type="clock",
        clock_time=ClockTime(hours=hours, minutes=0),
        interactive_type="input",
        steps=(
            _step(f"Start at {hours}:00"),
            _step("Add 30 minutes", result=reading),
        ),
    )


def _money(year_level: int, difficulty: Difficulty, rng: random.Random) -> Problem:
    prices = PRICES[difficulty]
    price1 = rng.choice(prices)
    price2 = rng.choice(prices)
    total = price1 + price2
    item1 = rng.choice(MONEY_ITEMS)
    item2 = rng.choice(MONEY_ITEMS)

    return _build(
        MathTopic.money,
        year_level,
        difficulty,
        total,
        acceptable_answers=_unique(total, f"${total}", f"{total} dollars"),
        question=(
            f"A {item1} costs ${price1} and a {item2} costs ${price2}. How much for both?"
        ),
        hint="Add the two prices together!",
        explanation=f"${price1} + ${price2} = ${total}",
        visual_type="blocks",
        interactive_type="input",
        numbers=Numbers(num1=price1, num2=price2, operator="+"),
        steps=(
            _step(f"{item1} costs ${price1}"),
            _step(f"{item2} costs ${price2}"),
            _step("Add them together", formula=f"${price1} + ${price2}", result=f"${total}"),
        ),
    )


def _patterns(year_level: int, difficulty: Difficulty, rng: random.Random) -> Problem:
    step = rng.randint(*PATTERN_STEPS[difficulty])
    start = rng.randint(1, 10)
    sequence = [start + step * i for i in range(4)]
    answer = start + step * 4

    return _build(
        MathTopic.patterns,
        year_level,
        difficulty,
        answer,
        question=f"What comes next? {', '.join(map(str, sequence))}, ?",
        hint="Look at how much the numbers increase each time!",
        explanation=f"The pattern adds {step} each time. {sequence[3]} + {step} = {answer}",
        visual_type="number_line",
        interactive_type="drag_drop",
        steps=(
            _step("Find the pattern", result=f"Adding {step} each time"),
            _step("Continue the pattern", formula=f"{sequence[3]} + {step}", result=str(answer)),
        ),
    )


def _area_perimeter(year_level: int, difficulty: Difficulty, rng: random.Random) -> Problem:
    is_area = rng.random() > 0.5
    lo, hi = SIDE_LENGTHS[difficulty]
    length = rng.randint(lo, hi)
    width = rng.randint(lo, hi)
    dims = Dimensions(length=length, width=width)

    if is_area:
        answer = length * width
        return _build(
            MathTopic.area_perimeter,
            year_level,
            difficulty,
            answer,
            acceptable_answers=_unique(answer, f"{answer} square units"),
            question="What is the area of this rectangle?",
            hint="Area = length × width. Count all the squares inside!",
            explanation=f"Area = {length} × {width} = {answer} square units",
            visual_type="rectangle",
            dimensions=dims,
            interactive_type="input",
            numbers=Numbers(num1=length, num2=width, operator="×"),
            steps=(
                _step("Use the formula: Area = length × width"),
                _step("Calculate", formula=f"{length} × {width}", result=f"{answer} square units"),
            ),
        )

    answer = 2 * (length + width)
    sides = f"{length} + {width} + {length} + {width}"
    return _build(
        MathTopic.area_perimeter,
        year_level,
        difficulty,
        answer,
        acceptable_answers=_unique(answer, f"{answer} units"),
        question="What is the perimeter of this rectangle?",
        hint="Perimeter = add all sides together. Walk around the shape!",
        explanation=f"Perimeter = {sides} = {answer} units",
        visual_type="rectangle",
        dimensions=dims,
        interactive_type="input",
        steps=(
            _step("Add all four sides"),
            _step("Calculate", formula=sides, result=f"{answer} units"),
        ),
    )


# --- Public API -------------------------------------------------------------------

Generator = Callable[[int, Difficulty, random.Random], Problem]

GENERATORS: Dict[MathTopic, Generator] = {
    MathTopic.counting: _counting,
    MathTopic.addition: _addition,
    MathTopic.subtraction: _subtraction,
    MathTopic.multiplication: _multiplication,
    MathTopic.division: _division,
    MathTopic.fractions: _fractions,
    MathTopic.decimals: _decimals,
    MathTopic.percentages: _percentages,
    MathTopic.time: _time,
    MathTopic.money: _money,
    MathTopic.patterns: _patterns,
    MathTopic.area_perimeter: _area_perimeter,
}


def generate_problem(
    topic: Union[MathTopic, str],
    year_level: int,
    difficulty: Union[Difficulty, str],
    rng: Optional[random.Random] = None,
) -> Problem:
    """
    Build one problem for topic/year level/difficulty.

    Never fails for any input: unknown topics are served as addition, year levels
    are clamped into 1..6 and unknown difficulties read as easy.
    """
    rng = rng or _default_rng
    t = coerce_topic(topic)
    level = clamp_year_level(year_level)
    diff = coerce_difficulty(difficulty)

    problem = GENERATORS[t](level, diff, rng)
    logger.debug(
        "generated %s problem %s (level %d, %s): %r",
        t.value,
        problem.id,
        level,
        diff.value,
        problem.question,
    )
    return problem


def generate_for_level(
    year_level: int,
    difficulty: Union[Difficulty, str],
    topic: Union[MathTopic, str, None] = None,
    rng: Optional[random.Random] = None,
) -> Problem:
    # No topic picked: draw one from what the level offers.
    rng = rng or _default_rng
    level = clamp_year_level(year_level)
    if topic is None:
        topic = rng.choice(YEAR_TOPICS[level])
    return generate_problem(topic, level, difficulty, rng)


def generate_batch(
    count: int,
    year_level: int,
    difficulty: Union[Difficulty, str],
    topic: Union[MathTopic, str, None] = None,
    rng: Optional[random.Random] = None,
) -> List[Problem]:
    return [generate_for_level(year_level, difficulty, topic, rng) for _ in range(max(0, count))]
