# schemas/problems.py
from __future__ import annotations

import uuid
from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from formatting import format_number
from topics import Difficulty, MathTopic

AnswerValue = Union[int, float, str]

VisualType = Literal[
    "number_line", "blocks", "pie_chart", "fraction_bar", "grid", "clock", "rectangle"
]
InteractiveType = Literal["drag_drop", "input"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class ProblemStep(_Frozen):
    description: str
    formula: Optional[str] = None
    result: Optional[str] = None


class Numbers(_Frozen):
    num1: int
    num2: int
    operator: str


class ClockTime(_Frozen):
    hours: int
    minutes: int


class Dimensions(_Frozen):
    length: int
    width: int


class DisplayScale(_Frozen):
    # How many units to draw; never used to compute the answer.
    num1: int
    num2: int
    scale_factor: float = 1.0
    scaled: bool = False


class DragItem(_Frozen):
    id: str
    content: str
    value: Union[int, str]
    type: Literal["number", "operator"]


def _new_id() -> str:
    return uuid.uuid4().hex


class Problem(_Frozen):
    """
    One generated problem. Never mutated; a new problem is a new value.

    `answer` is what goes on the wire (number or formatted string).
    `answer_value` is the exact numeric value when the answer is a quantity,
    None for clock times. Clients may show it; answer checking never reads it.
    """

    id: str = Field(default_factory=_new_id)
    topic: MathTopic
    year_level: int = Field(ge=1, le=6)
    difficulty: Difficulty
    question: str
    answer: AnswerValue
    answer_value: Optional[float] = None
    acceptable_answers: Tuple[AnswerValue, ...] = ()
    hint: str = ""
    explanation: str = ""
    steps: Tuple[ProblemStep, ...] = ()
    numbers: Optional[Numbers] = None
    visual_type: Optional[VisualType] = None
    interactive_type: Optional[InteractiveType] = None
    visual_content: Optional[str] = None
    clock_time: Optional[ClockTime] = None
    dimensions: Optional[Dimensions] = None
    display: Optional[DisplayScale] = None
    drag_items: Tuple[DragItem, ...] = ()

    @property
    def answer_text(self) -> str:
        if isinstance(self.answer, str):
            return self.answer
        return format_number(self.answer)
