# schemas/marking.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from schemas.problems import Problem
from topics import MathTopic

# ---------- Check single ----------


class CheckRequest(BaseModel):
    problem: Problem
    answer: str = ""
    # wrong tries so far, counting this one
    attempt: int = Field(default=1, ge=1)


class CheckResponse(BaseModel):
    ok: bool
    correct: bool
    feedback: str
    # only filled once the answer is correct or revealed
    expected: Optional[str] = None
    reveal: bool = False


# ---------- Check batch ----------


class CheckBatchItem(BaseModel):
    problem: Problem
    answer: str = ""


class CheckBatchResult(BaseModel):
    id: str
    response: CheckResponse


class CheckBatchRequest(BaseModel):
    items: List[CheckBatchItem]
    # time the learner spent on the worksheet; the server timing is used when absent
    duration_ms: Optional[int] = None


class CheckBatchResponse(BaseModel):
    ok: bool
    total: int
    correct: int
    results: List[CheckBatchResult]
    current_streak: int = 0
    best_streak: int = 0
    topics: List[MathTopic] = []
    duration_ms: Optional[int] = None


# ---------- Multiple choice ----------


class OptionsRequest(BaseModel):
    problem: Problem


class OptionsResponse(BaseModel):
    ok: bool
    options: List[str]
