from __future__ import annotations

import logging
import time
from typing import Any, Dict, List

from fastapi import APIRouter

from answers import mark
from feedback import multiple_choice_options
from schemas.marking import (
    CheckBatchRequest,
    CheckBatchResponse,
    CheckRequest,
    CheckResponse,
    OptionsRequest,
    OptionsResponse,
)
from topics import MathTopic

logger = logging.getLogger("mathbuddy.marking")

router = APIRouter(tags=["marking"])


def _streaks(outcomes: List[bool]) -> Dict[str, int]:
    current = best = 0
    for ok in outcomes:
        current = current + 1 if ok else 0
        best = max(best, current)
    return {"current_streak": current, "best_streak": best}


# --- Endpoints --------------------------------------------------------------------


@router.post("/check", response_model=CheckResponse)
def check(req: CheckRequest):
    return mark(req.problem, req.answer, attempt=req.attempt)


@router.post("/check-batch", response_model=CheckBatchResponse)
def check_batch(req: CheckBatchRequest):
    t0 = time.perf_counter()

    results: List[Dict[str, Any]] = []
    outcomes: List[bool] = []
    topics: List[MathTopic] = []

    for it in req.items:
        # one shot per item: the batch is a finished worksheet
        res = mark(it.problem, it.answer, attempt=1)
        results.append({"id": it.problem.id, "response": res})
        outcomes.append(bool(res.get("correct")))
        if it.problem.topic not in topics:
            topics.append(it.problem.topic)

    total = len(results)
    correct_count = sum(outcomes)
    measured_ms = int(round((time.perf_counter() - t0) * 1000))
    duration_ms = req.duration_ms if req.duration_ms is not None else measured_ms

    logger.info("checked batch of %d: %d correct", total, correct_count)

    return {
        "ok": True,
        "total": total,
        "correct": correct_count,
        "results": results,
        "topics": topics,
        "duration_ms": duration_ms,
        **_streaks(outcomes),
    }


@router.post("/options", response_model=OptionsResponse)
def options(req: OptionsRequest):
    return {"ok": True, "options": multiple_choice_options(req.problem)}
