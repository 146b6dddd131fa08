from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query

from config import MAX_BATCH
from generator import generate_batch, generate_for_level
from schemas.problems import Problem
from schemas.topics import TopicOut, YearTopicsOut
from topics import TOPIC_NAMES, YEAR_TOPICS, Difficulty, MathTopic, clamp_year_level

router = APIRouter(tags=["problems"])


@router.get("/topics", response_model=List[TopicOut])
def list_topics():
    return [{"topic": t, "name": TOPIC_NAMES[t]} for t in MathTopic]


@router.get("/topics/{year_level}", response_model=YearTopicsOut)
def topics_for_level(year_level: int):
    level = clamp_year_level(year_level)
    return {
        "year_level": level,
        "topics": [{"topic": t, "name": TOPIC_NAMES[t]} for t in YEAR_TOPICS[level]],
    }


@router.get("/problems/generate", response_model=Problem)
def generate(
    topic: Optional[str] = None,
    year_level: int = 1,
    difficulty: Difficulty = Difficulty.easy,
):
    # topic stays a free string: unknown names are served as addition
    return generate_for_level(year_level, difficulty, topic)


@router.get("/problems/batch", response_model=List[Problem])
def generate_many(
    count: int = Query(default=5, ge=1, le=MAX_BATCH),
    topic: Optional[str] = None,
    year_level: int = 1,
    difficulty: Difficulty = Difficulty.easy,
):
    return generate_batch(count, year_level, difficulty, topic)
