# schemas/topics.py
from pydantic import BaseModel

from topics import MathTopic


class TopicOut(BaseModel):
    topic: MathTopic
    name: str


class YearTopicsOut(BaseModel):
    year_level: int
    topics: list[TopicOut]
