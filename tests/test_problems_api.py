from fastapi.testclient import TestClient

from main import app
from topics import YEAR_TOPICS

client = TestClient(app)


def test_health():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json().get("ok") is True


def test_list_topics():
    r = client.get("/topics")
    assert r.status_code == 200
    data = r.json()
    assert len(data) == 12
    assert {"topic": "area_perimeter", "name": "Area & Perimeter"} in data


def test_topics_for_level_is_clamped():
    r = client.get("/topics/9")
    assert r.status_code == 200
    body = r.json()
    assert body["year_level"] == 6
    assert [t["topic"] for t in body["topics"]] == [t.value for t in YEAR_TOPICS[6]]


def test_generate_problem():
    r = client.get(
        "/problems/generate", params={"topic": "fractions", "year_level": 4, "difficulty": "hard"}
    )
    assert r.status_code == 200
    p = r.json()
    assert p["topic"] == "fractions"
    assert p["year_level"] == 4
    assert p["difficulty"] == "hard"
    assert {"id", "question", "answer", "acceptable_answers", "hint", "steps"}.issubset(p)
    assert p["numbers"] is None


def test_generate_unknown_topic_is_addition():
    r = client.get("/problems/generate", params={"topic": "geometry", "year_level": 2})
    assert r.status_code == 200
    body = r.json()
    assert body["topic"] == "addition"
    assert body["numbers"]["operator"] == "+"


def test_generate_clamps_year_level():
    r = client.get("/problems/generate", params={"topic": "addition", "year_level": 12})
    assert r.status_code == 200
    assert r.json()["year_level"] == 6


def test_generate_without_topic_uses_level_topics():
    allowed = {t.value for t in YEAR_TOPICS[1]}
    for _ in range(10):
        r = client.get("/problems/generate", params={"year_level": 1})
        assert r.json()["topic"] in allowed


def test_generate_invalid_difficulty():
    r = client.get("/problems/generate", params={"difficulty": "extreme"})
    assert r.status_code == 422


def test_batch():
    r = client.get("/problems/batch", params={"count": 3, "topic": "money", "difficulty": "medium"})
    assert r.status_code == 200
    data = r.json()
    assert len(data) == 3
    assert len({p["id"] for p in data}) == 3
    assert all(p["topic"] == "money" for p in data)


def test_batch_count_bounds():
    assert client.get("/problems/batch", params={"count": 0}).status_code == 422
    assert client.get("/problems/batch", params={"count": 1000}).status_code == 422
