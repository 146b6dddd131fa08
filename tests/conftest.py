import random

import pytest


class ScriptedRandom(random.Random):
    """
    Random source that hands out scripted values first, then falls back to a
    seeded generator. Scripted values must fall inside the requested range.
    """

    def __new__(cls, *args, **kwargs):
        return super().__new__(cls)

    def __init__(self, ints=(), choices=(), seed=0):
        super().__init__(seed)
        self._ints = list(ints)
        self._choices = list(choices)

    def randint(self, a, b):
        if self._ints:
            v = self._ints.pop(0)
            assert a <= v <= b, f"scripted {v} outside [{a}, {b}]"
            return v
        return super().randint(a, b)

    def choice(self, seq):
        if self._choices:
            v = self._choices.pop(0)
            assert v in seq, f"scripted {v!r} not in {seq!r}"
            return v
        return super().choice(seq)


@pytest.fixture
def scripted():
    return ScriptedRandom
