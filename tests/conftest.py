# tests/conftest.py
import random
import pytest
from faker import Faker

from teamdraw.domain.models import Participant

FAKE = Faker()


class SequenceRandom:
    """RandomSource replaying a fixed list of values, cycling when exhausted."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


def make_participants(scores, categories=None):
    categories = categories or ["A"] * len(scores)
    return [
        Participant(name=FAKE.first_name(), score=s, category=c)
        for s, c in zip(scores, categories)
    ]


@pytest.fixture
def random_participants():
    """24 participants with scores in [1, 10], mixed categories."""
    rng = random.Random(1234)
    scores = [rng.randint(1, 10) for _ in range(24)]
    categories = [rng.choice(["A", "B"]) for _ in range(24)]
    return make_participants(scores, categories)
