import random

import pytest

from score_store import MemoryScoreStore
from session import Game


class FixedRandom(random.Random):
    """random.Random whose random() always returns the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def store():
    return MemoryScoreStore()


@pytest.fixture
def game(store):
    return Game(store, "easy", rng=random.Random(1234))
