from collections import deque

import pytest

from gacha.draw_engine import Catalog
from gacha.models.gacha_models import Entry, Tier


class ScriptedRng:
    """Random source that replays fixed values, repeating the last one."""

    def __init__(self, ints=(1,), floats=(0.0,)):
        self.ints = deque(ints)
        self.floats = deque(floats)
        self.randrange_calls = 0

    def _next(self, values):
        return values.popleft() if len(values) > 1 else values[0]

    def randrange(self, stop):
        self.randrange_calls += 1
        value = self._next(self.ints)
        assert 0 <= value < stop
        return value

    def random(self):
        value = self._next(self.floats)
        assert 0.0 <= value < 1.0
        return value


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def mixed_catalog():
    return Catalog(
        entries=[
            Entry(name="Sword", tier=Tier.common, weight=50),
            Entry(name="Shield", tier=Tier.common, weight=50),
            Entry(name="Gem", tier=Tier.rare, weight=10),
        ],
        window_capacity=3,
    )
