"""
Pytest fixtures for the Countdown solver tests.
"""

import pytest

from config.config import Rules
from countdown import Leaf, Node, Operator


class FakeRedis:
    """In-memory stand-in for the few redis.Redis calls the cache makes."""

    def __init__(self):
        self.store = {}
        self.ttl = {}

    def get(self, key):
        return self.store.get(key)

    def set(self, key, value):
        self.store[key] = value

    def expire(self, key, seconds):
        self.ttl[key] = seconds

    def delete(self, key):
        self.store.pop(key, None)
        self.ttl.pop(key, None)


@pytest.fixture
def fake_redis(monkeypatch) -> FakeRedis:
    """Make every redis.Redis(...) in the code under test share one FakeRedis."""
    import redis

    fake = FakeRedis()
    monkeypatch.setattr(redis, "Redis", lambda *args, **kwargs: fake)
    return fake


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables so defaults apply."""
    for name in ("REDIS_HOST", "REDIS_PORT", "COUNTDOWN_CACHE_TTL",
                 "COUNTDOWN_MAX_NUMBERS", "COUNTDOWN_RULES"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def board():
    """The classic example board."""
    return [1, 3, 7, 10, 25, 50]


@pytest.fixture
def classic_solution():
    """(25 - 10) * (1 + 50) = 765"""
    return Node(
        Operator.MUL,
        Node(Operator.SUB, Leaf(25), Leaf(10)),
        Node(Operator.ADD, Leaf(1), Leaf(50)),
    )


@pytest.fixture
def always_solvable_rules():
    """Deals 5 and 5 with target 10."""
    return Rules(
        large_numbers=[],
        small_numbers=[5],
        num_large=0,
        num_small=2,
        target_min=10,
        target_max=10,
    )


@pytest.fixture
def never_solvable_rules():
    """Deals 1 and 1 with target 3."""
    return Rules(
        large_numbers=[],
        small_numbers=[1],
        num_large=0,
        num_small=2,
        target_min=3,
        target_max=3,
    )
