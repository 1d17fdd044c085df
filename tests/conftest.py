import random

import fakeredis
import pytest
from rq import Queue


@pytest.fixture
def rng():
    return random.Random(20240101)


@pytest.fixture
def redis_conn():
    return fakeredis.FakeStrictRedis()


@pytest.fixture
def sync_queue(redis_conn):
    """RQ queue that runs jobs inline, backed by fakeredis."""
    return Queue("factor-test", connection=redis_conn, is_async=False)
