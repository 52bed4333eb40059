"""Shared test fixtures for pokerhands."""

import pytest

from pokerhands.core.judge import HandJudge
from pokerhands.core.mongo_store import MemoryHandStore


@pytest.fixture
def store():
    """An in-memory hand store."""
    return MemoryHandStore()


@pytest.fixture
def judge(store):
    """A judge writing to the in-memory store."""
    return HandJudge(store)
