"""Shared fixtures for the toolkit tests."""

from __future__ import annotations

import pytest

from intercept_toolkit.ratelimit import VirtualScheduler
from intercept_toolkit.storage import MemoryStore, set_default_store


@pytest.fixture(autouse=True)
def reset_default_store():
    set_default_store(None)
    yield
    set_default_store(None)


@pytest.fixture
def scheduler() -> VirtualScheduler:
    return VirtualScheduler()


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()
