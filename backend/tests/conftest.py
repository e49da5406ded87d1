import pytest

import store
from helpers import FakeClock, sequential_ids
from registry import Registry


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def registry(clock) -> Registry:
    return Registry(clock=clock, new_id=sequential_ids())


@pytest.fixture
def shared_registry(registry, monkeypatch) -> Registry:
    """Swap the process-wide registry for one driven by the fake clock."""
    monkeypatch.setattr(store, "registry", registry)
    return registry
