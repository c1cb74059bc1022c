from __future__ import annotations

import pytest

from todo_agent.metadata.store import InMemoryMetadataStore
from todo_agent.todo.store import TodoListStore

from .fakes import StepClock


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def metadata() -> InMemoryMetadataStore:
    return InMemoryMetadataStore()


@pytest.fixture()
def todo_store(metadata: InMemoryMetadataStore, clock: StepClock) -> TodoListStore:
    """TodoListStore bound to worker-1 with a deterministic clock."""
    return TodoListStore(metadata, default_worker=lambda: "worker-1", clock=clock)
