import pytest

from dynamic_draft.editor.persistence import PersistenceAdapter
from dynamic_draft.editor.scheduling import ManualScheduler
from dynamic_draft.repository.storage import InMemoryStore


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def persistence(store):
    return PersistenceAdapter(store)
