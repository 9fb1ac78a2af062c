"""Test configuration."""
import os
import random
from datetime import date, timedelta
from pathlib import Path
from typing import Optional

import pytest
from dotenv import load_dotenv

# Set test environment before any imports
os.environ["ENV"] = "test"
os.environ.setdefault("DATABASE_URL", "sqlite://")

# Load test environment variables
test_env_path = Path(__file__).parent.parent.parent.parent / ".env.test"
load_dotenv(test_env_path)

# Import after environment setup
from wordmate.exceptions import StorageError
from wordmate.models.word_models import WordEntry
from wordmate.services.catalog_service import WordCatalog
from wordmate.services.progress_service import ProgressTracker
from wordmate.services.storage_service import InMemoryKeyValueStore, RecordStore


class FakeClock:
    """Callable returning a settable date."""

    def __init__(self, today: date):
        self.today = today

    def __call__(self) -> date:
        return self.today

    def advance(self, days: int = 1) -> None:
        self.today += timedelta(days=days)


class FailingStore(InMemoryKeyValueStore):
    """In-memory store whose reads or writes can be switched to fail."""

    def __init__(self, initial: Optional[dict] = None):
        super().__init__(initial)
        self.fail_reads = False
        self.fail_writes = False

    def get(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise StorageError("read", key)
        return super().get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageError("write", key)
        super().set(key, value)

    def remove(self, key: str) -> None:
        if self.fail_writes:
            raise StorageError("remove", key)
        super().remove(key)


@pytest.fixture
def store() -> FailingStore:
    """Store that behaves like a plain in-memory store until told to fail."""
    return FailingStore()


@pytest.fixture
def records(store: FailingStore) -> RecordStore:
    return RecordStore(store)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(date(2024, 3, 10))


@pytest.fixture
def progress(records: RecordStore, clock: FakeClock) -> ProgressTracker:
    return ProgressTracker(records, clock=clock)


@pytest.fixture
def catalog() -> WordCatalog:
    """The catalog bundled with the package."""
    return WordCatalog.load()


@pytest.fixture
def small_catalog() -> WordCatalog:
    """Five entries, enough for one set of quiz options."""
    return WordCatalog([
        WordEntry(id=i, word=word, part_of_speech="noun", pronunciation=word, meaning=f"Meaning of {word}")
        for i, word in enumerate(["apple", "banana", "cherry", "damson", "elder"], start=1)
    ])


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
