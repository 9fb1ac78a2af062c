"""Key-value persistence for WordMate records."""
import json
import logging
from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wordmate.exceptions import StorageError
from wordmate.models.models import KeyValue
from wordmate import monitoring

logger = logging.getLogger(__name__)


class StorageKey(StrEnum):
    """Names of the persisted records."""
    BOOKMARKS = "bookmarks"
    WORDS_LEARNED = "wordsLearned"
    STREAK = "streak"
    LAST_STREAK_DATE = "lastStreakDate"
    QUIZ_SCORE = "quizScore"
    FLASHCARDS_SUCCESS_RATE = "flashcardsSuccessRate"
    SEARCH_HISTORY = "searchHistory"
    USER_SETTINGS = "userSettings"
    WORD_OF_DAY = "wordOfDay"


class KeyValueStore(ABC):
    """Opaque string store addressed by key.

    Implementations raise StorageError when the backend fails.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored string or None when the key is absent."""
        raise NotImplementedError("Subclasses must implement this method")

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        raise NotImplementedError("Subclasses must implement this method")

    @abstractmethod
    def remove(self, key: str) -> None:
        raise NotImplementedError("Subclasses must implement this method")


class InMemoryKeyValueStore(KeyValueStore):
    """Dictionary-backed store."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class SqlKeyValueStore(KeyValueStore):
    """Store backed by the key_values table."""

    def __init__(self, db: Session):
        """Initialize the store with a database session."""
        self.db = db

    def get(self, key: str) -> Optional[str]:
        try:
            record = self.db.query(KeyValue).filter(KeyValue.key == key).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("read", key, str(e)) from e
        return record.value if record else None

    def set(self, key: str, value: str) -> None:
        try:
            record = self.db.query(KeyValue).filter(KeyValue.key == key).first()
            if record:
                record.value = value
            else:
                self.db.add(KeyValue(key=key, value=value))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("write", key, str(e)) from e

    def remove(self, key: str) -> None:
        try:
            self.db.query(KeyValue).filter(KeyValue.key == key).delete()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("remove", key, str(e)) from e


class RecordStore:
    """Typed access to named records kept in a KeyValueStore.

    Reads never raise: a missing, unreadable or malformed record yields the
    default. Writes raise StorageError so callers can decide whether the
    failure is shown to the user.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    def _read(self, key: str) -> Optional[str]:
        key = str(key)
        try:
            return self.store.get(key)
        except StorageError as e:
            logger.warning(f"Falling back to default for '{key}': {e}")
            monitoring.storage_errors.labels(operation="read").inc()
            return None

    def get_json(self, key: str, default: Any = None, expected_type: Optional[type] = None) -> Any:
        raw = self._read(key)
        if raw is None:
            return default
        try:
            value = json.loads(raw)
        except ValueError:
            logger.warning(f"Record '{key}' is not valid JSON, using default")
            return default
        if expected_type is not None and not isinstance(value, expected_type):
            logger.warning(f"Record '{key}' has unexpected type {type(value).__name__}, using default")
            return default
        return value

    def get_int(self, key: str, default: int = 0) -> int:
        raw = self._read(key)
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError:
            logger.warning(f"Record '{key}' is not an integer, using default")
            return default

    def get_str(self, key: str, default: Optional[str] = None) -> Optional[str]:
        raw = self._read(key)
        return default if raw is None else raw

    def _write(self, key: str, value: str) -> None:
        key = str(key)
        try:
            self.store.set(key, value)
        except StorageError:
            monitoring.storage_errors.labels(operation="write").inc()
            raise

    def set_json(self, key: str, value: Any) -> None:
        self._write(key, json.dumps(value, ensure_ascii=False))

    def set_int(self, key: str, value: int) -> None:
        self._write(key, str(int(value)))

    def set_str(self, key: str, value: str) -> None:
        self._write(key, value)

    def remove(self, *keys: str) -> None:
        """Remove every key, stopping at the first failure."""
        for key in keys:
            key = str(key)
            try:
                self.store.remove(key)
            except StorageError:
                monitoring.storage_errors.labels(operation="remove").inc()
                raise
