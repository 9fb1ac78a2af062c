"""Tests for data models."""
from typing import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from wordmate.models.base import init_db
from wordmate.models.models import KeyValue
from wordmate.models.session_models import QuizSnapshot, QuizState
from wordmate.models.word_models import UserSettings, WordEntry


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    engine = create_engine("sqlite://")
    init_db(bind=engine)
    db = sessionmaker(bind=engine)()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


def test_key_value_creation(db: Session) -> None:
    """Test key-value rows get timestamps."""
    record = KeyValue(key="streak", value="1")
    db.add(record)
    db.commit()
    db.refresh(record)

    assert record.created_at is not None
    assert record.updated_at is not None
    assert repr(record) == "<KeyValue streak>"


def test_word_entry_dict_round_trip() -> None:
    entry = WordEntry(id=4, word="Resilient", part_of_speech="adjective", pronunciation="rɪˈzɪl.i.ənt",
                      meaning="Able to recover quickly.", example="Children are resilient.")

    data = entry.to_dict()

    assert data == {
        "id": 4,
        "word": "Resilient",
        "partOfSpeech": "adjective",
        "pronunciation": "rɪˈzɪl.i.ənt",
        "meaning": "Able to recover quickly.",
        "example": "Children are resilient.",
    }
    assert WordEntry.from_dict(data) == entry


def test_word_entry_without_id() -> None:
    """Test lookup results are identified by their lower-cased word."""
    entry = WordEntry(word="Hello", part_of_speech="exclamation", pronunciation="N/A", meaning="A greeting.")

    assert "id" not in entry.to_dict()
    assert entry.key == "hello"
    assert entry.identity == "hello"


def test_word_entry_requires_word_and_meaning() -> None:
    with pytest.raises(KeyError):
        WordEntry.from_dict({"word": "alpha"})


def test_user_settings_round_trip() -> None:
    user_settings = UserSettings(dark_mode=False, quiz_reminder=True)
    assert UserSettings.from_dict(user_settings.to_dict()) == user_settings


def test_quiz_snapshot_without_selection() -> None:
    snapshot = QuizSnapshot(state=QuizState.NOT_STARTED, current_index=0, total=0, score=0)
    assert snapshot.is_correct is None
