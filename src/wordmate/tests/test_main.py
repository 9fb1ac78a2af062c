"""Tests for the command-line entry point and logging setup."""
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from wordmate import __main__ as entry
from wordmate.exceptions import WordNotFoundError
from wordmate.logging_config import setup_logging
from wordmate.models.word_models import ProgressStats, WordEntry

ENTRY = WordEntry(id=1, word="Serendipity", part_of_speech="noun", pronunciation="ˌser.ənˈdɪp.ə.ti",
                  meaning="Finding something good without looking for it.")


@pytest.fixture
def fake_app(monkeypatch) -> MagicMock:
    app = MagicMock()
    app.start = AsyncMock()
    app.stop = AsyncMock()
    app.open = MagicMock(return_value=ENTRY)
    app.stats = MagicMock(return_value=ProgressStats(words_learned=2, streak=3))
    app.search = AsyncMock(return_value=[ENTRY])
    monkeypatch.setattr(entry, "WordMate", MagicMock(return_value=app))
    return app


def test_setup_logging_level():
    root_logger = logging.getLogger()
    saved_handlers, saved_level = root_logger.handlers[:], root_logger.level
    try:
        setup_logging("Starting tests", level="WARNING")
        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1

        setup_logging(level=logging.DEBUG)
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
    finally:
        root_logger.handlers[:] = saved_handlers
        root_logger.setLevel(saved_level)


@pytest.mark.asyncio
async def test_main_reports_word_of_the_day(fake_app: MagicMock, caplog):
    with caplog.at_level(logging.INFO, logger="wordmate"):
        await entry.main()

    assert "Word of the day: Serendipity" in caplog.text
    assert "streak: 3" in caplog.text
    fake_app.search.assert_not_awaited()
    fake_app.stop.assert_awaited_once()


@pytest.mark.asyncio
async def test_main_looks_up_word(fake_app: MagicMock, caplog):
    with caplog.at_level(logging.INFO, logger="wordmate"):
        await entry.main("serendipity")

    fake_app.search.assert_awaited_once_with("serendipity")
    assert "Serendipity /ˌser.ənˈdɪp.ə.ti/ noun" in caplog.text


@pytest.mark.asyncio
async def test_main_reports_failed_lookup(fake_app: MagicMock, caplog):
    fake_app.search.side_effect = WordNotFoundError("qwerty")

    with caplog.at_level(logging.INFO, logger="wordmate"):
        await entry.main("qwerty")

    assert "qwerty: Word not found" in caplog.text
    fake_app.stop.assert_awaited_once()
