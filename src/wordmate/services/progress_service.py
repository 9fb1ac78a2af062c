"""Progress tracking: learned words, daily streak and session scores."""
import logging
from datetime import date, timedelta
from typing import Callable, List, Optional

from wordmate.models.word_models import ProgressStats
from wordmate.services.storage_service import RecordStore, StorageKey
from wordmate import monitoring

logger = logging.getLogger(__name__)

PROGRESS_KEYS = (
    StorageKey.WORDS_LEARNED,
    StorageKey.STREAK,
    StorageKey.LAST_STREAK_DATE,
    StorageKey.QUIZ_SCORE,
    StorageKey.FLASHCARDS_SUCCESS_RATE,
)

# Cleared together with progress on a reset
RESET_KEYS = PROGRESS_KEYS + (StorageKey.BOOKMARKS, StorageKey.WORD_OF_DAY)


def to_percentage(correct: int, total: int) -> int:
    """Return round(100 * correct / total) with halves rounded up."""
    if total <= 0:
        return 0
    return (200 * correct + total) // (2 * total)


class ProgressTracker:
    """Reads and updates the persisted progress record."""

    def __init__(self, records: RecordStore, clock: Callable[[], date] = date.today):
        """Initialize the tracker with a record store and a clock for today's date."""
        self.records = records
        self.clock = clock

    def get_words_learned(self) -> List[str]:
        learned = self.records.get_json(StorageKey.WORDS_LEARNED, [], expected_type=list)
        return [word for word in learned if isinstance(word, str)]

    def record_word_learned(self, word: str, source: str = "flashcard") -> bool:
        """Append the word to the learned list if absent.

        Returns True only when the list changed. Raises StorageError when the
        write fails.
        """
        learned = self.get_words_learned()
        if word.lower() in {w.lower() for w in learned}:
            return False

        learned.append(word)
        self.records.set_json(StorageKey.WORDS_LEARNED, learned)
        monitoring.words_learned.labels(source=source).inc()
        logger.info(f"Word learned: {word} ({len(learned)} total)")
        return True

    def _last_streak_date(self) -> Optional[date]:
        raw = self.records.get_str(StorageKey.LAST_STREAK_DATE)
        if raw is None:
            return None
        try:
            return date.fromisoformat(raw)
        except ValueError:
            logger.warning(f"Ignoring unreadable last streak date: {raw!r}")
            return None

    def touch_daily_streak(self) -> int:
        """Advance the streak at most once per calendar day and return it."""
        today = self.clock()
        last_date = self._last_streak_date()
        streak = self.records.get_int(StorageKey.STREAK, 0)

        if last_date == today:
            return streak

        if last_date is not None and last_date == today - timedelta(days=1):
            streak += 1
        else:
            streak = 1

        self.records.set_int(StorageKey.STREAK, streak)
        self.records.set_str(StorageKey.LAST_STREAK_DATE, today.isoformat())
        logger.info(f"Streak updated to {streak} on {today.isoformat()}")
        return streak

    def record_quiz_score(self, percentage: int) -> None:
        self.records.set_int(StorageKey.QUIZ_SCORE, percentage)

    def record_flashcard_rate(self, percentage: int) -> None:
        self.records.set_int(StorageKey.FLASHCARDS_SUCCESS_RATE, percentage)

    def get_stats(self) -> ProgressStats:
        """Get the stats shown on every view."""
        return ProgressStats(
            words_learned=len(self.get_words_learned()),
            streak=self.records.get_int(StorageKey.STREAK, 0),
            quiz_score=self.records.get_int(StorageKey.QUIZ_SCORE, 0),
            flashcards_success_rate=self.records.get_int(StorageKey.FLASHCARDS_SUCCESS_RATE, 0),
        )

    def reset_all(self) -> None:
        """Clear all progress, bookmarks and the stored word of the day.

        Raises StorageError so the failure can be shown to the user.
        """
        self.records.remove(*RESET_KEYS)
        logger.info("Progress reset")
