"""Main application object wiring every service to one store."""
import logging
import random
from datetime import date
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from wordmate.config import settings
from wordmate.exceptions import CapabilityUnavailableError, StorageError
from wordmate.models.base import SessionLocal, init_db
from wordmate.models.word_models import ProgressStats, WordEntry
from wordmate.services.bookmark_service import BookmarkSet
from wordmate.services.catalog_service import WordCatalog
from wordmate.services.dictionary_service import DictionaryService
from wordmate.services.flashcard_service import FlashcardSession
from wordmate.services.progress_service import ProgressTracker
from wordmate.services.quiz_service import QuizSession
from wordmate.services.search_history_service import SearchHistory
from wordmate.services.settings_service import SettingsService
from wordmate.services.storage_service import (
    KeyValueStore,
    RecordStore,
    SqlKeyValueStore,
    StorageKey,
)
from wordmate import monitoring


class WordMate:
    """Main application class.

    Without an explicit store, start() opens a database session and keeps
    every record in the key_values table.
    """

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        catalog: Optional[WordCatalog] = None,
        dictionary: Optional[DictionaryService] = None,
        speaker: Optional[Callable[[str], None]] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], date] = date.today,
    ):
        """Initialize the application."""
        self.store = store
        self.catalog = catalog
        self.dictionary = dictionary
        self.speaker = speaker
        self.rng = rng or random.Random()
        self.clock = clock
        self.db: Optional[Session] = None
        self.running = False
        self.word_of_the_day: Optional[WordEntry] = None
        self.logger = logging.getLogger(__name__)

    async def start(self) -> None:
        """Start the application."""
        if self.running:
            return

        try:
            if self.store is None:
                init_db()
                self.db = SessionLocal()
                self.store = SqlKeyValueStore(self.db)
                self.logger.info("Database initialized")

            if self.catalog is None:
                self.catalog = WordCatalog.load()
            if self.dictionary is None:
                self.dictionary = DictionaryService()

            self.records = RecordStore(self.store)
            self.progress = ProgressTracker(self.records, clock=self.clock)
            self.bookmarks = BookmarkSet(self.records)
            self.search_history = SearchHistory(self.records)
            self.user_settings = SettingsService(self.records)
            self.bookmarks.load()
            self.search_history.load()

            if settings.monitoring.enabled:
                monitoring.start_monitoring(settings.monitoring.port)
                self.logger.info(f"Metrics exposed on port {settings.monitoring.port}")

            self.running = True
            self.logger.info("Application started")

        except Exception as e:
            self.logger.error("Failed to start application: %s", str(e))
            await self.stop()
            raise

    async def stop(self) -> None:
        """Stop the application."""
        if self.dictionary:
            await self.dictionary.close()

        if self.db:
            self.db.close()
            self.db = None
            self.store = None
            self.logger.info("Database session closed")

        if self.running:
            self.running = False
            self.logger.info("Application stopped")

    def open(self) -> WordEntry:
        """Foreground the app: touch the streak and pick a word of the day."""
        try:
            self.progress.touch_daily_streak()
        except StorageError as e:
            self.logger.error(f"Error updating streak: {e}")
            monitoring.error_count.labels(error_type="streak").inc()

        self.word_of_the_day = self.catalog.random_entry(self.rng)
        try:
            self.records.set_json(StorageKey.WORD_OF_DAY, self.word_of_the_day.to_dict())
        except StorageError as e:
            self.logger.error(f"Error saving word of the day: {e}")
            monitoring.error_count.labels(error_type="word_of_day").inc()
        return self.word_of_the_day

    def stats(self) -> ProgressStats:
        return self.progress.get_stats()

    def new_quiz(self) -> QuizSession:
        """Create and start a quiz session."""
        quiz = QuizSession(self.catalog, self.progress, rng=self.rng)
        quiz.start()
        return quiz

    def new_flashcards(self) -> FlashcardSession:
        return FlashcardSession(self.catalog, self.progress)

    async def search(self, query: str) -> List[WordEntry]:
        """Look up a word; successful queries are added to the search history.

        Raises WordNotFoundError or LookupFailedError.
        """
        query = query.strip()
        if not query:
            return []
        entries = await self.dictionary.lookup(query)
        self.search_history.record(query)
        return entries

    def speak(self, entry: WordEntry) -> bool:
        """Pronounce the word and count it as learned.

        Returns True when the word was newly learned.
        """
        if self.speaker is None:
            raise CapabilityUnavailableError("Text-to-speech is not available on this device.")
        try:
            self.speaker(entry.word)
        except Exception as e:
            monitoring.error_count.labels(error_type="speech").inc()
            raise CapabilityUnavailableError("Text-to-speech is not available on this device.") from e

        try:
            return self.progress.record_word_learned(entry.word, source="speech")
        except StorageError as e:
            self.logger.error(f"Error saving learned word: {e}")
            monitoring.error_count.labels(error_type="learned_word").inc()
            return False

    def reset_progress(self) -> None:
        """Clear all progress. Raises StorageError for the user to see."""
        self.progress.reset_all()
        self.bookmarks.load()
        self.word_of_the_day = None
