"""Flashcard session over the whole catalog."""
import logging
from typing import Optional

from wordmate.exceptions import StorageError
from wordmate.models.session_models import FlashcardSnapshot, FlashcardState
from wordmate.models.word_models import WordEntry
from wordmate.services.catalog_service import WordCatalog
from wordmate.services.progress_service import ProgressTracker, to_percentage
from wordmate import monitoring

logger = logging.getLogger(__name__)


class FlashcardSession:
    """Walks the catalog in order, counting the cards the user knows."""

    def __init__(self, catalog: WordCatalog, progress: ProgressTracker):
        self.catalog = catalog
        self.progress = progress
        self.order = tuple(catalog)
        self.current_index = 0
        self.known_count = 0
        self.flipped = False
        self.success_rate: Optional[int] = None
        self.state = FlashcardState.IN_PROGRESS if self.order else FlashcardState.COMPLETED

    @property
    def total(self) -> int:
        return len(self.order)

    @property
    def current_card(self) -> Optional[WordEntry]:
        if self.state == FlashcardState.COMPLETED:
            return None
        return self.order[self.current_index]

    def flip(self) -> bool:
        """Toggle between the word and its meaning."""
        if self.state == FlashcardState.IN_PROGRESS:
            self.flipped = not self.flipped
        return self.flipped

    def mark_known(self) -> None:
        """Swipe right: the user knows this word."""
        card = self.current_card
        if card is None:
            return
        try:
            self.progress.record_word_learned(card.word, source="flashcard")
        except StorageError as e:
            logger.error(f"Error saving known word: {e}")
            monitoring.error_count.labels(error_type="known_word").inc()
        self.known_count += 1
        self.advance()

    def mark_unknown(self) -> None:
        """Swipe left: move on without recording."""
        if self.current_card is None:
            return
        self.advance()

    def advance(self) -> None:
        if self.state == FlashcardState.COMPLETED:
            return
        self.flipped = False

        if self.current_index >= self.total - 1:
            self.current_index = self.total
            self._complete()
        else:
            self.current_index += 1

    def _complete(self) -> None:
        self.success_rate = to_percentage(self.known_count, self.total)
        self.state = FlashcardState.COMPLETED
        monitoring.flashcard_sessions_completed.inc()
        logger.info(f"Flashcards completed: {self.known_count}/{self.total} ({self.success_rate}%)")
        try:
            self.progress.record_flashcard_rate(self.success_rate)
        except StorageError as e:
            logger.error(f"Error saving flashcards success rate: {e}")
            monitoring.error_count.labels(error_type="flashcard_rate").inc()

    def reset(self) -> None:
        """Zero the stored success rate and start a new pass."""
        try:
            self.progress.record_flashcard_rate(0)
        except StorageError as e:
            logger.error(f"Error resetting flashcards success rate: {e}")
            monitoring.error_count.labels(error_type="flashcard_reset").inc()
        self.current_index = 0
        self.known_count = 0
        self.flipped = False
        self.success_rate = None
        self.state = FlashcardState.IN_PROGRESS if self.order else FlashcardState.COMPLETED

    def snapshot(self) -> FlashcardSnapshot:
        return FlashcardSnapshot(
            state=self.state,
            current_index=self.current_index,
            total=self.total,
            known_count=self.known_count,
            card=self.current_card,
            flipped=self.flipped,
            success_rate=self.success_rate,
        )
