"""Bookmarked words."""
import logging
from typing import Iterable, List

from wordmate.exceptions import StorageError
from wordmate.models.word_models import WordEntry
from wordmate.services.storage_service import RecordStore, StorageKey
from wordmate import monitoring

logger = logging.getLogger(__name__)


class BookmarkSet:
    """Ordered bookmarks, unique by word.

    Every mutation writes the whole list. When the write fails the in-memory
    list is restored and StorageError propagates.
    """

    def __init__(self, records: RecordStore):
        self.records = records
        self._entries: List[WordEntry] = []

    def load(self) -> List[WordEntry]:
        """Reload bookmarks from the store."""
        entries: List[WordEntry] = []
        seen = set()
        for item in self.records.get_json(StorageKey.BOOKMARKS, [], expected_type=list):
            try:
                entry = WordEntry.from_dict(item)
            except (KeyError, TypeError, AttributeError):
                logger.warning(f"Skipping malformed bookmark: {item!r}")
                continue
            if entry.key not in seen:
                seen.add(entry.key)
                entries.append(entry)
        self._entries = entries
        return self.entries

    @property
    def entries(self) -> List[WordEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def is_bookmarked(self, word: str) -> bool:
        key = word.lower()
        return any(entry.key == key for entry in self._entries)

    def _commit(self, updated: List[WordEntry]) -> None:
        previous = self._entries
        self._entries = updated
        try:
            self.records.set_json(StorageKey.BOOKMARKS, [entry.to_dict() for entry in updated])
        except StorageError:
            self._entries = previous
            logger.error("Failed to save bookmarks, changes rolled back")
            raise

    def toggle(self, entry: WordEntry) -> bool:
        """Add the entry if absent, remove it if present.

        Returns True when the entry is bookmarked afterwards.
        """
        if self.is_bookmarked(entry.word):
            self._commit([e for e in self._entries if e.key != entry.key])
            monitoring.bookmark_toggles.labels(action="remove").inc()
            return False

        self._commit(self._entries + [entry])
        monitoring.bookmark_toggles.labels(action="add").inc()
        return True

    def remove(self, word: str) -> None:
        self.remove_many([word])

    def remove_many(self, words: Iterable[str]) -> int:
        """Remove every bookmark whose word is listed, in a single write.

        Returns the number of bookmarks removed.
        """
        keys = {word.lower() for word in words}
        updated = [entry for entry in self._entries if entry.key not in keys]
        removed = len(self._entries) - len(updated)
        if removed:
            self._commit(updated)
            logger.info(f"Removed {removed} bookmark(s)")
        return removed
