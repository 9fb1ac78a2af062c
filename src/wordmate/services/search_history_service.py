"""Recent dictionary searches."""
import logging
from typing import List, Optional

from wordmate.config import settings
from wordmate.exceptions import StorageError
from wordmate.services.storage_service import RecordStore, StorageKey

logger = logging.getLogger(__name__)


class SearchHistory:
    """Most-recent-first list of lower-cased queries.

    A repeated query keeps its existing position.
    """

    def __init__(self, records: RecordStore, size: Optional[int] = None):
        self.records = records
        self.size = size if size is not None else settings.history.size
        self._queries: List[str] = []

    def load(self) -> List[str]:
        stored = self.records.get_json(StorageKey.SEARCH_HISTORY, [], expected_type=list)
        self._queries = [q for q in stored if isinstance(q, str)][: self.size]
        return self.entries

    @property
    def entries(self) -> List[str]:
        return list(self._queries)

    def record(self, query: str) -> List[str]:
        """Remember a query; failures to persist are logged and ignored."""
        query = query.strip().lower()
        if not query or query in self._queries:
            return self.entries

        updated = [query] + self._queries
        updated = updated[: self.size]
        try:
            self.records.set_json(StorageKey.SEARCH_HISTORY, updated)
        except StorageError as e:
            logger.error(f"Error updating search history: {e}")
            return self.entries
        self._queries = updated
        return self.entries
