"""Static vocabulary catalog bundled with the app."""
import json
import logging
import random
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from wordmate.config import settings
from wordmate.exceptions import CatalogError
from wordmate.models.word_models import WordEntry

logger = logging.getLogger(__name__)


class WordCatalog:
    """Read-only, ordered sequence of vocabulary entries."""

    def __init__(self, entries: Sequence[WordEntry]):
        self._entries = tuple(entries)
        self._by_key = {entry.key: entry for entry in self._entries}

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "WordCatalog":
        """Load the catalog from a JSON array of entries."""
        path = Path(path) if path is not None else settings.paths.catalog_file
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            raise CatalogError(f"Cannot read catalog {path}: {e}") from e

        if not isinstance(raw, list):
            raise CatalogError(f"Catalog {path} must contain a JSON array")

        entries: List[WordEntry] = []
        for position, item in enumerate(raw):
            try:
                entries.append(WordEntry.from_dict(item))
            except (KeyError, TypeError, AttributeError) as e:
                raise CatalogError(f"Malformed catalog entry at position {position}: {e}") from e

        logger.info(f"Loaded {len(entries)} words from {path}")
        return cls(entries)

    @property
    def entries(self) -> tuple:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[WordEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> WordEntry:
        return self._entries[index]

    def get(self, word: str) -> Optional[WordEntry]:
        """Find an entry by word, ignoring case."""
        return self._by_key.get(word.lower())

    def random_entry(self, rng: Optional[random.Random] = None) -> WordEntry:
        """Pick a word of the day."""
        if not self._entries:
            raise CatalogError("Catalog is empty")
        return (rng or random).choice(self._entries)
