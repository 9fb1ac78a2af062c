"""Remote dictionary lookups."""
import asyncio
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import aiohttp

from wordmate.config import settings
from wordmate.exceptions import LookupFailedError, WordNotFoundError
from wordmate.models.word_models import WordEntry
from wordmate import monitoring

logger = logging.getLogger(__name__)


def map_api_entry(entry: Dict[str, Any]) -> WordEntry:
    """Map one dictionary API entry onto the catalog entry shape.

    Only the first meaning and its first definition are kept.
    """
    meanings = entry.get("meanings") or []
    first_meaning = meanings[0] if meanings else {}
    definitions = first_meaning.get("definitions") or []
    first_definition = definitions[0] if definitions else {}

    phonetics = entry.get("phonetics") or []
    pronunciation = entry.get("phonetic") or (phonetics[0].get("text") if phonetics else None)

    return WordEntry(
        word=entry["word"],
        part_of_speech=first_meaning.get("partOfSpeech") or "unknown",
        pronunciation=pronunciation or "N/A",
        meaning=first_definition.get("definition") or "No definition available",
        example=first_definition.get("example"),
    )


class DictionaryService:
    """Client for the free dictionary API.

    Use as an async context manager, or call close() when done.
    """

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        self._session = session
        self._owns_session = session is None
        self.base_url = (base_url or settings.dictionary.api_url).rstrip("/")
        self.timeout = timeout or settings.dictionary.timeout

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the session if this service created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> "DictionaryService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def lookup(self, word: str) -> List[WordEntry]:
        """Look up a word.

        Raises WordNotFoundError for a non-success response and
        LookupFailedError when the API cannot be reached.
        """
        word = word.strip()
        if not word:
            raise WordNotFoundError(word)

        session = await self._get_session()
        url = f"{self.base_url}/{quote(word)}"

        try:
            async with session.get(url) as response:
                if response.status != 200:
                    monitoring.dictionary_lookups.labels(result="not_found").inc()
                    logger.info(f"No dictionary entry for '{word}' (HTTP {response.status})")
                    raise WordNotFoundError(word)
                data = await response.json()
        except asyncio.TimeoutError as e:
            monitoring.dictionary_lookups.labels(result="error").inc()
            raise LookupFailedError("Dictionary lookup timed out") from e
        except aiohttp.ClientError as e:
            monitoring.dictionary_lookups.labels(result="error").inc()
            logger.warning(f"Dictionary lookup failed for '{word}': {e}")
            raise LookupFailedError(f"Dictionary lookup failed: {e}") from e
        except ValueError as e:
            monitoring.dictionary_lookups.labels(result="error").inc()
            logger.warning(f"Unreadable dictionary response for '{word}': {e}")
            raise LookupFailedError("Dictionary returned an unreadable response") from e

        if not isinstance(data, list):
            monitoring.dictionary_lookups.labels(result="not_found").inc()
            raise WordNotFoundError(word)

        entries = []
        for item in data:
            try:
                entries.append(map_api_entry(item))
            except (KeyError, TypeError, AttributeError, IndexError):
                logger.warning(f"Skipping malformed dictionary entry for '{word}'")
        if not entries:
            monitoring.dictionary_lookups.labels(result="not_found").inc()
            raise WordNotFoundError(word)

        monitoring.dictionary_lookups.labels(result="found").inc()
        logger.debug(f"Dictionary returned {len(entries)} entries for '{word}'")
        return entries
