"""Main entry point for WordMate."""
import asyncio
import logging
import sys
from typing import Optional

from wordmate.app import WordMate
from wordmate.config import ensure_directories
from wordmate.exceptions import LookupFailedError
from wordmate.logging_config import setup_logging

logger = logging.getLogger("wordmate")


async def main(word: Optional[str] = None) -> None:
    """Open the app, report the word of the day and stats, optionally look up a word."""
    app = WordMate()
    try:
        await app.start()

        entry = app.open()
        logger.info(f"Word of the day: {entry.word} ({entry.part_of_speech}) - {entry.meaning}")

        stats = app.stats()
        logger.info(
            f"Words learned: {stats.words_learned}, streak: {stats.streak}, "
            f"quiz score: {stats.quiz_score}%, flashcards: {stats.flashcards_success_rate}%"
        )

        if word:
            try:
                for result in await app.search(word):
                    logger.info(f"{result.word} /{result.pronunciation}/ {result.part_of_speech}: {result.meaning}")
            except LookupFailedError as e:
                logger.warning(f"{word}: {e}")
    finally:
        await app.stop()


def run() -> None:
    """Console entry point."""
    ensure_directories()

    setup_logging("Starting WordMate ...")

    try:
        asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None))
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")


if __name__ == "__main__":
    run()
