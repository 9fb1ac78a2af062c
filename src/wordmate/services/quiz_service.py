"""Multiple-choice quiz session."""
import asyncio
import logging
import random
from typing import List, Optional

from wordmate.config import settings
from wordmate.exceptions import StorageError
from wordmate.models.session_models import QuizSnapshot, QuizState
from wordmate.models.word_models import WordEntry
from wordmate.services.catalog_service import WordCatalog
from wordmate.services.progress_service import ProgressTracker, to_percentage
from wordmate import monitoring

logger = logging.getLogger(__name__)


class QuizSession:
    """State machine for one quiz: questions, options, score and completion.

    The presentation layer calls select_answer() when an option is tapped and
    advance() once the reveal delay has passed (or awaits auto_advance()).
    """

    def __init__(
        self,
        catalog: WordCatalog,
        progress: ProgressTracker,
        rng: Optional[random.Random] = None,
        question_count: Optional[int] = None,
        option_count: Optional[int] = None,
        reveal_delay: Optional[float] = None,
    ):
        self.catalog = catalog
        self.progress = progress
        self.rng = rng or random.Random()
        self.question_count = question_count if question_count is not None else settings.quiz.questions
        self.option_count = option_count if option_count is not None else settings.quiz.options
        self.reveal_delay = reveal_delay if reveal_delay is not None else settings.quiz.reveal_delay

        self.distinct_entries = self._distinct_entries(catalog)
        if len(self.distinct_entries) < self.option_count:
            raise ValueError(
                f"Catalog has {len(self.distinct_entries)} distinct words, need at least {self.option_count} for options"
            )

        self.state = QuizState.NOT_STARTED
        self.questions: List[WordEntry] = []
        self.current_index = 0
        self.score = 0
        self.options: List[WordEntry] = []
        self.selected: Optional[WordEntry] = None
        self.percentage: Optional[int] = None

    @staticmethod
    def _distinct_entries(catalog: WordCatalog) -> List[WordEntry]:
        """First entry for each identity, in catalog order."""
        unique = {}
        for entry in catalog:
            unique.setdefault(entry.identity, entry)
        return list(unique.values())

    @property
    def current_question(self) -> Optional[WordEntry]:
        if self.state in (QuizState.NOT_STARTED, QuizState.COMPLETED):
            return None
        return self.questions[self.current_index]

    def start(self) -> None:
        """Draw a fresh set of questions and reset the score."""
        count = min(self.question_count, len(self.distinct_entries))
        self.questions = self.rng.sample(self.distinct_entries, count)
        self.current_index = 0
        self.score = 0
        self.selected = None
        self.percentage = None
        self.state = QuizState.IN_PROGRESS
        self.generate_options()
        logger.debug(f"Quiz started with {count} questions")

    def restart(self) -> None:
        """Zero the stored quiz score, then start a new quiz."""
        try:
            self.progress.record_quiz_score(0)
        except StorageError as e:
            logger.error(f"Error resetting quiz score: {e}")
            monitoring.error_count.labels(error_type="quiz_reset").inc()
        self.start()

    def generate_options(self) -> List[WordEntry]:
        """Build the shuffled options for the current question."""
        correct = self.questions[self.current_index]

        candidates = [entry for entry in self.distinct_entries if entry.identity != correct.identity]
        distractors = self.rng.sample(candidates, self.option_count - 1)
        options = [correct] + distractors
        self.rng.shuffle(options)
        self.options = options
        return options

    def select_answer(self, option: WordEntry) -> Optional[bool]:
        """Score the chosen option.

        Returns whether it was correct, or None when input is disabled
        (answer already revealed, quiz not running).
        """
        if self.state != QuizState.IN_PROGRESS:
            return None
        if option.identity not in {o.identity for o in self.options}:
            raise ValueError(f"'{option.word}' is not one of the current options")

        correct = option.identity == self.questions[self.current_index].identity
        if correct:
            self.score += 1
        self.selected = option
        self.state = QuizState.ANSWER_REVEALED
        return correct

    def advance(self) -> None:
        """Move past a revealed answer to the next question or completion."""
        if self.state != QuizState.ANSWER_REVEALED:
            return

        if self.current_index >= len(self.questions) - 1:
            self._complete()
            return

        self.current_index += 1
        self.selected = None
        self.state = QuizState.IN_PROGRESS
        self.generate_options()

    async def auto_advance(self) -> None:
        """Wait for the reveal delay, then advance.

        Does nothing if the quiz moved on while waiting.
        """
        questions, index = self.questions, self.current_index
        await asyncio.sleep(self.reveal_delay)
        if self.questions is questions and self.current_index == index:
            self.advance()

    def _complete(self) -> None:
        self.percentage = to_percentage(self.score, len(self.questions))
        self.state = QuizState.COMPLETED
        self.selected = None
        self.options = []
        monitoring.quiz_sessions_completed.inc()
        logger.info(f"Quiz completed: {self.score}/{len(self.questions)} ({self.percentage}%)")
        try:
            self.progress.record_quiz_score(self.percentage)
        except StorageError as e:
            logger.error(f"Error saving quiz score: {e}")
            monitoring.error_count.labels(error_type="quiz_score").inc()

    def snapshot(self) -> QuizSnapshot:
        return QuizSnapshot(
            state=self.state,
            current_index=self.current_index,
            total=len(self.questions),
            score=self.score,
            question=self.current_question,
            options=tuple(self.options),
            selected=self.selected,
            percentage=self.percentage,
        )
