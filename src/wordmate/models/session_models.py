"""Models for quiz and flashcard session state."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from wordmate.models.word_models import WordEntry


class QuizState(Enum):
    """States of a quiz session."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    ANSWER_REVEALED = "answer_revealed"  # Input disabled until the next question
    COMPLETED = "completed"


class FlashcardState(Enum):
    """States of a flashcard session."""
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class QuizSnapshot:
    """Read-only view of a quiz session for rendering."""
    state: QuizState
    current_index: int
    total: int
    score: int
    question: Optional[WordEntry] = None
    options: Tuple[WordEntry, ...] = ()
    selected: Optional[WordEntry] = None
    percentage: Optional[int] = None

    @property
    def is_correct(self) -> Optional[bool]:
        if self.selected is None or self.question is None:
            return None
        return self.selected.identity == self.question.identity


@dataclass(frozen=True)
class FlashcardSnapshot:
    """Read-only view of a flashcard session for rendering."""
    state: FlashcardState
    current_index: int
    total: int
    known_count: int
    card: Optional[WordEntry] = None
    flipped: bool = False
    success_rate: Optional[int] = None
