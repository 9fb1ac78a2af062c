"""Models for vocabulary entries and user-facing records."""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class WordEntry:
    """A vocabulary entry from the catalog or a dictionary lookup."""
    word: str
    part_of_speech: str
    pronunciation: str
    meaning: str
    example: Optional[str] = None
    id: Optional[int] = None

    @property
    def key(self) -> str:
        """Lower-cased word, used for bookmark and learned-word matching."""
        return self.word.lower()

    @property
    def identity(self) -> Union[int, str]:
        """Catalog id when present, otherwise the lower-cased word."""
        return self.id if self.id is not None else self.key

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "word": self.word,
            "partOfSpeech": self.part_of_speech,
            "pronunciation": self.pronunciation,
            "meaning": self.meaning,
            "example": self.example,
        }
        if self.id is not None:
            data = {"id": self.id, **data}
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WordEntry":
        """Build an entry from its stored camelCase form.

        Raises KeyError or TypeError when a required field is missing.
        """
        return cls(
            id=data.get("id"),
            word=str(data["word"]),
            part_of_speech=data.get("partOfSpeech") or "unknown",
            pronunciation=data.get("pronunciation") or "N/A",
            meaning=str(data["meaning"]),
            example=data.get("example"),
        )


@dataclass
class UserSettings:
    """Preferences shown on the settings view."""
    dark_mode: bool = True
    daily_notification: bool = True
    quiz_reminder: bool = False
    sound_effects: bool = True

    def to_dict(self) -> Dict[str, bool]:
        return {
            "darkMode": self.dark_mode,
            "dailyNotification": self.daily_notification,
            "quizReminder": self.quiz_reminder,
            "soundEffects": self.sound_effects,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserSettings":
        defaults = asdict(cls())
        return cls(
            dark_mode=bool(data.get("darkMode", defaults["dark_mode"])),
            daily_notification=bool(data.get("dailyNotification", defaults["daily_notification"])),
            quiz_reminder=bool(data.get("quizReminder", defaults["quiz_reminder"])),
            sound_effects=bool(data.get("soundEffects", defaults["sound_effects"])),
        )


@dataclass(frozen=True)
class ProgressStats:
    """Stats every view displays."""
    words_learned: int = 0
    streak: int = 0
    quiz_score: int = 0
    flashcards_success_rate: int = 0
