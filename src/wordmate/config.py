"""Configuration settings for WordMate."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Define base directory
BASE_DIR = Path(__file__).parent.parent.parent
PACKAGE_DIR = Path(__file__).parent

# Load environment variables from .env file
env_file = ".env.test" if os.getenv("ENV") == "test" else ".env"
load_dotenv(env_file)


# Define data directories from environment variables
DATA_DIR = Path(os.getenv("DATA_DIR", "./data"))
CATALOG_FILE = Path(os.getenv("CATALOG_FILE", str(PACKAGE_DIR / "data" / "words.json")))

# Learning settings
QUIZ_QUESTIONS = 10
QUIZ_OPTIONS = 4
QUIZ_REVEAL_DELAY = 1.5  # seconds the chosen answer stays highlighted
SEARCH_HISTORY_SIZE = 10


def ensure_directories() -> None:
    """Ensure all required directories exist."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)


@dataclass
class PathSettings:
    """Path configuration settings."""
    base_dir: Path = BASE_DIR
    data_dir: Path = DATA_DIR
    catalog_file: Path = CATALOG_FILE


@dataclass
class DatabaseSettings:
    """Database configuration settings."""
    url: str = os.getenv("DATABASE_URL", "sqlite:///wordmate.db")
    echo: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"


@dataclass
class LoggingSettings:
    """Logging configuration settings."""
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    dir: Optional[str] = os.getenv("LOG_DIR", None)
    rotation: str = os.getenv("LOG_ROTATION", "midnight")
    interval: int = int(os.getenv("LOG_INTERVAL", "1"))
    backup_count: int = int(os.getenv("LOG_BACKUP_COUNT", "7"))


@dataclass
class QuizSettings:
    """Quiz session settings."""
    questions: int = int(os.getenv("QUIZ_QUESTIONS", str(QUIZ_QUESTIONS)))
    options: int = int(os.getenv("QUIZ_OPTIONS", str(QUIZ_OPTIONS)))
    reveal_delay: float = float(os.getenv("QUIZ_REVEAL_DELAY", str(QUIZ_REVEAL_DELAY)))


@dataclass
class HistorySettings:
    """Search history settings."""
    size: int = int(os.getenv("SEARCH_HISTORY_SIZE", str(SEARCH_HISTORY_SIZE)))


@dataclass
class DictionarySettings:
    """Remote dictionary settings."""
    api_url: str = os.getenv("DICTIONARY_API_URL", "https://api.dictionaryapi.dev/api/v2/entries/en")
    timeout: int = int(os.getenv("DICTIONARY_TIMEOUT", "10"))


@dataclass
class MonitoringSettings:
    """Prometheus metrics settings."""
    enabled: bool = os.getenv("METRICS_ENABLED", "false").lower() == "true"
    port: int = int(os.getenv("METRICS_PORT", "9090"))


def get_path_settings() -> PathSettings:
    """Get path settings."""
    return PathSettings()


def get_database_settings() -> DatabaseSettings:
    """Get database settings."""
    return DatabaseSettings()


def get_logging_settings() -> LoggingSettings:
    """Get logging settings."""
    return LoggingSettings()


def get_quiz_settings() -> QuizSettings:
    """Get quiz settings."""
    return QuizSettings()


def get_history_settings() -> HistorySettings:
    """Get search history settings."""
    return HistorySettings()


def get_dictionary_settings() -> DictionarySettings:
    """Get dictionary settings."""
    return DictionarySettings()


def get_monitoring_settings() -> MonitoringSettings:
    """Get monitoring settings."""
    return MonitoringSettings()


@dataclass
class Settings:
    """Main settings class that combines all configuration settings."""
    paths: PathSettings = field(default_factory=get_path_settings)
    database: DatabaseSettings = field(default_factory=get_database_settings)
    logging: LoggingSettings = field(default_factory=get_logging_settings)
    quiz: QuizSettings = field(default_factory=get_quiz_settings)
    history: HistorySettings = field(default_factory=get_history_settings)
    dictionary: DictionarySettings = field(default_factory=get_dictionary_settings)
    monitoring: MonitoringSettings = field(default_factory=get_monitoring_settings)

    def validate(self) -> None:
        """Validate settings and raise ValueError if invalid."""
        if self.quiz.questions < 1:
            raise ValueError("QUIZ_QUESTIONS must be positive")

        if self.quiz.options < 2:
            raise ValueError("QUIZ_OPTIONS must be at least 2")

        if self.quiz.reveal_delay < 0:
            raise ValueError("QUIZ_REVEAL_DELAY cannot be negative")

        if self.history.size < 1:
            raise ValueError("SEARCH_HISTORY_SIZE must be positive")

        if self.dictionary.timeout < 1:
            raise ValueError("DICTIONARY_TIMEOUT must be positive")


# Create global settings instance
settings = Settings()
settings.validate()
