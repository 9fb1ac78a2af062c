"""Monitoring configuration for WordMate."""
from prometheus_client import Counter, start_http_server

# Learning metrics
words_learned = Counter(
    "wordmate_words_learned_total",
    "Total number of words newly marked as learned",
    ["source"],
)

quiz_sessions_completed = Counter(
    "wordmate_quiz_sessions_completed_total",
    "Total number of quiz sessions played to the last question",
)

flashcard_sessions_completed = Counter(
    "wordmate_flashcard_sessions_completed_total",
    "Total number of flashcard passes finished",
)

# Bookmark metrics
bookmark_toggles = Counter(
    "wordmate_bookmark_toggles_total",
    "Total number of bookmark toggles",
    ["action"],
)

# Dictionary metrics
dictionary_lookups = Counter(
    "wordmate_dictionary_lookups_total",
    "Total number of remote dictionary lookups",
    ["result"],
)

# Error metrics
storage_errors = Counter(
    "wordmate_storage_errors_total",
    "Total number of key-value store failures",
    ["operation"],
)

error_count = Counter(
    "wordmate_errors_total",
    "Total number of errors encountered",
    ["error_type"],
)


def start_monitoring(port: int = 9090) -> None:
    """Start the Prometheus metrics server."""
    start_http_server(port)
