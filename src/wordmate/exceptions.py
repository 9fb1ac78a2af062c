"""Exceptions raised by WordMate services."""


class WordMateError(Exception):
    """Base class for all WordMate errors."""


class StorageError(WordMateError):
    """A read or write against the key-value store failed."""

    def __init__(self, operation: str, key: str, message: str = ""):
        self.operation = operation
        self.key = key
        super().__init__(message or f"Failed to {operation} '{key}'")


class CatalogError(WordMateError):
    """The bundled word catalog is missing or malformed."""


class LookupFailedError(WordMateError):
    """The remote dictionary could not be queried."""


class WordNotFoundError(LookupFailedError):
    """The remote dictionary has no entry for the word."""

    def __init__(self, word: str):
        self.word = word
        super().__init__("Word not found")


class CapabilityUnavailableError(WordMateError):
    """A device capability such as speech synthesis is not available."""
