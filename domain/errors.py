from __future__ import annotations


class TrackerError(Exception):
    """Base class for every recoverable tracker error shown to the user."""


class ValidationError(TrackerError, ValueError):
    """Raised when a field value or command argument is invalid."""


class InvalidIndexError(TrackerError, IndexError):
    """Raised when a 0-based position falls outside the current list.

    The message always carries the 1-based index the user typed.
    """

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Invalid internship index: {index + 1}")


class EmptyStoreError(TrackerError):
    """Raised by queries that need at least one internship."""


class UnknownCommandError(TrackerError):
    def __init__(self, command_word: str) -> None:
        self.command_word = command_word
        super().__init__(f"Unknown command: {command_word}")


class StorageFormatError(TrackerError):
    """Raised when the storage file header is missing or corrupt."""


class StorageIOError(TrackerError, OSError):
    """Raised when reading or writing the storage file fails."""


__all__ = [
    "TrackerError",
    "ValidationError",
    "InvalidIndexError",
    "EmptyStoreError",
    "UnknownCommandError",
    "StorageFormatError",
    "StorageIOError",
]
