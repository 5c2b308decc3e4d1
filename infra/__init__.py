"""Infrastructure adapters – concrete implementations of domain ports."""

from .config import FileSystemConfigProvider
from .interaction import ConsoleRenderer
from .persistence import PipeFileInternshipStorage
from .runtime import StructuredLogger, SystemClock

__all__ = [
    "FileSystemConfigProvider",
    "ConsoleRenderer",
    "PipeFileInternshipStorage",
    "StructuredLogger",
    "SystemClock",
]
