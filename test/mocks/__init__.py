"""
Reusable fakes and in-memory implementations for tests.
"""

from .fake_internship_storage import InMemoryInternshipStorage
from .fake_runtime import FixedClock, InMemoryLogger

__all__ = [
    "InMemoryInternshipStorage",
    "FixedClock",
    "InMemoryLogger",
]
