from __future__ import annotations

from abc import abstractmethod
from datetime import date
from typing import Any, Protocol, Sequence, runtime_checkable

from domain.models import Internship, LoadResult


@runtime_checkable
class InternshipStoragePort(Protocol):
    """Durable storage for the internship list and username."""

    @abstractmethod
    def load(self) -> LoadResult:
        ...

    @abstractmethod
    def save(self, internships: Sequence[Internship], username: str | None) -> None:
        ...


@runtime_checkable
class ClockPort(Protocol):
    """Source of "today" so deadline logic stays deterministic under test."""

    def today(self) -> date:
        ...


@runtime_checkable
class LoggerPort(Protocol):
    """Structured, testable logging abstraction."""

    def info(self, message: str, **fields: Any) -> None:
        ...

    def warning(self, message: str, **fields: Any) -> None:
        ...

    def error(self, message: str, **fields: Any) -> None:
        ...


__all__ = [
    "InternshipStoragePort",
    "ClockPort",
    "LoggerPort",
]
