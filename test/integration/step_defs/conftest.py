"""Shared fixtures and context for BDD step definitions."""
from __future__ import annotations

import io
from dataclasses import dataclass, field
from datetime import date

import pytest

from app import TrackerFacade
from domain.services import InternshipList
from infra.interaction import ConsoleRenderer
from test.mocks import FixedClock, InMemoryInternshipStorage, InMemoryLogger


@dataclass
class TrackerContext:
    """Holds mutable state shared across BDD steps."""

    today: date = date(2025, 6, 1)
    storage: InMemoryInternshipStorage = field(default_factory=InMemoryInternshipStorage)
    logger: InMemoryLogger = field(default_factory=InMemoryLogger)
    output: io.StringIO = field(default_factory=io.StringIO)
    internships: InternshipList = None  # type: ignore[assignment]
    facade: TrackerFacade = None  # type: ignore[assignment]

    def reset(self, today: date) -> None:
        self.today = today
        self.storage = InMemoryInternshipStorage()
        self.output = io.StringIO()
        self.internships = InternshipList(clock=FixedClock(today), logger=self.logger)
        self.facade = TrackerFacade(internships=self.internships, storage=self.storage, logger=self.logger)

    @property
    def renderer(self) -> ConsoleRenderer:
        return ConsoleRenderer(self.output)


@pytest.fixture()
def ctx() -> TrackerContext:
    context = TrackerContext()
    context.reset(context.today)
    return context
