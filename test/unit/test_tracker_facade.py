from __future__ import annotations

from datetime import date

import pytest

from app import InternshipChanges, TrackerFacade
from domain import (
    Internship,
    InvalidIndexError,
    SortOrder,
    Status,
    StorageIOError,
    ValidationError,
)
from domain.services import InternshipList
from test.mocks import FixedClock, InMemoryInternshipStorage, InMemoryLogger


def _make_facade(storage: InMemoryInternshipStorage | None = None) -> tuple[TrackerFacade, InMemoryInternshipStorage]:
    storage = storage or InMemoryInternshipStorage()
    internships = InternshipList(clock=FixedClock(date(2025, 6, 1)), logger=InMemoryLogger())
    facade = TrackerFacade(internships=internships, storage=storage, logger=InMemoryLogger())
    return facade, storage


def test_load_populates_list_and_username() -> None:
    stored = InMemoryInternshipStorage(
        internships=[Internship("Acme", "Intern", date(2025, 7, 1), 100)],
        username="Ada",
        warnings=["Warning: Skipped line with invalid status: x"],
    )
    facade, _ = _make_facade(stored)

    result = facade.load()

    assert facade.size() == 1
    assert facade.get_username() == "Ada"
    assert list(result.warnings) == ["Warning: Skipped line with invalid status: x"]


def test_every_mutation_is_written_through() -> None:
    facade, storage = _make_facade()

    facade.add(Internship("Acme", "Intern", date(2025, 7, 1), 100))
    facade.add(Internship("Globex", "Analyst", date(2025, 8, 1), 200))
    facade.update(0, InternshipChanges(status="offer"))
    facade.delete(1)
    facade.set_username("Ada")

    assert storage.save_count == 5
    assert [item.company for item in storage.internships] == ["Acme"]
    assert storage.internships[0].status is Status.OFFER
    assert storage.username == "Ada"


def test_queries_do_not_save() -> None:
    facade, storage = _make_facade()
    facade.add(Internship("Acme", "Intern", date(2025, 7, 1), 100))

    facade.list_internships(SortOrder.DESCENDING)
    facade.find("acme")
    facade.dashboard_summary()

    assert storage.save_count == 1


def test_update_returns_before_and_after_snapshots() -> None:
    facade, _ = _make_facade()
    facade.add(Internship("Acme", "Intern", date(2025, 7, 1), 100))

    original, updated = facade.update(0, InternshipChanges(company="Initech", pay=250))

    assert (original.company, original.pay) == ("Acme", 100)
    assert (updated.company, updated.pay) == ("Initech", 250)
    assert facade.get(0) == updated


def test_update_with_one_bad_field_changes_nothing() -> None:
    facade, storage = _make_facade()
    facade.add(Internship("Acme", "Intern", date(2025, 7, 1), 100))

    with pytest.raises(ValidationError):
        facade.update(0, InternshipChanges(company="Initech", role=""))

    assert facade.get(0).company == "Acme"
    assert storage.save_count == 1


def test_update_bad_index() -> None:
    facade, _ = _make_facade()
    with pytest.raises(InvalidIndexError, match="index: 1"):
        facade.update(0, InternshipChanges(pay=1))


def test_dashboard_summary() -> None:
    facade, _ = _make_facade()
    empty = facade.dashboard_summary()
    assert empty.total == 0
    assert empty.nearest is None

    facade.add(Internship("Acme", "Intern", date(2025, 7, 1), 100, "Applied"))
    facade.add(Internship("Globex", "Analyst", date(2025, 7, 1), 200))
    summary = facade.dashboard_summary()

    assert summary.total == 2
    assert summary.nearest is not None
    assert summary.nearest.internship.company == "Acme"
    assert summary.nearest.tie_count == 1
    assert summary.status_counts[Status.APPLIED] == 1
    assert summary.today == date(2025, 6, 1)


def test_save_failure_surfaces_storage_error() -> None:
    facade, storage = _make_facade()
    storage.fail_saves = True

    with pytest.raises(StorageIOError, match="disk full"):
        facade.add(Internship("Acme", "Intern", date(2025, 7, 1), 100))


def test_changes_is_empty() -> None:
    assert InternshipChanges().is_empty()
    assert not InternshipChanges(pay=0).is_empty()
