from datetime import date, datetime

import pytest

from domain import (
    ClockPort,
    Internship,
    InternshipStoragePort,
    LoggerPort,
    Status,
    ValidationError,
)
from test.mocks import FixedClock, InMemoryInternshipStorage, InMemoryLogger


def _make(**overrides: object) -> Internship:
    values: dict = dict(company="Google", role="SWE", deadline=date(2025, 12, 10), pay=9000)
    values.update(overrides)
    return Internship(**values)


def test_internship_defaults_to_pending() -> None:
    internship = _make()
    assert internship.status is Status.PENDING
    assert internship.company == "Google"
    assert internship.deadline == date(2025, 12, 10)


def test_internship_strips_surrounding_whitespace() -> None:
    internship = _make(company="  Google  ", role=" SWE ")
    assert internship.company == "Google"
    assert internship.role == "SWE"


@pytest.mark.parametrize(
    ("field", "value", "message"),
    [
        ("company", "", "Company cannot be empty"),
        ("company", "   ", "Company cannot be empty"),
        ("role", "", "Role cannot be empty"),
        ("company", "Café", "printable ASCII"),
        ("role", "Dev\tOps", "printable ASCII"),
        ("company", "x" * 31, "cannot exceed 30"),
        ("role", "y" * 31, "cannot exceed 30"),
        ("pay", -1, "non-negative integer"),
        ("pay", 10.5, "non-negative integer"),
        ("pay", True, "non-negative integer"),
        ("deadline", "10-12-2025", "calendar date"),
        ("deadline", datetime(2025, 12, 10, 9, 0), "calendar date"),
        ("status", "Ghosted", "Invalid status"),
    ],
)
def test_invalid_fields_are_rejected(field: str, value: object, message: str) -> None:
    with pytest.raises(ValidationError, match=message):
        _make(**{field: value})


def test_thirty_character_names_are_allowed() -> None:
    internship = _make(company="c" * 30, role="r" * 30)
    assert len(internship.company) == 30


def test_status_parse_is_case_insensitive_and_canonical() -> None:
    assert Status.parse("interviewing") is Status.INTERVIEWING
    assert Status.parse("  OFFER ") is Status.OFFER
    assert Status.parse(Status.APPLIED) is Status.APPLIED
    assert Status.is_valid("rejected")
    assert not Status.is_valid("maybe")


def test_set_status_canonicalizes_casing() -> None:
    internship = _make()
    internship.set_status("aCCePted")
    assert internship.status is Status.ACCEPTED
    assert str(internship.status) == "Accepted"


def test_failed_setter_leaves_record_unchanged() -> None:
    internship = _make()
    before = internship.copy()

    with pytest.raises(ValidationError):
        internship.set_company("")
    with pytest.raises(ValidationError):
        internship.set_pay(-5)
    with pytest.raises(ValidationError):
        internship.set_status("unknown")

    assert internship == before


def test_copy_is_independent() -> None:
    original = _make()
    clone = original.copy()
    clone.set_role("Data Engineer")
    assert original.role == "SWE"
    assert clone != original


def test_str_summarises_all_fields() -> None:
    text = str(_make(status="applied"))
    assert text == "Company: Google | Role: SWE | Deadline: 10-12-2025 | Pay: 9000 | Status: Applied"


def test_fakes_conform_to_ports() -> None:
    assert isinstance(InMemoryInternshipStorage(), InternshipStoragePort)
    assert isinstance(FixedClock(date(2025, 1, 1)), ClockPort)
    assert isinstance(InMemoryLogger(), LoggerPort)
