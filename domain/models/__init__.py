from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Mapping, Sequence

from domain.errors import ValidationError
from domain.utils import format_deadline, is_printable_ascii

COMPANY_MAX_LENGTH = 30
ROLE_MAX_LENGTH = 30


class Status(str, Enum):
    """Lifecycle states of an internship application, in display order."""

    PENDING = "Pending"
    INTERESTED = "Interested"
    APPLIED = "Applied"
    INTERVIEWING = "Interviewing"
    OFFER = "Offer"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: str | Status) -> Status:
        """Case-insensitive lookup returning the canonical member."""
        if isinstance(raw, cls):
            return raw
        wanted = str(raw).strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValidationError(f"Invalid status: '{raw}'. Valid statuses: {valid}")

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        try:
            cls.parse(raw)
        except ValidationError:
            return False
        return True


class SortOrder(Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"
    DEFAULT = "default"


# -- field validators --------------------------------------------------------


def _validate_text(label: str, value: str, max_length: int) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{label} must be text")
    text = value.strip()
    if not text:
        raise ValidationError(f"{label} cannot be empty")
    if not is_printable_ascii(text):
        raise ValidationError(f"{label} must contain only printable ASCII characters")
    if len(text) > max_length:
        raise ValidationError(f"{label} cannot exceed {max_length} characters")
    return text


def validate_company(value: str) -> str:
    return _validate_text("Company", value, COMPANY_MAX_LENGTH)


def validate_role(value: str) -> str:
    return _validate_text("Role", value, ROLE_MAX_LENGTH)


def validate_deadline(value: date) -> date:
    # datetime is a date subclass but carries a time component we never store
    if not isinstance(value, date) or hasattr(value, "hour"):
        raise ValidationError("Deadline must be a calendar date")
    return value


def validate_pay(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError("Pay must be a non-negative integer")
    return value


def validate_status(value: str | Status) -> Status:
    return Status.parse(value)


class Internship:
    """
    One internship application.

    Every field is validated on construction and again by each ``set_*``
    mutator, which assigns only after validation succeeds.
    """

    __slots__ = ("_company", "_role", "_deadline", "_pay", "_status")

    def __init__(
        self,
        company: str,
        role: str,
        deadline: date,
        pay: int,
        status: str | Status = Status.PENDING,
    ) -> None:
        self._company = validate_company(company)
        self._role = validate_role(role)
        self._deadline = validate_deadline(deadline)
        self._pay = validate_pay(pay)
        self._status = validate_status(status)

    @property
    def company(self) -> str:
        return self._company

    @property
    def role(self) -> str:
        return self._role

    @property
    def deadline(self) -> date:
        return self._deadline

    @property
    def pay(self) -> int:
        return self._pay

    @property
    def status(self) -> Status:
        return self._status

    def set_company(self, company: str) -> None:
        self._company = validate_company(company)

    def set_role(self, role: str) -> None:
        self._role = validate_role(role)

    def set_deadline(self, deadline: date) -> None:
        self._deadline = validate_deadline(deadline)

    def set_pay(self, pay: int) -> None:
        self._pay = validate_pay(pay)

    def set_status(self, status: str | Status) -> None:
        self._status = validate_status(status)

    def copy(self) -> Internship:
        return Internship(self._company, self._role, self._deadline, self._pay, self._status)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Internship):
            return NotImplemented
        return (
            self._company == other._company
            and self._role == other._role
            and self._deadline == other._deadline
            and self._pay == other._pay
            and self._status is other._status
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Internship(company={self._company!r}, role={self._role!r}, "
            f"deadline={self._deadline!r}, pay={self._pay!r}, status={self._status.value!r})"
        )

    def __str__(self) -> str:
        return (
            f"Company: {self._company} | Role: {self._role} | "
            f"Deadline: {format_deadline(self._deadline)} | "
            f"Pay: {self._pay} | Status: {self._status.value}"
        )


@dataclass(frozen=True)
class IndexedInternship:
    """An internship paired with its 0-based position in the full list."""

    index: int
    internship: Internship


@dataclass(frozen=True)
class NearestDeadline:
    """
    The internship with the nearest deadline.

    ``tie_count`` counts the *other* internships sharing exactly the same
    deadline; the representative itself is excluded.
    """

    internship: Internship
    tie_count: int


@dataclass(frozen=True)
class LoadResult:
    """Outcome of reading the storage file."""

    internships: Sequence[Internship] = field(default_factory=tuple)
    username: str | None = None
    warnings: Sequence[str] = field(default_factory=tuple)


@dataclass(frozen=True)
class DashboardSummary:
    username: str | None
    total: int
    nearest: NearestDeadline | None
    status_counts: Mapping[Status, int]
    today: date


@dataclass(frozen=True)
class TrackerConfig:
    """Runtime configuration loaded from config.json."""

    data_file: str = "data/internships.txt"
    log_level: str = "warning"


__all__ = [
    "COMPANY_MAX_LENGTH",
    "ROLE_MAX_LENGTH",
    "Status",
    "SortOrder",
    "Internship",
    "IndexedInternship",
    "NearestDeadline",
    "LoadResult",
    "DashboardSummary",
    "TrackerConfig",
    "validate_company",
    "validate_role",
    "validate_deadline",
    "validate_pay",
    "validate_status",
]
