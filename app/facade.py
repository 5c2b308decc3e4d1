from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from domain.models import (
    DashboardSummary,
    IndexedInternship,
    Internship,
    LoadResult,
    NearestDeadline,
    SortOrder,
    Status,
)
from domain.ports import InternshipStoragePort, LoggerPort
from domain.services import InternshipList


@dataclass(frozen=True)
class InternshipChanges:
    """Field values to apply in one ``update``; ``None`` means unchanged."""

    company: str | None = None
    role: str | None = None
    deadline: date | None = None
    pay: int | None = None
    status: str | Status | None = None

    def is_empty(self) -> bool:
        return all(
            value is None for value in (self.company, self.role, self.deadline, self.pay, self.status)
        )

    def apply_to(self, internship: Internship) -> None:
        if self.company is not None:
            internship.set_company(self.company)
        if self.role is not None:
            internship.set_role(self.role)
        if self.deadline is not None:
            internship.set_deadline(self.deadline)
        if self.pay is not None:
            internship.set_pay(self.pay)
        if self.status is not None:
            internship.set_status(self.status)


class TrackerFacade:
    """
    UI-facing facade over the internship list and its storage.

    Every mutating call saves the whole list straight away, so the file on
    disk always matches memory after a command completes.
    """

    def __init__(
        self,
        *,
        internships: InternshipList,
        storage: InternshipStoragePort,
        logger: LoggerPort,
    ) -> None:
        self._internships = internships
        self._storage = storage
        self._logger = logger

    def load(self) -> LoadResult:
        result = self._storage.load()
        self._internships.replace_all(result.internships, result.username)
        return result

    def save(self) -> None:
        self._storage.save(list(self._internships), self._internships.get_username())

    # -- mutations ----------------------------------------------------------

    def add(self, internship: Internship) -> int:
        self._internships.add(internship)
        self.save()
        return self._internships.size()

    def delete(self, index: int) -> Internship:
        removed = self._internships.delete(index)
        self.save()
        return removed

    def update(self, index: int, changes: InternshipChanges) -> tuple[Internship, Internship]:
        """Apply all changes or none; returns (original, updated) snapshots."""
        original = self._internships.get(index).copy()
        # dry run on a copy so one bad field leaves the stored record untouched
        changes.apply_to(original.copy())

        if changes.company is not None:
            self._internships.update_company(index, changes.company)
        if changes.role is not None:
            self._internships.update_role(index, changes.role)
        if changes.deadline is not None:
            self._internships.update_deadline(index, changes.deadline)
        if changes.pay is not None:
            self._internships.update_pay(index, changes.pay)
        if changes.status is not None:
            self._internships.update_status(index, changes.status)

        self.save()
        self._logger.info("internship updated", index=index)
        return original, self._internships.get(index).copy()

    def set_username(self, username: str) -> None:
        self._internships.set_username(username)
        self.save()

    # -- queries ------------------------------------------------------------

    def get_username(self) -> str | None:
        return self._internships.get_username()

    def size(self) -> int:
        return self._internships.size()

    def get(self, index: int) -> Internship:
        return self._internships.get(index)

    def list_internships(self, order: SortOrder = SortOrder.DEFAULT) -> list[IndexedInternship]:
        return self._internships.indexed_view(order)

    def find(self, keyword: str | None) -> list[IndexedInternship]:
        return self._internships.find(keyword)

    def nearest_deadline(self) -> NearestDeadline:
        return self._internships.find_nearest_deadline()

    def dashboard_summary(self) -> DashboardSummary:
        nearest = None if self._internships.is_empty() else self._internships.find_nearest_deadline()
        return DashboardSummary(
            username=self._internships.get_username(),
            total=self._internships.size(),
            nearest=nearest,
            status_counts=self._internships.status_counts(),
            today=self._internships.today(),
        )
