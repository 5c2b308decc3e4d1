from __future__ import annotations

from datetime import date
from typing import Iterable, Iterator

from domain.errors import EmptyStoreError, InvalidIndexError, ValidationError
from domain.models import (
    IndexedInternship,
    Internship,
    NearestDeadline,
    SortOrder,
    Status,
)
from domain.ports import ClockPort, LoggerPort


class InternshipList:
    """
    In-memory, ordered collection of internships plus the username.

    Insertion order is the canonical order and positions are the only
    identity: deleting index ``i`` shifts every later record down by one.
    This class never touches the filesystem; callers persist through an
    ``InternshipStoragePort`` after each mutation.
    """

    def __init__(
        self,
        *,
        logger: LoggerPort,
        clock: ClockPort | None = None,
    ) -> None:
        self._clock = clock
        self._logger = logger
        self._internships: list[Internship] = []
        self._username: str | None = None

    # -- CRUD ---------------------------------------------------------------

    def add(self, internship: Internship) -> None:
        self._internships.append(internship)
        self._logger.info("internship added", company=internship.company, size=self.size())

    def delete(self, index: int) -> Internship:
        self._check_index(index)
        removed = self._internships.pop(index)
        self._logger.info("internship deleted", index=index, size=self.size())
        return removed

    def get(self, index: int) -> Internship:
        self._check_index(index)
        return self._internships[index]

    def size(self) -> int:
        return len(self._internships)

    def is_empty(self) -> bool:
        return not self._internships

    def __len__(self) -> int:
        return len(self._internships)

    def __iter__(self) -> Iterator[Internship]:
        return iter(list(self._internships))

    def clear(self) -> None:
        self._internships.clear()
        self._username = None

    def replace_all(self, internships: Iterable[Internship], username: str | None) -> None:
        """Swap in a freshly loaded list, e.g. at startup."""
        self._internships = list(internships)
        self._username = username

    # -- field updates ------------------------------------------------------

    def update_status(self, index: int, status: str | Status) -> None:
        self.get(index).set_status(status)

    def update_company(self, index: int, company: str) -> None:
        self.get(index).set_company(company)

    def update_role(self, index: int, role: str) -> None:
        self.get(index).set_role(role)

    def update_deadline(self, index: int, deadline: date) -> None:
        self.get(index).set_deadline(deadline)

    def update_pay(self, index: int, pay: int) -> None:
        self.get(index).set_pay(pay)

    # -- queries ------------------------------------------------------------

    def find(self, keyword: str | None) -> list[IndexedInternship]:
        """Case-insensitive substring search over company and role.

        Matches keep their index in the full list. An empty keyword matches
        everything; ``None`` is rejected.
        """
        if keyword is None:
            raise ValidationError("Search keyword is required")
        needle = keyword.lower()
        matches = [
            IndexedInternship(index=i, internship=item)
            for i, item in enumerate(self._internships)
            if needle in item.company.lower() or needle in item.role.lower()
        ]
        self._logger.info("search completed", matches=len(matches))
        return matches

    def sorted_view(self, order: SortOrder = SortOrder.DEFAULT) -> list[Internship]:
        return [entry.internship for entry in self.indexed_view(order)]

    def indexed_view(self, order: SortOrder = SortOrder.DEFAULT) -> list[IndexedInternship]:
        """Return a new ordering of the list; the list itself is untouched.

        Deadline sorts are stable in both directions, so equal deadlines keep
        insertion order.
        """
        entries = [IndexedInternship(index=i, internship=item) for i, item in enumerate(self._internships)]
        if order is SortOrder.ASCENDING:
            entries.sort(key=lambda e: e.internship.deadline)
        elif order is SortOrder.DESCENDING:
            # negate the ordinal rather than reverse=True, which would flip ties
            entries.sort(key=lambda e: -e.internship.deadline.toordinal())
        return entries

    def find_nearest_deadline(self) -> NearestDeadline:
        """
        Earliest deadline on or after today; failing that, the latest past one.

        The first record reaching the chosen deadline represents it and
        ``tie_count`` counts the others with the same deadline.
        """
        if self.is_empty():
            raise EmptyStoreError("No internships found")

        today = self.today()
        upcoming = [item for item in self._internships if item.deadline >= today]
        if upcoming:
            target = min(item.deadline for item in upcoming)
        else:
            self._logger.info("no upcoming deadlines, using most recent past deadline")
            target = max(item.deadline for item in self._internships)

        tied = [item for item in self._internships if item.deadline == target]
        return NearestDeadline(internship=tied[0], tie_count=len(tied) - 1)

    def status_counts(self) -> dict[Status, int]:
        counts = {status: 0 for status in Status}
        for item in self._internships:
            counts[item.status] += 1
        return counts

    def today(self) -> date:
        if self._clock is None:
            return date.today()
        return self._clock.today()

    # -- username -----------------------------------------------------------

    def set_username(self, username: str | None) -> None:
        self._username = username

    def get_username(self) -> str | None:
        return self._username

    # -- helpers ------------------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._internships):
            raise InvalidIndexError(index)
