from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Callable, Protocol, Sequence

from app.facade import InternshipChanges, TrackerFacade
from domain.errors import UnknownCommandError, ValidationError
from domain.models import (
    DashboardSummary,
    IndexedInternship,
    Internship,
    SortOrder,
    Status,
)
from domain.utils import is_printable_ascii, parse_deadline


class TrackerView(Protocol):
    """What commands need from the presentation layer."""

    def help(self) -> None:
        ...

    def goodbye(self) -> None:
        ...

    def added(self, internship: Internship, total: int) -> None:
        ...

    def removed(self, internship: Internship, total: int) -> None:
        ...

    def updated(self, index: int, original: Internship, updated: Internship) -> None:
        ...

    def username_set(self, username: str) -> None:
        ...

    def internship_list(self, entries: Sequence[IndexedInternship], order: SortOrder) -> None:
        ...

    def search_results(self, entries: Sequence[IndexedInternship]) -> None:
        ...

    def dashboard(self, summary: DashboardSummary) -> None:
        ...


class Command(ABC):
    """A parsed user command, ready to run against the facade."""

    is_exit = False

    @abstractmethod
    def execute(self, facade: TrackerFacade, view: TrackerView) -> None:
        ...


@dataclass(frozen=True)
class AddCommand(Command):
    internship: Internship

    def execute(self, facade: TrackerFacade, view: TrackerView) -> None:
        total = facade.add(self.internship)
        view.added(self.internship, total)


@dataclass(frozen=True)
class DeleteCommand(Command):
    index: int

    def execute(self, facade: TrackerFacade, view: TrackerView) -> None:
        removed = facade.delete(self.index)
        view.removed(removed, facade.size())


@dataclass(frozen=True)
class UpdateCommand(Command):
    index: int
    changes: InternshipChanges

    def execute(self, facade: TrackerFacade, view: TrackerView) -> None:
        original, updated = facade.update(self.index, self.changes)
        view.updated(self.index, original, updated)


@dataclass(frozen=True)
class ListCommand(Command):
    order: SortOrder = SortOrder.DEFAULT

    def execute(self, facade: TrackerFacade, view: TrackerView) -> None:
        view.internship_list(facade.list_internships(self.order), self.order)


@dataclass(frozen=True)
class FindCommand(Command):
    keyword: str

    def execute(self, facade: TrackerFacade, view: TrackerView) -> None:
        view.search_results(facade.find(self.keyword))


@dataclass(frozen=True)
class UsernameCommand(Command):
    username: str

    def execute(self, facade: TrackerFacade, view: TrackerView) -> None:
        facade.set_username(self.username)
        view.username_set(self.username)


@dataclass(frozen=True)
class DashboardCommand(Command):
    def execute(self, facade: TrackerFacade, view: TrackerView) -> None:
        view.dashboard(facade.dashboard_summary())


@dataclass(frozen=True)
class HelpCommand(Command):
    def execute(self, facade: TrackerFacade, view: TrackerView) -> None:
        view.help()


@dataclass(frozen=True)
class ExitCommand(Command):
    is_exit = True

    def execute(self, facade: TrackerFacade, view: TrackerView) -> None:
        view.goodbye()


# -- argument parsing ---------------------------------------------------------

_ADD_FIELDS = ("company", "role", "deadline", "pay")
_UPDATE_FIELDS = ("company", "role", "deadline", "pay", "status")
_PAY_PATTERN = re.compile(r"^\d+$")
_SORT_ORDERS = {"asc": SortOrder.ASCENDING, "desc": SortOrder.DESCENDING}

ADD_USAGE = "Usage: add company/<name> role/<title> deadline/<DD-MM-YYYY> pay/<amount>"
UPDATE_USAGE = "Usage: update <index> [company/..] [role/..] [deadline/..] [pay/..] [status/..]"
LIST_USAGE = "Usage: list [sort/asc | sort/desc]"


def parse_prefixed_args(args: str, allowed: Sequence[str]) -> dict[str, str]:
    """Split ``company/Acme role/Intern`` style text into a field mapping.

    A prefix only counts at the start of the text or after whitespace, so
    values may themselves contain slashes.
    """
    pattern = re.compile(r"(?:^|(?<=\s))(" + "|".join(map(re.escape, allowed)) + r")/", re.IGNORECASE)
    matches = list(pattern.finditer(args))
    if not matches:
        return {}
    leading = args[: matches[0].start()].strip()
    if leading:
        raise ValidationError(f"Unexpected text before fields: '{leading}'")

    values: dict[str, str] = {}
    for i, match in enumerate(matches):
        name = match.group(1).lower()
        end = matches[i + 1].start() if i + 1 < len(matches) else len(args)
        if name in values:
            raise ValidationError(f"Field '{name}/' given more than once")
        values[name] = args[match.end():end].strip()
    return values


def parse_index(raw: str) -> int:
    """Turn a 1-based index typed by the user into a 0-based position."""
    text = raw.strip()
    if not text.isdigit() or int(text) < 1:
        raise ValidationError(f"Index must be a positive integer, got '{raw}'")
    return int(text) - 1


def parse_pay(raw: str) -> int:
    if not _PAY_PATTERN.match(raw.strip()):
        raise ValidationError("Pay must be a non-negative integer")
    return int(raw)


def _parse_add(args: str) -> Command:
    fields = parse_prefixed_args(args, _ADD_FIELDS)
    missing = [name for name in _ADD_FIELDS if not fields.get(name)]
    if missing:
        raise ValidationError(f"Missing {', '.join(missing)}. {ADD_USAGE}")
    internship = Internship(
        company=fields["company"],
        role=fields["role"],
        deadline=parse_deadline(fields["deadline"]),
        pay=parse_pay(fields["pay"]),
    )
    return AddCommand(internship)


def _parse_delete(args: str) -> Command:
    if not args.strip():
        raise ValidationError("Usage: delete <index>")
    return DeleteCommand(parse_index(args))


def _parse_update(args: str) -> Command:
    parts = args.strip().split(maxsplit=1)
    if not parts:
        raise ValidationError(UPDATE_USAGE)
    index = parse_index(parts[0])
    fields = parse_prefixed_args(parts[1] if len(parts) > 1 else "", _UPDATE_FIELDS)
    if not fields:
        raise ValidationError(f"Nothing to update. {UPDATE_USAGE}")

    deadline: date | None = None
    if "deadline" in fields:
        deadline = parse_deadline(fields["deadline"])
    pay = parse_pay(fields["pay"]) if "pay" in fields else None
    status = Status.parse(fields["status"]) if "status" in fields else None
    changes = InternshipChanges(
        company=fields.get("company"),
        role=fields.get("role"),
        deadline=deadline,
        pay=pay,
        status=status,
    )
    return UpdateCommand(index=index, changes=changes)


def _parse_list(args: str) -> Command:
    if not args.strip():
        return ListCommand(SortOrder.DEFAULT)
    fields = parse_prefixed_args(args.strip(), ("sort",))
    order = _SORT_ORDERS.get(fields.get("sort", "").lower())
    if order is None:
        raise ValidationError(LIST_USAGE)
    return ListCommand(order)


def _parse_find(args: str) -> Command:
    keyword = args.strip()
    if not keyword:
        raise ValidationError("Usage: find <keyword>")
    return FindCommand(keyword)


def _parse_username(args: str) -> Command:
    username = args.strip()
    if not username:
        raise ValidationError("Usage: username <name>")
    return UsernameCommand(username)


_FACTORIES: dict[str, Callable[[str], Command]] = {
    "add": _parse_add,
    "delete": _parse_delete,
    "update": _parse_update,
    "list": _parse_list,
    "find": _parse_find,
    "username": _parse_username,
    "dashboard": lambda _args: DashboardCommand(),
    "help": lambda _args: HelpCommand(),
    "exit": lambda _args: ExitCommand(),
}

COMMAND_WORDS = tuple(_FACTORIES)


class CommandParser:
    """Turns one line of user input into a ``Command``."""

    def parse(self, text: str | None) -> Command:
        if text is None or not text.strip():
            raise ValidationError("Input cannot be empty")
        for ch in text:
            if not is_printable_ascii(ch):
                raise ValidationError(f"Invalid character detected: {ch!r}")

        parts = text.strip().split(maxsplit=1)
        command_word = parts[0].lower()
        args = parts[1] if len(parts) > 1 else ""

        factory = _FACTORIES.get(command_word)
        if factory is None:
            raise UnknownCommandError(command_word)
        return factory(args)
