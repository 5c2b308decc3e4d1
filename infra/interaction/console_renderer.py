from __future__ import annotations

import sys
from typing import Sequence, TextIO

from domain.models import (
    COMPANY_MAX_LENGTH,
    ROLE_MAX_LENGTH,
    DashboardSummary,
    IndexedInternship,
    Internship,
    SortOrder,
)
from domain.utils import format_deadline

INDEX_WIDTH = 5
DEADLINE_WIDTH = 15
PAY_WIDTH = 10
STATUS_WIDTH = 12
INDENT = "  "

LINE = "_" * 109

_LOGO = (
    " ___       _                  _     _\n"
    "|_ _|_ __ | |_ ___ _ __ _ __ | |   (_)___| |_\n"
    " | || '_ \\| __/ _ \\ '__| '_ \\| |   | / __| __|\n"
    " | || | | | ||  __/ |  | | | | |___| \\__ \\ |_\n"
    "|___|_| |_|\\__\\___|_|  |_| |_|_____|_|___/\\__|"
)

HELP_TEXT = """\
Here are the available commands:

  - add       : Add a new internship application with company, role, deadline, and pay.
                add company/<name> role/<title> deadline/<DD-MM-YYYY> pay/<amount>
  - delete    : Remove an internship application at the specified index.
                delete <index>
  - list      : Display all internship applications, optionally sorted by deadline.
                list [sort/asc | sort/desc]
  - find      : Search and list internship applications matching a keyword.
                find <keyword>
  - update    : Update any field of an internship application at the specified index.
                update <index> [company/..] [role/..] [deadline/..] [pay/..] [status/..]
  - username  : Set your username for personalised greetings.
                username <name>
  - dashboard : View statistics about your internship applications.
  - help      : Display this list again.
  - exit      : Terminate this session. Your progress is saved after every change.
"""

_LIST_HEADERS = {
    SortOrder.ASCENDING: "Here are the internships in your list (sorted by deadline ascending):",
    SortOrder.DESCENDING: "Here are the internships in your list (sorted by deadline descending):",
    SortOrder.DEFAULT: "Here are the internships in your list (in order added):",
}


class ConsoleRenderer:
    """Formats tracker results as console text.

    This is the only place that writes user-facing output; it receives
    plain domain values and never mutates them. Warnings go to a separate
    stream, stderr by default, so tables on stdout stay clean.
    """

    def __init__(self, stream: TextIO | None = None, warning_stream: TextIO | None = None) -> None:
        self._stream = stream
        self._warning_stream = warning_stream

    def welcome(self) -> None:
        self._print("Hello, welcome to\n" + _LOGO)
        self._print("Be on top of your internships management with InternList!")

    def greet(self, username: str | None) -> None:
        self._print(f"Hello, {username or 'Guest'}!")

    def goodbye(self) -> None:
        self._print("Thank you for using InternList! Goodbye!")

    def help(self) -> None:
        self._print(HELP_TEXT, end="")

    def line(self) -> None:
        self._print(LINE)

    def added(self, internship: Internship, total: int) -> None:
        self._print("Added this internship:")
        self._print(str(internship))
        self._print(f"Now you have {total} internship(s) in the list.")

    def removed(self, internship: Internship, total: int) -> None:
        self._print("Removed this internship:")
        self._print(str(internship))
        self._print(f"Now you have {total} internship(s) in the list.")

    def updated(self, index: int, original: Internship, updated: Internship) -> None:
        self._print(f"Internship at index {index + 1} successfully updated:")
        self._print("Original:\n" + str(original))
        self._print("Updated:\n" + str(updated))

    def username_set(self, username: str) -> None:
        self._print(f"Username set to {username}")

    def internship_list(self, entries: Sequence[IndexedInternship], order: SortOrder) -> None:
        if not entries:
            self._print("Your internship list is currently empty.")
            return
        self._table(_LIST_HEADERS[order], entries)

    def search_results(self, entries: Sequence[IndexedInternship]) -> None:
        if not entries:
            self._print("No internships with this company or role found.")
            return
        self._table("These are the matching internships in your list:", entries)

    def dashboard(self, summary: DashboardSummary) -> None:
        self._print(f"User: {summary.username or 'Guest'}")
        self._print(f"Total Internships: {summary.total}")

        if summary.nearest is None:
            self._print("\nNearest Deadline: No internships found.")
        else:
            nearest = summary.nearest.internship
            overdue = " (OVERDUE!)" if nearest.deadline < summary.today else ""
            self._print("\nNearest Deadline:")
            self._print(
                f"{INDENT}{format_deadline(nearest.deadline)} | {nearest.role} @ {nearest.company}{overdue}"
            )
            if summary.nearest.tie_count > 0:
                self._print(
                    f"{INDENT}(Found {summary.nearest.tie_count} other internship(s) with the same deadline)"
                )

        if summary.total == 0:
            self._print("\nStatus Overview: No internships found.")
            return
        self._print("\nStatus Overview:")
        for status, count in summary.status_counts.items():
            self._print(f"{INDENT}{status.value:<15} : {count}")

    def warning(self, message: str) -> None:
        print(message, file=self._warning_stream or sys.stderr)

    def error(self, message: str) -> None:
        self._print(f"Error: {message}")

    # -- internal helpers ---------------------------------------------------

    def _table(self, message: str, entries: Sequence[IndexedInternship]) -> None:
        self._print(message)
        self.line()
        self._print(self._row("No.", "Company", "Role", "Deadline", "Pay", "Status"))
        self.line()
        for entry in entries:
            item = entry.internship
            self._print(
                self._row(
                    str(entry.index + 1),
                    item.company,
                    item.role,
                    format_deadline(item.deadline),
                    str(item.pay),
                    item.status.value,
                )
            )

    @staticmethod
    def _row(index: str, company: str, role: str, deadline: str, pay: str, status: str) -> str:
        return (
            f"{index:>{INDEX_WIDTH}} {company:<{COMPANY_MAX_LENGTH}} {role:<{ROLE_MAX_LENGTH}} "
            f"{deadline:<{DEADLINE_WIDTH}} {pay:<{PAY_WIDTH}} {status:<{STATUS_WIDTH}}"
        ).rstrip()

    def _print(self, text: str, end: str = "\n") -> None:
        print(text, end=end, file=self._stream or sys.stdout)
