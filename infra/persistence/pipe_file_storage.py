from __future__ import annotations

import errno
import os
import re
import shutil
from pathlib import Path
from typing import Sequence

from domain.errors import StorageFormatError, StorageIOError, ValidationError
from domain.models import (
    COMPANY_MAX_LENGTH,
    ROLE_MAX_LENGTH,
    Internship,
    LoadResult,
    Status,
)
from domain.ports import LoggerPort
from domain.utils import format_deadline, is_printable_ascii, parse_deadline

HEADER = "Username (in line below):"
DELIMITER = "|"
FIELD_SEPARATOR = " | "
FIELD_COUNT = 5

_IDX_COMPANY, _IDX_ROLE, _IDX_DEADLINE, _IDX_PAY, _IDX_STATUS = range(FIELD_COUNT)

_PAY_PATTERN = re.compile(r"^[+-]?\d+$")
# Only CR, LF and CRLF end a line; other Unicode separators are field data.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
# A literal "%" only needs escaping where it would otherwise read as an escape.
_AMBIGUOUS_PERCENT = re.compile(r"%(?=7C|25)")
_ESCAPE_SEQUENCE = re.compile(r"%(7C|25)")
_UNESCAPED = {"7C": "|", "25": "%"}

# errno values meaning "rename cannot be atomic here", not "the disk is broken"
_NON_ATOMIC_ERRNOS = frozenset({errno.EXDEV, errno.ENOTSUP, errno.EOPNOTSUPP})


class LineParseError(ValueError):
    """A storage line that cannot become an Internship; the message is the warning."""


def escape_field(text: str) -> str:
    return _AMBIGUOUS_PERCENT.sub("%25", text).replace(DELIMITER, "%7C")


def unescape_field(text: str) -> str:
    return _ESCAPE_SEQUENCE.sub(lambda m: _UNESCAPED[m.group(1)], text)


def split_lines(text: str) -> list[str]:
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def format_line(internship: Internship) -> str:
    return FIELD_SEPARATOR.join(
        (
            escape_field(internship.company),
            escape_field(internship.role),
            format_deadline(internship.deadline),
            str(internship.pay),
            internship.status.value,
        )
    )


def parse_line(line: str) -> Internship:
    """Parse one ``company | role | DD-MM-YYYY | pay | status`` line.

    Raises ``LineParseError`` describing why the line was rejected.
    """
    parts = [part.strip() for part in line.split(DELIMITER)]
    if len(parts) != FIELD_COUNT:
        raise LineParseError(f"Skipped line with invalid number of fields: {line}")

    company = unescape_field(parts[_IDX_COMPANY])
    role = unescape_field(parts[_IDX_ROLE])
    if not company or not role:
        raise LineParseError(f"Skipped line with empty company or role: {line}")
    if not is_printable_ascii(company):
        raise LineParseError(f"Skipped line with non-ASCII characters in company name: {line}")
    if not is_printable_ascii(role):
        raise LineParseError(f"Skipped line with non-ASCII characters in role: {line}")
    if len(company) > COMPANY_MAX_LENGTH:
        raise LineParseError(
            f"Skipped line with company name exceeding {COMPANY_MAX_LENGTH} characters: {line}"
        )
    if len(role) > ROLE_MAX_LENGTH:
        raise LineParseError(
            f"Skipped line with role name exceeding {ROLE_MAX_LENGTH} characters: {line}"
        )

    raw_pay = parts[_IDX_PAY]
    if not _PAY_PATTERN.match(raw_pay):
        raise LineParseError(f"Skipped line with invalid pay format: {line}")
    pay = int(raw_pay)
    if pay < 0:
        raise LineParseError(f"Skipped line with negative pay amount: {line}")

    if not Status.is_valid(parts[_IDX_STATUS]):
        raise LineParseError(f"Skipped line with invalid status: {line}")

    try:
        deadline = parse_deadline(parts[_IDX_DEADLINE])
    except ValidationError as exc:
        raise LineParseError(f"Skipped line - {exc}: {line}") from exc

    try:
        return Internship(company, role, deadline, pay, parts[_IDX_STATUS])
    except ValidationError as exc:
        raise LineParseError(f"Skipped line - {exc}: {line}") from exc


class PipeFileInternshipStorage:
    """
    Plain-text implementation of ``InternshipStoragePort``.

    Layout: a fixed header line, the username line, then one pipe-delimited
    internship per line. Saves go through a sibling ``.tmp`` file that is
    renamed over the target, so the previous file survives a failed write.
    The storage directory is treated as owned by this file: a successful load
    removes any other regular files found beside it.
    """

    def __init__(self, path: str | os.PathLike[str], logger: LoggerPort) -> None:
        self._path = Path(path)
        self._logger = logger

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LoadResult:
        if not self._path.exists():
            self._logger.info("storage file not found, starting empty", path=str(self._path))
            return LoadResult()

        try:
            with open(self._path, "r", encoding="utf-8", newline="") as f:
                lines = split_lines(f.read())
        except (OSError, UnicodeDecodeError) as exc:
            self._logger.error("storage load failed", path=str(self._path), error=str(exc))
            raise StorageIOError(f"Could not load internships: {exc}") from exc

        if not lines or lines[0] != HEADER:
            self._logger.warning("storage header missing", path=str(self._path))
            raise StorageFormatError("Invalid storage file format")

        username: str | None = None
        if len(lines) > 1 and lines[1].strip():
            username = lines[1].strip()

        internships: list[Internship] = []
        warnings: list[str] = []
        for line_number, line in enumerate(lines[2:], start=3):
            try:
                internships.append(parse_line(line))
            except LineParseError as exc:
                warnings.append(f"Warning: {exc}")
                self._logger.warning("skipped storage line", line_number=line_number, reason=str(exc))

        self._logger.info("storage loaded", count=len(internships), skipped=len(warnings))
        self._remove_extra_files()
        return LoadResult(internships=tuple(internships), username=username, warnings=tuple(warnings))

    def save(self, internships: Sequence[Internship], username: str | None) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8", newline="\n") as f:
                f.write(HEADER + "\n")
                f.write((username or "") + "\n")
                for internship in internships:
                    f.write(format_line(internship) + "\n")
                f.flush()
                os.fsync(f.fileno())
            self._replace(tmp_path)
        except OSError as exc:
            self._logger.error("storage save failed", path=str(self._path), error=str(exc))
            tmp_path.unlink(missing_ok=True)
            raise StorageIOError(f"Could not save internships: {exc}") from exc
        self._logger.info("storage saved", count=len(internships), path=str(self._path))

    # -- internal helpers ---------------------------------------------------

    def _replace(self, tmp_path: Path) -> None:
        try:
            os.replace(tmp_path, self._path)
        except OSError as exc:
            if exc.errno not in _NON_ATOMIC_ERRNOS:
                raise
            self._logger.warning("atomic rename unsupported, using regular move", path=str(self._path))
            shutil.move(str(tmp_path), str(self._path))

    def _remove_extra_files(self) -> None:
        # A bare filename lives in the working directory, which we do not own.
        if not self._path.is_absolute() and self._path.parent == Path("."):
            return
        directory = self._path.parent
        try:
            entries = list(directory.iterdir())
        except OSError as exc:
            self._logger.warning("could not list storage directory", path=str(directory), error=str(exc))
            return
        for entry in entries:
            if entry.name == self._path.name or not entry.is_file():
                continue
            try:
                entry.unlink()
                self._logger.info("deleted extra file", path=str(entry))
            except OSError as exc:
                self._logger.warning("could not delete extra file", path=str(entry), error=str(exc))
