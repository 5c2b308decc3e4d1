from __future__ import annotations

import re
from datetime import date

from domain.errors import ValidationError

DATE_FORMAT_HINT = "DD-MM-YYYY"

_DATE_PATTERN = re.compile(r"^(\d{1,2})-(\d{1,2})-(\d{4})$")


def parse_deadline(raw: str) -> date:
    """Parse ``DD-MM-YYYY`` into a date, rejecting impossible calendar days."""
    match = _DATE_PATTERN.match(raw.strip())
    if match is None:
        raise ValidationError(f"Invalid date format: '{raw}'. Expected {DATE_FORMAT_HINT}")
    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise ValidationError(f"Invalid calendar date: '{raw}'") from exc


def format_deadline(value: date) -> str:
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"


def is_printable_ascii(text: str) -> bool:
    return all(32 <= ord(ch) <= 126 for ch in text)

