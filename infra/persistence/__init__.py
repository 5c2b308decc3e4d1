"""Plain-text persistence adapter for the internship storage port."""

from .pipe_file_storage import (
    HEADER,
    LineParseError,
    PipeFileInternshipStorage,
    format_line,
    parse_line,
)

__all__ = [
    "HEADER",
    "LineParseError",
    "PipeFileInternshipStorage",
    "format_line",
    "parse_line",
]
