from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

LEVELS = {"info": 20, "warning": 30, "error": 40}


class StructuredLogger:
    """Writes one JSON object per event, dropping events below ``min_level``."""

    def __init__(self, stream: TextIO | None = None, min_level: str = "info") -> None:
        if min_level not in LEVELS:
            raise ValueError(f"Unknown log level: {min_level}")
        self._stream = stream
        self._threshold = LEVELS[min_level]

    def info(self, message: str, **fields: Any) -> None:
        self._emit("info", message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._emit("warning", message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._emit("error", message, fields)

    def _emit(self, level: str, message: str, fields: dict[str, Any]) -> None:
        if LEVELS[level] < self._threshold:
            return
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "message": message,
            "fields": fields,
        }
        stream = self._stream or sys.stderr
        print(json.dumps(payload, sort_keys=True, default=str), file=stream)
