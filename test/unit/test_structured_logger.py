from __future__ import annotations

import io
import json

import pytest

from domain import LoggerPort
from infra.runtime import StructuredLogger


def test_emits_one_json_object_per_event() -> None:
    out = io.StringIO()
    logger = StructuredLogger(stream=out)

    logger.info("storage saved", count=3)
    logger.error("storage save failed", path="data/internships.txt")

    events = [json.loads(line) for line in out.getvalue().splitlines()]
    assert [e["level"] for e in events] == ["info", "error"]
    assert events[0]["message"] == "storage saved"
    assert events[0]["fields"] == {"count": 3}
    assert "ts" in events[1]


def test_events_below_min_level_are_dropped() -> None:
    out = io.StringIO()
    logger = StructuredLogger(stream=out, min_level="warning")

    logger.info("ignored")
    logger.warning("kept")

    assert [json.loads(line)["message"] for line in out.getvalue().splitlines()] == ["kept"]


def test_unknown_level_is_rejected() -> None:
    with pytest.raises(ValueError):
        StructuredLogger(min_level="verbose")


def test_conforms_to_logger_port() -> None:
    assert isinstance(StructuredLogger(), LoggerPort)
