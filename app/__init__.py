"""Application/UI layer package."""

from .commands import Command, CommandParser, TrackerView
from .facade import InternshipChanges, TrackerFacade

__all__ = ["Command", "CommandParser", "TrackerView", "InternshipChanges", "TrackerFacade"]
