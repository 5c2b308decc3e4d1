from .system_clock import SystemClock
from .structured_logger import LEVELS, StructuredLogger

__all__ = ["SystemClock", "StructuredLogger", "LEVELS"]
