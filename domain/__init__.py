"""
Domain layer package.

This package contains the internship models, errors, ports and the
in-memory list service, independent of any storage or console code.
"""

from .errors import (  # noqa: F401
    EmptyStoreError,
    InvalidIndexError,
    StorageFormatError,
    StorageIOError,
    TrackerError,
    UnknownCommandError,
    ValidationError,
)
from .models import (  # noqa: F401
    DashboardSummary,
    IndexedInternship,
    Internship,
    LoadResult,
    NearestDeadline,
    SortOrder,
    Status,
    TrackerConfig,
)
from .ports import (  # noqa: F401
    ClockPort,
    InternshipStoragePort,
    LoggerPort,
)

__all__ = [
    # Errors
    "TrackerError",
    "ValidationError",
    "InvalidIndexError",
    "EmptyStoreError",
    "UnknownCommandError",
    "StorageFormatError",
    "StorageIOError",
    # Models
    "Internship",
    "Status",
    "SortOrder",
    "IndexedInternship",
    "NearestDeadline",
    "LoadResult",
    "DashboardSummary",
    "TrackerConfig",
    # Ports
    "InternshipStoragePort",
    "ClockPort",
    "LoggerPort",
]
