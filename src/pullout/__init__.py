"""Pull-out schedule core for classroom resource services.

Parses free-text resource-service descriptors ("MTW 10:00 AM-11:30 AM") into
weekly schedule entries and answers who is out of the room, who leaves soon,
and which students a proposed activity would clash with.
"""

from src.pullout.index import build_index, resource_students
from src.pullout.models import (
    ConflictResult,
    IndexedStudent,
    ParseResult,
    PullOutStatus,
    ResourceDescriptor,
    ScheduleEntry,
    Student,
)
from src.pullout.parser import format_descriptor, parse_schedule, parse_schedule_result
from src.pullout.queries import (
    current_pullouts,
    current_service_for,
    detect_conflict,
    filter_available,
    is_in_pullout,
    upcoming_pullouts,
)
from src.pullout.timeutil import normalize_time

__all__ = [
    "ScheduleEntry",
    "ResourceDescriptor",
    "Student",
    "IndexedStudent",
    "PullOutStatus",
    "ConflictResult",
    "ParseResult",
    "normalize_time",
    "parse_schedule",
    "parse_schedule_result",
    "format_descriptor",
    "build_index",
    "resource_students",
    "current_pullouts",
    "upcoming_pullouts",
    "is_in_pullout",
    "current_service_for",
    "detect_conflict",
    "filter_available",
]
