"""Pydantic models for pull-out schedule data.

All data structures use Pydantic v2 for validation, serialization, and type safety.
Models are frozen: the index and query results are read-only projections of
the roster, rebuilt rather than edited.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Weekday = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]

WEEKDAYS: tuple[str, ...] = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")


class ScheduleEntry(BaseModel):
    """One weekly recurrence of a pull-out service.

    Times are zero-padded 24-hour "HH:MM" strings, so string order is
    chronological order.
    """

    model_config = ConfigDict(frozen=True)

    day: Weekday
    start_time: str  # "10:00"
    end_time: str  # "11:30"
    service_type: str  # "Speech Therapy"
    provider: str  # "Ms. Parker"
    location: str | None = None

    @property
    def time_range(self) -> str:
        return f"{self.start_time}-{self.end_time}"

    @property
    def is_degenerate(self) -> bool:
        """Zero-length windows are never active."""
        return self.start_time >= self.end_time


class ResourceDescriptor(BaseModel):
    """Resource-service fields of a roster record.

    raw_timeframe is the free-text schedule, e.g. "MTW 10:00 AM-11:30 AM".
    """

    model_config = ConfigDict(frozen=True)

    attends_service: bool = False
    service_type: str = ""
    provider: str = ""
    raw_timeframe: str = ""


class Student(BaseModel):
    """A roster record as seen by the schedule core."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    resource: ResourceDescriptor | None = None


class IndexedStudent(Student):
    """Student plus the entries parsed from its descriptor."""

    schedule_entries: tuple[ScheduleEntry, ...] = ()


class PullOutStatus(BaseModel):
    """Query result: one student, one matching entry.

    For current pull-outs minutes_remaining counts down to the entry end.
    For upcoming pull-outs it is the entry length and starts_in is set.
    """

    model_config = ConfigDict(frozen=True)

    student: IndexedStudent
    active_entry: ScheduleEntry
    minutes_remaining: int = Field(default=0, ge=0)
    starts_in: int | None = None


class ConflictResult(BaseModel):
    conflict: bool = False
    conflicting_students: list[IndexedStudent] = Field(default_factory=list)


class ParseResult(BaseModel):
    """Entries parsed from one descriptor plus anything that was dropped."""

    entries: list[ScheduleEntry] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
