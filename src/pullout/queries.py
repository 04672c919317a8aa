"""Point-in-time questions about the schedule index.

Every query takes the reference time as an argument (``now``); passing None
reads the local wall clock. Results are built fresh on every call and the
index is never modified, so repeated calls with the same ``now`` agree.

Time comparisons are plain string comparisons on zero-padded "HH:MM" values.
"""

import math
import re
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta

from src.pullout.logging import get_logger
from src.pullout.models import (
    ConflictResult,
    IndexedStudent,
    PullOutStatus,
    ScheduleEntry,
    Student,
)
from src.pullout.timeutil import clock, day_name, normalize_time, to_minutes

log = get_logger(__name__)

DEFAULT_UPCOMING_WINDOW = 30

# Latest wall-clock time a same-day lookahead can reach
END_OF_DAY = "23:59"

# One side of a candidate activity range: "9:00", "09:00", "9 AM", "9:00 pm"
_ENDPOINT_RE = re.compile(r"^\s*(\d{1,2})(?::(\d{2}))?\s*(AM|PM)?\s*$", re.IGNORECASE)


def _resolve(now: datetime | None) -> datetime:
    return now if now is not None else datetime.now()


def _minutes_until(hhmm: str, now: datetime) -> int:
    """Whole minutes from now until hhmm today, floored, never negative."""
    seconds_now = now.hour * 3600 + now.minute * 60 + now.second + now.microsecond / 1e6
    return max(0, math.floor((to_minutes(hhmm) * 60 - seconds_now) / 60))


def _entries_on(index: Iterable[IndexedStudent], day: str):
    for student in index:
        for entry in student.schedule_entries:
            if entry.day == day:
                yield student, entry


def current_pullouts(
    index: Iterable[IndexedStudent], now: datetime | None = None
) -> list[PullOutStatus]:
    """Students out of the room at ``now``.

    An entry is active when its day matches and the current "HH:MM" lies in
    [start_time, end_time], both ends inclusive. A student with two active
    entries is reported twice.

    Args:
        index: Output of build_index().
        now: Reference time; defaults to the local wall clock.

    Returns:
        One PullOutStatus per active entry, in index order.
    """
    now = _resolve(now)
    current = clock(now)

    statuses: list[PullOutStatus] = []
    for student, entry in _entries_on(index, day_name(now)):
        if entry.is_degenerate:
            continue
        if entry.start_time <= current <= entry.end_time:
            statuses.append(
                PullOutStatus(
                    student=student,
                    active_entry=entry,
                    minutes_remaining=_minutes_until(entry.end_time, now),
                )
            )
    return statuses


def upcoming_pullouts(
    index: Iterable[IndexedStudent],
    now: datetime | None = None,
    window_minutes: int = DEFAULT_UPCOMING_WINDOW,
) -> list[PullOutStatus]:
    """Entries starting after ``now`` but within the next window_minutes.

    Entries already in progress are excluded; they belong to
    current_pullouts(). A window reaching past midnight stops at 23:59.

    Returns:
        PullOutStatus list with starts_in set and minutes_remaining holding
        the length of the entry.
    """
    now = _resolve(now)
    current = clock(now)
    future = now + timedelta(minutes=window_minutes)
    horizon = clock(future) if future.date() == now.date() else END_OF_DAY

    statuses: list[PullOutStatus] = []
    for student, entry in _entries_on(index, day_name(now)):
        if entry.is_degenerate:
            continue
        if current < entry.start_time <= horizon:
            statuses.append(
                PullOutStatus(
                    student=student,
                    active_entry=entry,
                    minutes_remaining=to_minutes(entry.end_time) - to_minutes(entry.start_time),
                    starts_in=to_minutes(entry.start_time) - to_minutes(current),
                )
            )
    return statuses


def is_in_pullout(
    index: Iterable[IndexedStudent], student_id: str, now: datetime | None = None
) -> bool:
    return any(s.student.id == student_id for s in current_pullouts(index, now))


def current_service_for(
    index: Iterable[IndexedStudent], student_id: str, now: datetime | None = None
) -> ScheduleEntry | None:
    """The first active entry for a student, or None if they are in class."""
    for status in current_pullouts(index, now):
        if status.student.id == student_id:
            return status.active_entry
    return None


def _parse_range(candidate_range: str) -> tuple[str, str] | None:
    """Split "HH:MM-HH:MM" into normalized endpoints, or None if malformed."""
    start_text, sep, end_text = candidate_range.partition("-")
    if not sep:
        return None

    endpoints = []
    for text in (start_text, end_text):
        match = _ENDPOINT_RE.match(text)
        if match is None:
            return None
        endpoints.append(normalize_time(*match.groups()))
    return endpoints[0], endpoints[1]


def ranges_overlap(first: str, second: str) -> bool:
    """Half-open overlap test on two "HH:MM-HH:MM" ranges.

    Touching ranges ("09:00-10:00" and "10:00-10:30") do not overlap.
    A range without a "-" separator never overlaps anything.
    """
    start1, sep1, end1 = first.partition("-")
    start2, sep2, end2 = second.partition("-")
    if not (sep1 and sep2):
        return False
    return start1 < end2 and start2 < end1


def detect_conflict(
    index: Iterable[IndexedStudent],
    candidate_range: str,
    day: str | None = None,
    now: datetime | None = None,
) -> ConflictResult:
    """Find students whose pull-outs overlap a proposed activity.

    Args:
        index: Output of build_index().
        candidate_range: Activity time, e.g. "09:30-10:30" or "9:30 AM-10:30 AM".
        day: Weekday name to check; defaults to the weekday of ``now``.
        now: Reference time used only to pick the default day.

    Returns:
        ConflictResult listing each conflicting student once. A malformed
        candidate_range reports no conflict.
    """
    check_day = day or day_name(_resolve(now))

    candidate = _parse_range(candidate_range)
    if candidate is None:
        log.debug("conflict_range_malformed", candidate_range=candidate_range)
        return ConflictResult()
    start, end = candidate

    conflicting: list[IndexedStudent] = []
    seen: set[str] = set()
    for student, entry in _entries_on(index, check_day):
        if student.id in seen or entry.is_degenerate:
            continue
        if start < entry.end_time and entry.start_time < end:
            seen.add(student.id)
            conflicting.append(student)

    return ConflictResult(conflict=bool(conflicting), conflicting_students=conflicting)


def filter_available(
    index: Iterable[IndexedStudent],
    candidates: Sequence[Student],
    now: datetime | None = None,
) -> list[Student]:
    """Drop every candidate who is currently pulled out."""
    away = {status.student.id for status in current_pullouts(index, now)}
    return [student for student in candidates if student.id not in away]
