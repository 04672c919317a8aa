"""Wall-clock helpers shared by the parser and the query engine.

Everything here works on local wall-clock time. There is no timezone
handling: a tz-aware datetime is read through its own wall clock.
"""

from datetime import datetime

from src.pullout.models import ScheduleEntry

# datetime.weekday() order; strftime("%A") would follow the process locale
DAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def normalize_time(hour: str, minute: str | None = None, meridiem: str | None = None) -> str:
    """Convert an hour/minute/meridiem triple to zero-padded 24-hour "HH:MM".

    12 PM stays 12, 12 AM becomes 00, any other PM hour gains 12. Without a
    meridiem the hour is used as-is. Values are not range-checked: "13" PM
    yields "25:00".

    Args:
        hour: Hour digits, e.g. "9" or "10".
        minute: Minute digits; missing minutes mean "00".
        meridiem: "AM" or "PM" in any case, or None.

    Returns:
        Time string such as "09:00" or "13:30".
    """
    h = int(hour)
    m = int(minute) if minute else 0

    if meridiem:
        period = meridiem.upper()
        if period == "PM" and h != 12:
            h += 12
        elif period == "AM" and h == 12:
            h = 0

    return f"{h:02d}:{m:02d}"


def day_name(dt: datetime) -> str:
    return DAY_NAMES[dt.weekday()]


def clock(dt: datetime) -> str:
    """Return the "HH:MM" wall-clock time of a datetime."""
    return f"{dt.hour:02d}:{dt.minute:02d}"


def to_minutes(hhmm: str) -> int:
    """Minutes since midnight for an "HH:MM" string."""
    hour, minute = hhmm.split(":")
    return int(hour) * 60 + int(minute)


def to_meridiem(hhmm: str) -> str:
    """Render "13:30" as "1:30 PM" (the form typed into data-entry forms)."""
    hour, minute = (int(part) for part in hhmm.split(":"))
    period = "PM" if hour >= 12 else "AM"
    display = hour % 12 or 12
    return f"{display}:{minute:02d} {period}"


def format_time_range(entry: ScheduleEntry) -> str:
    return f"{entry.start_time}-{entry.end_time}"
