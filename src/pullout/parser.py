"""Schedule parser - turns free-text pull-out descriptors into ScheduleEntry models.

Descriptors come straight from the roster's data-entry form, so two families
of input are accepted:

  Compact (current form output):  "MTW 10:00 AM-11:30 AM", "TTh 1:00 PM-1:45 PM"
  Legacy (hand typed):            "Tuesdays 10:00-10:30", "Monday/Wednesday 2-2:30 PM",
                                  "T/TH 9:00-9:30"

The time range is mandatory. A descriptor without one, or without a
recognized weekday, yields no entries; the reason is reported as a warning
instead of an exception.
"""

import re
from collections.abc import Iterable

from src.pullout.logging import get_logger
from src.pullout.models import WEEKDAYS, ParseResult, ScheduleEntry
from src.pullout.timeutil import normalize_time, to_meridiem

log = get_logger(__name__)

# H(:MM)? (AM|PM)? - H(:MM)? (AM|PM)?
TIME_RANGE_RE = re.compile(
    r"(\d{1,2})(?::(\d{2}))?\s*(AM|PM)?\s*-\s*(\d{1,2})(?::(\d{2}))?\s*(AM|PM)?",
    re.IGNORECASE,
)

# Leading run of compact day letters, e.g. "MTWThF " (case-sensitive)
COMPACT_PREFIX_RE = re.compile(r"^([MTWFh]+)\s+")

# "Th" must win over "T"; anything else in the prefix is skipped
DAY_TOKEN_RE = re.compile(r"Th|[MTWF]")

COMPACT_DAYS: dict[str, str] = {
    "M": "Monday",
    "T": "Tuesday",
    "W": "Wednesday",
    "Th": "Thursday",
    "F": "Friday",
}

# Legacy substring search: full name or 3-letter abbreviation, upper-cased
LEGACY_DAY_NAMES: dict[str, tuple[str, str]] = {
    "Monday": ("MONDAY", "MON"),
    "Tuesday": ("TUESDAY", "TUE"),
    "Wednesday": ("WEDNESDAY", "WED"),
    "Thursday": ("THURSDAY", "THU"),
    "Friday": ("FRIDAY", "FRI"),
}

LEGACY_GROUPS: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("MWF",), ("Monday", "Wednesday", "Friday")),
    (("TTH", "T/TH"), ("Tuesday", "Thursday")),
)

_ABBREVIATIONS = {day: abbr for abbr, day in COMPACT_DAYS.items()}


def tokenize_days(prefix: str) -> list[str]:
    """Decode a compact day prefix into weekday names, left to right.

    Duplicates are kept: "MM" gives two Mondays.

    Examples:
        tokenize_days("MTWThF") -> Monday..Friday
        tokenize_days("TTh") -> ["Tuesday", "Thursday"]
    """
    return [COMPACT_DAYS[token] for token in DAY_TOKEN_RE.findall(prefix)]


def _legacy_days(descriptor: str) -> list[str]:
    upper = descriptor.upper()
    found: set[str] = set()

    for day, names in LEGACY_DAY_NAMES.items():
        if any(name in upper for name in names):
            found.add(day)

    for patterns, days in LEGACY_GROUPS:
        if any(pattern in upper for pattern in patterns):
            found.update(days)

    return [day for day in WEEKDAYS if day in found]


def parse_schedule_result(
    descriptor: str,
    service_type: str,
    provider: str,
    location: str | None = None,
) -> ParseResult:
    """Parse a descriptor and report why anything was dropped.

    Args:
        descriptor: Raw schedule text, e.g. "MTW 10:00 AM-11:30 AM".
        service_type: Label copied onto every entry, e.g. "Speech Therapy".
        provider: Staff member copied onto every entry.
        location: Optional room copied onto every entry.

    Returns:
        ParseResult with one entry per recognized day (all sharing the same
        times) and a list of human-readable warnings.
    """
    if not descriptor:
        return ParseResult()

    match = TIME_RANGE_RE.search(descriptor)
    if match is None:
        return ParseResult(warnings=[f"no time range found in {descriptor!r}"])

    start_hour, start_min, start_period, end_hour, end_min, end_period = match.groups()
    start_time = normalize_time(start_hour, start_min, start_period)
    end_time = normalize_time(end_hour, end_min, end_period)

    warnings: list[str] = []
    if start_time > end_time:
        return ParseResult(
            warnings=[f"end {end_time} is before start {start_time} in {descriptor!r}"]
        )
    if start_time == end_time:
        warnings.append(f"zero-length window {start_time} in {descriptor!r}")

    compact = COMPACT_PREFIX_RE.match(descriptor)
    if compact:
        days = tokenize_days(compact.group(1))
    else:
        days = _legacy_days(descriptor)

    if not days:
        warnings.append(f"no weekday recognized in {descriptor!r}")
        return ParseResult(warnings=warnings)

    entries = [
        ScheduleEntry(
            day=day,
            start_time=start_time,
            end_time=end_time,
            service_type=service_type,
            provider=provider,
            location=location,
        )
        for day in days
    ]
    return ParseResult(entries=entries, warnings=warnings)


def parse_schedule(
    descriptor: str,
    service_type: str,
    provider: str,
    location: str | None = None,
) -> list[ScheduleEntry]:
    """Parse a descriptor into weekly entries, logging anything dropped.

    Never raises for bad text: an unparseable descriptor returns [].
    """
    result = parse_schedule_result(descriptor, service_type, provider, location)
    for warning in result.warnings:
        log.warning("schedule_descriptor_warning", reason=warning, service_type=service_type)
    return result.entries


def format_descriptor(days: Iterable[str], start_time: str, end_time: str) -> str:
    """Build the compact descriptor a data-entry form would store.

    Args:
        days: Weekday names in any order, e.g. ["Friday", "Monday"].
        start_time: 24-hour "HH:MM".
        end_time: 24-hour "HH:MM".

    Returns:
        e.g. "MF 9:00 AM-9:30 AM", or "" when no days are given.
    """
    order = {day: i for i, day in enumerate(WEEKDAYS)}
    ordered = sorted(set(days), key=lambda day: order.get(day, len(order)))
    if not ordered:
        return ""

    prefix = "".join(_ABBREVIATIONS.get(day, day[:3]) for day in ordered)
    return f"{prefix} {to_meridiem(start_time)}-{to_meridiem(end_time)}"
