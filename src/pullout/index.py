"""Schedule index - the roster with every descriptor parsed once.

The index is a pure derivation of one roster snapshot. It is never patched:
when the roster changes, call build_index() again.
"""

from collections.abc import Iterable

from src.pullout.logging import get_logger
from src.pullout.models import IndexedStudent, Student
from src.pullout.parser import parse_schedule

log = get_logger(__name__)


def index_student(student: Student) -> IndexedStudent:
    """Attach parsed schedule entries to one student.

    Students who do not attend a service, or whose descriptor is empty or
    unparseable, get an empty schedule.
    """
    resource = student.resource
    entries = ()
    if resource is not None and resource.attends_service and resource.raw_timeframe:
        entries = tuple(
            parse_schedule(
                resource.raw_timeframe,
                resource.service_type,
                resource.provider,
            )
        )
        if not entries:
            log.debug("student_schedule_empty", student_id=student.id)

    return IndexedStudent(
        id=student.id,
        name=student.name,
        resource=resource,
        schedule_entries=entries,
    )


def build_index(roster: Iterable[Student]) -> list[IndexedStudent]:
    """Build the schedule index for a roster snapshot, preserving roster order.

    Args:
        roster: Student records from the roster store.

    Returns:
        One IndexedStudent per roster record.
    """
    index = [index_student(student) for student in roster]
    log.debug(
        "index_built",
        students=len(index),
        entries=sum(len(s.schedule_entries) for s in index),
    )
    return index


def resource_students(index: Iterable[IndexedStudent]) -> list[IndexedStudent]:
    """Students flagged as attending a resource service, parsed or not."""
    return [s for s in index if s.resource is not None and s.resource.attends_service]
