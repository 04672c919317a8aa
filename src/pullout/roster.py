"""Roster adapter - maps the student store's records onto Student models.

The roster store is external and owns the data. Records arrive in one of
three shapes:

  Current:   {"id", "name", "resourceInfo": {"attendsResource", "resourceType",
              "resourceTeacher", "timeframe"}}
  Legacy:    {"id", "name", "resourceInformation": {"attendsResourceServices",
              "relatedServices": [...]}}  (no timeframe was ever stored)
  Contract:  {"id", "name", "resource": {"attends_service", "service_type",
              "provider", "raw_timeframe"}}
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from src.pullout.errors import RosterFormatError, RosterNotFoundError
from src.pullout.logging import get_logger
from src.pullout.models import ResourceDescriptor, Student

log = get_logger(__name__)

DEFAULT_SERVICE_TYPE = "Resource Services"
DEFAULT_PROVIDER = "Resource Teacher"


def _resource_from_record(record: dict[str, Any]) -> ResourceDescriptor | None:
    if "resource" in record and record["resource"] is not None:
        return ResourceDescriptor.model_validate(record["resource"])

    info = record.get("resourceInfo")
    if info:
        return ResourceDescriptor(
            attends_service=bool(info.get("attendsResource", False)),
            service_type=info.get("resourceType") or "",
            provider=info.get("resourceTeacher") or "",
            raw_timeframe=info.get("timeframe") or "",
        )

    legacy = record.get("resourceInformation")
    if legacy:
        related = legacy.get("relatedServices") or []
        return ResourceDescriptor(
            attends_service=bool(legacy.get("attendsResourceServices", False)),
            service_type=related[0] if related else DEFAULT_SERVICE_TYPE,
            provider=DEFAULT_PROVIDER,
        )

    return None


def student_from_record(record: dict[str, Any]) -> Student:
    """Convert one roster record to a Student.

    Raises:
        RosterFormatError: If the record has no usable id/name or a malformed
            resource block.
    """
    try:
        return Student(
            id=str(record["id"]),
            name=record["name"],
            resource=_resource_from_record(record),
        )
    except (KeyError, TypeError, AttributeError, ValidationError) as e:
        raise RosterFormatError(f"Invalid roster record {record!r}: {e}") from e


def load_roster(path: str | Path) -> list[Student]:
    """Read a roster JSON file.

    The file holds either a list of records or an object with a
    "students" list.

    Args:
        path: Path to the roster JSON file.

    Returns:
        Students in file order.

    Raises:
        RosterNotFoundError: If the file does not exist.
        RosterFormatError: If the file is not valid roster JSON.
    """
    path = Path(path)
    if not path.exists():
        raise RosterNotFoundError(f"Roster file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise RosterFormatError(f"Roster file {path} is not valid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("students")
    if not isinstance(data, list):
        raise RosterFormatError(f"Roster file {path} does not contain a student list")

    students = [student_from_record(record) for record in data]
    log.info("roster_loaded", path=str(path), students=len(students))
    return students
