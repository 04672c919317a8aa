"""Error hierarchy for roster loading.

Schedule descriptors never raise: an unparseable descriptor degrades to an
empty schedule. Only the roster adapter reports failures, and it does so with
the classes below so callers can tell a missing roster from a broken one.

Example usage:
    try:
        roster = load_roster(path)
    except RosterNotFoundError:
        roster = []
"""


class PulloutError(Exception):
    """Base exception for all pull-out schedule errors."""

    pass


class RosterError(PulloutError):
    """The roster could not be turned into student records."""

    pass


class RosterNotFoundError(RosterError):
    """Roster file does not exist.

    Usually a wrong --roster path or ROSTER_PATH setting.
    """

    pass


class RosterFormatError(RosterError):
    """Roster file exists but is not usable.

    Examples: invalid JSON, top-level value that is not a list, a record
    missing its id or name.
    """

    pass
