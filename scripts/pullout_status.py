"""Show who is out of the classroom for resource services right now.

Standalone CLI script over the pull-out schedule core. Loads the roster,
builds the schedule index, and prints current and upcoming pull-outs as
JSON or a human-readable table. Can also check a proposed activity time
for conflicts.

Run with: python scripts/pullout_status.py
Roster:   python scripts/pullout_status.py --roster data/students.json
At time:  python scripts/pullout_status.py --at 2026-10-20T10:45
Table:    python scripts/pullout_status.py --table
Conflict: python scripts/pullout_status.py --conflict 09:30-10:30 --day Tuesday
Watch:    python scripts/pullout_status.py --table --watch

Exit codes:
  0 = success (JSON or table on stdout)
  1 = error (message on stderr)
"""

import argparse
import json
import os
import sys
import time
from datetime import datetime

from dotenv import load_dotenv

load_dotenv()

# Add project root to path for src imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.pullout.config import get_config  # noqa: E402
from src.pullout.index import build_index  # noqa: E402
from src.pullout.logging import setup_logging  # noqa: E402
from src.pullout.models import IndexedStudent, PullOutStatus  # noqa: E402
from src.pullout.queries import (  # noqa: E402
    current_pullouts,
    detect_conflict,
    upcoming_pullouts,
)
from src.pullout.roster import load_roster  # noqa: E402


def _log(msg: str) -> None:
    """Write diagnostic messages to stderr so stdout stays clean for JSON."""
    print(msg, file=sys.stderr)


def _parse_args() -> argparse.Namespace:
    """Parse CLI arguments using argparse."""
    config = get_config()
    parser = argparse.ArgumentParser(
        description="Show current and upcoming resource-service pull-outs.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--roster",
        default=config.roster_path,
        help=f"Roster JSON file (default: {config.roster_path}).",
    )
    parser.add_argument(
        "--at",
        type=datetime.fromisoformat,
        default=None,
        help="Reference time as ISO datetime, e.g. 2026-10-20T10:45 (default: now).",
    )
    parser.add_argument(
        "--window",
        type=int,
        default=config.upcoming_window_minutes,
        help="Lookahead in minutes for upcoming pull-outs.",
    )
    parser.add_argument(
        "--conflict",
        metavar="HH:MM-HH:MM",
        help="Check a proposed activity time for conflicts instead.",
    )
    parser.add_argument(
        "--day",
        help="Weekday for --conflict (default: weekday of --at).",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Print a text table instead of JSON.",
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help=f"Re-query every {config.poll_interval_seconds}s until interrupted.",
    )
    return parser.parse_args()


def _format_table(title: str, statuses: list[PullOutStatus]) -> str:
    """Format pull-out statuses as a human-readable text table."""
    lines = [title, "-" * len(title)]
    if not statuses:
        lines.append("  (none)")
        return "\n".join(lines)

    for status in statuses:
        entry = status.active_entry
        if status.starts_in is None:
            timing = f"{status.minutes_remaining} min left"
        else:
            timing = f"in {status.starts_in} min"
        lines.append(
            f"  {status.student.name:<20} {entry.time_range:<12} "
            f"{entry.service_type:<22} {entry.provider:<16} {timing}"
        )
    return "\n".join(lines)


def _report(index: list[IndexedStudent], args: argparse.Namespace) -> str:
    now = args.at or datetime.now()

    if args.conflict:
        result = detect_conflict(index, args.conflict, day=args.day, now=now)
        if args.table:
            names = ", ".join(s.name for s in result.conflicting_students) or "(none)"
            return f"Conflicts for {args.conflict}: {names}"
        return json.dumps(result.model_dump(mode="json"), indent=2)

    current = current_pullouts(index, now)
    upcoming = upcoming_pullouts(index, now, args.window)

    if args.table:
        return "\n\n".join(
            [
                _format_table(f"Out now ({now:%A %H:%M})", current),
                _format_table(f"Leaving in the next {args.window} min", upcoming),
            ]
        )
    output = {
        "at": now.isoformat(),
        "current": [s.model_dump(mode="json") for s in current],
        "upcoming": [s.model_dump(mode="json") for s in upcoming],
    }
    return json.dumps(output, indent=2, ensure_ascii=False)


def main(args: argparse.Namespace) -> None:
    config = get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)

    index = build_index(load_roster(args.roster))
    _log(f"  Indexed {len(index)} students from {args.roster}")

    print(_report(index, args))
    while args.watch:
        time.sleep(config.poll_interval_seconds)
        print(_report(index, args), flush=True)


if __name__ == "__main__":
    args = _parse_args()
    try:
        main(args)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
