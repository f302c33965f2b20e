# File: meeting_scheduler/cli.py
"""
Command-line front end for Meeting Scheduler.

Reads a JSON day file holding the events and the meeting request, runs the
query and prints the available ranges.

    {
      "events": [
        {"title": "Standup", "when": {"start": "09:00", "end": "09:15"}, "attendees": ["alice"]}
      ],
      "request": {"attendees": ["alice"], "optional_attendees": ["bob"], "duration": 30}
    }
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from meeting_scheduler.core.config_manager import Config
from meeting_scheduler.core.find_meeting_query import FindMeetingQuery
from meeting_scheduler.models import (
    Event, MeetingRequest, TimeRange, event_from_dict, format_clock_time, meeting_request_from_dict
)
from meeting_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)


def load_day_file(path: Path) -> Tuple[List[Event], MeetingRequest]:
    """Decode events and the meeting request from a JSON day file."""
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict) or 'request' not in data:
        raise ValueError(f"{path} must contain a 'request' object")

    events = [event_from_dict(e) for e in data.get('events', [])]
    request = meeting_request_from_dict(data['request'])
    return events, request


def format_ranges(ranges: List[TimeRange], limit: int = 0) -> str:
    """
    Render ranges as one "HH:MM-HH:MM (N min)" line each.

    Args:
        ranges: Ranges to render
        limit: Maximum number of ranges shown (0 = all)
    """
    if not ranges:
        return "No available time ranges."

    shown = ranges[:limit] if limit > 0 else ranges
    lines = [
        f"{format_clock_time(r.start)}-{format_clock_time(r.end)} ({r.duration} min)"
        for r in shown
    ]
    if len(shown) < len(ranges):
        lines.append(f"... and {len(ranges) - len(shown)} more")
    return "\n".join(lines)


def ranges_to_json(ranges: List[TimeRange], limit: int = 0) -> str:
    shown = ranges[:limit] if limit > 0 else ranges
    return json.dumps({'ranges': [r.to_dict() for r in shown]}, indent=2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='find-meeting-times',
        description='Find the time ranges in a day where a meeting fits.'
    )
    parser.add_argument('day_file', type=Path, help='JSON file with events and a meeting request')
    parser.add_argument('--json', action='store_true', help='Print the ranges as JSON')
    parser.add_argument(
        '--limit', type=int, default=Config.MAX_OUTPUT_RANGES,
        help='Maximum number of ranges to print (0 = all)'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the find-meeting-times command."""
    args = build_parser().parse_args(argv)

    if not Config.validate():
        return 1

    try:
        events, request = load_day_file(args.day_file)
    except FileNotFoundError:
        logger.error(f"Day file not found: {args.day_file}")
        return 1
    except (OSError, KeyError, TypeError, ValueError) as e:
        logger.error(f"Could not read {args.day_file}: {e}")
        return 1

    logger.info(
        f"Loaded {len(events)} events; looking for {request.duration} minutes "
        f"with {len(request.attendees)} mandatory and {len(request.optional_attendees)} optional attendees"
    )

    ranges = FindMeetingQuery().query(events, request)

    if args.json:
        print(ranges_to_json(ranges, args.limit))
    else:
        print(format_ranges(ranges, args.limit))
    return 0


if __name__ == '__main__':
    sys.exit(main())
