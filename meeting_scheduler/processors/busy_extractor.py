# File: meeting_scheduler/processors/busy_extractor.py
"""
Busy interval extraction.
Picks out the events that tie up at least one attendee of interest.
"""

from typing import Iterable, List

from meeting_scheduler.models import Event, TimeRange
from meeting_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)


def extract_busy_ranges(events: Iterable[Event], attendees: Iterable[str]) -> List[TimeRange]:
    """
    Collect the time ranges of events attended by anyone in `attendees`.

    A single shared attendee is enough to make an event relevant. The
    result keeps the order of `events` and is not merged.

    Args:
        events: Calendar events for the day
        attendees: Attendee identifiers whose availability matters

    Returns:
        Unsorted list of busy ranges (empty when `attendees` is empty)
    """
    attendees = frozenset(attendees)
    if not attendees:
        return []

    busy = [event.when for event in events if event.has_any_attendee(attendees)]

    logger.debug(f"Found {len(busy)} busy ranges for {len(attendees)} attendees")
    return busy
