# File: meeting_scheduler/processors/free_deriver.py
"""
Free interval derivation.
Inverts a normalized busy list against the day and keeps gaps long enough
for the meeting.
"""

from typing import List, Sequence

from meeting_scheduler.models import TimeRange
from meeting_scheduler.processors.interval_normalizer import is_normalized
from meeting_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)


def fits_duration(time_range: TimeRange, duration: int) -> bool:
    return time_range.duration >= duration


def derive_free_ranges(
    busy: Sequence[TimeRange],
    duration: int,
    day: TimeRange = TimeRange.WHOLE_DAY,
) -> List[TimeRange]:
    """
    Return the gaps around `busy` inside `day` that can hold `duration` minutes.

    Gaps before the first busy range, between neighbours and after the last
    one are all considered. The last gap ends at `day.end`, so a meeting may
    finish exactly at the end of the day.

    Args:
        busy: Normalized busy ranges (sorted, disjoint, non-touching)
        duration: Requested meeting length in minutes
        day: Bounds of the bookable day

    Returns:
        Free ranges in ascending order; empty when the duration is infeasible
    """
    assert is_normalized(busy), "busy ranges must be merged before deriving free time"

    if duration <= 0 or duration > day.duration:
        logger.debug(f"Duration {duration} cannot fit in {day}")
        return []

    free: List[TimeRange] = []
    cursor = day.start

    for blocked in busy:
        if blocked.end <= day.start or blocked.start >= day.end:
            continue
        gap_end = max(blocked.start, cursor)
        if gap_end > cursor:
            gap = TimeRange(cursor, gap_end)
            if fits_duration(gap, duration):
                free.append(gap)
        cursor = max(cursor, min(blocked.end, day.end))

    if cursor < day.end:
        gap = TimeRange(cursor, day.end)
        if fits_duration(gap, duration):
            free.append(gap)

    logger.debug(f"Derived {len(free)} free ranges from {len(busy)} busy ranges")
    return free
