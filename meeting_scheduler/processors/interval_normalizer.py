# File: meeting_scheduler/processors/interval_normalizer.py
"""
Interval normalization.
Sorts busy ranges and coalesces the ones that overlap or touch.
"""

from typing import Iterable, List, Sequence

from meeting_scheduler.models import TimeRange
from meeting_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)


def merge_ranges(ranges: Iterable[TimeRange]) -> List[TimeRange]:
    """
    Merge ranges into the minimal sorted, disjoint list covering the same time.

    Ranges that merely touch are merged as well, so no zero-length gap ever
    appears between two entries of the result. Empty ranges block nothing
    and are dropped.

    Example:
        >>> merge_ranges([TimeRange(200, 300), TimeRange(100, 200)])
        [TimeRange(start=100, end=300)]
    """
    items = sorted(r for r in ranges if r.duration > 0)
    if not items:
        return []

    merged: List[TimeRange] = []
    current = items[0]

    for nxt in items[1:]:
        if nxt.start <= current.end:
            if nxt.end > current.end:
                current = TimeRange(current.start, nxt.end)
        else:
            merged.append(current)
            current = nxt

    merged.append(current)

    logger.debug(f"Merged {len(items)} ranges into {len(merged)}")
    return merged


def is_normalized(ranges: Sequence[TimeRange]) -> bool:
    """True when ranges are start-sorted with a real gap between neighbours."""
    return all(prev.end < nxt.start for prev, nxt in zip(ranges, ranges[1:]))
