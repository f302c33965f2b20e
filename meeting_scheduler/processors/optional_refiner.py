# File: meeting_scheduler/processors/optional_refiner.py
"""
Optional attendee refinement.

Narrows the ranges that work for mandatory attendees down to the parts where
optional attendees are free as well. Optional attendees are a preference:
when no range survives the narrowing, the mandatory-only ranges are returned
untouched.
"""

from typing import List, Sequence

from meeting_scheduler.models import TimeRange
from meeting_scheduler.processors.free_deriver import fits_duration
from meeting_scheduler.processors.interval_normalizer import is_normalized
from meeting_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)


def split_range(piece: TimeRange, blocker: TimeRange, duration: int) -> List[TimeRange]:
    """
    Cut `blocker` out of `piece`, keeping leftovers that still fit `duration`.

    Returns:
        Zero, one or two ranges in ascending order. `piece` comes back as-is
        when the two do not overlap (touching is not overlapping).
    """
    if not blocker.overlaps(piece):
        return [piece]

    leftovers = []
    if piece.start < blocker.start:
        leftovers.append(TimeRange(piece.start, blocker.start))
    if blocker.end < piece.end:
        leftovers.append(TimeRange(blocker.end, piece.end))

    return [r for r in leftovers if fits_duration(r, duration)]


def refine_range(free: TimeRange, optional_busy: Sequence[TimeRange], duration: int) -> List[TimeRange]:
    """
    Apply every overlapping optional-busy range to one mandatory-free range.

    Each blocker works on the pieces left by the previous one, so several
    blockers inside `free` keep subdividing it.
    """
    pieces = [free]
    for blocker in optional_busy:
        if blocker.start >= free.end:
            break
        if not blocker.overlaps(free):
            continue

        next_pieces: List[TimeRange] = []
        for piece in pieces:
            next_pieces.extend(split_range(piece, blocker, duration))
        pieces = next_pieces

        if not pieces:
            break
    return pieces


def refine_for_optional(
    mandatory_free: Sequence[TimeRange],
    optional_busy: Sequence[TimeRange],
    duration: int,
) -> List[TimeRange]:
    """
    Narrow mandatory-free ranges so optional attendees can join too.

    Args:
        mandatory_free: Free ranges for mandatory attendees (normalized)
        optional_busy: Busy ranges for optional attendees (normalized)
        duration: Requested meeting length in minutes

    Returns:
        The refined ranges, or `mandatory_free` unchanged if refinement
        leaves nothing.
    """
    assert is_normalized(mandatory_free), "mandatory free ranges must be normalized"
    assert is_normalized(optional_busy), "optional busy ranges must be normalized"

    if not optional_busy:
        return list(mandatory_free)

    refined: List[TimeRange] = []
    for free in mandatory_free:
        refined.extend(refine_range(free, optional_busy, duration))
    refined.sort()

    if not refined:
        logger.info(
            f"Optional attendees cannot join any of {len(mandatory_free)} ranges, "
            f"keeping mandatory-only availability"
        )
        return list(mandatory_free)

    logger.debug(f"Refined {len(mandatory_free)} ranges into {len(refined)} for optional attendees")
    return refined
