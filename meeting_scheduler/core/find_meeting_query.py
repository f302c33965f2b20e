# File: meeting_scheduler/core/find_meeting_query.py
"""
Meeting query module for Meeting Scheduler.
Chains the interval stages together to answer "when can we meet?".

Pipeline:
    1. Extract busy ranges for the attendees of interest
    2. Merge them into a sorted, disjoint list
    3. Invert against the day, keeping gaps that fit the duration
    4. Narrow the result around optional attendees' busy time
"""

from typing import Iterable, List, Optional

from meeting_scheduler.core.config_manager import Config
from meeting_scheduler.models import Event, MeetingRequest, TimeRange
from meeting_scheduler.processors.busy_extractor import extract_busy_ranges
from meeting_scheduler.processors.interval_normalizer import merge_ranges
from meeting_scheduler.processors.free_deriver import derive_free_ranges
from meeting_scheduler.processors.optional_refiner import refine_for_optional
from meeting_scheduler.utils.logger import LoggerMixin


class FindMeetingQuery(LoggerMixin):
    """
    Finds the ranges of a day in which a requested meeting can take place.

    Holds nothing but the day bounds, so one instance can serve any number
    of concurrent queries.
    """

    def __init__(self, day: Optional[TimeRange] = None):
        """
        Args:
            day: Bookable span of the day (default: Config.day_range())
        """
        self.day = day if day is not None else Config.day_range()
        # Resolve the logger now so queries never touch instance state
        self.logger.debug(f"Booking meetings within {self.day}")

    def busy_ranges(self, events: Iterable[Event], attendees: Iterable[str]) -> List[TimeRange]:
        """Stages 1 and 2: merged busy time for a set of attendees."""
        return merge_ranges(extract_busy_ranges(events, attendees))

    def query(self, events: Iterable[Event], request: MeetingRequest) -> List[TimeRange]:
        """
        Return every range of the day that can host the meeting.

        Args:
            events: Existing calendar events
            request: Meeting to place

        Returns:
            Ascending, disjoint ranges; empty when nothing fits
        """
        # Nobody to accommodate: the whole day is open
        if not request.has_attendees():
            return [self.day]

        if not request.is_feasible_duration(self.day.duration):
            self.logger.debug(f"Duration {request.duration} cannot fit in {self.day}")
            return []

        events = list(events)

        # Optional attendees are binding when they are the only attendees
        if not request.attendees:
            self.logger.debug("No mandatory attendees, treating optional attendees as mandatory")
            busy = self.busy_ranges(events, request.optional_attendees)
            return derive_free_ranges(busy, request.duration, self.day)

        busy = self.busy_ranges(events, request.attendees)
        available = derive_free_ranges(busy, request.duration, self.day)
        if not available:
            self.logger.debug(f"No range fits {request.duration} minutes for mandatory attendees")
            return []

        optional_busy = self.busy_ranges(events, request.binding_optional_attendees())
        result = refine_for_optional(available, optional_busy, request.duration)

        self.logger.debug(
            f"Query for {len(request.attendees)} mandatory and "
            f"{len(request.optional_attendees)} optional attendees "
            f"over {len(events)} events: {len(result)} ranges"
        )
        return result


def query(events: Iterable[Event], request: MeetingRequest) -> List[TimeRange]:
    """Run a query over the configured day."""
    return FindMeetingQuery().query(events, request)
