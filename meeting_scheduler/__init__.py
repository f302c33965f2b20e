"""
Meeting Scheduler.
Finds the time ranges in a day where a meeting fits everyone's calendar.
"""

from meeting_scheduler.core.find_meeting_query import FindMeetingQuery, query
from meeting_scheduler.models import TimeRange, Event, MeetingRequest

__version__ = "1.0.0"

__all__ = [
    "FindMeetingQuery",
    "query",
    "TimeRange",
    "Event",
    "MeetingRequest",
]
