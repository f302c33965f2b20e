from .common import parse_clock_time, format_clock_time, to_minutes
from .time_range import TimeRange, START_OF_DAY, END_OF_DAY
from .event import Event, event_from_dict
from .request import MeetingRequest, meeting_request_from_dict

__all__ = [
    "parse_clock_time",
    "format_clock_time",
    "to_minutes",
    "TimeRange",
    "START_OF_DAY",
    "END_OF_DAY",
    "Event",
    "event_from_dict",
    "MeetingRequest",
    "meeting_request_from_dict",
]
