# File: meeting_scheduler/models/event.py

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable

from .common import to_minutes
from .request import attendee_set, parse_duration
from .time_range import TimeRange


@dataclass(frozen=True)
class Event:
    """An occupied slot in somebody's calendar."""
    title: str
    when: TimeRange
    attendees: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        """Store attendees as a frozenset whatever iterable was passed in."""
        if not isinstance(self.attendees, frozenset):
            object.__setattr__(self, 'attendees', frozenset(self.attendees))

    def has_any_attendee(self, attendees: Iterable[str]) -> bool:
        """True when at least one of `attendees` is at this event."""
        return not self.attendees.isdisjoint(attendees)

    def to_dict(self) -> dict:
        return {
            'title': self.title,
            'when': self.when.to_dict(),
            'attendees': sorted(self.attendees),
        }


def time_range_from_dict(data: dict) -> TimeRange:
    """Build a TimeRange from {"start", "end"} or {"start", "duration"}."""
    start = to_minutes(data['start'])
    if 'end' in data:
        return TimeRange(start, to_minutes(data['end']))
    if 'duration' in data:
        return TimeRange.from_start_duration(start, parse_duration(data['duration']))
    raise ValueError("Time range needs either an 'end' or a 'duration'")


def event_from_dict(data: dict) -> Event:
    """Create Event from dictionary (e.g., one entry of a JSON day file)."""
    if not isinstance(data, dict):
        raise ValueError(f"Event must be an object, got {data!r}")

    when = data.get('when')
    if when is None:
        # Flat form: {"start": ..., "end": ...} next to the title
        when = data
    if not isinstance(when, dict):
        raise ValueError(f"Expected an object for 'when', got {when!r}")

    return Event(
        title=str(data.get('title', 'Untitled Event')),
        when=time_range_from_dict(when),
        attendees=attendee_set(data.get('attendees', []), 'attendees'),
    )
