# File: meeting_scheduler/models/request.py

from dataclasses import dataclass, field
from typing import FrozenSet


@dataclass(frozen=True)
class MeetingRequest:
    """
    A meeting someone wants to book.

    `duration` is stored as given; a value that cannot fit in a day makes the
    request infeasible rather than invalid.
    """
    attendees: FrozenSet[str] = field(default_factory=frozenset)
    optional_attendees: FrozenSet[str] = field(default_factory=frozenset)
    duration: int = 30

    def __post_init__(self):
        """Normalize attendee collections to frozensets."""
        for name in ('attendees', 'optional_attendees'):
            value = getattr(self, name)
            if not isinstance(value, frozenset):
                object.__setattr__(self, name, frozenset(value))

    def is_feasible_duration(self, day_length: int) -> bool:
        """A meeting must last at least a minute and fit inside the day."""
        return 0 < self.duration <= day_length

    def binding_optional_attendees(self) -> FrozenSet[str]:
        """Optional attendees that are not already mandatory."""
        return self.optional_attendees - self.attendees

    def has_attendees(self) -> bool:
        return bool(self.attendees or self.optional_attendees)


def parse_duration(value) -> int:
    """Accept whole minutes as an int, an integral float or a numeric string."""
    if isinstance(value, bool):
        raise ValueError(f"Duration must be a whole number of minutes, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Duration must be a whole number of minutes, got {value!r}")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Duration must be a whole number of minutes, got {value!r}")


def attendee_set(value, field_name: str) -> FrozenSet[str]:
    """Decode a JSON list of attendee identifiers."""
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"'{field_name}' must be a list of attendees, got {value!r}")
    return frozenset(str(a) for a in value)


def meeting_request_from_dict(data: dict) -> MeetingRequest:
    """Create MeetingRequest from dictionary."""
    if not isinstance(data, dict):
        raise ValueError(f"Meeting request must be an object, got {data!r}")

    return MeetingRequest(
        attendees=attendee_set(data.get('attendees', []), 'attendees'),
        optional_attendees=attendee_set(data.get('optional_attendees', data.get('optional', [])), 'optional_attendees'),
        duration=parse_duration(data['duration']),
    )
