# File: meeting_scheduler/models/time_range.py

from dataclasses import dataclass
from typing import Union

from .common import MINUTES_PER_DAY, format_clock_time

START_OF_DAY = 0
END_OF_DAY = MINUTES_PER_DAY  # exclusive


@dataclass(frozen=True, order=True)
class TimeRange:
    """
    Half-open span of minutes within a day: [start, end).

    Ordering compares start first and end second, so ranges sharing a start
    sort shortest first.
    """
    start: int
    end: int

    def __post_init__(self):
        """Reject ranges that cannot exist."""
        if self.start < START_OF_DAY:
            raise ValueError(f"Range cannot start before midnight: {self.start}")
        if self.end < self.start:
            raise ValueError(f"Range end must not precede start: [{self.start}, {self.end})")

    @classmethod
    def from_start_end(cls, start: int, end: int, inclusive: bool = False) -> 'TimeRange':
        """Build a range from its bounds; inclusive makes `end` part of the range."""
        return cls(start, end + 1 if inclusive else end)

    @classmethod
    def from_start_duration(cls, start: int, duration: int) -> 'TimeRange':
        """Build a range of `duration` minutes beginning at `start`."""
        return cls(start, start + duration)

    @property
    def duration(self) -> int:
        return self.end - self.start

    def overlaps(self, other: 'TimeRange') -> bool:
        """True when the two ranges share more than zero minutes."""
        return self.start < other.end and other.start < self.end

    def touches(self, other: 'TimeRange') -> bool:
        """True when one range ends exactly where the other begins."""
        return self.end == other.start or other.end == self.start

    def contains(self, other: Union['TimeRange', int]) -> bool:
        """Check whether a range, or a single minute, lies inside this range."""
        if isinstance(other, TimeRange):
            return self.start <= other.start and other.end <= self.end
        return self.start <= other < self.end

    def to_dict(self) -> dict:
        return {
            'start': self.start,
            'end': self.end,
            'duration': self.duration,
        }

    def __str__(self) -> str:
        return f"Range: [{format_clock_time(self.start)}, {format_clock_time(self.end)})"


TimeRange.WHOLE_DAY = TimeRange(START_OF_DAY, END_OF_DAY)
