# File: meeting_scheduler/models/common.py

import re
from typing import Union

MINUTES_PER_DAY = 24 * 60

CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_clock_time(clock: str) -> int:
    """Parse an "HH:MM" string into minutes from midnight ("24:00" is end of day)."""
    match = CLOCK_PATTERN.match(clock.strip())
    if not match:
        raise ValueError(f"Invalid clock time '{clock}', expected HH:MM")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes >= 60 or hours > 24 or (hours == 24 and minutes != 0):
        raise ValueError(f"Clock time out of range: '{clock}'")
    return hours * 60 + minutes


def format_clock_time(minutes: int) -> str:
    """Render minutes from midnight as "HH:MM"."""
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def to_minutes(value: Union[int, str]) -> int:
    """Accept either integer minutes or an "HH:MM" string."""
    if isinstance(value, bool):
        raise ValueError(f"Not a time value: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if value.strip().lstrip('-').isdigit():
            return int(value)
        return parse_clock_time(value)
    raise ValueError(f"Not a time value: {value!r}")
