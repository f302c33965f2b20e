# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable calendars and meeting requests for all tests.
"""

import pytest
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from meeting_scheduler.models import TimeRange, Event, MeetingRequest


# ==================== Attendees ====================

PERSON_A = "Person A"
PERSON_B = "Person B"
PERSON_C = "Person C"

# ==================== Times (minutes from midnight) ====================

TIME_0800AM = 8 * 60
TIME_0830AM = 8 * 60 + 30
TIME_0845AM = 8 * 60 + 45
TIME_0900AM = 9 * 60
TIME_0930AM = 9 * 60 + 30
TIME_1000AM = 10 * 60
TIME_1100AM = 11 * 60

DURATION_15_MINUTES = 15
DURATION_30_MINUTES = 30
DURATION_60_MINUTES = 60


def make_event(title, start, end, *attendees):
    """Shorthand for an Event spanning [start, end)."""
    return Event(title, TimeRange(start, end), frozenset(attendees))


# ==================== Calendar Fixtures ====================

@pytest.fixture
def split_day_events():
    """Person A is busy 08:00-08:30, Person B 09:00-10:00."""
    return [
        make_event("Event 1", TIME_0800AM, TIME_0830AM, PERSON_A),
        make_event("Event 2", TIME_0900AM, TIME_1000AM, PERSON_B),
    ]


@pytest.fixture
def split_day_free_ranges():
    """What Person A and Person B have left around split_day_events."""
    return [
        TimeRange(TimeRange.WHOLE_DAY.start, TIME_0800AM),
        TimeRange(TIME_0830AM, TIME_0900AM),
        TimeRange(TIME_1000AM, TimeRange.WHOLE_DAY.end),
    ]


@pytest.fixture
def tight_day_events():
    """Person A only has 08:30-09:00 free."""
    return [
        make_event("Event 1", TimeRange.WHOLE_DAY.start, TIME_0830AM, PERSON_A),
        make_event("Event 2", TIME_0900AM, TimeRange.WHOLE_DAY.end, PERSON_A),
    ]


@pytest.fixture
def pair_request():
    """Half-hour meeting for Person A and Person B."""
    return MeetingRequest(frozenset([PERSON_A, PERSON_B]), frozenset(), DURATION_30_MINUTES)
