# File: meeting_scheduler/core/config_manager.py
"""
Centralized configuration management for Meeting Scheduler.
Loads settings from environment variables (and a .env file if present).
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from meeting_scheduler.models.time_range import TimeRange, START_OF_DAY, END_OF_DAY

# Load environment variables
load_dotenv()

# Problems found while reading the environment, reported by Config.errors()
ENV_ERRORS: List[str] = []


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ['yes', 'true', '1', 'on']


def _env_int(name: str, default: int) -> int:
    """Read an integer setting, keeping the default when the value is not a number."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        ENV_ERRORS.append(f"{name} must be a whole number, got '{raw}'")
        return default


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from meeting_scheduler/core/
    LOGS_DIR = Path(os.getenv("LOGS_DIR", str(BASE_DIR / "logs")))
    ENV_FILE = BASE_DIR / ".env"

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_TO_FILE = _env_bool("LOG_TO_FILE")

    # Day bounds in minutes from midnight, half-open
    DAY_START_MINUTES = _env_int("DAY_START_MINUTES", START_OF_DAY)
    DAY_END_MINUTES = _env_int("DAY_END_MINUTES", END_OF_DAY)

    # Output settings (0 = print every range)
    MAX_OUTPUT_RANGES = _env_int("MAX_OUTPUT_RANGES", 0)

    @classmethod
    def day_range(cls) -> TimeRange:
        """
        The span of the day meetings may be booked in.

        Falls back to the whole day when the configured bounds are unusable.
        """
        if cls.bound_errors():
            # Imported here: the logger itself reads Config
            from meeting_scheduler.utils.logger import setup_logger
            setup_logger(__name__).warning(
                f"Invalid day bounds [{cls.DAY_START_MINUTES}, {cls.DAY_END_MINUTES}), using the whole day"
            )
            return TimeRange.WHOLE_DAY
        return TimeRange(cls.DAY_START_MINUTES, cls.DAY_END_MINUTES)

    @classmethod
    def bound_errors(cls) -> List[str]:
        """Collect problems with the day bounds."""
        errors = []

        if not START_OF_DAY <= cls.DAY_START_MINUTES <= END_OF_DAY:
            errors.append(f"DAY_START_MINUTES must be within 0-{END_OF_DAY}, got {cls.DAY_START_MINUTES}")
        if not START_OF_DAY <= cls.DAY_END_MINUTES <= END_OF_DAY:
            errors.append(f"DAY_END_MINUTES must be within 0-{END_OF_DAY}, got {cls.DAY_END_MINUTES}")
        if cls.DAY_END_MINUTES < cls.DAY_START_MINUTES:
            errors.append("DAY_END_MINUTES must not be before DAY_START_MINUTES")

        return errors

    @classmethod
    def errors(cls) -> List[str]:
        """Collect configuration problems."""
        errors = list(ENV_ERRORS) + cls.bound_errors()

        if cls.MAX_OUTPUT_RANGES < 0:
            errors.append("MAX_OUTPUT_RANGES cannot be negative")

        return errors

    @classmethod
    def validate(cls) -> bool:
        """Validate that the configuration is usable."""
        # Imported here: the logger itself reads Config
        from meeting_scheduler.utils.logger import setup_logger
        logger = setup_logger(__name__)

        errors = cls.errors()
        for error in errors:
            logger.error(f"Configuration Error: {error}")
        return not errors
