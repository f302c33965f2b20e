# File: plan.py
#
# Run this file to find meeting times for a day.
# Usage: python plan.py config/sample_day.json [--json] [--limit N]

import sys

from meeting_scheduler.cli import main

if __name__ == "__main__":
    sys.exit(main())
