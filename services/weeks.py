"""
Week Resolver

Maps an enrollment start date to the user's current program week.
Week 0 means the program has not started yet.
"""

import math

from utils.clock import utcnow, as_datetime

SECONDS_PER_DAY = 24 * 60 * 60


def resolve_week(start_date, reference_date=None, max_weeks=None):
    """
    Program week for reference_date (defaults to now).

    Returns 0 before the start date, 1 on the start date and during the
    first seven days, then one more per full week. With max_weeks the
    result holds at the final week instead of running past it.
    """
    start = as_datetime(start_date)
    reference = as_datetime(reference_date) if reference_date is not None else utcnow()

    elapsed = (reference - start).total_seconds()
    if elapsed < 0:
        return 0

    days = math.floor(elapsed / SECONDS_PER_DAY)
    week = days // 7 + 1

    if max_weeks and week > max_weeks:
        return max_weeks
    return week
