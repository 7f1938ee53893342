"""
Current Content Service

Answers "what does this user see this week": resolves the active
enrollment's program week and the assignments eligible for it.
"""

from sqlalchemy import func

from models import db, PathAssignment
from utils.clock import utcnow

from .enrollment import get_active_enrollment
from .errors import NotFoundError
from .variants import resolve_assignments
from .weeks import resolve_week


def get_path_max_week(path_id):
    """Last week any assignment of the path covers (1 for an empty path)."""
    max_week = db.session.query(func.max(PathAssignment.week_end)).filter(
        PathAssignment.path_id == path_id
    ).scalar()
    return max_week or 1


def resolve_current_content(user_id, reference_date=None, kind=None):
    """
    Resolve the active enrollment's content for the reference date.

    Returns (week, assignments). Week 0 means the program has not started
    and yields no assignments.

    Raises:
        NotFoundError: the user has no active enrollment
    """
    enrollment = get_active_enrollment(user_id)
    if enrollment is None:
        raise NotFoundError(f"No active enrollment for user {user_id}")

    week = resolve_week(
        enrollment.start_date,
        reference_date if reference_date is not None else utcnow(),
        get_path_max_week(enrollment.path_id),
    )
    if week == 0:
        return week, []

    assignments = resolve_assignments(
        enrollment.path_id,
        week,
        enrollment.selected_option_ids(),
        kind,
    )
    return week, assignments
