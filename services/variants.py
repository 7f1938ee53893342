"""
Content/Variant Resolution Service

Decides which path assignments apply to a user in a given week: the
assignment's inclusive week window must contain the week and its variant
gate must be empty or one of the user's selected options.
"""

from sqlalchemy import case, or_

from constants import CONTENT_KINDS, VALID_CONTENT_KINDS
from models import PathAssignment

from .errors import ValidationError

# Kinds sort in their declared order, not alphabetically
KIND_ORDER = case(
    {kind: position for position, kind in enumerate(CONTENT_KINDS)},
    value=PathAssignment.kind,
)


def resolve_assignments(path_id, week, selected_variant_option_ids, kind=None):
    """
    Return the assignments of a path eligible for the week.

    Args:
        path_id: Path to resolve
        week: Program week (1-based)
        selected_variant_option_ids: Variant option ids chosen by the user
        kind: Optional TRAINING, NUTRITION or INFO filter

    Returns:
        List of PathAssignment ordered by kind (TRAINING, NUTRITION, INFO)
        then week_start ascending
    """
    if kind is not None and kind not in VALID_CONTENT_KINDS:
        raise ValidationError(f"Unknown content kind: {kind}")

    query = PathAssignment.query.filter(
        PathAssignment.path_id == path_id,
        PathAssignment.week_start <= week,
        PathAssignment.week_end >= week,
        or_(
            PathAssignment.variant_option_id.is_(None),
            PathAssignment.variant_option_id.in_(list(selected_variant_option_ids or [])),
        ),
    )
    if kind is not None:
        query = query.filter(PathAssignment.kind == kind)

    return query.order_by(KIND_ORDER, PathAssignment.week_start, PathAssignment.id).all()


def group_by_kind(assignments):
    """Group resolved assignments into {kind: [assignment, ...]} in kind order."""
    grouped = {kind: [] for kind in CONTENT_KINDS}
    for assignment in assignments:
        grouped[assignment.kind].append(assignment)
    return grouped
