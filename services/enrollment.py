"""
Enrollment Service

Lifecycle of a user's path enrollment. Creating an enrollment supersedes
any active one; variant choices can change only before the start date.
Both operations commit in a single transaction or not at all.
"""

import logging

from sqlalchemy import update

from models import db, Path, UserPathEnrollment, UserEnrollmentVariant
from utils.clock import utcnow, as_datetime

from .errors import NotFoundError, VariantsLockedError

logger = logging.getLogger(__name__)


def can_update_variants(start_date, reference_date=None):
    """True while the reference time is strictly before the start date."""
    reference = as_datetime(reference_date) if reference_date is not None else utcnow()
    return reference < as_datetime(start_date)


def create_enrollment(user_id, path_id, start_date, selected_variants):
    """
    Enroll a user in a path.

    Deactivates every active enrollment of the user and creates the new
    active one with its variant selections, in one transaction.

    Args:
        user_id: External user id
        path_id: Path to enroll in
        start_date: Date or datetime the program starts
        selected_variants: List of dicts with variant_type_id and variant_option_id

    Returns:
        The created UserPathEnrollment
    """
    if db.session.get(Path, path_id) is None:
        raise NotFoundError(f"Path {path_id} not found")

    try:
        db.session.execute(
            update(UserPathEnrollment)
            .where(UserPathEnrollment.user_id == user_id, UserPathEnrollment.is_active.is_(True))
            .values(is_active=False)
            .execution_options(synchronize_session='fetch')
        )

        enrollment = UserPathEnrollment(
            user_id=user_id,
            path_id=path_id,
            start_date=as_datetime(start_date),
            is_active=True,
        )
        for selection in selected_variants:
            enrollment.selected_variants.append(UserEnrollmentVariant(
                variant_type_id=selection['variant_type_id'],
                variant_option_id=selection['variant_option_id'],
            ))
        db.session.add(enrollment)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info("User %s enrolled in path %s (enrollment %s)", user_id, path_id, enrollment.id)
    return enrollment


def update_enrollment_variants(enrollment_id, updates, reference_date=None):
    """
    Change variant choices of an enrollment that has not started yet.

    Each update is a dict with variant_type_id and variant_option_id and is
    upserted on (enrollment, variant type).

    Raises:
        NotFoundError: enrollment does not exist
        VariantsLockedError: the enrollment has already started
    """
    enrollment = db.session.get(UserPathEnrollment, enrollment_id)
    if enrollment is None:
        raise NotFoundError(f"Enrollment {enrollment_id} not found")

    if not can_update_variants(enrollment.start_date, reference_date):
        logger.warning("Rejected variant change for started enrollment %s", enrollment_id)
        raise VariantsLockedError("Variants cannot be changed after the start date.")

    try:
        for change in updates:
            existing = UserEnrollmentVariant.query.filter_by(
                enrollment_id=enrollment_id,
                variant_type_id=change['variant_type_id'],
            ).first()
            if existing:
                existing.variant_option_id = change['variant_option_id']
            else:
                enrollment.selected_variants.append(UserEnrollmentVariant(
                    variant_type_id=change['variant_type_id'],
                    variant_option_id=change['variant_option_id'],
                ))
            db.session.flush()
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    return enrollment


def get_active_enrollment(user_id):
    return UserPathEnrollment.query.filter_by(user_id=user_id, is_active=True).first()
