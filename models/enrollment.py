"""
Enrollment Models

Contains the UserPathEnrollment and UserEnrollmentVariant models.
Users live in the external auth system and are referenced by id only.
"""

from utils.clock import utcnow

from .base import db


class UserPathEnrollment(db.Model):
    """A user's enrollment in a path. At most one per user is active."""
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, nullable=False, index=True)
    path_id = db.Column(db.Integer, db.ForeignKey('path.id', ondelete='CASCADE'), nullable=False, index=True)
    start_date = db.Column(db.DateTime, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    path = db.relationship('Path')
    selected_variants = db.relationship(
        'UserEnrollmentVariant',
        backref='enrollment',
        lazy=True,
        cascade='all, delete-orphan',
    )

    def selected_option_ids(self):
        return [variant.variant_option_id for variant in self.selected_variants]


class UserEnrollmentVariant(db.Model):
    """The option a user chose for one variant type of an enrollment."""
    __table_args__ = (
        db.UniqueConstraint('enrollment_id', 'variant_type_id', name='uq_enrollment_variant_type'),
    )

    id = db.Column(db.Integer, primary_key=True)
    enrollment_id = db.Column(db.Integer, db.ForeignKey('user_path_enrollment.id', ondelete='CASCADE'), nullable=False, index=True)
    variant_type_id = db.Column(db.Integer, db.ForeignKey('variant_type.id', ondelete='CASCADE'), nullable=False)
    variant_option_id = db.Column(db.Integer, db.ForeignKey('variant_option.id', ondelete='CASCADE'), nullable=False)
