"""
Path Models

Contains the Path, VariantType, VariantOption and PathAssignment models.
A path is a multi-week program; assignments place training, nutrition or
info content into a week window, optionally gated by a variant option.
"""

from .base import db


class Path(db.Model):
    """Named program users enroll in."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), unique=True, nullable=False)
    description = db.Column(db.Text, nullable=True)
    assignments = db.relationship('PathAssignment', backref='path', lazy=True, cascade='all, delete-orphan')


class VariantType(db.Model):
    """Configuration axis a user picks one option for (e.g. 'Diet')."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)
    options = db.relationship('VariantOption', backref='variant_type', lazy=True, cascade='all, delete-orphan')


class VariantOption(db.Model):
    """One choice of a variant type (e.g. 'Vegetarian')."""
    id = db.Column(db.Integer, primary_key=True)
    variant_type_id = db.Column(db.Integer, db.ForeignKey('variant_type.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)


class PathAssignment(db.Model):
    """
    Content placed on a path for an inclusive week window.

    kind is one of TRAINING, NUTRITION or INFO and content_ref_id points at
    the referenced plan or block. A NULL variant_option_id applies to every
    user regardless of their variant choices.
    """
    __table_args__ = (
        db.CheckConstraint('week_start >= 1', name='week_start'),
        db.CheckConstraint('week_end >= week_start', name='week_window'),
    )

    id = db.Column(db.Integer, primary_key=True)
    path_id = db.Column(db.Integer, db.ForeignKey('path.id', ondelete='CASCADE'), nullable=False, index=True)
    kind = db.Column(db.String(20), nullable=False, index=True)
    content_ref_id = db.Column(db.Integer, nullable=False)
    week_start = db.Column(db.Integer, nullable=False)
    week_end = db.Column(db.Integer, nullable=False)
    variant_option_id = db.Column(db.Integer, db.ForeignKey('variant_option.id', ondelete='CASCADE'), nullable=True, index=True)
    variant_option = db.relationship('VariantOption')

    def __repr__(self):
        return f"<PathAssignment {self.kind}:{self.content_ref_id} weeks {self.week_start}-{self.week_end}>"
