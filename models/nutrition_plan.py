"""
Nutrition Plan Models

Contains the NutritionPlan and NutritionPlanMealEntry models. Meal entries
describe the base composition of each meal slot; recipes are matched
against the nutrition those entries add up to.
"""

from .base import db


class NutritionPlan(db.Model):
    """Named nutrition plan grouping meal slot entries."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    entries = db.relationship(
        'NutritionPlanMealEntry',
        backref='plan',
        lazy=True,
        cascade='all, delete-orphan',
        order_by='NutritionPlanMealEntry.id',
    )


class NutritionPlanMealEntry(db.Model):
    """One base ingredient of a meal slot (e.g. 80 g oats for Breakfast)."""
    id = db.Column(db.Integer, primary_key=True)
    plan_id = db.Column(db.Integer, db.ForeignKey('nutrition_plan.id', ondelete='CASCADE'), nullable=False, index=True)
    meal_slot = db.Column(db.String(50), nullable=False, index=True)
    ingredient_id = db.Column(db.Integer, db.ForeignKey('ingredient.id', ondelete='CASCADE'), nullable=False, index=True)
    amount = db.Column(db.Float, nullable=False)
    unit = db.Column(db.String(20), nullable=False)
    ingredient = db.relationship(
        'Ingredient',
        backref=db.backref('meal_entries', cascade='all, delete-orphan'),
    )
