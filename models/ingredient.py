"""
Ingredient Model

Contains the Ingredient model: catalog entry with nutrition values per
100 g and optional per-unit conversion overrides.
"""

from constants import NUTRITION_FIELDS, OVERRIDE_KEYS
from .base import db


class Ingredient(db.Model):
    """
    Catalog ingredient.

    Nutrition columns hold values per 100 g and may be NULL when unknown
    (treated as 0 during aggregation).

    Conversion override columns describe how heavy one unit of this
    ingredient is. A NULL override means the system default is used and
    the conversion is flagged as estimated:
    - ml_density_g_per_ml: grams per milliliter for volume units
    - grams_per_*: grams for one piece, hand, teaspoon, tablespoon,
      pinch, cup, slice, bunch or can
    """
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)

    # Nutrition per 100 g
    calories = db.Column(db.Float, nullable=True)
    protein = db.Column(db.Float, nullable=True)
    carbs = db.Column(db.Float, nullable=True)
    fat = db.Column(db.Float, nullable=True)
    fiber = db.Column(db.Float, nullable=True)
    sugar = db.Column(db.Float, nullable=True)
    salt = db.Column(db.Float, nullable=True)

    # Conversion overrides
    ml_density_g_per_ml = db.Column(db.Float, nullable=True)
    grams_per_piece = db.Column(db.Float, nullable=True)
    grams_per_hand = db.Column(db.Float, nullable=True)
    grams_per_teaspoon = db.Column(db.Float, nullable=True)
    grams_per_tablespoon = db.Column(db.Float, nullable=True)
    grams_per_pinch = db.Column(db.Float, nullable=True)
    grams_per_cup = db.Column(db.Float, nullable=True)
    grams_per_slice = db.Column(db.Float, nullable=True)
    grams_per_bunch = db.Column(db.Float, nullable=True)
    grams_per_can = db.Column(db.Float, nullable=True)

    def nutrition_per_100g(self):
        return {field: getattr(self, field) for field in NUTRITION_FIELDS}

    def conversion_overrides(self):
        return {key: getattr(self, key) for key in OVERRIDE_KEYS}

    def __repr__(self):
        return f"<Ingredient {self.name}>"
