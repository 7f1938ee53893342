"""
Recipe Models

Contains the Recipe and RecipeIngredient models. A recipe carries a cached
nutrition snapshot that services.nutrition_cache rewrites whenever its
ingredient list or an ingredient's values change.
"""

from .base import db


class Recipe(db.Model):
    """Recipe with ordered ingredients and a denormalized nutrition snapshot."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)

    # Cached nutrition snapshot (rounded to one decimal)
    nutrition_calories = db.Column(db.Float, nullable=True)
    nutrition_protein = db.Column(db.Float, nullable=True)
    nutrition_carbs = db.Column(db.Float, nullable=True)
    nutrition_fat = db.Column(db.Float, nullable=True)
    nutrition_fiber = db.Column(db.Float, nullable=True)
    nutrition_sugar = db.Column(db.Float, nullable=True)
    nutrition_salt = db.Column(db.Float, nullable=True)
    nutrition_total_grams = db.Column(db.Float, nullable=True)
    nutrition_warning_count = db.Column(db.Integer, default=0, nullable=False)
    nutrition_has_estimated_conversions = db.Column(db.Boolean, default=False, nullable=False)
    nutrition_computed_at = db.Column(db.DateTime, nullable=True)

    ingredients = db.relationship(
        'RecipeIngredient',
        backref='recipe',
        lazy=True,
        cascade='all, delete-orphan',
        order_by='RecipeIngredient.position',
    )

    def nutrition_snapshot(self):
        """Return the cached snapshot, or None if it was never computed."""
        if self.nutrition_computed_at is None:
            return None
        return {
            'calories': self.nutrition_calories,
            'protein': self.nutrition_protein,
            'carbs': self.nutrition_carbs,
            'fat': self.nutrition_fat,
            'fiber': self.nutrition_fiber,
            'sugar': self.nutrition_sugar,
            'salt': self.nutrition_salt,
            'total_grams': self.nutrition_total_grams,
            'warning_count': self.nutrition_warning_count,
            'has_estimated_conversions': self.nutrition_has_estimated_conversions,
            'computed_at': self.nutrition_computed_at,
        }

    def __repr__(self):
        return f"<Recipe {self.name}>"


class RecipeIngredient(db.Model):
    """Join table linking recipes to ingredients with amount and unit."""
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True)
    ingredient_id = db.Column(db.Integer, db.ForeignKey('ingredient.id', ondelete='CASCADE'), nullable=False, index=True)
    amount = db.Column(db.Float, nullable=False)
    unit = db.Column(db.String(20), nullable=False)
    position = db.Column(db.Integer, default=0, nullable=False)
    ingredient = db.relationship(
        'Ingredient',
        backref=db.backref('recipe_links', cascade='all, delete-orphan'),
    )
