"""
Shopping Models

Contains the UserShoppingList and UserShoppingListItem models for the
weekly shopping list of an enrollment.
"""

from .base import db


class UserShoppingList(db.Model):
    """Shopping list for one enrollment week."""
    __table_args__ = (
        db.UniqueConstraint('enrollment_id', 'week', name='uq_shopping_list_enrollment_week'),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, nullable=False, index=True)
    enrollment_id = db.Column(db.Integer, db.ForeignKey('user_path_enrollment.id', ondelete='CASCADE'), nullable=False)
    week = db.Column(db.Integer, nullable=False)
    items = db.relationship(
        'UserShoppingListItem',
        backref='shopping_list',
        lazy=True,
        cascade='all, delete-orphan',
        order_by='UserShoppingListItem.id',
    )


class UserShoppingListItem(db.Model):
    """
    Shopping list line item.

    Items imported from recipes carry a dedupe key of the form
    'ingredient:<id>:<unit>' so repeated imports add to the same line.
    Manual items get a unique 'manual:<uuid>' key.
    """
    __table_args__ = (
        db.UniqueConstraint('shopping_list_id', 'dedupe_key', name='uq_shopping_item_dedupe_key'),
    )

    id = db.Column(db.Integer, primary_key=True)
    shopping_list_id = db.Column(db.Integer, db.ForeignKey('user_shopping_list.id', ondelete='CASCADE'), nullable=False, index=True)
    dedupe_key = db.Column(db.String(200), nullable=False)
    label = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(50), default='other')
    amount = db.Column(db.Float, nullable=True)
    unit = db.Column(db.String(20), nullable=True)
    is_checked = db.Column(db.Boolean, default=False, nullable=False)
    # FK to Ingredient for recipe imports (NULL for manually-added items)
    ingredient_id = db.Column(db.Integer, db.ForeignKey('ingredient.id', ondelete='SET NULL'), nullable=True, index=True)
    source_recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='SET NULL'), nullable=True)
    created_by_user_id = db.Column(db.Integer, nullable=True)
    ingredient = db.relationship('Ingredient')
