"""
Catalog Editing Service

Ingredient and recipe edits. Every edit that can change a recipe's
nutrition recomputes the affected recipe caches in the same transaction
as the edit itself, so no committed state ever carries a stale snapshot.
"""

import logging
import math

from sqlalchemy import func

from constants import NUTRITION_FIELDS, OVERRIDE_KEYS, MAX_LENGTHS
from models import db, Ingredient, Recipe, RecipeIngredient

from .errors import NotFoundError, ValidationError
from .nutrition_cache import write_recipe_cache, recipe_ids_for_ingredient

logger = logging.getLogger(__name__)

INGREDIENT_TEXT_FIELDS = ('name', 'description')
INGREDIENT_FIELDS = INGREDIENT_TEXT_FIELDS + NUTRITION_FIELDS + OVERRIDE_KEYS


def _validate_ingredient_values(values):
    unknown = set(values) - set(INGREDIENT_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown ingredient fields: {', '.join(sorted(unknown))}")

    if 'name' in values:
        name = (values['name'] or '').strip()
        if not name:
            raise ValidationError("Ingredient name is required.")
        if len(name) > MAX_LENGTHS['ingredient_name']:
            raise ValidationError("Ingredient name is too long.")
        values['name'] = name

    for field in NUTRITION_FIELDS:
        value = values.get(field)
        if value is not None and (not math.isfinite(value) or value < 0):
            raise ValidationError(f"{field} must be a finite, non-negative number.")

    for key in OVERRIDE_KEYS:
        value = values.get(key)
        if value is not None and (not math.isfinite(value) or value <= 0):
            raise ValidationError(f"{key} must be a finite, positive number.")

    return values


def _validate_amount_and_unit(amount, unit):
    if amount is None or not math.isfinite(amount) or amount <= 0:
        raise ValidationError("Amount must be positive.")
    unit = (unit or '').strip()
    if not unit or len(unit) > MAX_LENGTHS['unit']:
        raise ValidationError("Unit is required.")
    return unit


def _commit_with_recompute(recipe_ids):
    """Recompute the given recipe caches and commit together with pending edits."""
    try:
        for recipe_id in recipe_ids:
            write_recipe_cache(recipe_id)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


def _get_or_404(model, object_id):
    instance = db.session.get(model, object_id)
    if instance is None:
        raise NotFoundError(f"{model.__name__} {object_id} not found")
    return instance


def create_ingredient(**values):
    values = _validate_ingredient_values(values)
    if 'name' not in values:
        raise ValidationError("Ingredient name is required.")

    existing = Ingredient.query.filter(func.lower(Ingredient.name) == values['name'].lower()).first()
    if existing:
        raise ValidationError(f"Ingredient '{values['name']}' already exists.")

    ingredient = Ingredient(**values)
    db.session.add(ingredient)
    db.session.commit()
    return ingredient


def update_ingredient(ingredient_id, **values):
    """
    Update ingredient fields and recompute every recipe that uses it.

    Returns the list of recomputed recipe ids.
    """
    ingredient = _get_or_404(Ingredient, ingredient_id)
    values = _validate_ingredient_values(values)

    for field, value in values.items():
        setattr(ingredient, field, value)

    recipe_ids = recipe_ids_for_ingredient(ingredient_id)
    _commit_with_recompute(recipe_ids)
    logger.info("Updated ingredient %s, recomputed %d recipes", ingredient_id, len(recipe_ids))
    return recipe_ids


def delete_ingredient(ingredient_id):
    """
    Delete an ingredient and its recipe links, then recompute the recipes
    that used it. Returns the list of recomputed recipe ids.
    """
    ingredient = _get_or_404(Ingredient, ingredient_id)
    recipe_ids = recipe_ids_for_ingredient(ingredient_id)

    db.session.delete(ingredient)
    db.session.flush()

    _commit_with_recompute(recipe_ids)
    logger.info("Deleted ingredient %s, recomputed %d recipes", ingredient_id, len(recipe_ids))
    return recipe_ids


def create_recipe(name, description=None, ingredients=None):
    """
    Create a recipe with its ingredient list and an initial snapshot.

    ingredients is a list of dicts with ingredient_id, amount and unit.
    """
    name = (name or '').strip()
    if not name or len(name) > MAX_LENGTHS['recipe_name']:
        raise ValidationError("Recipe name is required.")

    recipe = Recipe(name=name, description=description)
    for position, item in enumerate(ingredients or []):
        ingredient = _get_or_404(Ingredient, item['ingredient_id'])
        recipe.ingredients.append(RecipeIngredient(
            ingredient=ingredient,
            amount=item['amount'],
            unit=_validate_amount_and_unit(item['amount'], item['unit']),
            position=position,
        ))

    db.session.add(recipe)
    db.session.flush()
    _commit_with_recompute([recipe.id])
    return recipe


def add_recipe_ingredient(recipe_id, ingredient_id, amount, unit):
    recipe = _get_or_404(Recipe, recipe_id)
    ingredient = _get_or_404(Ingredient, ingredient_id)
    unit = _validate_amount_and_unit(amount, unit)

    link = RecipeIngredient(
        ingredient=ingredient,
        amount=amount,
        unit=unit,
        position=len(recipe.ingredients),
    )
    recipe.ingredients.append(link)
    db.session.flush()
    _commit_with_recompute([recipe.id])
    return link


def update_recipe_ingredient(link_id, amount=None, unit=None):
    link = _get_or_404(RecipeIngredient, link_id)
    new_amount = link.amount if amount is None else amount
    new_unit = link.unit if unit is None else unit
    link.unit = _validate_amount_and_unit(new_amount, new_unit)
    link.amount = new_amount

    _commit_with_recompute([link.recipe_id])
    return link


def remove_recipe_ingredient(link_id):
    link = _get_or_404(RecipeIngredient, link_id)
    recipe_id = link.recipe_id
    db.session.delete(link)
    db.session.flush()
    _commit_with_recompute([recipe_id])
    return recipe_id
