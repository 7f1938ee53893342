"""
Recipe Nutrition Cache Service

Keeps the nutrition snapshot stored on each Recipe in sync with its
ingredient list and the ingredients' current values. Every edit that can
change a recipe's nutrition must end in a recompute here; a stale snapshot
is a bug.
"""

import logging

from sqlalchemy import update
from sqlalchemy.orm import joinedload

from models import db, Recipe, RecipeIngredient
from utils.clock import utcnow

from .computation import compute_nutrition_totals, round_totals, entry_from_ingredient
from .errors import NotFoundError

logger = logging.getLogger(__name__)


def compute_recipe_nutrition(recipe_id, computed_at=None):
    """
    Compute the cache column values for a recipe without writing them.

    Returns a dict keyed by Recipe column name.
    """
    links = (
        RecipeIngredient.query
        .options(joinedload(RecipeIngredient.ingredient))
        .filter_by(recipe_id=recipe_id)
        .order_by(RecipeIngredient.position, RecipeIngredient.id)
        .all()
    )

    computed = compute_nutrition_totals([
        entry_from_ingredient(link.amount, link.unit, link.ingredient)
        for link in links
    ])
    rounded = round_totals(computed['totals'])

    return {
        'nutrition_calories': rounded['calories'],
        'nutrition_protein': rounded['protein'],
        'nutrition_carbs': rounded['carbs'],
        'nutrition_fat': rounded['fat'],
        'nutrition_fiber': rounded['fiber'],
        'nutrition_sugar': rounded['sugar'],
        'nutrition_salt': rounded['salt'],
        'nutrition_total_grams': rounded['grams'],
        'nutrition_warning_count': computed['warning_count'],
        'nutrition_has_estimated_conversions': computed['has_estimated_conversions'],
        'nutrition_computed_at': computed_at or utcnow(),
    }


def write_recipe_cache(recipe_id, computed_at=None):
    """
    Recompute and stage the snapshot in the current session (no commit).

    The whole snapshot is replaced with a single UPDATE statement. Used by
    edit operations that commit the edit and the recompute together.
    """
    if db.session.get(Recipe, recipe_id) is None:
        raise NotFoundError(f"Recipe {recipe_id} not found")

    values = compute_recipe_nutrition(recipe_id, computed_at)
    db.session.execute(
        update(Recipe)
        .where(Recipe.id == recipe_id)
        .values(**values)
        .execution_options(synchronize_session='fetch')
    )
    logger.debug(
        "Recipe %s nutrition cache: %s kcal, %s warnings",
        recipe_id, values['nutrition_calories'], values['nutrition_warning_count'],
    )
    return values


def recompute_recipe_cache(recipe_id, computed_at=None):
    """Recompute one recipe's snapshot and commit it atomically."""
    try:
        values = write_recipe_cache(recipe_id, computed_at)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    logger.info("Recomputed nutrition cache for recipe %s", recipe_id)
    return values


def recipe_ids_for_ingredient(ingredient_id):
    """Distinct ids of recipes that use the ingredient."""
    rows = (
        db.session.query(RecipeIngredient.recipe_id)
        .filter(RecipeIngredient.ingredient_id == ingredient_id)
        .distinct()
        .order_by(RecipeIngredient.recipe_id)
        .all()
    )
    return [row[0] for row in rows]


def recompute_caches_by_ingredient(ingredient_id, computed_at=None):
    """
    Recompute every recipe that uses the ingredient, one commit per recipe.

    Returns the list of recomputed recipe ids.
    """
    recipe_ids = recipe_ids_for_ingredient(ingredient_id)
    for recipe_id in recipe_ids:
        recompute_recipe_cache(recipe_id, computed_at)
    if recipe_ids:
        logger.info("Ingredient %s changed: recomputed %d recipe caches", ingredient_id, len(recipe_ids))
    return recipe_ids


def recompute_all_caches(computed_at=None):
    """Rebuild the snapshot of every recipe. Returns the number rebuilt."""
    recipe_ids = [row[0] for row in db.session.query(Recipe.id).order_by(Recipe.id).all()]
    for recipe_id in recipe_ids:
        recompute_recipe_cache(recipe_id, computed_at)
    return len(recipe_ids)
