"""
Meal Slot Matching Service

Builds a nutrition target from the base ingredients of a meal slot and
ranks recipes against it using their cached nutrition snapshots.
"""

import logging

from flask import current_app
from sqlalchemy.orm import joinedload

from constants import DEFAULT_SLOT_MATCH_LIMIT
from models import db, NutritionPlan, NutritionPlanMealEntry, Recipe

from .computation import compute_nutrition_totals, round_totals, entry_from_ingredient
from .errors import NotFoundError
from .matching import get_nutrition_match_result

logger = logging.getLogger(__name__)


def build_slot_target(entries):
    """
    Build a slot target from aggregation entries (see compute_nutrition_totals).

    Returns dict with rounded calories, protein, carbs, fat plus
    warning_count and has_estimated_conversions.
    """
    computed = compute_nutrition_totals(entries)
    rounded = round_totals(computed['totals'])
    return {
        'calories': rounded['calories'],
        'protein': rounded['protein'],
        'carbs': rounded['carbs'],
        'fat': rounded['fat'],
        'warning_count': computed['warning_count'],
        'has_estimated_conversions': computed['has_estimated_conversions'],
    }


def rank_candidates(target, candidates, limit=DEFAULT_SLOT_MATCH_LIMIT, tolerance=None):
    """
    Rank candidate recipes against a slot target.

    Candidates are dicts with id, name, calories, protein, carbs and fat.
    Non-matching candidates are dropped; matches are sorted by score
    (best first, ties keep input order) and truncated to limit.
    """
    matches = []
    for candidate in candidates:
        result = get_nutrition_match_result(target, candidate, tolerance)
        if not result['is_match']:
            continue
        matches.append({
            'id': candidate['id'],
            'name': candidate['name'],
            'score': result['score'],
            'calories_diff_percent': result['diffs']['calories']['percent'],
            'protein_diff_percent': result['diffs']['protein']['percent'],
            'carbs_diff_percent': result['diffs']['carbs']['percent'],
            'fat_diff_percent': result['diffs']['fat']['percent'],
        })

    # list.sort is stable
    matches.sort(key=lambda m: m['score'])
    return matches[:limit]


def build_slot_target_for_plan(plan_id, meal_slot):
    """Slot target for one meal slot of a stored nutrition plan."""
    if db.session.get(NutritionPlan, plan_id) is None:
        raise NotFoundError(f"Nutrition plan {plan_id} not found")

    entries = (
        NutritionPlanMealEntry.query
        .options(joinedload(NutritionPlanMealEntry.ingredient))
        .filter_by(plan_id=plan_id, meal_slot=meal_slot)
        .order_by(NutritionPlanMealEntry.id)
        .all()
    )
    return build_slot_target([
        entry_from_ingredient(entry.amount, entry.unit, entry.ingredient)
        for entry in entries
    ])


def recipe_candidates():
    """Candidates from every recipe with a computed nutrition snapshot."""
    recipes = (
        Recipe.query
        .filter(Recipe.nutrition_computed_at.isnot(None))
        .order_by(Recipe.id)
        .all()
    )
    return [
        {
            'id': recipe.id,
            'name': recipe.name,
            'calories': recipe.nutrition_calories or 0,
            'protein': recipe.nutrition_protein or 0,
            'carbs': recipe.nutrition_carbs or 0,
            'fat': recipe.nutrition_fat or 0,
        }
        for recipe in recipes
    ]


def suggest_recipes_for_slot(plan_id, meal_slot, limit=None, tolerance=None):
    """
    Recipes whose cached nutrition matches a plan's meal slot.

    limit and tolerance default to the SLOT_MATCH_LIMIT and
    NUTRITION_MATCH_TOLERANCE app settings.

    Returns (target, matches).
    """
    if limit is None:
        limit = current_app.config.get('SLOT_MATCH_LIMIT', DEFAULT_SLOT_MATCH_LIMIT)
    if tolerance is None:
        tolerance = current_app.config.get('NUTRITION_MATCH_TOLERANCE')
    target = build_slot_target_for_plan(plan_id, meal_slot)
    matches = rank_candidates(target, recipe_candidates(), limit, tolerance)
    logger.debug("Slot %s of plan %s: %d matching recipes", meal_slot, plan_id, len(matches))
    return target, matches
