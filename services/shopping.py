"""
Shopping List Service

Functions for building and maintaining the weekly shopping list of an
enrollment. Recipe and meal slot ingredients are consolidated per
ingredient and unit, so importing the same recipe twice in a week adds to
the existing line instead of creating a duplicate.
"""

import logging
import math
import uuid

from constants import CATEGORY_KEYWORDS, DEFAULT_CATEGORY, MAX_LENGTHS
from models import (
    db, NutritionPlanMealEntry, RecipeIngredient, Recipe,
    UserPathEnrollment, UserShoppingList, UserShoppingListItem,
)
from utils.text import normalize_label, normalize_unit

from .content import get_path_max_week
from .errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def resolve_shopping_category(label):
    """Store section for a label, by keyword ('other' if nothing matches)."""
    normalized = normalize_label(label)
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in normalized for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


def ingredient_dedupe_key(ingredient_id, unit):
    return f"ingredient:{ingredient_id}:{normalize_unit(unit)}"


def _get_enrollment_for_week(enrollment_id, week):
    enrollment = db.session.get(UserPathEnrollment, enrollment_id)
    if enrollment is None:
        raise NotFoundError(f"Enrollment {enrollment_id} not found")
    if week < 1:
        raise ValidationError("Week must be at least 1.")
    if week > get_path_max_week(enrollment.path_id):
        raise ValidationError(f"Week {week} is outside the path.")
    return enrollment


def get_or_create_shopping_list(enrollment, week):
    """Shopping list of an enrollment week, created on first use (not committed)."""
    shopping_list = UserShoppingList.query.filter_by(enrollment_id=enrollment.id, week=week).first()
    if shopping_list is None:
        shopping_list = UserShoppingList(user_id=enrollment.user_id, enrollment_id=enrollment.id, week=week)
        db.session.add(shopping_list)
        db.session.flush()
    return shopping_list


def _upsert_ingredient_lines(shopping_list, lines, user_id=None, source_recipe_id=None):
    """
    Add (ingredient, amount, unit) lines to the list, summing amounts per
    dedupe key. Caller commits.
    """
    existing = {item.dedupe_key: item for item in shopping_list.items}

    for ingredient, amount, unit in lines:
        key = ingredient_dedupe_key(ingredient.id, unit)
        item = existing.get(key)
        if item:
            item.amount = (item.amount or 0) + amount
            item.label = ingredient.name
            item.category = resolve_shopping_category(ingredient.name)
            continue

        item = UserShoppingListItem(
            dedupe_key=key,
            label=ingredient.name,
            category=resolve_shopping_category(ingredient.name),
            amount=amount,
            unit=unit,
            ingredient=ingredient,
            source_recipe_id=source_recipe_id,
            created_by_user_id=user_id,
        )
        shopping_list.items.append(item)
        existing[key] = item


def add_recipe_to_shopping_list(enrollment_id, week, recipe_id, user_id=None):
    """
    Add a recipe's ingredients to the enrollment's list for the week.

    Returns the UserShoppingList.
    """
    enrollment = _get_enrollment_for_week(enrollment_id, week)
    if db.session.get(Recipe, recipe_id) is None:
        raise NotFoundError(f"Recipe {recipe_id} not found")

    links = (
        RecipeIngredient.query
        .filter_by(recipe_id=recipe_id)
        .order_by(RecipeIngredient.position, RecipeIngredient.id)
        .all()
    )
    if not links:
        raise ValidationError("Recipe has no ingredients.")

    try:
        shopping_list = get_or_create_shopping_list(enrollment, week)
        _upsert_ingredient_lines(
            shopping_list,
            [(link.ingredient, link.amount, link.unit) for link in links],
            user_id=user_id,
            source_recipe_id=recipe_id,
        )
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info("Added recipe %s to shopping list week %s of enrollment %s", recipe_id, week, enrollment_id)
    return shopping_list


def add_slot_to_shopping_list(enrollment_id, week, plan_id, meal_slot, user_id=None):
    """Add the base ingredients of a nutrition plan meal slot to the list."""
    enrollment = _get_enrollment_for_week(enrollment_id, week)

    entries = (
        NutritionPlanMealEntry.query
        .filter_by(plan_id=plan_id, meal_slot=meal_slot)
        .order_by(NutritionPlanMealEntry.id)
        .all()
    )
    if not entries:
        raise ValidationError("Meal slot has no ingredients.")

    try:
        shopping_list = get_or_create_shopping_list(enrollment, week)
        _upsert_ingredient_lines(
            shopping_list,
            [(entry.ingredient, entry.amount, entry.unit) for entry in entries],
            user_id=user_id,
        )
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    return shopping_list


def add_manual_item(enrollment_id, week, label, amount=None, unit=None, user_id=None):
    """Add a free-text item. Manual items are never merged on insert."""
    enrollment = _get_enrollment_for_week(enrollment_id, week)

    label = (label or '').strip()
    if not label or len(label) > MAX_LENGTHS['shopping_label']:
        raise ValidationError("Label is required.")
    if amount is not None and (not math.isfinite(amount) or amount <= 0):
        raise ValidationError("Amount must be positive.")

    try:
        shopping_list = get_or_create_shopping_list(enrollment, week)
        item = UserShoppingListItem(
            dedupe_key=f"manual:{uuid.uuid4()}",
            label=label,
            category=resolve_shopping_category(label),
            amount=amount,
            unit=(unit or '').strip() or None,
            created_by_user_id=user_id,
        )
        shopping_list.items.append(item)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    return item


def cleanup_key(item):
    return f"{normalize_label(item.label)}::{normalize_unit(item.unit)}"


def cleanup_shopping_list(enrollment_id, week):
    """
    Merge items with the same normalized label and unit.

    Items are ordered unchecked first, then by label, and the first item of
    each group is kept. Its amount becomes the sum when
    every item in the group has an amount, otherwise None; it is checked if
    any item was. Returns the number of items removed.
    """
    shopping_list = UserShoppingList.query.filter_by(enrollment_id=enrollment_id, week=week).first()
    if shopping_list is None or not shopping_list.items:
        return 0

    groups = {}
    # sorted is stable, so equal labels keep id order
    for item in sorted(shopping_list.items, key=lambda i: (i.is_checked, i.label)):
        groups.setdefault(cleanup_key(item), []).append(item)

    removed = 0
    try:
        for items in groups.values():
            first, rest = items[0], items[1:]
            if all(item.amount is not None for item in items):
                first.amount = sum(item.amount for item in items)
            else:
                first.amount = None
            first.is_checked = any(item.is_checked for item in items)
            first.category = resolve_shopping_category(first.label)

            for item in rest:
                shopping_list.items.remove(item)
                removed += 1
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.debug("Shopping list %s cleanup removed %d items", shopping_list.id, removed)
    return removed


def toggle_item(item_id):
    item = db.session.get(UserShoppingListItem, item_id)
    if item is None:
        raise NotFoundError(f"Shopping list item {item_id} not found")
    item.is_checked = not item.is_checked
    db.session.commit()
    return item


def delete_item(item_id):
    item = db.session.get(UserShoppingListItem, item_id)
    if item is None:
        raise NotFoundError(f"Shopping list item {item_id} not found")
    db.session.delete(item)
    db.session.commit()
