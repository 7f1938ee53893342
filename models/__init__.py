"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .ingredient import Ingredient
from .recipe import Recipe, RecipeIngredient
from .nutrition_plan import NutritionPlan, NutritionPlanMealEntry
from .path import Path, VariantType, VariantOption, PathAssignment
from .enrollment import UserPathEnrollment, UserEnrollmentVariant
from .shopping import UserShoppingList, UserShoppingListItem

__all__ = [
    'db',
    'Ingredient',
    'Recipe',
    'RecipeIngredient',
    'NutritionPlan',
    'NutritionPlanMealEntry',
    'Path',
    'VariantType',
    'VariantOption',
    'PathAssignment',
    'UserPathEnrollment',
    'UserEnrollmentVariant',
    'UserShoppingList',
    'UserShoppingListItem',
]
