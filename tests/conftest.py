"""
Pytest configuration and shared fixtures.

Fixtures defined here are available to all tests.
"""

import os
import sys
from datetime import date

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from models import (
    db, Ingredient, Path, VariantType, VariantOption, PathAssignment,
    NutritionPlan, NutritionPlanMealEntry,
)


# =============================================================================
# App Fixtures
# =============================================================================


@pytest.fixture
def app():
    """Flask app on an in-memory database, inside an app context."""
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def session(app):
    return db.session


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def make_ingredient(session):
    """Factory for committed ingredients."""
    def _make(name, **values):
        ingredient = Ingredient(name=name, **values)
        session.add(ingredient)
        session.commit()
        return ingredient
    return _make


@pytest.fixture
def oats(make_ingredient):
    return make_ingredient('Haferflocken', calories=370, protein=13, carbs=59, fat=7)


@pytest.fixture
def milk(make_ingredient):
    return make_ingredient('Milch', calories=64, protein=3.4, carbs=4.8, fat=3.5, ml_density_g_per_ml=1.03)


@pytest.fixture
def diet_path(session):
    """
    Eight-week path with a Diet variant (Vegetarian / Omnivore).

    Assignments (inserted out of kind order on purpose):
        info_weeks_2_3:   INFO 2-3, no gate
        info_weeks_5_8:   INFO 5-8, no gate
        nutrition_veg:    NUTRITION 1-8, Vegetarian
        nutrition_omni:   NUTRITION 1-8, Omnivore
        training_1_4:     TRAINING 1-4, no gate
    """
    diet = VariantType(name='Diet')
    vegetarian = VariantOption(name='Vegetarian')
    omnivore = VariantOption(name='Omnivore')
    diet.options.extend([vegetarian, omnivore])

    path = Path(name='Recomp 8 Weeks')
    assignments = {
        'info_weeks_2_3': PathAssignment(kind='INFO', content_ref_id=31, week_start=2, week_end=3),
        'info_weeks_5_8': PathAssignment(kind='INFO', content_ref_id=32, week_start=5, week_end=8),
        'nutrition_veg': PathAssignment(
            kind='NUTRITION', content_ref_id=21, week_start=1, week_end=8, variant_option=vegetarian,
        ),
        'nutrition_omni': PathAssignment(
            kind='NUTRITION', content_ref_id=22, week_start=1, week_end=8, variant_option=omnivore,
        ),
        'training_1_4': PathAssignment(kind='TRAINING', content_ref_id=11, week_start=1, week_end=4),
    }
    path.assignments.extend(assignments.values())

    session.add_all([diet, path])
    session.commit()

    return {
        'path': path,
        'diet': diet,
        'vegetarian': vegetarian,
        'omnivore': omnivore,
        'assignments': assignments,
    }


@pytest.fixture
def breakfast_plan(session, oats, milk):
    """Nutrition plan whose Breakfast slot is 80 g oats and 200 ml milk."""
    plan = NutritionPlan(name='Cut 2000')
    plan.entries.extend([
        NutritionPlanMealEntry(meal_slot='Breakfast', ingredient=oats, amount=80, unit='g'),
        NutritionPlanMealEntry(meal_slot='Breakfast', ingredient=milk, amount=200, unit='ml'),
        NutritionPlanMealEntry(meal_slot='Lunch', ingredient=oats, amount=40, unit='g'),
    ])
    session.add(plan)
    session.commit()
    return plan


@pytest.fixture
def start_date():
    return date(2026, 1, 1)
