"""
Nutrition Aggregation Service

Sums per-ingredient nutrition into totals. Totals stay unrounded until
round_totals() is applied at a presentation or cache-write boundary.
"""

import math

from constants import NUTRITION_FIELDS

from .conversion import calculate_nutrition_with_conversion

TOTAL_FIELDS = ('grams',) + NUTRITION_FIELDS


def round_nutrition_value(value):
    """Round to one decimal place, halves rounded up."""
    return math.floor(value * 10 + 0.5) / 10


def empty_totals():
    return {field: 0.0 for field in TOTAL_FIELDS}


def compute_nutrition_totals(entries):
    """
    Compute summed nutrition for a list of entries.

    Each entry is a dict with:
        amount: quantity in the entry's unit
        unit: unit token
        nutrition_per_100g: dict of per-100g values (missing/None -> 0)
        conversion: optional dict of ingredient conversion overrides

    Returns:
        Dict with totals, warnings (in entry order), warning_count (not
        deduplicated) and has_estimated_conversions
    """
    totals = empty_totals()
    warnings = []
    has_estimated_conversions = False

    for entry in entries:
        nutrition = calculate_nutrition_with_conversion(
            entry['amount'],
            entry['unit'],
            entry.get('nutrition_per_100g'),
            entry.get('conversion'),
        )

        warnings.extend(nutrition['warnings'])
        if nutrition['is_estimated']:
            has_estimated_conversions = True

        totals['grams'] += nutrition['grams'] or 0
        for field in NUTRITION_FIELDS:
            totals[field] += nutrition[field]

    return {
        'totals': totals,
        'warnings': warnings,
        'warning_count': len(warnings),
        'has_estimated_conversions': has_estimated_conversions,
    }


def round_totals(totals):
    return {field: round_nutrition_value(value) for field, value in totals.items()}


def entry_from_ingredient(amount, unit, ingredient):
    """Build an aggregation entry from an Ingredient model instance."""
    return {
        'amount': amount,
        'unit': unit,
        'nutrition_per_100g': ingredient.nutrition_per_100g(),
        'conversion': ingredient.conversion_overrides(),
    }
