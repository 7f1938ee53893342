"""
Unit Conversion Service

Converts ingredient quantities to grams.

Units fall into three kinds (see constants.units):
- weight: fixed ratio to grams, never estimated
- volume: fixed ratio to milliliters, then multiplied by the ingredient's
  density (g/ml). Without a density the default of 1 g/ml is used and the
  result is estimated.
- piece: teaspoon, tablespoon, pinch, cup, slice, bunch, can, hand and
  generic piece. Each maps to an override column on the ingredient; the
  system default weight is used when the ingredient has none, and the
  result is estimated.

Results are dicts: {'grams': float|None, 'warnings': [...], 'is_estimated': bool}.
Each warning is a dict {'code': ..., 'message': ...}.
"""

from constants import (
    UNIT_CONFIG, DEFAULT_OVERRIDES, DENSITY_KEY, NUTRITION_FIELDS,
    WEIGHT, VOLUME,
    UNKNOWN_UNIT, MISSING_INGREDIENT_OVERRIDE, USED_DEFAULT,
)
from utils.text import normalize_unit

from .errors import UnsupportedUnitError


def make_warning(code, message):
    return {'code': code, 'message': message}


def resolve_override(overrides, key):
    """
    Two-tier lookup of a conversion value.

    Returns (value, was_defaulted). The ingredient's own value wins; when it
    is missing the system default is returned with was_defaulted=True.
    """
    value = (overrides or {}).get(key)
    if value is not None:
        return value, False
    return DEFAULT_OVERRIDES[key], True


def convert_to_grams_with_metadata(amount, unit, overrides=None):
    """
    Convert an amount in the given unit to grams.

    Args:
        amount: The quantity to convert
        unit: Unit token as typed ('EL', ' kg ', 'Stück', ...)
        overrides: Optional dict of ingredient conversion overrides
            (see Ingredient.conversion_overrides)

    Returns:
        Dict with grams (None for unknown units), warnings and is_estimated
    """
    config = UNIT_CONFIG.get(normalize_unit(unit))

    if config is None:
        return {
            'grams': None,
            'warnings': [make_warning(UNKNOWN_UNIT, f"Unsupported unit: {unit}")],
            'is_estimated': True,
        }

    kind, ratio, override_key = config

    if kind == WEIGHT:
        return {'grams': amount * ratio, 'warnings': [], 'is_estimated': False}

    if kind == VOLUME:
        density, defaulted = resolve_override(overrides, DENSITY_KEY)
        warnings = []
        if defaulted:
            warnings.append(make_warning(
                USED_DEFAULT, f"Default density used ({DEFAULT_OVERRIDES[DENSITY_KEY]} g/ml)."
            ))
        return {'grams': amount * ratio * density, 'warnings': warnings, 'is_estimated': defaulted}

    if override_key is None:
        return {
            'grams': None,
            'warnings': [make_warning(
                MISSING_INGREDIENT_OVERRIDE, f"No conversion configured for unit: {unit}"
            )],
            'is_estimated': True,
        }

    grams_per_unit, defaulted = resolve_override(overrides, override_key)
    warnings = []
    if defaulted:
        warnings.append(make_warning(USED_DEFAULT, f"Default weight used for {unit}."))
    return {'grams': amount * grams_per_unit, 'warnings': warnings, 'is_estimated': defaulted}


def convert_to_grams(amount, unit, overrides=None):
    """Strict conversion: returns grams or raises UnsupportedUnitError."""
    result = convert_to_grams_with_metadata(amount, unit, overrides)
    if result['grams'] is None:
        raise UnsupportedUnitError(unit)
    return result['grams']


def scale_nutrition(nutrition_per_100g, grams):
    """Scale per-100g values to the given weight. Missing values count as 0."""
    factor = grams / 100
    nutrition_per_100g = nutrition_per_100g or {}
    return {
        field: (nutrition_per_100g.get(field) or 0) * factor
        for field in NUTRITION_FIELDS
    }


def calculate_nutrition_by_100g(amount, unit, nutrition_per_100g):
    """Strict variant: nutrition for an amount, raising on unknown units."""
    grams = convert_to_grams(amount, unit)
    result = {'grams': grams}
    result.update(scale_nutrition(nutrition_per_100g, grams))
    return result


def calculate_nutrition_with_conversion(amount, unit, nutrition_per_100g, overrides=None):
    """
    Nutrition for an amount, degrading gracefully on unknown units.

    An unknown unit contributes zero nutrition and grams=None; its warning
    is kept in the result.
    """
    conversion = convert_to_grams_with_metadata(amount, unit, overrides)

    if conversion['grams'] is None:
        result = {'grams': None, 'warnings': conversion['warnings'], 'is_estimated': True}
        result.update({field: 0 for field in NUTRITION_FIELDS})
        return result

    result = {
        'grams': conversion['grams'],
        'warnings': conversion['warnings'],
        'is_estimated': conversion['is_estimated'],
    }
    result.update(scale_nutrition(nutrition_per_100g, conversion['grams']))
    return result
