"""
Unit Constants and Conversion Tables

Contains the unit table used to convert recipe and meal plan quantities
to grams, plus the system default weights used when an ingredient has
no override of its own.
"""

# Unit kinds
WEIGHT = 'weight'
VOLUME = 'volume'
PIECE = 'piece'

# Conversion warning codes
UNKNOWN_UNIT = 'UNKNOWN_UNIT'
MISSING_DENSITY = 'MISSING_DENSITY'
MISSING_INGREDIENT_OVERRIDE = 'MISSING_INGREDIENT_OVERRIDE'
USED_DEFAULT = 'USED_DEFAULT'

# Ingredient override columns (all optional on the ingredient)
DENSITY_KEY = 'ml_density_g_per_ml'
OVERRIDE_KEYS = (
    DENSITY_KEY,
    'grams_per_piece',
    'grams_per_hand',
    'grams_per_teaspoon',
    'grams_per_tablespoon',
    'grams_per_pinch',
    'grams_per_cup',
    'grams_per_slice',
    'grams_per_bunch',
    'grams_per_can',
)

# Normalized unit token -> (kind, ratio, override key)
# Weight ratios are grams per unit, volume ratios are ml per unit.
# Piece-like units carry no ratio; their weight comes from the override key.
UNIT_CONFIG = {
    # Weight: base = G
    'g': (WEIGHT, 1, None),
    'gram': (WEIGHT, 1, None),
    'grams': (WEIGHT, 1, None),
    'kg': (WEIGHT, 1000, None),
    # Volume: base = ML
    'ml': (VOLUME, 1, None),
    'milliliter': (VOLUME, 1, None),
    'millilitre': (VOLUME, 1, None),
    'l': (VOLUME, 1000, None),
    'liter': (VOLUME, 1000, None),
    'litre': (VOLUME, 1000, None),
    # Piece-like
    'hand': (PIECE, None, 'grams_per_hand'),
    'hands': (PIECE, None, 'grams_per_hand'),
    'hande': (PIECE, None, 'grams_per_hand'),
    'haende': (PIECE, None, 'grams_per_hand'),
    'hände': (PIECE, None, 'grams_per_hand'),
    'el': (PIECE, None, 'grams_per_tablespoon'),
    'tbsp': (PIECE, None, 'grams_per_tablespoon'),
    'essloeffel': (PIECE, None, 'grams_per_tablespoon'),
    'esslöffel': (PIECE, None, 'grams_per_tablespoon'),
    'tl': (PIECE, None, 'grams_per_teaspoon'),
    'tsp': (PIECE, None, 'grams_per_teaspoon'),
    'teeloeffel': (PIECE, None, 'grams_per_teaspoon'),
    'teelöffel': (PIECE, None, 'grams_per_teaspoon'),
    'stk': (PIECE, None, 'grams_per_piece'),
    'stueck': (PIECE, None, 'grams_per_piece'),
    'stück': (PIECE, None, 'grams_per_piece'),
    'piece': (PIECE, None, 'grams_per_piece'),
    'pieces': (PIECE, None, 'grams_per_piece'),
    'prise': (PIECE, None, 'grams_per_pinch'),
    'pinch': (PIECE, None, 'grams_per_pinch'),
    'tasse': (PIECE, None, 'grams_per_cup'),
    'cup': (PIECE, None, 'grams_per_cup'),
    'scheibe': (PIECE, None, 'grams_per_slice'),
    'slice': (PIECE, None, 'grams_per_slice'),
    'bund': (PIECE, None, 'grams_per_bunch'),
    'bunch': (PIECE, None, 'grams_per_bunch'),
    'dose': (PIECE, None, 'grams_per_can'),
    'can': (PIECE, None, 'grams_per_can'),
}

# System defaults used when the ingredient has no value for an override
DEFAULT_OVERRIDES = {
    DENSITY_KEY: 1,
    'grams_per_piece': 100,
    'grams_per_hand': 50,
    'grams_per_teaspoon': 5,
    'grams_per_tablespoon': 15,
    'grams_per_pinch': 0.5,
    'grams_per_cup': 240,
    'grams_per_slice': 30,
    'grams_per_bunch': 60,
    'grams_per_can': 400,
}

WEIGHT_UNITS = {unit for unit, (kind, _, _) in UNIT_CONFIG.items() if kind == WEIGHT}
VOLUME_UNITS = {unit for unit, (kind, _, _) in UNIT_CONFIG.items() if kind == VOLUME}
PIECE_UNITS = {unit for unit, (kind, _, _) in UNIT_CONFIG.items() if kind == PIECE}
