"""
Nutrition Constants

Nutrition field names, matching tolerances and score weights used by the
aggregation and matching services.
"""

# Per-100g nutrition columns on Ingredient, in display order
NUTRITION_FIELDS = ('calories', 'protein', 'carbs', 'fat', 'fiber', 'sugar', 'salt')

# Macros compared when matching a candidate against a target
MATCH_FIELDS = ('calories', 'carbs', 'fat', 'protein')

# Allowed deviation from the target, in percent
DEFAULT_MATCH_TOLERANCE = {
    'calories': 15,
    'carbs': 15,
    'fat': 15,
    'protein': 10,
}

# Protein deviation counts 25% more towards the score
PROTEIN_SCORE_WEIGHT = 1.25

DEFAULT_SLOT_MATCH_LIMIT = 5
