"""
Constants Package

Lookup tables shared by the models and services.
"""

from .units import (
    WEIGHT, VOLUME, PIECE,
    UNKNOWN_UNIT, MISSING_DENSITY, MISSING_INGREDIENT_OVERRIDE, USED_DEFAULT,
    DENSITY_KEY, OVERRIDE_KEYS, UNIT_CONFIG, DEFAULT_OVERRIDES,
    WEIGHT_UNITS, VOLUME_UNITS, PIECE_UNITS,
)
from .nutrition import (
    NUTRITION_FIELDS, MATCH_FIELDS, DEFAULT_MATCH_TOLERANCE,
    PROTEIN_SCORE_WEIGHT, DEFAULT_SLOT_MATCH_LIMIT,
)
from .shopping import CATEGORY_KEYWORDS, DEFAULT_CATEGORY, UMLAUT_FOLDING
from .validation import (
    CONTENT_KINDS, VALID_CONTENT_KINDS,
    VALID_SUGGESTION_CONFIDENCE, MAX_LENGTHS,
)
