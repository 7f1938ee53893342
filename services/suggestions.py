"""
Ingredient Nutrition Suggestion Service

Validates the JSON an external text-generation provider returns when asked
for an ingredient's nutrition and conversion values. Nothing from the
response is trusted until every field has been checked. The provider call
itself lives outside this package.
"""

import json
import math
import re
from collections import namedtuple

from constants import NUTRITION_FIELDS, OVERRIDE_KEYS, VALID_SUGGESTION_CONFIDENCE
from models import db, Ingredient

from .catalog import update_ingredient
from .errors import NotFoundError

OK = 'OK'
PARSE_ERROR = 'PARSE_ERROR'
SCHEMA_VIOLATION = 'SCHEMA_VIOLATION'

SuggestionResult = namedtuple('SuggestionResult', ['status', 'suggestion', 'field', 'message'])

# Provider field name -> Ingredient column
CONVERSION_FIELD_MAP = {
    'mlDensityGPerMl': 'ml_density_g_per_ml',
    'gramsPerPiece': 'grams_per_piece',
    'gramsPerHand': 'grams_per_hand',
    'gramsPerTeaspoon': 'grams_per_teaspoon',
    'gramsPerTablespoon': 'grams_per_tablespoon',
    'gramsPerPinch': 'grams_per_pinch',
    'gramsPerCup': 'grams_per_cup',
    'gramsPerSlice': 'grams_per_slice',
    'gramsPerBunch': 'grams_per_bunch',
    'gramsPerCan': 'grams_per_can',
}

FENCED_JSON = re.compile(r'```json\s*([\s\S]*?)```', re.IGNORECASE)


class SchemaViolation(Exception):
    def __init__(self, field, message):
        super().__init__(message)
        self.field = field


def extract_json(raw):
    """Pull the JSON object out of a fenced block or the outermost braces."""
    fenced = FENCED_JSON.search(raw)
    if fenced and fenced.group(1).strip():
        return fenced.group(1).strip()

    first = raw.find('{')
    last = raw.rfind('}')
    if first >= 0 and last > first:
        return raw[first:last + 1].strip()
    return raw.strip()


def _nullable_number(value, field):
    if value is None:
        return None
    # bool is an int subclass and must not pass as a number
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
        raise SchemaViolation(field, f"Invalid value for '{field}'.")
    return value


def _require_object(payload, field):
    value = payload.get(field)
    if not isinstance(value, dict):
        raise SchemaViolation(field, f"'{field}' must be an object.")
    return value


def validate_suggestion_payload(payload):
    """
    Validate a decoded payload field by field.

    Returns the normalized suggestion dict; nutrition and conversion values
    are keyed by Ingredient column names. Raises SchemaViolation.
    """
    if not isinstance(payload, dict):
        raise SchemaViolation('$', "Response is not a JSON object.")

    if not isinstance(payload.get('found'), bool):
        raise SchemaViolation('found', "'found' must be a boolean.")

    if payload.get('confidence') not in VALID_SUGGESTION_CONFIDENCE:
        raise SchemaViolation('confidence', "'confidence' must be HIGH, MEDIUM or LOW.")

    reason = payload.get('reason')
    if not isinstance(reason, str) or len(reason.strip()) < 3:
        raise SchemaViolation('reason', "'reason' must be a short explanation.")

    nutrition = _require_object(payload, 'nutritionPer100g')
    conversion = _require_object(payload, 'conversionEstimates')

    if not isinstance(payload.get('needsAlternativeDescription'), bool):
        raise SchemaViolation('needsAlternativeDescription', "'needsAlternativeDescription' must be a boolean.")

    alternative = payload.get('suggestedAlternativeDescription')
    if alternative is not None and not isinstance(alternative, str):
        raise SchemaViolation('suggestedAlternativeDescription', "'suggestedAlternativeDescription' must be a string or null.")

    return {
        'found': payload['found'],
        'confidence': payload['confidence'],
        'reason': reason.strip(),
        'nutrition_per_100g': {
            field: _nullable_number(nutrition.get(field), field)
            for field in NUTRITION_FIELDS
        },
        'conversion_estimates': {
            column: _nullable_number(conversion.get(name), name)
            for name, column in CONVERSION_FIELD_MAP.items()
        },
        'needs_alternative_description': payload['needsAlternativeDescription'],
        'suggested_alternative_description': alternative,
    }


def parse_nutrition_suggestion(raw):
    """
    Parse a raw provider response.

    Returns a SuggestionResult whose status is OK (suggestion set),
    PARSE_ERROR (no JSON could be decoded) or SCHEMA_VIOLATION (field names
    the first invalid field).
    """
    try:
        payload = json.loads(extract_json(raw or ''))
    except json.JSONDecodeError as e:
        return SuggestionResult(PARSE_ERROR, None, None, str(e))

    try:
        suggestion = validate_suggestion_payload(payload)
    except SchemaViolation as e:
        return SuggestionResult(SCHEMA_VIOLATION, None, e.field, str(e))

    return SuggestionResult(OK, suggestion, None, None)


def apply_nutrition_suggestion(ingredient_id, suggestion, overwrite=False):
    """
    Copy suggested values onto an ingredient and recompute dependent recipes.

    Without overwrite only fields the ingredient has no value for are filled.
    Returns the list of recomputed recipe ids.
    """
    ingredient = db.session.get(Ingredient, ingredient_id)
    if ingredient is None:
        raise NotFoundError(f"Ingredient {ingredient_id} not found")

    values = {}
    suggested = dict(suggestion['nutrition_per_100g'])
    suggested.update(suggestion['conversion_estimates'])
    for column in NUTRITION_FIELDS + OVERRIDE_KEYS:
        value = suggested.get(column)
        if value is None or (column in OVERRIDE_KEYS and value <= 0):
            continue
        if overwrite or getattr(ingredient, column) is None:
            values[column] = value

    return update_ingredient(ingredient_id, **values)
