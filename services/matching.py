"""
Nutrition Matching Service

Scores a candidate's macros against a target. A candidate matches only
when every macro is within its tolerance; the score ranks matches
(lower is better).
"""

from constants import DEFAULT_MATCH_TOLERANCE, MATCH_FIELDS, PROTEIN_SCORE_WEIGHT

from .computation import round_nutrition_value


def calculate_diff(target, candidate):
    """
    Absolute and percent difference of a candidate value from the target.

    A zero (or negative) target cannot be divided by: the percent diff is 0
    if the candidate is also <= 0, otherwise 100.
    """
    absolute = candidate - target
    if target <= 0:
        return {
            'absolute': round_nutrition_value(absolute),
            'percent': 0 if candidate <= 0 else 100,
        }
    return {
        'absolute': round_nutrition_value(absolute),
        'percent': round_nutrition_value(abs(absolute) / target * 100),
    }


def get_nutrition_match_result(target, candidate, tolerance=None):
    """
    Compare candidate macros against target macros.

    Args:
        target: Dict with calories, carbs, fat and protein
        candidate: Dict with the same keys
        tolerance: Optional dict of allowed percent deviation per macro;
            macros it leaves out use DEFAULT_MATCH_TOLERANCE

    Returns:
        Dict with is_match, score and diffs (per macro: absolute, percent)
    """
    tolerance = {**DEFAULT_MATCH_TOLERANCE, **(tolerance or {})}

    diffs = {
        field: calculate_diff(target[field] or 0, candidate[field] or 0)
        for field in MATCH_FIELDS
    }

    is_match = all(diffs[field]['percent'] <= tolerance[field] for field in MATCH_FIELDS)

    score = round_nutrition_value(
        diffs['calories']['percent']
        + diffs['carbs']['percent']
        + diffs['fat']['percent']
        + diffs['protein']['percent'] * PROTEIN_SCORE_WEIGHT
    )

    return {'is_match': is_match, 'score': score, 'diffs': diffs}
