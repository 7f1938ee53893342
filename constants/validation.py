"""
Validation Constants

Contains whitelist values for validating caller input and ensuring
data integrity.
"""

# Path assignment content kinds, in their canonical sort order
CONTENT_KINDS = ('TRAINING', 'NUTRITION', 'INFO')
VALID_CONTENT_KINDS = set(CONTENT_KINDS)

# Confidence levels an ingredient nutrition suggestion may report
VALID_SUGGESTION_CONFIDENCE = {'HIGH', 'MEDIUM', 'LOW'}

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_name': 200,
    'recipe_name': 200,
    'unit': 20,
    'shopping_label': 200,
}
