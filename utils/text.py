"""
Text Normalization Helpers

Used to compare free-text labels and unit tokens typed by admins and users.
"""

import re

from constants import UMLAUT_FOLDING


def normalize_unit(unit):
    """Trim and lowercase a unit token."""
    return (unit or '').strip().lower()


def fold_umlauts(text):
    for char, replacement in UMLAUT_FOLDING.items():
        text = text.replace(char, replacement)
    return text


def normalize_label(label):
    """Lowercase, collapse whitespace and fold umlauts for matching."""
    normalized = (label or '').strip().lower()
    normalized = re.sub(r'\s+', ' ', normalized)
    return fold_umlauts(normalized)
