"""
Shopping Constants

Keyword table for sorting shopping list items into store sections.
Keywords are matched against the label after lowercasing and umlaut folding.
"""

# (category, keywords) - first matching category wins
CATEGORY_KEYWORDS = (
    ('produce', (
        'gemuese', 'gemuse', 'salat', 'spinat', 'gurke', 'tomate', 'paprika',
        'karotte', 'zwiebel', 'kartoffel', 'pilz', 'brokkoli', 'zucchini',
        'kohlenhydratarm',
    )),
    ('fruit', (
        'apfel', 'banane', 'beere', 'orange', 'zitrone', 'kiwi', 'traube',
        'mango', 'ananas', 'birne',
    )),
    ('dairy', (
        'milch', 'joghurt', 'quark', 'kaese', 'skyr', 'butter', 'sahne',
    )),
    ('meat', (
        'haehnchen', 'hahnchen', 'pute', 'rind', 'hack', 'lachs', 'thunfisch',
        'fisch', 'schinken', 'wurst', 'aufschnitt', 'ei',
    )),
    ('grains', (
        'reis', 'nudel', 'hafer', 'muesli', 'brot', 'toast', 'mehl', 'quinoa',
        'couscous',
    )),
    ('drinks', (
        'wasser', 'saft', 'tee', 'kaffee', 'drink', 'limonade', 'monster',
        'energy', 'energydrink',
    )),
    ('snacks', ('nuss', 'riegel', 'chips', 'schokolade', 'cracker')),
)

DEFAULT_CATEGORY = 'other'

# Character folding applied before keyword matching
UMLAUT_FOLDING = {
    'ä': 'ae',
    'ö': 'oe',
    'ü': 'ue',
    'ß': 'ss',
}
