"""
Storefront categories.

The list is fixed; ``highlighted`` is a virtual bucket built from the
``ParentProduct.highlighted`` flag and is never stored as a category.
"""

from collections import namedtuple

Category = namedtuple('Category', ['key', 'name', 'emoji'])

HIGHLIGHTED = 'highlighted'

# Products whose category is not a known key are shown here.
FALLBACK_CATEGORY = 'play-corners'

CATEGORIES = [
    Category(HIGHLIGHTED, 'Destacados', '🌟'),
    Category('early-childhood', 'Primera infancia', '🧸'),
    Category('on-the-move', 'En movimiento', '🚲'),
    Category('play-corners', 'Rincones de juego', '🏡'),
    Category('exploration-and-climbing', 'Exploración y escalada', '🧗‍♂️'),
]

CATEGORIES_BY_KEY = {c.key: c for c in CATEGORIES}

CATEGORY_CHOICES = [
    (c.key, f'{c.emoji} {c.name}') for c in CATEGORIES if c.key != HIGHLIGHTED
]


def category_display(key, emoji_only=False):
    category = CATEGORIES_BY_KEY.get(key)
    if category is None:
        return key
    if emoji_only:
        return category.emoji
    return f'{category.emoji} {category.name}'
