"""
Grouping of catalog products into the storefront's category buckets, and
the free-text search that replaces the grouping when a query is typed.
"""

import logging
from collections import namedtuple
from typing import Dict, List, Optional, Sequence

from apps.catalog.models.category import CATEGORIES, CATEGORIES_BY_KEY, FALLBACK_CATEGORY, HIGHLIGHTED
from apps.catalog.utils import fold_text, locale_sort_key
from .variant_navigation import VariantNavigationService

logger = logging.getLogger(__name__)

DisplayProduct = namedtuple('DisplayProduct', ['parent', 'default_variant'])


def _by_parent_name(item):
    return locale_sort_key(item.parent.name)


def group_by_category(items: Sequence[DisplayProduct], categories=CATEGORIES) -> Dict[str, List[DisplayProduct]]:
    """
    Split products into category buckets.

    Highlighted products also go to the ``highlighted`` bucket, so a product
    can be in two buckets. Unknown categories land in FALLBACK_CATEGORY.
    ``highlighted`` keeps encounter order; every other bucket is sorted by name.
    """
    keys = [c.key for c in categories]
    buckets = {key: [] for key in keys}

    for item in items:
        parent = item.parent
        if parent.highlighted and HIGHLIGHTED in buckets:
            buckets[HIGHLIGHTED].append(item)

        category = parent.category
        if category == HIGHLIGHTED or category not in buckets:
            logger.debug(
                'Product %r has unknown category %r, using %s',
                parent.name, category, FALLBACK_CATEGORY
            )
            category = FALLBACK_CATEGORY
        buckets.setdefault(category, []).append(item)

    for key, bucket in buckets.items():
        if key != HIGHLIGHTED:
            bucket.sort(key=_by_parent_name)

    return buckets


def search_products(items: Sequence[DisplayProduct], query) -> Optional[List[DisplayProduct]]:
    """
    Flat search over product and variant names, ignoring case and accents.
    Returns None for a blank query (show the grouped listing instead).
    """
    needle = fold_text((query or '').strip())
    if not needle:
        return None

    results = []
    for item in items:
        haystacks = [item.parent.name]
        if item.default_variant is not None:
            haystacks.append(item.default_variant.variant_name)
        if any(needle in fold_text(text) for text in haystacks):
            results.append(item)
    return results


def filter_by_category(items: Sequence[DisplayProduct], slug) -> List[DisplayProduct]:
    """Products of one category page, sorted by name."""
    if slug == HIGHLIGHTED:
        filtered = [item for item in items if item.parent.highlighted]
    else:
        filtered = [item for item in items if item.parent.category == slug]
    return sorted(filtered, key=_by_parent_name)


def build_display_products(client, parents=None) -> List[DisplayProduct]:
    """
    Pair each parent with its default variant. Parents without variants are
    skipped.
    """
    if parents is None:
        parents = client.list_parents()

    items = []
    for parent in parents:
        variants = client.list_variants(parent.pk)
        default_variant = VariantNavigationService.find_default_variant(variants)
        if default_variant is None:
            logger.warning('No variants found for product %s (%s), skipping', parent.name, parent.pk)
            continue
        items.append(DisplayProduct(parent, default_variant))
    return items


def category_info(key):
    category = CATEGORIES_BY_KEY.get(key)
    if category is None:
        return None
    return {'key': category.key, 'name': category.name, 'emoji': category.emoji}
